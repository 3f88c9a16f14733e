"""Progressive overload: single-set evaluation, session analysis and calculators.

Pure computation over request data; no DB and no auth required.
"""

from __future__ import annotations

from fastapi import APIRouter, Query

from app.core.config import get_settings
from app.core.constants import DEFAULT_WEIGHT_INCREMENT
from app.core.enums import EquipmentType, WeightUnit
from app.schemas.progression import (
    ExerciseRecommendationRead,
    ProgressionRequest,
    RecommendationRead,
    RIRLevelRead,
    SessionAnalysisRequest,
)
from app.services.metrics import RIR_SCALE, one_rep_max, volume_load, weight_increment
from app.services.progression import SessionHistoryEntry, evaluate_progression, evaluate_session

router = APIRouter()


@router.post("/evaluate", response_model=RecommendationRead)
async def evaluate(payload: ProgressionRequest):
    """
    Next-session prescription for one set. `history` must be newest first.
    When `equipment` is given the weight jump comes from the increment table
    (unit defaults to the configured default unit); otherwise it is the flat 2.5.
    """
    increment = DEFAULT_WEIGHT_INCREMENT
    if payload.equipment is not None:
        increment = weight_increment(payload.equipment, payload.unit or get_settings().default_weight_unit)
    rec = evaluate_progression(
        reps_done=payload.reps_done,
        weight=payload.weight,
        reps_min=payload.reps_min,
        reps_max=payload.reps_max,
        rir=payload.rir,
        history=[SessionHistoryEntry(h.reps_done, h.weight) for h in payload.history],
        increment=increment,
    )
    return rec.to_dict()


@router.post("/session", response_model=list[ExerciseRecommendationRead])
async def analyze_session(payload: SessionAnalysisRequest):
    """One recommendation per exercise, in input order. `previous_sessions` newest first."""
    results = evaluate_session(
        payload.session.model_dump(),
        [s.model_dump() for s in payload.previous_sessions],
    )
    return [r.to_dict() for r in results]


@router.get("/one-rep-max")
async def get_one_rep_max(
    weight: float = Query(..., ge=0),
    reps: int = Query(..., ge=1),
):
    """Epley estimate (rounded); a single rep returns the weight itself."""
    return {"weight": weight, "reps": reps, "one_rep_max": one_rep_max(weight, reps)}


@router.get("/volume-load")
async def get_volume_load(
    weight: float = Query(..., ge=0),
    reps: int = Query(..., ge=0),
    sets: int = Query(default=1, ge=0),
):
    return {"weight": weight, "reps": reps, "sets": sets, "volume_load": volume_load(weight, reps, sets)}


@router.get("/weight-increment")
async def get_weight_increment(
    equipment: str = "barbell",
    unit: WeightUnit = WeightUnit.KG,
):
    """Increment for an equipment kind; unknown kinds fall back to barbell."""
    return {"equipment": equipment, "unit": unit.value, "increment": weight_increment(equipment, unit)}


@router.get("/equipment")
async def list_equipment():
    return {"equipment": [e.value for e in EquipmentType], "units": [u.value for u in WeightUnit]}


@router.get("/rir-scale", response_model=list[RIRLevelRead])
async def rir_scale():
    """Reps-in-reserve scale with RPE equivalents."""
    return [RIRLevelRead(**vars(level)) for level in RIR_SCALE.values()]
