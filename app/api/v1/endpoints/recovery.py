"""Recovery questionnaire: factor definitions and scoring."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Body

from app.schemas.recovery import FactorOptionRead, RecoveryAnalysisRead, RecoveryFactorRead
from app.services.recovery import RECOVERY_FACTORS, score_recovery

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/factors", response_model=list[RecoveryFactorRead])
async def list_factors():
    """Questions and answer options, in questionnaire order."""
    return [
        RecoveryFactorRead(
            id=d.factor.value,
            label=d.label,
            question=d.question,
            options=[FactorOptionRead(value=o.value, label=o.label, impact=o.impact) for o in d.options],
        )
        for d in RECOVERY_FACTORS.values()
    ]


@router.post("/score", response_model=RecoveryAnalysisRead)
async def score(responses: dict[str, Any] = Body(...)):
    """
    Score answers keyed by factor id, e.g. {"sleep": "poor", "stress": "low"}.
    Unknown factors or answers are ignored so partial questionnaires work.
    """
    analysis = score_recovery(responses)
    if analysis.should_deload:
        logger.info("Recovery score %d suggests a deload", analysis.total_impact)
    return RecoveryAnalysisRead(
        total_impact=analysis.total_impact,
        issues=analysis.issues,
        recommendations=analysis.recommendations,
        overall_recommendation=analysis.overall_recommendation,
        should_deload=analysis.should_deload,
    )
