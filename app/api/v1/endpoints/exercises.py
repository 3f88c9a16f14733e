"""Exercise CRUD and exercise log endpoints (owner-scoped)."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_current_user
from app.api.v1.endpoints.folders import get_owned_routine
from app.core.constants import MAX_EXERCISES_PER_ROUTINE, MAX_LOGS_PAGE
from app.db.session import get_db
from app.models.exercise import Exercise
from app.models.user import User
from app.models.workout import ExerciseLog
from app.schemas.exercise import (
    ExerciseCreate,
    ExerciseLogCreate,
    ExerciseLogRead,
    ExerciseRead,
    ExerciseUpdate,
)
from app.services.exercise_log import record_log

router = APIRouter()


async def get_owned_exercise(db: AsyncSession, user_id: uuid.UUID, exercise_id: uuid.UUID) -> Exercise:
    result = await db.execute(
        select(Exercise).where(Exercise.id == exercise_id, Exercise.user_id == user_id)
    )
    exercise = result.scalar_one_or_none()
    if not exercise:
        raise HTTPException(status_code=404, detail="Exercise not found")
    return exercise


@router.get("/exercises", response_model=list[ExerciseRead])
async def list_exercises(
    routine_id: uuid.UUID | None = None,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Exercises in routine order when filtered by routine, else newest first."""
    stmt = select(Exercise).where(Exercise.user_id == user.id)
    if routine_id is not None:
        stmt = stmt.where(Exercise.routine_id == routine_id).order_by(
            Exercise.order_in_routine, Exercise.created_at
        )
    else:
        stmt = stmt.order_by(Exercise.created_at.desc())
    result = await db.execute(stmt)
    return list(result.scalars().all())


@router.post("/exercises", response_model=ExerciseRead, status_code=201)
async def create_exercise(
    payload: ExerciseCreate,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Add an exercise to a routine (max 20 per routine)."""
    await get_owned_routine(db, user.id, payload.routine_id)
    count = await db.execute(
        select(func.count(Exercise.id)).where(Exercise.routine_id == payload.routine_id)
    )
    if (count.scalar() or 0) >= MAX_EXERCISES_PER_ROUTINE:
        raise HTTPException(
            status_code=400,
            detail=f"Maximum {MAX_EXERCISES_PER_ROUTINE} exercises per routine.",
        )
    exercise = Exercise(user_id=user.id, **payload.model_dump())
    db.add(exercise)
    await db.flush()
    await db.refresh(exercise)
    return exercise


@router.get("/exercises/{exercise_id}", response_model=ExerciseRead)
async def get_exercise(
    exercise_id: uuid.UUID,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await get_owned_exercise(db, user.id, exercise_id)


@router.patch("/exercises/{exercise_id}", response_model=ExerciseRead)
async def update_exercise(
    exercise_id: uuid.UUID,
    payload: ExerciseUpdate,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Partial update; the resulting rep range must still satisfy reps_min <= reps_max."""
    exercise = await get_owned_exercise(db, user.id, exercise_id)
    data = payload.model_dump(exclude_unset=True)
    reps_min = data.get("reps_min", exercise.reps_min)
    reps_max = data.get("reps_max", exercise.reps_max)
    if reps_min is not None and reps_max is not None and reps_min > reps_max:
        raise HTTPException(status_code=422, detail="reps_min must be <= reps_max")
    for k, v in data.items():
        if v is not None or k in ("target_weight", "rest_seconds", "notes"):
            setattr(exercise, k, v)
    await db.flush()
    await db.refresh(exercise)
    return exercise


@router.delete("/exercises/{exercise_id}", status_code=204)
async def delete_exercise(
    exercise_id: uuid.UUID,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Delete an exercise and its logs."""
    exercise = await get_owned_exercise(db, user.id, exercise_id)
    await db.delete(exercise)
    return None


# ---- Logs ----


@router.get("/logs", response_model=list[ExerciseLogRead])
async def list_logs(
    exercise_id: uuid.UUID | None = None,
    limit: int = Query(default=50, ge=1, le=MAX_LOGS_PAGE),
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Logged performances, newest first."""
    stmt = select(ExerciseLog).where(ExerciseLog.user_id == user.id)
    if exercise_id is not None:
        stmt = stmt.where(ExerciseLog.exercise_id == exercise_id)
    result = await db.execute(stmt.order_by(ExerciseLog.created_at.desc()).limit(limit))
    return list(result.scalars().all())


@router.post("/exercises/{exercise_id}/logs", response_model=ExerciseLogRead, status_code=201)
async def log_exercise(
    exercise_id: uuid.UUID,
    payload: ExerciseLogCreate,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Log a performance outside an active workout. The stored log carries its recommendation."""
    exercise = await get_owned_exercise(db, user.id, exercise_id)
    log, _ = await record_log(
        db,
        user.id,
        exercise,
        reps=payload.reps,
        weight=payload.weight,
        sets=payload.sets,
        rir=payload.rir,
        notes=payload.notes,
    )
    return log
