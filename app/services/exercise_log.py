"""Log a performance and attach its progression recommendation."""

from __future__ import annotations

import uuid
from collections.abc import Collection

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import get_settings
from app.core.constants import DEFAULT_WEIGHT_INCREMENT, REGRESSION_LOOKBACK
from app.models.exercise import Exercise
from app.models.workout import ExerciseLog
from app.services.metrics import weight_increment
from app.services.progression import Recommendation, SessionHistoryEntry, evaluate_progression


def increment_for(exercise: Exercise) -> float:
    """Equipment-aware increment when enabled, else the flat default."""
    if get_settings().equipment_aware_increments:
        return weight_increment(exercise.equipment, exercise.unit)
    return DEFAULT_WEIGHT_INCREMENT


async def recent_history(
    db: AsyncSession,
    user_id: uuid.UUID,
    exercise_id: uuid.UUID,
    limit: int = REGRESSION_LOOKBACK,
    exclude_ids: Collection[uuid.UUID] = (),
) -> list[SessionHistoryEntry]:
    """Newest-first prior performances for one exercise (before the new log is saved).
    `exclude_ids` drops logs from the session in progress so its own sets never
    count as earlier sessions."""
    stmt = select(ExerciseLog.reps, ExerciseLog.weight).where(
        ExerciseLog.user_id == user_id, ExerciseLog.exercise_id == exercise_id
    )
    if exclude_ids:
        stmt = stmt.where(ExerciseLog.id.not_in(list(exclude_ids)))
    result = await db.execute(stmt.order_by(ExerciseLog.created_at.desc()).limit(limit))
    return [
        SessionHistoryEntry(reps_done=int(r.reps), weight=float(r.weight or 0))
        for r in result.all()
    ]


async def record_log(
    db: AsyncSession,
    user_id: uuid.UUID,
    exercise: Exercise,
    reps: int,
    weight: float,
    sets: int = 1,
    rir: int | None = None,
    notes: str | None = None,
    workout_id: uuid.UUID | None = None,
    session_log_ids: Collection[uuid.UUID] = (),
) -> tuple[ExerciseLog, Recommendation]:
    """
    Evaluate against the exercise's rep range and trailing history, then store
    the log with the recommendation as JSON. Returns (log, recommendation).
    """
    history = await recent_history(db, user_id, exercise.id, exclude_ids=session_log_ids)
    rec = evaluate_progression(
        reps_done=reps,
        weight=float(weight),
        reps_min=exercise.reps_min,
        reps_max=exercise.reps_max,
        rir=rir,
        history=history,
        increment=increment_for(exercise),
    )
    log = ExerciseLog(
        user_id=user_id,
        exercise_id=exercise.id,
        workout_id=workout_id,
        sets=sets,
        reps=reps,
        weight=weight,
        rir=rir,
        notes=notes,
        recommendation=rec.to_dict(),
    )
    db.add(log)
    await db.flush()
    await db.refresh(log)
    return log, rec
