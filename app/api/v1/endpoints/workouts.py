"""Active workout endpoints and finished workout history."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_current_user, get_tracker
from app.core.errors import ExerciseNotFound, NoActiveWorkout, PlanNotFound
from app.db.session import get_db
from app.models.exercise import Exercise
from app.models.folder import WorkoutRoutine
from app.models.user import User
from app.models.workout import ExerciseLog, Workout
from app.schemas.exercise import ExerciseLogRead
from app.schemas.workout import (
    ActiveSetCreate,
    ActiveSetLogged,
    ActiveWorkoutRead,
    ActiveWorkoutStart,
    WorkoutRead,
    WorkoutSummaryRead,
)
from app.services.active_workout import ActiveWorkout, ActiveWorkoutTracker, WorkoutSummary
from app.services.exercise_log import record_log

router = APIRouter()


def _active_read(w: ActiveWorkout) -> ActiveWorkoutRead:
    return ActiveWorkoutRead(
        routine_id=w.routine_id,
        exercise_ids=w.exercise_ids,
        started_at=w.started_at,
        last_activity_at=w.last_activity_at,
        total_sets=w.total_sets,
        total_volume=w.total_volume,
        completed_exercises=[e for e in w.exercise_ids if e in w.completed_exercises],
    )


async def _persist_summary(db: AsyncSession, user: User, summary: WorkoutSummary) -> WorkoutSummaryRead:
    workout = Workout(
        user_id=user.id,
        routine_id=summary.routine_id,
        status=summary.status,
        started_at=summary.started_at,
        ended_at=summary.ended_at,
        duration_seconds=summary.duration_seconds,
        total_sets=summary.total_sets,
        total_volume=summary.total_volume,
    )
    db.add(workout)
    await db.flush()
    if summary.log_ids:
        await db.execute(
            update(ExerciseLog)
            .where(ExerciseLog.id.in_(summary.log_ids), ExerciseLog.user_id == user.id)
            .values(workout_id=workout.id)
        )
    return WorkoutSummaryRead(
        id=workout.id,
        routine_id=workout.routine_id,
        status=workout.status,
        started_at=summary.started_at,
        ended_at=summary.ended_at,
        duration_seconds=summary.duration_seconds,
        total_sets=summary.total_sets,
        total_volume=summary.total_volume,
        completed_exercises=summary.completed_exercises,
    )


@router.get("", response_model=list[WorkoutRead])
async def list_workouts(
    skip: int = 0,
    limit: int = Query(default=50, ge=1, le=200),
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Finished workouts, newest first."""
    result = await db.execute(
        select(Workout)
        .where(Workout.user_id == user.id)
        .order_by(Workout.started_at.desc())
        .offset(skip)
        .limit(limit)
    )
    return list(result.scalars().all())


@router.post("/active", response_model=ActiveWorkoutRead, status_code=201)
async def start_workout(
    payload: ActiveWorkoutStart,
    user: User = Depends(get_current_user),
    tracker: ActiveWorkoutTracker = Depends(get_tracker),
    db: AsyncSession = Depends(get_db),
):
    """Start a workout from a routine. The routine needs at least one exercise."""
    result = await db.execute(
        select(WorkoutRoutine.id).where(
            WorkoutRoutine.id == payload.routine_id, WorkoutRoutine.user_id == user.id
        )
    )
    if result.scalar_one_or_none() is None:
        raise PlanNotFound()
    ids = await db.execute(
        select(Exercise.id)
        .where(Exercise.routine_id == payload.routine_id)
        .order_by(Exercise.order_in_routine, Exercise.created_at)
    )
    workout = tracker.start(payload.routine_id, [r[0] for r in ids.all()])
    return _active_read(workout)


@router.get("/active", response_model=ActiveWorkoutRead | None)
async def get_active_workout(tracker: ActiveWorkoutTracker = Depends(get_tracker)):
    """Current running totals, or null when no workout is active."""
    if tracker.active is None:
        return None
    return _active_read(tracker.active)


@router.post("/active/sets", response_model=ActiveSetLogged, status_code=201)
async def log_active_set(
    payload: ActiveSetCreate,
    user: User = Depends(get_current_user),
    tracker: ActiveWorkoutTracker = Depends(get_tracker),
    db: AsyncSession = Depends(get_db),
):
    """Log a set for the active workout; stores the log with its recommendation and updates totals."""
    active = tracker.active
    if active is None:
        raise NoActiveWorkout()
    if payload.exercise_id not in active.exercise_ids:
        raise ExerciseNotFound("Exercise is not part of the active workout")
    result = await db.execute(
        select(Exercise).where(Exercise.id == payload.exercise_id, Exercise.user_id == user.id)
    )
    exercise = result.scalar_one_or_none()
    if exercise is None:
        raise ExerciseNotFound()
    log, _ = await record_log(
        db,
        user.id,
        exercise,
        reps=payload.reps,
        weight=payload.weight,
        sets=payload.sets,
        rir=payload.rir,
        notes=payload.notes,
        session_log_ids=active.log_ids,
    )
    workout = tracker.log_set(
        payload.exercise_id,
        reps=payload.reps,
        weight=payload.weight,
        sets=payload.sets,
        log_id=log.id,
    )
    return ActiveSetLogged(log=ExerciseLogRead.model_validate(log), workout=_active_read(workout))


@router.post("/active/complete", response_model=WorkoutSummaryRead | None)
async def complete_workout(
    user: User = Depends(get_current_user),
    tracker: ActiveWorkoutTracker = Depends(get_tracker),
    db: AsyncSession = Depends(get_db),
):
    """Finish the active workout and save its summary. Null when nothing was active."""
    summary = tracker.complete()
    if summary is None:
        return None
    return await _persist_summary(db, user, summary)


@router.post("/active/cancel", response_model=WorkoutSummaryRead | None)
async def cancel_workout(
    user: User = Depends(get_current_user),
    tracker: ActiveWorkoutTracker = Depends(get_tracker),
    db: AsyncSession = Depends(get_db),
):
    """Abandon the active workout. Logged sets are kept; the summary is saved as cancelled."""
    summary = tracker.cancel()
    if summary is None:
        return None
    return await _persist_summary(db, user, summary)
