"""In-progress workout tracking.

One tracker holds at most one active workout. Trackers are plain objects
owned by the caller (one per user via WorkoutTrackerRegistry); nothing here
is module-global. Updates are unguarded read-modify-write, so callers submit
sets one at a time.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from datetime import datetime, timezone

from app.core.enums import WorkoutStatus
from app.core.errors import ExerciseNotFound, NoActiveWorkout, NoExercisesInPlan, WorkoutAlreadyActive
from app.services.metrics import volume_load

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class ActiveWorkout:
    routine_id: uuid.UUID | None
    exercise_ids: list[uuid.UUID]
    started_at: datetime
    last_activity_at: datetime
    total_sets: int = 0
    total_volume: float = 0.0
    completed_exercises: set[uuid.UUID] = field(default_factory=set)
    log_ids: list[uuid.UUID] = field(default_factory=list)


@dataclass(frozen=True)
class WorkoutSummary:
    routine_id: uuid.UUID | None
    status: WorkoutStatus
    started_at: datetime
    ended_at: datetime
    duration_seconds: int
    total_sets: int
    total_volume: float
    completed_exercises: list[uuid.UUID]
    log_ids: list[uuid.UUID]


class ActiveWorkoutTracker:
    """Holds the single active workout for one user."""

    def __init__(self, clock: Clock = utc_now):
        self._clock = clock
        self._active: ActiveWorkout | None = None

    @property
    def active(self) -> ActiveWorkout | None:
        return self._active

    def start(self, routine_id: uuid.UUID | None, exercise_ids: Iterable[uuid.UUID]) -> ActiveWorkout:
        ids = list(exercise_ids)
        if not ids:
            raise NoExercisesInPlan()
        if self._active is not None:
            raise WorkoutAlreadyActive()
        now = self._clock()
        self._active = ActiveWorkout(
            routine_id=routine_id,
            exercise_ids=ids,
            started_at=now,
            last_activity_at=now,
        )
        logger.info("Workout started for routine %s with %d exercises", routine_id, len(ids))
        return self._active

    def log_set(
        self,
        exercise_id: uuid.UUID,
        reps: int,
        weight: float,
        sets: int = 1,
        log_id: uuid.UUID | None = None,
    ) -> ActiveWorkout:
        """Add one logged entry to the running totals."""
        workout = self._active
        if workout is None:
            raise NoActiveWorkout()
        if exercise_id not in workout.exercise_ids:
            raise ExerciseNotFound("Exercise is not part of the active workout")
        workout.total_volume += volume_load(weight, reps, sets)
        workout.total_sets += sets
        workout.completed_exercises.add(exercise_id)
        if log_id is not None:
            workout.log_ids.append(log_id)
        workout.last_activity_at = self._clock()
        return workout

    def complete(self) -> WorkoutSummary | None:
        return self._finish(WorkoutStatus.COMPLETED)

    def cancel(self) -> WorkoutSummary | None:
        return self._finish(WorkoutStatus.CANCELLED)

    def _finish(self, status: WorkoutStatus) -> WorkoutSummary | None:
        workout, self._active = self._active, None
        if workout is None:
            return None
        ended = self._clock()
        duration = max(0, int((ended - workout.started_at).total_seconds()))
        logger.info("Workout %s after %ds: %d sets", status.value, duration, workout.total_sets)
        return WorkoutSummary(
            routine_id=workout.routine_id,
            status=status,
            started_at=workout.started_at,
            ended_at=ended,
            duration_seconds=duration,
            total_sets=workout.total_sets,
            total_volume=workout.total_volume,
            completed_exercises=[e for e in workout.exercise_ids if e in workout.completed_exercises],
            log_ids=list(workout.log_ids),
        )


class WorkoutTrackerRegistry:
    """One tracker per user id, created on first use."""

    def __init__(self, clock: Clock = utc_now):
        self._clock = clock
        self._trackers: dict[uuid.UUID, ActiveWorkoutTracker] = {}

    def for_user(self, user_id: uuid.UUID) -> ActiveWorkoutTracker:
        tracker = self._trackers.get(user_id)
        if tracker is None:
            tracker = ActiveWorkoutTracker(clock=self._clock)
            self._trackers[user_id] = tracker
        return tracker
