import uuid

import pytest

from app.core.enums import WorkoutStatus
from app.core.errors import ExerciseNotFound, NoActiveWorkout, NoExercisesInPlan, WorkoutAlreadyActive
from app.services.active_workout import ActiveWorkoutTracker, WorkoutTrackerRegistry

ROUTINE = uuid.uuid4()
SQUAT = uuid.uuid4()
BENCH = uuid.uuid4()


def test_start_requires_exercises(clock):
    tracker = ActiveWorkoutTracker(clock=clock)
    with pytest.raises(NoExercisesInPlan):
        tracker.start(ROUTINE, [])
    assert tracker.active is None


def test_second_start_is_rejected(clock):
    tracker = ActiveWorkoutTracker(clock=clock)
    tracker.start(ROUTINE, [SQUAT])
    with pytest.raises(WorkoutAlreadyActive):
        tracker.start(ROUTINE, [BENCH])


def test_log_set_accumulates_totals(clock):
    tracker = ActiveWorkoutTracker(clock=clock)
    tracker.start(ROUTINE, [SQUAT, BENCH])
    tracker.log_set(SQUAT, reps=5, weight=100, sets=3)
    clock.advance(minutes=5)
    workout = tracker.log_set(BENCH, reps=8, weight=60)
    assert workout.total_sets == 4
    assert workout.total_volume == 1500 + 480
    assert workout.completed_exercises == {SQUAT, BENCH}
    assert workout.last_activity_at == clock.now


def test_log_set_unknown_exercise(clock):
    tracker = ActiveWorkoutTracker(clock=clock)
    tracker.start(ROUTINE, [SQUAT])
    with pytest.raises(ExerciseNotFound):
        tracker.log_set(uuid.uuid4(), reps=5, weight=100)


def test_log_set_without_workout(clock):
    with pytest.raises(NoActiveWorkout):
        ActiveWorkoutTracker(clock=clock).log_set(SQUAT, reps=5, weight=100)


def test_complete_summarizes_and_clears(clock):
    tracker = ActiveWorkoutTracker(clock=clock)
    tracker.start(ROUTINE, [SQUAT, BENCH])
    tracker.log_set(BENCH, reps=10, weight=50, sets=2)
    clock.advance(minutes=42, seconds=7)
    summary = tracker.complete()
    assert summary.status is WorkoutStatus.COMPLETED
    assert summary.duration_seconds == 42 * 60 + 7
    assert summary.total_sets == 2
    assert summary.total_volume == 1000
    assert summary.completed_exercises == [BENCH]
    assert tracker.active is None


def test_cancel_and_finish_are_idempotent(clock):
    tracker = ActiveWorkoutTracker(clock=clock)
    assert tracker.complete() is None
    assert tracker.cancel() is None
    tracker.start(ROUTINE, [SQUAT])
    assert tracker.cancel().status is WorkoutStatus.CANCELLED
    assert tracker.cancel() is None


def test_registry_keeps_one_tracker_per_user(clock):
    registry = WorkoutTrackerRegistry(clock=clock)
    alice, bob = uuid.uuid4(), uuid.uuid4()
    assert registry.for_user(alice) is registry.for_user(alice)
    assert registry.for_user(alice) is not registry.for_user(bob)
