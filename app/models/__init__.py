"""ORM models - import all so Base.metadata is complete for migrations."""

from app.models.exercise import Exercise
from app.models.folder import WorkoutFolder, WorkoutRoutine
from app.models.user import AuthSession, User
from app.models.workout import ExerciseLog, Workout

__all__ = [
    "AuthSession",
    "Exercise",
    "ExerciseLog",
    "User",
    "Workout",
    "WorkoutFolder",
    "WorkoutRoutine",
]
