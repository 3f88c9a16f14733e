"""Active workout and finished Workout schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from app.core.enums import WorkoutStatus
from app.schemas.exercise import ExerciseLogRead


class ActiveWorkoutStart(BaseModel):
    routine_id: UUID


class ActiveSetCreate(BaseModel):
    exercise_id: UUID
    sets: int = Field(default=1, ge=1, le=20)
    reps: int = Field(..., ge=0)
    weight: float = Field(default=0, ge=0)
    rir: int | None = Field(default=None, ge=0)
    notes: str | None = Field(default=None, max_length=500)


class ActiveWorkoutRead(BaseModel):
    routine_id: UUID | None = None
    exercise_ids: list[UUID] = []
    started_at: datetime
    last_activity_at: datetime
    total_sets: int = 0
    total_volume: float = 0
    completed_exercises: list[UUID] = []


class ActiveSetLogged(BaseModel):
    """Result of logging a set: the stored log (with recommendation) and updated totals."""

    log: ExerciseLogRead
    workout: ActiveWorkoutRead


class WorkoutRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    routine_id: UUID | None = None
    status: WorkoutStatus
    started_at: datetime
    ended_at: datetime
    duration_seconds: int
    total_sets: int
    total_volume: float


class WorkoutSummaryRead(WorkoutRead):
    completed_exercises: list[UUID] = []
