"""Progression and calculator schemas."""

from pydantic import BaseModel, Field, model_validator

from app.core.enums import EquipmentType, ProgressionAction, ProgressType, WeightUnit


class HistoryEntry(BaseModel):
    reps_done: int = Field(..., ge=0)
    weight: float = Field(default=0, ge=0)


class ProgressionRequest(BaseModel):
    """One set's performance. `history` is newest first."""

    reps_done: int = Field(..., ge=0)
    weight: float = Field(..., ge=0)
    reps_min: int = Field(..., ge=0)
    reps_max: int = Field(..., ge=0)
    rir: int | None = Field(default=None, ge=0)
    history: list[HistoryEntry] = []
    equipment: EquipmentType | None = None
    unit: WeightUnit | None = None

    @model_validator(mode="after")
    def _check_rep_range(self):
        if self.reps_min > self.reps_max:
            raise ValueError("reps_min must be <= reps_max")
        return self


class RecommendationRead(BaseModel):
    action: ProgressionAction
    new_weight: float
    target_reps: int
    message: str
    progress_type: ProgressType
    needs_recovery_check: bool | None = None


class ExerciseRecommendationRead(RecommendationRead):
    exercise_name: str


class SessionExercise(BaseModel):
    name: str = Field(..., min_length=1)
    reps: int = Field(..., ge=0)
    weight: float = Field(default=0, ge=0)
    reps_min: int = Field(..., ge=0)
    reps_max: int = Field(..., ge=0)
    rir: int | None = Field(default=None, ge=0)


class PreviousExercise(BaseModel):
    name: str
    reps: int = Field(..., ge=0)
    weight: float = Field(default=0, ge=0)


class PreviousSession(BaseModel):
    exercises: list[PreviousExercise] = []


class CurrentSession(BaseModel):
    exercises: list[SessionExercise] = []


class SessionAnalysisRequest(BaseModel):
    """`previous_sessions` is newest first."""

    session: CurrentSession
    previous_sessions: list[PreviousSession] = []


class RIRLevelRead(BaseModel):
    value: int
    label: str
    description: str
    rpe: int
