"""Exercise and ExerciseLog schemas."""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, model_validator

from app.core.enums import EquipmentType, WeightUnit


class ExerciseBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    equipment: EquipmentType = EquipmentType.BARBELL
    unit: WeightUnit = WeightUnit.KG
    target_sets: int = Field(default=3, ge=1, le=20)
    reps_min: int = Field(default=8, ge=0)
    reps_max: int = Field(default=12, ge=0)
    target_weight: float | None = Field(default=None, ge=0)
    rest_seconds: int | None = Field(default=None, ge=0)
    order_in_routine: int = 0
    notes: str | None = None

    @model_validator(mode="after")
    def _check_rep_range(self):
        if self.reps_min > self.reps_max:
            raise ValueError("reps_min must be <= reps_max")
        return self


class ExerciseCreate(ExerciseBase):
    routine_id: UUID


class ExerciseUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=255)
    equipment: EquipmentType | None = None
    unit: WeightUnit | None = None
    target_sets: int | None = Field(None, ge=1, le=20)
    reps_min: int | None = Field(None, ge=0)
    reps_max: int | None = Field(None, ge=0)
    target_weight: float | None = Field(None, ge=0)
    rest_seconds: int | None = Field(None, ge=0)
    order_in_routine: int | None = None
    notes: str | None = None


class ExerciseRead(ExerciseBase):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    routine_id: UUID
    created_at: datetime


class ExerciseLogCreate(BaseModel):
    sets: int = Field(default=1, ge=1, le=20)
    reps: int = Field(..., ge=0)
    weight: float = Field(default=0, ge=0)
    rir: int | None = Field(default=None, ge=0)
    notes: str | None = Field(default=None, max_length=500)


class ExerciseLogRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    exercise_id: UUID
    workout_id: UUID | None = None
    sets: int
    reps: int
    weight: float
    rir: int | None = None
    notes: str | None = None
    recommendation: dict[str, Any] | None = None
    created_at: datetime
