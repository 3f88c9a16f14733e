"""Exercise model - a routine entry with its target rep range and equipment."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, Enum, ForeignKey, Index, Integer, Numeric, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.enums import EquipmentType, WeightUnit
from app.db.base import Base


class Exercise(Base):
    """Exercise in a routine. reps_min/reps_max parameterize the progression engine;
    equipment/unit pick the weight increment."""

    __tablename__ = "exercises"
    __table_args__ = (
        Index("ix_exercises_user_id", "user_id"),
        Index("ix_exercises_routine_id", "routine_id"),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    routine_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("workout_routines.id", ondelete="CASCADE"), nullable=False
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    equipment: Mapped[EquipmentType] = mapped_column(
        Enum(EquipmentType), default=EquipmentType.BARBELL, nullable=False
    )
    unit: Mapped[WeightUnit] = mapped_column(Enum(WeightUnit), default=WeightUnit.KG, nullable=False)
    target_sets: Mapped[int] = mapped_column(Integer, default=3)
    reps_min: Mapped[int] = mapped_column(Integer, default=8)
    reps_max: Mapped[int] = mapped_column(Integer, default=12)
    target_weight: Mapped[float | None] = mapped_column(Numeric(8, 2), nullable=True)
    rest_seconds: Mapped[int | None] = mapped_column(Integer, nullable=True)  # Rest timer preset
    order_in_routine: Mapped[int] = mapped_column(Integer, default=0)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))

    routine: Mapped["WorkoutRoutine"] = relationship("WorkoutRoutine", back_populates="exercises")
    logs: Mapped[list["ExerciseLog"]] = relationship(
        "ExerciseLog", back_populates="exercise", cascade="all, delete-orphan"
    )
