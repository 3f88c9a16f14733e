"""Workout and ExerciseLog models."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Any

from sqlalchemy import JSON, DateTime, Enum, ForeignKey, Index, Integer, Numeric, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.enums import WorkoutStatus
from app.db.base import Base


class Workout(Base):
    """Finished (completed or cancelled) session with its summary totals."""

    __tablename__ = "workouts"
    __table_args__ = (
        Index("ix_workouts_user_id", "user_id"),
        Index("ix_workouts_started_at", "started_at"),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    routine_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid, ForeignKey("workout_routines.id", ondelete="SET NULL"), nullable=True
    )
    status: Mapped[WorkoutStatus] = mapped_column(Enum(WorkoutStatus), nullable=False)
    started_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    ended_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    duration_seconds: Mapped[int] = mapped_column(Integer, default=0)
    total_sets: Mapped[int] = mapped_column(Integer, default=0)
    total_volume: Mapped[float] = mapped_column(Numeric(12, 2), default=0)

    logs: Mapped[list["ExerciseLog"]] = relationship("ExerciseLog", back_populates="workout")


class ExerciseLog(Base):
    """One logged performance: sets x reps at weight, optional RIR, plus the
    recommendation computed when it was logged (stored as JSON, never mutated)."""

    __tablename__ = "exercise_logs"
    __table_args__ = (
        Index("ix_exercise_logs_user_id", "user_id"),
        Index("ix_exercise_logs_exercise_created", "exercise_id", "created_at"),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    exercise_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("exercises.id", ondelete="CASCADE"), nullable=False
    )
    workout_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid, ForeignKey("workouts.id", ondelete="SET NULL"), nullable=True
    )
    sets: Mapped[int] = mapped_column(Integer, default=1)
    reps: Mapped[int] = mapped_column(Integer, nullable=False)
    weight: Mapped[float] = mapped_column(Numeric(8, 2), default=0)
    rir: Mapped[int | None] = mapped_column(Integer, nullable=True)
    notes: Mapped[str | None] = mapped_column(String(500), nullable=True)
    recommendation: Mapped[dict[str, Any] | None] = mapped_column(JSON, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))

    exercise: Mapped["Exercise"] = relationship("Exercise", back_populates="logs")
    workout: Mapped["Workout | None"] = relationship("Workout", back_populates="logs")
