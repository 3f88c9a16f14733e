"""Folder and Routine models - plans organized into folders."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, ForeignKey, Index, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base


class WorkoutFolder(Base):
    """Named group of routines."""

    __tablename__ = "workout_folders"
    __table_args__ = (Index("ix_workout_folders_user_id", "user_id"),)

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, default="")
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))

    routines: Mapped[list["WorkoutRoutine"]] = relationship(
        "WorkoutRoutine", back_populates="folder", cascade="all, delete-orphan"
    )


class WorkoutRoutine(Base):
    """A workout plan: ordered exercises with target ranges."""

    __tablename__ = "workout_routines"
    __table_args__ = (
        Index("ix_workout_routines_user_id", "user_id"),
        Index("ix_workout_routines_folder_id", "folder_id"),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    folder_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("workout_folders.id", ondelete="CASCADE"), nullable=False
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, default="")
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))

    folder: Mapped["WorkoutFolder"] = relationship("WorkoutFolder", back_populates="routines")
    exercises: Mapped[list["Exercise"]] = relationship(
        "Exercise",
        back_populates="routine",
        cascade="all, delete-orphan",
        order_by="Exercise.order_in_routine",
    )
