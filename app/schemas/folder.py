"""Folder and Routine schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class FolderBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: str = ""


class FolderCreate(FolderBase):
    pass


class FolderUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None


class FolderRead(FolderBase):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    created_at: datetime


class RoutineBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: str = ""


class RoutineCreate(RoutineBase):
    folder_id: UUID


class RoutineUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    folder_id: UUID | None = None


class RoutineRead(RoutineBase):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    folder_id: UUID
    created_at: datetime
