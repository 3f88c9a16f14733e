"""Folder and routine CRUD endpoints (owner-scoped)."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_current_user
from app.db.session import get_db
from app.models.folder import WorkoutFolder, WorkoutRoutine
from app.models.user import User
from app.schemas.folder import (
    FolderCreate,
    FolderRead,
    FolderUpdate,
    RoutineCreate,
    RoutineRead,
    RoutineUpdate,
)

router = APIRouter()


async def get_owned_folder(db: AsyncSession, user_id: uuid.UUID, folder_id: uuid.UUID) -> WorkoutFolder:
    result = await db.execute(
        select(WorkoutFolder).where(WorkoutFolder.id == folder_id, WorkoutFolder.user_id == user_id)
    )
    folder = result.scalar_one_or_none()
    if not folder:
        raise HTTPException(status_code=404, detail="Folder not found")
    return folder


async def get_owned_routine(db: AsyncSession, user_id: uuid.UUID, routine_id: uuid.UUID) -> WorkoutRoutine:
    result = await db.execute(
        select(WorkoutRoutine).where(WorkoutRoutine.id == routine_id, WorkoutRoutine.user_id == user_id)
    )
    routine = result.scalar_one_or_none()
    if not routine:
        raise HTTPException(status_code=404, detail="Routine not found")
    return routine


# ---- Folders ----


@router.get("/folders", response_model=list[FolderRead])
async def list_folders(
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Folders, newest first."""
    result = await db.execute(
        select(WorkoutFolder)
        .where(WorkoutFolder.user_id == user.id)
        .order_by(WorkoutFolder.created_at.desc())
    )
    return list(result.scalars().all())


@router.post("/folders", response_model=FolderRead, status_code=201)
async def create_folder(
    payload: FolderCreate,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    folder = WorkoutFolder(user_id=user.id, **payload.model_dump())
    db.add(folder)
    await db.flush()
    await db.refresh(folder)
    return folder


@router.patch("/folders/{folder_id}", response_model=FolderRead)
async def update_folder(
    folder_id: uuid.UUID,
    payload: FolderUpdate,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    folder = await get_owned_folder(db, user.id, folder_id)
    for k, v in payload.model_dump(exclude_unset=True).items():
        setattr(folder, k, v)
    await db.flush()
    await db.refresh(folder)
    return folder


@router.delete("/folders/{folder_id}", status_code=204)
async def delete_folder(
    folder_id: uuid.UUID,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Delete a folder with its routines and their exercises."""
    folder = await get_owned_folder(db, user.id, folder_id)
    await db.delete(folder)
    return None


# ---- Routines ----


@router.get("/routines", response_model=list[RoutineRead])
async def list_routines(
    folder_id: uuid.UUID | None = None,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Routines, newest first, optionally only those in one folder."""
    stmt = select(WorkoutRoutine).where(WorkoutRoutine.user_id == user.id)
    if folder_id is not None:
        stmt = stmt.where(WorkoutRoutine.folder_id == folder_id)
    result = await db.execute(stmt.order_by(WorkoutRoutine.created_at.desc()))
    return list(result.scalars().all())


@router.post("/routines", response_model=RoutineRead, status_code=201)
async def create_routine(
    payload: RoutineCreate,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    await get_owned_folder(db, user.id, payload.folder_id)
    routine = WorkoutRoutine(user_id=user.id, **payload.model_dump())
    db.add(routine)
    await db.flush()
    await db.refresh(routine)
    return routine


@router.patch("/routines/{routine_id}", response_model=RoutineRead)
async def update_routine(
    routine_id: uuid.UUID,
    payload: RoutineUpdate,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    routine = await get_owned_routine(db, user.id, routine_id)
    data = payload.model_dump(exclude_unset=True)
    if data.get("folder_id") is not None:
        await get_owned_folder(db, user.id, data["folder_id"])
    for k, v in data.items():
        if v is not None:
            setattr(routine, k, v)
    await db.flush()
    await db.refresh(routine)
    return routine


@router.delete("/routines/{routine_id}", status_code=204)
async def delete_routine(
    routine_id: uuid.UUID,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    routine = await get_owned_routine(db, user.id, routine_id)
    await db.delete(routine)
    return None
