"""Shared endpoint dependencies: current user and active workout tracker."""

from __future__ import annotations

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import AuthenticationError
from app.db.session import get_db
from app.models.user import AuthSession, User
from app.services.active_workout import ActiveWorkoutTracker, WorkoutTrackerRegistry

bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_session(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    db: AsyncSession = Depends(get_db),
) -> AuthSession:
    """Resolve the bearer token to a live (not revoked) session."""
    if credentials is None or not credentials.credentials:
        raise AuthenticationError()
    result = await db.execute(
        select(AuthSession).where(
            AuthSession.token == credentials.credentials,
            AuthSession.revoked_at.is_(None),
        )
    )
    session = result.scalar_one_or_none()
    if session is None:
        raise AuthenticationError("Invalid or expired session")
    return session


async def get_current_user(
    auth_session: AuthSession = Depends(get_current_session),
    db: AsyncSession = Depends(get_db),
) -> User:
    user = await db.get(User, auth_session.user_id)
    if user is None:
        raise AuthenticationError("Invalid or expired session")
    return user


def get_tracker_registry(request: Request) -> WorkoutTrackerRegistry:
    return request.app.state.workout_trackers


def get_tracker(
    user: User = Depends(get_current_user),
    registry: WorkoutTrackerRegistry = Depends(get_tracker_registry),
) -> ActiveWorkoutTracker:
    return registry.for_user(user.id)
