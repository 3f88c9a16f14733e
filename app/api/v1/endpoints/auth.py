"""Identity endpoints: sign up, sign in, sign out, current session."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_current_session, get_current_user
from app.core.config import get_settings
from app.core.errors import AuthenticationError
from app.core.security import hash_password, new_session_token, verify_password
from app.db.session import get_db
from app.models.user import AuthSession, User
from app.schemas.auth import Credentials, SessionRead, UserRead

logger = logging.getLogger(__name__)
router = APIRouter()


async def _open_session(db: AsyncSession, user: User) -> SessionRead:
    token = new_session_token(get_settings().session_token_bytes)
    db.add(AuthSession(user_id=user.id, token=token))
    await db.flush()
    return SessionRead(access_token=token, user=UserRead.model_validate(user))


@router.post("/sign-up", response_model=SessionRead, status_code=201)
async def sign_up(payload: Credentials, db: AsyncSession = Depends(get_db)):
    """Create an account and sign it in."""
    email = payload.email.strip().lower()
    existing = await db.execute(select(User.id).where(User.email == email))
    if existing.scalar_one_or_none() is not None:
        logger.warning("Sign-up rejected, email already registered")
        raise HTTPException(status_code=409, detail="Email already registered")
    user = User(email=email, password_hash=hash_password(payload.password))
    db.add(user)
    await db.flush()
    await db.refresh(user)
    return await _open_session(db, user)


@router.post("/sign-in", response_model=SessionRead)
async def sign_in(payload: Credentials, db: AsyncSession = Depends(get_db)):
    """Exchange email + password for a bearer token."""
    email = payload.email.strip().lower()
    result = await db.execute(select(User).where(User.email == email))
    user = result.scalar_one_or_none()
    if user is None or not verify_password(payload.password, user.password_hash):
        logger.warning("Sign-in failed for %s", email)
        raise AuthenticationError("Invalid email or password")
    return await _open_session(db, user)


@router.post("/sign-out", status_code=204)
async def sign_out(
    auth_session: AuthSession = Depends(get_current_session),
    db: AsyncSession = Depends(get_db),
):
    """Revoke the current token."""
    auth_session.revoked_at = datetime.now(timezone.utc)
    await db.flush()
    return None


@router.get("/session", response_model=UserRead)
async def current_session(user: User = Depends(get_current_user)):
    """Who the bearer token belongs to."""
    return user
