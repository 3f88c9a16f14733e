"""Shared fixtures: in-memory SQLite app, authenticated client, fake clock."""

import os

os.environ.setdefault("DATABASE_URL_OVERRIDE", "sqlite+aiosqlite://")

from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.db.base import Base
from app.db.session import get_db
from app.main import create_application
from app.models import *  # noqa: F401, F403 - register all models


class FakeClock:
    """Deterministic clock; advance() moves time forward."""

    def __init__(self, start: datetime | None = None):
        self.now = start or datetime(2026, 1, 5, 18, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def app():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    maker = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    state = {"ready": False}

    async def override_get_db():
        if not state["ready"]:
            async with engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
            state["ready"] = True
        async with maker() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    application = create_application()
    application.dependency_overrides[get_db] = override_get_db
    return application


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


def sign_up(client: TestClient, email: str = "lifter@example.com", password: str = "squat-every-day") -> dict:
    r = client.post("/api/v1/auth/sign-up", json={"email": email, "password": password})
    assert r.status_code == 201, r.text
    return {"Authorization": f"Bearer {r.json()['access_token']}"}


@pytest.fixture
def auth_headers(client):
    return sign_up(client)
