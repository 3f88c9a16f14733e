"""SQLAlchemy declarative base shared by all owner-scoped models."""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base for all ORM models; Alembic reads Base.metadata."""
