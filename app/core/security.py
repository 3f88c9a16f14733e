"""Security utilities: password hashing and opaque session tokens."""

import secrets

from passlib.context import CryptContext

password_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(plain: str) -> str:
    return password_context.hash(plain)


def verify_password(plain: str, hashed: str) -> bool:
    return password_context.verify(plain, hashed)


def new_session_token(nbytes: int = 32) -> str:
    """URL-safe random token handed to the client as a bearer credential."""
    return secrets.token_urlsafe(nbytes)
