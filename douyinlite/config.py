"""Shared configuration constants and JWT secret helpers."""

from __future__ import annotations

import base64
import secrets
from enum import Enum

_KNOWN_WEAK_VALUE = str(123456)
_MIN_SECRET_BYTES = 32
_SECRET_RANDOM_BYTES = 32


class DbOperation(str, Enum):
    """Kinds of database operation carried in queued messages."""

    INSERT = "insert"
    UPDATE = "update"
    DELETE = "delete"
    SEARCH = "search"


def generate_secure_jwt_secret() -> str:
    """Return a fresh, URL-safe base64 encoding of 32 random bytes."""
    raw = secrets.token_bytes(_SECRET_RANDOM_BYTES)
    return base64.urlsafe_b64encode(raw).decode("ascii")


def is_secure_jwt_secret(secret_key: str) -> bool:
    """Tell whether a JWT secret is long enough and not the weak default."""
    if secret_key == _KNOWN_WEAK_VALUE:
        return False
    return len(secret_key.encode("utf-8")) >= _MIN_SECRET_BYTES