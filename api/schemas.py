"""
Pydantic schemas for the account API — request bodies and response envelopes.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import Any, List, Optional

from pydantic import BaseModel, Field

from database.models import User


def to_timestamp(value: Optional[datetime]) -> Optional[str]:
    """ISO-8601 UTC with millisecond precision, e.g. ``2024-01-31T08:00:00.000Z``."""
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


def parse_history(raw: Optional[str]) -> List[Any]:
    """Stored history text → list. Raises ``ValueError`` when it isn't a JSON array."""
    parsed = json.loads(raw or "[]")
    if not isinstance(parsed, list):
        raise ValueError("history is not a sequence")
    return parsed


# ═══════════════════════════════════════════════════════════════════════════════
# Requests
# ═══════════════════════════════════════════════════════════════════════════════


class RegisterRequest(BaseModel):
    """Every field is optional here; presence is checked field by field so each
    missing one gets its own message."""

    username: Optional[str] = None
    nama: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


class LoginRequest(BaseModel):
    account: Optional[str] = None
    password: Optional[str] = None


# ═══════════════════════════════════════════════════════════════════════════════
# Profile projections
# ═══════════════════════════════════════════════════════════════════════════════


class RegisteredUser(BaseModel):
    username: str
    nama: str
    email: str
    history: str  # returned exactly as stored

    @classmethod
    def from_user(cls, user: User) -> "RegisteredUser":
        return cls(username=user.username, nama=user.nama, email=user.email, history=user.history)


class LoginUser(BaseModel):
    username: str
    nama: str
    email: str
    history: List[Any] = Field(default_factory=list)

    @classmethod
    def from_user(cls, user: User) -> "LoginUser":
        return cls(
            username=user.username,
            nama=user.nama,
            email=user.email,
            history=parse_history(user.history),
        )


class SelfProfile(BaseModel):
    # NOTE: includes the password hash, kept for wire compatibility.
    username: str
    nama: str
    email: str
    password: str
    history: List[Any] = Field(default_factory=list)
    createdAt: Optional[str] = None
    updatedAt: Optional[str] = None

    @classmethod
    def from_user(cls, user: User) -> "SelfProfile":
        return cls(
            username=user.username,
            nama=user.nama,
            email=user.email,
            password=user.password,
            history=parse_history(user.history),
            createdAt=to_timestamp(user.created_at),
            updatedAt=to_timestamp(user.updated_at),
        )


class PublicUser(BaseModel):
    """List entry: every stored column except ``id``, ``password`` and ``history``."""

    username: str
    nama: str
    email: str
    createdAt: Optional[str] = None
    updatedAt: Optional[str] = None

    @classmethod
    def from_user(cls, user: User) -> "PublicUser":
        return cls(
            username=user.username,
            nama=user.nama,
            email=user.email,
            createdAt=to_timestamp(user.created_at),
            updatedAt=to_timestamp(user.updated_at),
        )


# ═══════════════════════════════════════════════════════════════════════════════
# Envelopes
# ═══════════════════════════════════════════════════════════════════════════════


class ErrorEnvelope(BaseModel):
    status: bool = False
    message: str
    error: Optional[str] = None


class MessageEnvelope(BaseModel):
    status: bool = True
    message: str


class RegisterResponse(MessageEnvelope):
    user: RegisteredUser


class LoginResponse(MessageEnvelope):
    token: str
    user: LoginUser


class SelfResponse(BaseModel):
    status: bool = True
    user: SelfProfile


class ListResponse(BaseModel):
    status: bool = True
    list: List[PublicUser] = Field(default_factory=list)
