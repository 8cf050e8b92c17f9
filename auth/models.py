"""This module holds the decoded token identity and re-exports the User model
from the database package for use in authentication-related code.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from database.models import User  # noqa: F401


@dataclass(frozen=True)
class Identity:
    """Claim extracted from a verified token.

    Downstream handlers read ``user_id`` only; the gate never re-checks it
    against the database.
    """

    user_id: Any
    expires_at: float


__all__ = ["Identity", "User"]
