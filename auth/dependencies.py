"""
FastAPI dependencies for authentication.

Provides ``db_session``, ``user_repository`` and ``get_current_identity``
dependencies that are used across all protected routes.
"""

from __future__ import annotations

import logging
from typing import AsyncGenerator, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from auth.errors import InvalidTokenError, MissingTokenError
from auth.models import Identity
from database.repository import UserRepository
from database.session import get_db_session

logger = logging.getLogger(__name__)

_bearer_scheme = HTTPBearer(auto_error=False)


async def db_session(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[AsyncSession, None]:
    """Yield a DB session for route handlers."""
    yield session


async def user_repository(session: AsyncSession = Depends(db_session)) -> UserRepository:
    return UserRepository(session)


async def get_current_identity(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(_bearer_scheme),
) -> Identity:
    """
    Extract and verify the Bearer token, returning the caller's
    :class:`Identity`. Raises ``MissingTokenError`` or ``InvalidTokenError``
    (both rendered as 401).
    """
    from auth.jwt import verify_token

    if credentials is None or not credentials.credentials:
        raise MissingTokenError()
    try:
        return verify_token(credentials.credentials)
    except InvalidTokenError as exc:
        logger.debug("Rejected token: %s", exc.reason or exc.message)
        raise
