"""
User repository — the persistence layer the account routes depend on.

Uniqueness of ``username``/``email`` and atomicity of create/destroy are
left to the database; every mutating call commits its own transaction.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional

from sqlalchemy import delete, or_, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from auth.errors import DuplicateUserError, PersistenceError
from database.models import User

logger = logging.getLogger(__name__)


def by_id(user_id: Any):
    return User.id == user_id


def by_account(account: str):
    """Match ``account`` against either the email or the username."""
    return or_(User.email == account, User.username == account)


class UserRepository:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, **values: Any) -> User:
        user = User(**values)
        self._session.add(user)
        try:
            await self._session.commit()
        except IntegrityError as exc:
            await self._session.rollback()
            raise DuplicateUserError("Duplicate user", error=str(exc.orig)) from exc
        except SQLAlchemyError as exc:
            await self._session.rollback()
            raise PersistenceError("Persistence failure", error=str(exc)) from exc
        return user

    async def find_one(self, *criteria: Any) -> Optional[User]:
        try:
            result = await self._session.execute(select(User).where(*criteria).limit(1))
        except SQLAlchemyError as exc:
            raise PersistenceError("Persistence failure", error=str(exc)) from exc
        return result.scalar_one_or_none()

    async def find_all(self) -> List[User]:
        try:
            result = await self._session.execute(select(User).order_by(User.id))
        except SQLAlchemyError as exc:
            raise PersistenceError("Persistence failure", error=str(exc)) from exc
        return list(result.scalars().all())

    async def destroy(self, *criteria: Any) -> int:
        """Delete matching rows and return how many were removed."""
        try:
            result = await self._session.execute(delete(User).where(*criteria))
            await self._session.commit()
        except SQLAlchemyError as exc:
            await self._session.rollback()
            raise PersistenceError("Persistence failure", error=str(exc)) from exc
        return result.rowcount or 0
