"""
User repository: the credential store.
"""

from typing import Protocol
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from eventdesk.auth.models import User


class UserRepositoryProtocol(Protocol):
    """Protocol for user repository operations."""

    async def get_by_id(self, user_id: UUID) -> User | None: ...
    async def get_by_email(self, email: str) -> User | None: ...
    async def create(self, user: User) -> User: ...


class UserRepository:
    """Repository for user database operations."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_id(self, user_id: UUID) -> User | None:
        """Get a user by ID."""
        return await self._session.get(User, user_id)

    async def get_by_email(self, email: str) -> User | None:
        """Get a user by email, ignoring case."""
        stmt = select(User).where(func.lower(User.email) == email.strip().lower())
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def create(self, user: User) -> User:
        """Persist a new user."""
        self._session.add(user)
        await self._session.flush()
        await self._session.refresh(user)
        return user
