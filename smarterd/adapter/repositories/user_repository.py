from typing import List, Optional
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from smarterd.app.repositories.user_repository import IUserRepository
from smarterd.domain.entities import User
from smarterd.domain.errors import DuplicateRecordError


class UserRepository(IUserRepository):
    """User repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_login_id(self, login_id: str) -> Optional[User]:
        """Get user by login ID"""
        stmt = select(User).where(User.login_id == login_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def exists_by_login_id(self, login_id: str) -> bool:
        """Check whether a login ID is taken"""
        return await self.get_by_login_id(login_id) is not None

    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID"""
        stmt = select(User).where(User.id == user_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_ids(self, user_ids: List[UUID]) -> List[User]:
        """Get all users with the given IDs"""
        if not user_ids:
            return []
        stmt = select(User).where(User.id.in_(user_ids))
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, user: User) -> User:
        """Create a new user"""
        self.session.add(user)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise DuplicateRecordError(f"Login ID already exists: {user.login_id}") from exc
        await self.session.refresh(user)
        return user
