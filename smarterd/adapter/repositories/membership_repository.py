from datetime import datetime
from typing import List, Optional
from uuid import UUID

from sqlalchemy import delete, func
from sqlalchemy.exc import IntegrityError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from smarterd.app.repositories.membership_repository import IMembershipRepository
from smarterd.domain.entities import Membership, MembershipKey
from smarterd.domain.errors import DuplicateRecordError


class MembershipRepository(IMembershipRepository):
    """Membership repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get(self, key: MembershipKey) -> Optional[Membership]:
        """Get membership by its (team_id, user_id) key"""
        stmt = select(Membership).where(
            Membership.team_id == key.team_id, Membership.user_id == key.user_id
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def exists(self, key: MembershipKey) -> bool:
        """Check whether a membership exists for (team_id, user_id)"""
        return await self.get(key) is not None

    async def get_by_user_id(self, user_id: UUID) -> List[Membership]:
        """Get all memberships for a user"""
        stmt = select(Membership).where(Membership.user_id == user_id)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get_by_team_id(self, team_id: UUID) -> List[Membership]:
        """Get all memberships for a team"""
        stmt = select(Membership).where(Membership.team_id == team_id)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def count_by_team_id(self, team_id: UUID) -> int:
        """Count memberships of a team"""
        stmt = (
            select(func.count())
            .select_from(Membership)
            .where(Membership.team_id == team_id)
        )
        result = await self.session.exec(stmt)
        return result.one()

    async def create(self, membership: Membership) -> Membership:
        """Create a new membership"""
        self.session.add(membership)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise DuplicateRecordError(
                f"Membership already exists: team={membership.team_id} user={membership.user_id}"
            ) from exc
        await self.session.refresh(membership)
        return membership

    async def update(self, membership: Membership) -> Membership:
        """Update existing membership in place"""
        membership.updated_at = datetime.utcnow()
        self.session.add(membership)
        await self.session.flush()
        await self.session.refresh(membership)
        return membership

    async def delete(self, membership: Membership) -> None:
        """Delete a membership"""
        await self.session.delete(membership)
        await self.session.flush()

    async def delete_by_team_id(self, team_id: UUID) -> None:
        """Delete every membership of a team"""
        stmt = delete(Membership).where(Membership.team_id == team_id)
        await self.session.execute(stmt)
        await self.session.flush()
