from typing import List, Optional
from uuid import UUID

from sqlalchemy import delete
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from smarterd.app.repositories.domain_repository import IDomainRepository
from smarterd.domain.entities import Domain


class DomainRepository(IDomainRepository):
    """Domain repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, domain_id: UUID) -> Optional[Domain]:
        """Get domain by ID"""
        stmt = select(Domain).where(Domain.id == domain_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_team_id(self, team_id: UUID) -> List[Domain]:
        """Get all domains of a team"""
        stmt = (
            select(Domain)
            .where(Domain.team_id == team_id)
            .order_by(Domain.logical_name)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, domain: Domain) -> Domain:
        """Create a new domain"""
        self.session.add(domain)
        await self.session.flush()
        await self.session.refresh(domain)
        return domain

    async def delete(self, domain: Domain) -> None:
        """Delete a domain"""
        await self.session.delete(domain)
        await self.session.flush()

    async def delete_by_team_id(self, team_id: UUID) -> None:
        """Delete every domain of a team"""
        stmt = delete(Domain).where(Domain.team_id == team_id)
        await self.session.execute(stmt)
        await self.session.flush()
