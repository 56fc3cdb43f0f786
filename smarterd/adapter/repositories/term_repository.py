from datetime import datetime
from typing import List, Optional
from uuid import UUID

from sqlalchemy import delete, update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from smarterd.app.repositories.term_repository import ITermRepository
from smarterd.domain.entities import Term


class TermRepository(ITermRepository):
    """Term repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, term_id: UUID) -> Optional[Term]:
        """Get term by ID"""
        stmt = select(Term).where(Term.id == term_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_team_id(self, team_id: UUID) -> List[Term]:
        """Get all terms of a team"""
        stmt = (
            select(Term)
            .where(Term.team_id == team_id)
            .order_by(Term.logical_name)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, term: Term) -> Term:
        """Create a new term"""
        self.session.add(term)
        await self.session.flush()
        await self.session.refresh(term)
        return term

    async def detach_domain(self, domain_id: UUID) -> None:
        """Clear domain_id on every term referencing the domain"""
        stmt = (
            update(Term)
            .where(Term.domain_id == domain_id)
            .values(domain_id=None, updated_at=datetime.utcnow())
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def delete(self, term: Term) -> None:
        """Delete a term"""
        await self.session.delete(term)
        await self.session.flush()

    async def delete_by_team_id(self, team_id: UUID) -> None:
        """Delete every term of a team"""
        stmt = delete(Term).where(Term.team_id == team_id)
        await self.session.execute(stmt)
        await self.session.flush()
