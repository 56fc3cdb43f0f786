from typing import List, Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from smarterd.app.repositories.team_repository import ITeamRepository
from smarterd.domain.entities import Team


class TeamRepository(ITeamRepository):
    """Team repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, team_id: UUID) -> Optional[Team]:
        """Get team by ID"""
        stmt = select(Team).where(Team.id == team_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_ids(self, team_ids: List[UUID]) -> List[Team]:
        """Get all teams with the given IDs"""
        if not team_ids:
            return []
        stmt = select(Team).where(Team.id.in_(team_ids))
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, team: Team) -> Team:
        """Create a new team"""
        self.session.add(team)
        await self.session.flush()
        await self.session.refresh(team)
        return team

    async def delete(self, team: Team) -> None:
        """Delete a team row"""
        await self.session.delete(team)
        await self.session.flush()
