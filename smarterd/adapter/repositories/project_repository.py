from typing import List, Optional
from uuid import UUID

from sqlalchemy import delete
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from smarterd.app.repositories.project_repository import IProjectRepository
from smarterd.domain.entities import Project


class ProjectRepository(IProjectRepository):
    """Project repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, project_id: UUID) -> Optional[Project]:
        """Get project by ID"""
        stmt = select(Project).where(Project.id == project_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_team_id(self, team_id: UUID) -> List[Project]:
        """Get all projects of a team"""
        stmt = (
            select(Project)
            .where(Project.team_id == team_id)
            .order_by(Project.created_at)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, project: Project) -> Project:
        """Create a new project"""
        self.session.add(project)
        await self.session.flush()
        await self.session.refresh(project)
        return project

    async def delete(self, project: Project) -> None:
        """Delete a project"""
        await self.session.delete(project)
        await self.session.flush()

    async def delete_by_team_id(self, team_id: UUID) -> None:
        """Delete every project of a team"""
        stmt = delete(Project).where(Project.team_id == team_id)
        await self.session.execute(stmt)
        await self.session.flush()
