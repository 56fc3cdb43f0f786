from datetime import datetime
from typing import List, Optional
from uuid import UUID

from sqlalchemy import delete
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from smarterd.app.repositories.diagram_repository import IDiagramRepository
from smarterd.domain.entities import Diagram


class DiagramRepository(IDiagramRepository):
    """Diagram repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, diagram_id: UUID) -> Optional[Diagram]:
        """Get diagram by ID"""
        stmt = select(Diagram).where(Diagram.id == diagram_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_project_id(self, project_id: UUID) -> List[Diagram]:
        """Get all diagrams of a project"""
        stmt = (
            select(Diagram)
            .where(Diagram.project_id == project_id)
            .order_by(Diagram.created_at)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, diagram: Diagram) -> Diagram:
        """Create a new diagram"""
        self.session.add(diagram)
        await self.session.flush()
        await self.session.refresh(diagram)
        return diagram

    async def update(self, diagram: Diagram) -> Diagram:
        """Update existing diagram"""
        diagram.updated_at = datetime.utcnow()
        self.session.add(diagram)
        await self.session.flush()
        await self.session.refresh(diagram)
        return diagram

    async def delete(self, diagram: Diagram) -> None:
        """Delete a diagram"""
        await self.session.delete(diagram)
        await self.session.flush()

    async def delete_by_project_ids(self, project_ids: List[UUID]) -> None:
        """Delete every diagram belonging to the given projects"""
        if not project_ids:
            return
        stmt = delete(Diagram).where(Diagram.project_id.in_(project_ids))
        await self.session.execute(stmt)
        await self.session.flush()
