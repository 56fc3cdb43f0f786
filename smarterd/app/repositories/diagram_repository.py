from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from smarterd.domain.entities import Diagram


class IDiagramRepository(ABC):
    """Diagram repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, diagram_id: UUID) -> Optional[Diagram]:
        """Get diagram by ID"""
        pass

    @abstractmethod
    async def get_by_project_id(self, project_id: UUID) -> List[Diagram]:
        """Get all diagrams of a project"""
        pass

    @abstractmethod
    async def create(self, diagram: Diagram) -> Diagram:
        """Create a new diagram"""
        pass

    @abstractmethod
    async def update(self, diagram: Diagram) -> Diagram:
        """Update existing diagram"""
        pass

    @abstractmethod
    async def delete(self, diagram: Diagram) -> None:
        """Delete a diagram"""
        pass

    @abstractmethod
    async def delete_by_project_ids(self, project_ids: List[UUID]) -> None:
        """Delete every diagram belonging to the given projects"""
        pass
