from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from smarterd.domain.entities import Project


class IProjectRepository(ABC):
    """Project repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, project_id: UUID) -> Optional[Project]:
        """Get project by ID"""
        pass

    @abstractmethod
    async def get_by_team_id(self, team_id: UUID) -> List[Project]:
        """Get all projects of a team"""
        pass

    @abstractmethod
    async def create(self, project: Project) -> Project:
        """Create a new project"""
        pass

    @abstractmethod
    async def delete(self, project: Project) -> None:
        """Delete a project"""
        pass

    @abstractmethod
    async def delete_by_team_id(self, team_id: UUID) -> None:
        """Delete every project of a team"""
        pass
