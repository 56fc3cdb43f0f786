from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from smarterd.domain.entities import Team


class ITeamRepository(ABC):
    """Team repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, team_id: UUID) -> Optional[Team]:
        """Get team by ID"""
        pass

    @abstractmethod
    async def get_by_ids(self, team_ids: List[UUID]) -> List[Team]:
        """Get all teams with the given IDs"""
        pass

    @abstractmethod
    async def create(self, team: Team) -> Team:
        """Create a new team"""
        pass

    @abstractmethod
    async def delete(self, team: Team) -> None:
        """Delete a team row (children must be removed first)"""
        pass
