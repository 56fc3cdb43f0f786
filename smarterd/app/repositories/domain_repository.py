from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from smarterd.domain.entities import Domain


class IDomainRepository(ABC):
    """Domain (data type dictionary) repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, domain_id: UUID) -> Optional[Domain]:
        """Get domain by ID"""
        pass

    @abstractmethod
    async def get_by_team_id(self, team_id: UUID) -> List[Domain]:
        """Get all domains of a team"""
        pass

    @abstractmethod
    async def create(self, domain: Domain) -> Domain:
        """Create a new domain"""
        pass

    @abstractmethod
    async def delete(self, domain: Domain) -> None:
        """Delete a domain"""
        pass

    @abstractmethod
    async def delete_by_team_id(self, team_id: UUID) -> None:
        """Delete every domain of a team"""
        pass
