from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from smarterd.domain.entities import Term


class ITermRepository(ABC):
    """Term (naming dictionary) repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, term_id: UUID) -> Optional[Term]:
        """Get term by ID"""
        pass

    @abstractmethod
    async def get_by_team_id(self, team_id: UUID) -> List[Term]:
        """Get all terms of a team"""
        pass

    @abstractmethod
    async def create(self, term: Term) -> Term:
        """Create a new term"""
        pass

    @abstractmethod
    async def detach_domain(self, domain_id: UUID) -> None:
        """Clear domain_id on every term referencing the domain"""
        pass

    @abstractmethod
    async def delete(self, term: Term) -> None:
        """Delete a term"""
        pass

    @abstractmethod
    async def delete_by_team_id(self, team_id: UUID) -> None:
        """Delete every term of a team"""
        pass
