from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from smarterd.domain.entities import Membership, MembershipKey


class IMembershipRepository(ABC):
    """Membership repository interface - application layer"""

    @abstractmethod
    async def get(self, key: MembershipKey) -> Optional[Membership]:
        """Get membership by its (team_id, user_id) key"""
        pass

    @abstractmethod
    async def exists(self, key: MembershipKey) -> bool:
        """Check whether a membership exists for (team_id, user_id)"""
        pass

    @abstractmethod
    async def get_by_user_id(self, user_id: UUID) -> List[Membership]:
        """Get all memberships for a user"""
        pass

    @abstractmethod
    async def get_by_team_id(self, team_id: UUID) -> List[Membership]:
        """Get all memberships for a team"""
        pass

    @abstractmethod
    async def count_by_team_id(self, team_id: UUID) -> int:
        """Count memberships of a team"""
        pass

    @abstractmethod
    async def create(self, membership: Membership) -> Membership:
        """Create a new membership"""
        pass

    @abstractmethod
    async def update(self, membership: Membership) -> Membership:
        """Update existing membership in place"""
        pass

    @abstractmethod
    async def delete(self, membership: Membership) -> None:
        """Delete a membership"""
        pass

    @abstractmethod
    async def delete_by_team_id(self, team_id: UUID) -> None:
        """Delete every membership of a team"""
        pass
