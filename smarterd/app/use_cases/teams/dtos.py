"""
Team Use Case DTOs (Data Transfer Objects)

All Response classes for the team and membership domain.
Provides type safety and clear contracts between layers.
"""

from datetime import datetime

from pydantic import BaseModel

from smarterd.domain.entities import Membership, Team, User


# ============================================================================
# Response DTOs
# ============================================================================


class TeamResponse(BaseModel):
    """Team summary returned by create/get/list team use cases"""

    id: str
    name: str
    owner_id: str
    owner_name: str
    member_count: int
    created_at: datetime

    @classmethod
    def from_team(cls, team: Team, owner: User, member_count: int) -> "TeamResponse":
        return cls(
            id=str(team.id),
            name=team.name,
            owner_id=str(team.owner_id),
            owner_name=owner.name,
            member_count=member_count,
            created_at=team.created_at,
        )


class TeamMemberResponse(BaseModel):
    """One membership row joined with its user"""

    user_id: str
    login_id: str
    name: str
    role: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_membership(cls, membership: Membership, user: User) -> "TeamMemberResponse":
        return cls(
            user_id=str(user.id),
            login_id=user.login_id,
            name=user.name,
            role=membership.role.value,
            created_at=membership.created_at,
            updated_at=membership.updated_at,
        )


class RemoveMemberResponse(BaseModel):
    """Response for remove member use case"""

    status: str


class DeleteTeamResponse(BaseModel):
    """Response for delete team use case"""

    status: str
