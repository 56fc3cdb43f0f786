"""
Membership Entity

Links User to Team with a role.
"""

from datetime import datetime
from typing import NamedTuple
from uuid import UUID

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from .enums import TeamMemberRole


class MembershipKey(NamedTuple):
    """Composite identity of a membership"""

    team_id: UUID
    user_id: UUID


class Membership(SQLModel, table=True):
    """
    Membership entity - links User to Team with a role.

    Business Rules:
    - (team_id, user_id) is the primary key: at most one membership per pair
    - Role changes mutate the row in place so created_at survives
    """

    __tablename__ = "team_members"

    team_id: UUID = Field(foreign_key="teams.id", primary_key=True)
    user_id: UUID = Field(foreign_key="users.id", primary_key=True)

    role: TeamMemberRole = Field(nullable=False)

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )
    updated_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )

    __table_args__ = (Index("idx_team_member_user_id", "user_id"),)
