"""
Team Entity

Organizational unit that owns projects and the data dictionary.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel


class Team(SQLModel, table=True):
    """
    Team entity - owns projects, terms and domains.

    Business Rules:
    - Exactly one owner, who is always an ADMIN member
    - The owner's membership cannot be removed or downgraded
    - Deleting a team removes its memberships, projects, diagrams, terms and domains
    """

    __tablename__ = "teams"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=100)

    owner_id: UUID = Field(foreign_key="users.id", nullable=False, index=True)

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )
    updated_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )
