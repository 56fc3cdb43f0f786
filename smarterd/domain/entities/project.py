"""
Project Entity

An ERD project scoped to exactly one team.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel


class Project(SQLModel, table=True):
    """
    Project entity - belongs to exactly one team.

    Business Rules:
    - Visible and operable only by members of the owning team
    - Deleting a project removes its diagrams
    """

    __tablename__ = "projects"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=100)

    team_id: UUID = Field(foreign_key="teams.id", nullable=False, index=True)

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )
    updated_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )
