"""
Domain Entity

Team-wide standard data type (e.g. "Name" -> VARCHAR(100)).
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel


class Domain(SQLModel, table=True):
    """
    Domain entity - standardized physical type shared by a team's terms.

    Business Rules:
    - Belongs to exactly one team
    - Deleting a domain detaches the terms that reference it
    """

    __tablename__ = "domains"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    logical_name: str = Field(max_length=100)
    physical_type: str = Field(max_length=50)

    team_id: UUID = Field(foreign_key="teams.id", nullable=False, index=True)

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )
    updated_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )
