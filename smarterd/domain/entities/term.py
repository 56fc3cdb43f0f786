"""
Term Entity

Naming dictionary entry mapping a logical name to a physical name.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel


class Term(SQLModel, table=True):
    """
    Term entity - logical name ("User name") to physical name ("user_name").

    Business Rules:
    - Belongs to exactly one team
    - Optional domain must belong to the same team
    """

    __tablename__ = "terms"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    logical_name: str = Field(max_length=100)
    physical_name: str = Field(max_length=100)

    team_id: UUID = Field(foreign_key="teams.id", nullable=False, index=True)
    domain_id: Optional[UUID] = Field(default=None, foreign_key="domains.id", index=True)

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )
    updated_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )
