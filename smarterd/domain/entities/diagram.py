"""
Diagram Entity

An ERD canvas stored as an opaque serialized blob.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlalchemy import Text
from sqlmodel import Column, DateTime, Field, SQLModel


class Diagram(SQLModel, table=True):
    """
    Diagram entity - belongs to exactly one project.

    The content column is never interpreted by the backend.
    """

    __tablename__ = "diagrams"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=100)

    project_id: UUID = Field(foreign_key="projects.id", nullable=False, index=True)

    content: Optional[str] = Field(default=None, sa_column=Column(Text))

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )
    updated_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )
