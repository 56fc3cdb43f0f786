"""
User Entity

Represents a person who can belong to multiple teams.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel


class User(SQLModel, table=True):
    """
    User entity - represents a person who can belong to multiple teams.

    Business Rules:
    - login_id must be unique across all users (it is the JWT subject)
    - Password stored as bcrypt hash (cost factor 12)
    """

    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    login_id: str = Field(unique=True, index=True, max_length=50)
    password_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars
    name: str = Field(max_length=50)

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )
    updated_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )
