"""
Smart ERD Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class TeamMemberRole(str, Enum):
    """User role within a team"""

    admin = "ADMIN"
    member = "MEMBER"
    viewer = "VIEWER"
