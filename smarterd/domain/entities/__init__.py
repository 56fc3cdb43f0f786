"""
Smart ERD Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import TeamMemberRole

# Export all entities
from .user import User
from .team import Team
from .membership import Membership, MembershipKey
from .project import Project
from .diagram import Diagram
from .domain import Domain
from .term import Term

__all__ = [
    # Enums
    "TeamMemberRole",
    # Entities
    "User",
    "Team",
    "Membership",
    "MembershipKey",
    "Project",
    "Diagram",
    "Domain",
    "Term",
]
