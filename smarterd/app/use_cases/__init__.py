"""
Use Cases

Organized into domain folders:
- auth/: Signup and login
- teams/: Teams and membership
- projects/: Projects inside a team
- diagrams/: Diagrams inside a project
- dictionary/: Terms and domains
"""

from .auth import LoginUseCase, SignupCommand, SignupUseCase
from .teams import (
    AddMemberUseCase,
    ChangeRoleUseCase,
    CreateTeamUseCase,
    DeleteTeamUseCase,
    GetMyTeamsUseCase,
    GetTeamUseCase,
    ListMembersUseCase,
    RemoveMemberUseCase,
)

__all__ = [
    # Auth
    "SignupUseCase",
    "SignupCommand",
    "LoginUseCase",
    # Teams
    "CreateTeamUseCase",
    "GetMyTeamsUseCase",
    "GetTeamUseCase",
    "DeleteTeamUseCase",
    "AddMemberUseCase",
    "RemoveMemberUseCase",
    "ChangeRoleUseCase",
    "ListMembersUseCase",
]
