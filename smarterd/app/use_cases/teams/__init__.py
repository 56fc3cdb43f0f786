"""
Team Management Use Cases

Teams and the membership registry.
"""

from .add_member_use_case import AddMemberUseCase
from .change_role_use_case import ChangeRoleUseCase
from .create_team_use_case import CreateTeamUseCase
from .delete_team_use_case import DeleteTeamUseCase
from .dtos import (
    DeleteTeamResponse,
    RemoveMemberResponse,
    TeamMemberResponse,
    TeamResponse,
)
from .get_my_teams_use_case import GetMyTeamsUseCase
from .get_team_use_case import GetTeamUseCase
from .list_members_use_case import ListMembersUseCase
from .remove_member_use_case import RemoveMemberUseCase

__all__ = [
    "CreateTeamUseCase",
    "GetMyTeamsUseCase",
    "GetTeamUseCase",
    "DeleteTeamUseCase",
    "AddMemberUseCase",
    "RemoveMemberUseCase",
    "ChangeRoleUseCase",
    "ListMembersUseCase",
    "TeamResponse",
    "TeamMemberResponse",
    "RemoveMemberResponse",
    "DeleteTeamResponse",
]
