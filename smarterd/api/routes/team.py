from typing import List

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from smarterd.api.error import parse_uuid, raise_for_error
from smarterd.app.services.unit_of_work import UnitOfWork
from smarterd.app.use_cases.teams import (
    AddMemberUseCase,
    ChangeRoleUseCase,
    CreateTeamUseCase,
    DeleteTeamResponse,
    DeleteTeamUseCase,
    GetMyTeamsUseCase,
    GetTeamUseCase,
    ListMembersUseCase,
    RemoveMemberResponse,
    RemoveMemberUseCase,
    TeamMemberResponse,
    TeamResponse,
)
from smarterd.depends import get_current_user, get_unit_of_work

router = APIRouter(prefix="/teams", tags=["Team"])


class CreateTeamRequest(BaseModel):
    name: str = Field(..., description="Team name (1-100 chars)")


class AddMemberRequest(BaseModel):
    """
    Add member HTTP request payload

    The target user is identified by login ID, the role is case-insensitive.
    """

    login_id: str = Field(..., description="Login ID of the user to add")
    role: str = Field(..., description="Role to assign (ADMIN/MEMBER/VIEWER)")


class ChangeRoleRequest(BaseModel):
    role: str = Field(..., description="New role (ADMIN/MEMBER/VIEWER)")


@router.post("", status_code=status.HTTP_201_CREATED, response_model=TeamResponse)
async def create_team(
    request: CreateTeamRequest,
    current_user: str = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create Team

    The requester becomes the owner and receives an ADMIN membership.

    Raises:
        - 400 Bad Request: INVALID_TEAM_NAME
        - 401 Unauthorized: Invalid or expired JWT
    """
    use_case = CreateTeamUseCase(uow)
    result = await use_case.execute(current_user, request.name)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("", response_model=List[TeamResponse])
async def get_my_teams(
    current_user: str = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """List the teams the requester belongs to"""
    use_case = GetMyTeamsUseCase(uow)
    result = await use_case.execute(current_user)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/{team_id}", response_model=TeamResponse)
async def get_team(
    team_id: str,
    current_user: str = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    team_uuid = parse_uuid(team_id, "INVALID_TEAM_ID", "team")

    use_case = GetTeamUseCase(uow)
    result = await use_case.execute(current_user, team_uuid)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.delete("/{team_id}", response_model=DeleteTeamResponse)
async def delete_team(
    team_id: str,
    current_user: str = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Delete Team

    Only the owner may delete a team. Projects, diagrams, dictionary
    entries and memberships go with it.

    Raises:
        - 400 Bad Request: Invalid team_id format
        - 403 Forbidden: NOT_A_MEMBER or OWNER_REQUIRED
        - 404 Not Found: TEAM_NOT_FOUND
    """
    team_uuid = parse_uuid(team_id, "INVALID_TEAM_ID", "team")

    use_case = DeleteTeamUseCase(uow)
    result = await use_case.execute(current_user, team_uuid)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/{team_id}/members", response_model=List[TeamMemberResponse])
async def list_members(
    team_id: str,
    current_user: str = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    team_uuid = parse_uuid(team_id, "INVALID_TEAM_ID", "team")

    use_case = ListMembersUseCase(uow)
    result = await use_case.execute(current_user, team_uuid)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post(
    "/{team_id}/members",
    status_code=status.HTTP_201_CREATED,
    response_model=TeamMemberResponse,
)
async def add_member(
    team_id: str,
    request: AddMemberRequest,
    current_user: str = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Add Member to Team

    Requires ADMIN role in the team.

    Raises:
        - 400 Bad Request: Invalid team_id or INVALID_ROLE
        - 403 Forbidden: NOT_A_MEMBER or ADMIN_REQUIRED
        - 404 Not Found: TEAM_NOT_FOUND or USER_NOT_FOUND
        - 409 Conflict: ALREADY_MEMBER
    """
    team_uuid = parse_uuid(team_id, "INVALID_TEAM_ID", "team")

    use_case = AddMemberUseCase(uow)
    result = await use_case.execute(
        current_user, team_uuid, request.login_id, request.role
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.patch("/{team_id}/members/{user_id}", response_model=TeamMemberResponse)
async def change_role(
    team_id: str,
    user_id: str,
    request: ChangeRoleRequest,
    current_user: str = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Change Member Role

    Raises:
        - 400 Bad Request: INVALID_ROLE or CANNOT_MODIFY_OWNER
        - 403 Forbidden: NOT_A_MEMBER or ADMIN_REQUIRED
        - 404 Not Found: TEAM_NOT_FOUND or MEMBERSHIP_NOT_FOUND
    """
    team_uuid = parse_uuid(team_id, "INVALID_TEAM_ID", "team")
    target_user_id = parse_uuid(user_id, "INVALID_USER_ID", "user")

    use_case = ChangeRoleUseCase(uow)
    result = await use_case.execute(current_user, team_uuid, target_user_id, request.role)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.delete("/{team_id}/members/{user_id}", response_model=RemoveMemberResponse)
async def remove_member(
    team_id: str,
    user_id: str,
    current_user: str = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Remove Member from Team

    The team owner can never be removed.

    Raises:
        - 400 Bad Request: CANNOT_MODIFY_OWNER
        - 403 Forbidden: NOT_A_MEMBER or ADMIN_REQUIRED
        - 404 Not Found: TEAM_NOT_FOUND or MEMBERSHIP_NOT_FOUND
    """
    team_uuid = parse_uuid(team_id, "INVALID_TEAM_ID", "team")
    target_user_id = parse_uuid(user_id, "INVALID_USER_ID", "user")

    use_case = RemoveMemberUseCase(uow)
    result = await use_case.execute(current_user, team_uuid, target_user_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
