from typing import List

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from smarterd.api.error import parse_uuid, raise_for_error
from smarterd.app.services.unit_of_work import UnitOfWork
from smarterd.app.use_cases.projects import (
    CreateProjectUseCase,
    DeleteProjectResponse,
    DeleteProjectUseCase,
    GetProjectsUseCase,
    GetProjectUseCase,
    ProjectResponse,
)
from smarterd.depends import get_current_user, get_unit_of_work

router = APIRouter(prefix="/teams/{team_id}/projects", tags=["Project"])


class CreateProjectRequest(BaseModel):
    name: str = Field(..., description="Project name (1-100 chars)")


@router.post("", status_code=status.HTTP_201_CREATED, response_model=ProjectResponse)
async def create_project(
    team_id: str,
    request: CreateProjectRequest,
    current_user: str = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create Project

    Requires ADMIN or MEMBER role; VIEWER gets 403 EDITOR_REQUIRED.
    """
    team_uuid = parse_uuid(team_id, "INVALID_TEAM_ID", "team")

    use_case = CreateProjectUseCase(uow)
    result = await use_case.execute(current_user, team_uuid, request.name)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("", response_model=List[ProjectResponse])
async def get_projects(
    team_id: str,
    current_user: str = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    team_uuid = parse_uuid(team_id, "INVALID_TEAM_ID", "team")

    use_case = GetProjectsUseCase(uow)
    result = await use_case.execute(current_user, team_uuid)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/{project_id}", response_model=ProjectResponse)
async def get_project(
    team_id: str,
    project_id: str,
    current_user: str = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Get Project

    Raises:
        - 400 Bad Request: PROJECT_TEAM_MISMATCH when the project lives in another team
        - 403 Forbidden: NOT_A_MEMBER
        - 404 Not Found: TEAM_NOT_FOUND or PROJECT_NOT_FOUND
    """
    team_uuid = parse_uuid(team_id, "INVALID_TEAM_ID", "team")
    project_uuid = parse_uuid(project_id, "INVALID_PROJECT_ID", "project")

    use_case = GetProjectUseCase(uow)
    result = await use_case.execute(current_user, team_uuid, project_uuid)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.delete("/{project_id}", response_model=DeleteProjectResponse)
async def delete_project(
    team_id: str,
    project_id: str,
    current_user: str = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    team_uuid = parse_uuid(team_id, "INVALID_TEAM_ID", "team")
    project_uuid = parse_uuid(project_id, "INVALID_PROJECT_ID", "project")

    use_case = DeleteProjectUseCase(uow)
    result = await use_case.execute(current_user, team_uuid, project_uuid)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
