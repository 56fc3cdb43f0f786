from typing import List, Optional

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from smarterd.api.error import parse_uuid, raise_for_error
from smarterd.app.services.unit_of_work import UnitOfWork
from smarterd.app.use_cases.diagrams import (
    CreateDiagramUseCase,
    DeleteDiagramResponse,
    DeleteDiagramUseCase,
    DiagramResponse,
    DiagramSummary,
    GetDiagramsUseCase,
    GetDiagramUseCase,
    UpdateDiagramUseCase,
)
from smarterd.depends import get_current_user, get_unit_of_work

router = APIRouter(
    prefix="/teams/{team_id}/projects/{project_id}/diagrams", tags=["Diagram"]
)


class CreateDiagramRequest(BaseModel):
    name: str = Field(..., description="Diagram name (1-100 chars)")
    content: Optional[str] = Field(None, description="Serialized diagram body")


class UpdateDiagramRequest(BaseModel):
    """Partial update: omitted fields are left unchanged"""

    name: Optional[str] = Field(None, description="New diagram name")
    content: Optional[str] = Field(None, description="New diagram body")


@router.post("", status_code=status.HTTP_201_CREATED, response_model=DiagramResponse)
async def create_diagram(
    team_id: str,
    project_id: str,
    request: CreateDiagramRequest,
    current_user: str = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    team_uuid = parse_uuid(team_id, "INVALID_TEAM_ID", "team")
    project_uuid = parse_uuid(project_id, "INVALID_PROJECT_ID", "project")

    use_case = CreateDiagramUseCase(uow)
    result = await use_case.execute(
        current_user, team_uuid, project_uuid, request.name, request.content
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("", response_model=List[DiagramSummary])
async def get_diagrams(
    team_id: str,
    project_id: str,
    current_user: str = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """List diagrams of a project, without their content"""
    team_uuid = parse_uuid(team_id, "INVALID_TEAM_ID", "team")
    project_uuid = parse_uuid(project_id, "INVALID_PROJECT_ID", "project")

    use_case = GetDiagramsUseCase(uow)
    result = await use_case.execute(current_user, team_uuid, project_uuid)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/{diagram_id}", response_model=DiagramResponse)
async def get_diagram(
    team_id: str,
    project_id: str,
    diagram_id: str,
    current_user: str = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    team_uuid = parse_uuid(team_id, "INVALID_TEAM_ID", "team")
    project_uuid = parse_uuid(project_id, "INVALID_PROJECT_ID", "project")
    diagram_uuid = parse_uuid(diagram_id, "INVALID_DIAGRAM_ID", "diagram")

    use_case = GetDiagramUseCase(uow)
    result = await use_case.execute(current_user, team_uuid, project_uuid, diagram_uuid)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.patch("/{diagram_id}", response_model=DiagramResponse)
async def update_diagram(
    team_id: str,
    project_id: str,
    diagram_id: str,
    request: UpdateDiagramRequest,
    current_user: str = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update Diagram

    Raises:
        - 400 Bad Request: INVALID_DIAGRAM_NAME or DIAGRAM_PROJECT_MISMATCH
        - 403 Forbidden: NOT_A_MEMBER or EDITOR_REQUIRED
        - 404 Not Found: PROJECT_NOT_FOUND or DIAGRAM_NOT_FOUND
    """
    team_uuid = parse_uuid(team_id, "INVALID_TEAM_ID", "team")
    project_uuid = parse_uuid(project_id, "INVALID_PROJECT_ID", "project")
    diagram_uuid = parse_uuid(diagram_id, "INVALID_DIAGRAM_ID", "diagram")

    use_case = UpdateDiagramUseCase(uow)
    result = await use_case.execute(
        current_user,
        team_uuid,
        project_uuid,
        diagram_uuid,
        name=request.name,
        content=request.content,
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.delete("/{diagram_id}", response_model=DeleteDiagramResponse)
async def delete_diagram(
    team_id: str,
    project_id: str,
    diagram_id: str,
    current_user: str = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    team_uuid = parse_uuid(team_id, "INVALID_TEAM_ID", "team")
    project_uuid = parse_uuid(project_id, "INVALID_PROJECT_ID", "project")
    diagram_uuid = parse_uuid(diagram_id, "INVALID_DIAGRAM_ID", "diagram")

    use_case = DeleteDiagramUseCase(uow)
    result = await use_case.execute(current_user, team_uuid, project_uuid, diagram_uuid)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
