"""
Create Diagram Use Case
"""

from typing import Optional
from uuid import UUID

from smarterd.app.services.unit_of_work import UnitOfWork
from smarterd.domain.authorization import require_editor
from smarterd.domain.entities import Diagram
from smarterd.domain.errors import validate_length
from smarterd.libs.result import Result, Return

from ..common import load_team_context, load_team_project
from .dtos import DiagramResponse


class CreateDiagramUseCase:
    """
    Use case for creating a diagram inside a project.

    Business Rules:
    - Requester must be an ADMIN or MEMBER of the project's team
    - Project must belong to the team named in the path
    - Diagram name must be 1-100 characters
    - Content is stored as-is
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        login_id: str,
        team_id: UUID,
        project_id: UUID,
        name: str,
        content: Optional[str] = None,
    ) -> Result[DiagramResponse]:
        error = validate_length("Diagram name", name, 1, 100, "INVALID_DIAGRAM_NAME")
        if error is not None:
            return Return.err(error)

        async with self.uow:
            ctx_result = await load_team_context(self.uow, login_id, team_id)
            if ctx_result.is_err():
                return ctx_result
            ctx = ctx_result.value

            auth = require_editor(ctx.team, ctx.user, ctx.membership)
            if auth.is_err():
                return auth

            project_result = await load_team_project(self.uow, ctx.team, project_id)
            if project_result.is_err():
                return project_result

            diagram = Diagram(
                name=name.strip(),
                project_id=project_result.value.id,
                content=content,
            )
            diagram = await self.uow.diagrams.create(diagram)

            await self.uow.commit()

            return Return.ok(DiagramResponse.from_diagram(diagram))
