"""
Update Diagram Use Case

Renames a diagram and/or replaces its content.
"""

from typing import Optional
from uuid import UUID

from smarterd.app.services.unit_of_work import UnitOfWork
from smarterd.domain.authorization import require_editor
from smarterd.domain.errors import validate_length
from smarterd.libs.result import Result, Return

from ..common import load_project_diagram, load_team_context, load_team_project
from .dtos import DiagramResponse


class UpdateDiagramUseCase:
    """
    Use case for saving a diagram.

    Business Rules:
    - Requester must be an ADMIN or MEMBER of the team
    - Only fields that are provided are changed
    - A new name must be 1-100 characters
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        login_id: str,
        team_id: UUID,
        project_id: UUID,
        diagram_id: UUID,
        name: Optional[str] = None,
        content: Optional[str] = None,
    ) -> Result[DiagramResponse]:
        if name is not None:
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

            diagram_result = await load_project_diagram(
                self.uow, project_result.value, diagram_id
            )
            if diagram_result.is_err():
                return diagram_result
            diagram = diagram_result.value

            if name is not None:
                diagram.name = name.strip()
            if content is not None:
                diagram.content = content
            diagram = await self.uow.diagrams.update(diagram)

            await self.uow.commit()

            return Return.ok(DiagramResponse.from_diagram(diagram))
