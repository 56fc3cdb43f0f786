"""
Create Project Use Case
"""

from uuid import UUID

from smarterd.app.services.unit_of_work import UnitOfWork
from smarterd.domain.authorization import require_editor
from smarterd.domain.entities import Project
from smarterd.domain.errors import validate_length
from smarterd.libs.result import Result, Return

from ..common import load_team_context
from .dtos import ProjectResponse


class CreateProjectUseCase:
    """
    Use case for creating a project inside a team.

    Business Rules:
    - Requester must be an ADMIN or MEMBER of the team
    - Project name must be 1-100 characters
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, login_id: str, team_id: UUID, name: str
    ) -> Result[ProjectResponse]:
        """
        Execute create project use case.

        Args:
            login_id: Login ID of the requester
            team_id: Owning team ID
            name: Project name

        Returns:
            Result with ProjectResponse, or Error
        """
        error = validate_length("Project name", name, 1, 100, "INVALID_PROJECT_NAME")
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

            project = Project(name=name.strip(), team_id=ctx.team.id)
            project = await self.uow.projects.create(project)

            await self.uow.commit()

            return Return.ok(ProjectResponse.from_project(project))
