from uuid import UUID

from smarterd.app.services.unit_of_work import UnitOfWork
from smarterd.domain.authorization import require_editor
from smarterd.libs.result import Result, Return

from ..common import load_team_context, load_team_project
from .dtos import DeleteProjectResponse


class DeleteProjectUseCase:
    """Deletes a project and its diagrams; ADMIN or MEMBER only"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, login_id: str, team_id: UUID, project_id: UUID
    ) -> Result[DeleteProjectResponse]:
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
            project = project_result.value

            await self.uow.diagrams.delete_by_project_ids([project.id])
            await self.uow.projects.delete(project)

            await self.uow.commit()

            return Return.ok(DeleteProjectResponse(status="deleted"))
