from uuid import UUID

from smarterd.app.services.unit_of_work import UnitOfWork
from smarterd.domain.authorization import require_membership
from smarterd.libs.result import Result, Return

from ..common import load_team_context, load_team_project
from .dtos import ProjectResponse


class GetProjectUseCase:
    """
    Project details for a team member.

    A project id that exists under a different team than the one in the
    path is a PROJECT_TEAM_MISMATCH business error, not a 404.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, login_id: str, team_id: UUID, project_id: UUID
    ) -> Result[ProjectResponse]:
        async with self.uow:
            ctx_result = await load_team_context(self.uow, login_id, team_id)
            if ctx_result.is_err():
                return ctx_result
            ctx = ctx_result.value

            auth = require_membership(ctx.team, ctx.user, ctx.membership)
            if auth.is_err():
                return auth

            project_result = await load_team_project(self.uow, ctx.team, project_id)
            if project_result.is_err():
                return project_result

            return Return.ok(ProjectResponse.from_project(project_result.value))
