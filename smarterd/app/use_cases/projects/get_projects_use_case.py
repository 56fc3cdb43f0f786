from typing import List
from uuid import UUID

from smarterd.app.services.unit_of_work import UnitOfWork
from smarterd.domain.authorization import require_membership
from smarterd.libs.result import Result, Return

from ..common import load_team_context
from .dtos import ProjectResponse


class GetProjectsUseCase:
    """Lists a team's projects for any of its members"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, login_id: str, team_id: UUID) -> Result[List[ProjectResponse]]:
        async with self.uow:
            ctx_result = await load_team_context(self.uow, login_id, team_id)
            if ctx_result.is_err():
                return ctx_result
            ctx = ctx_result.value

            auth = require_membership(ctx.team, ctx.user, ctx.membership)
            if auth.is_err():
                return auth

            projects = await self.uow.projects.get_by_team_id(ctx.team.id)
            return Return.ok([ProjectResponse.from_project(p) for p in projects])
