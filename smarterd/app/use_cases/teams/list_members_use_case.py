from typing import List
from uuid import UUID

from smarterd.app.services.unit_of_work import UnitOfWork
from smarterd.domain.authorization import require_membership
from smarterd.libs.result import Result, Return

from ..common import load_team_context
from .dtos import TeamMemberResponse


class ListMembersUseCase:
    """
    Lists all memberships of a team.

    Any member (ADMIN/MEMBER/VIEWER) may call it. Order is not guaranteed.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, login_id: str, team_id: UUID
    ) -> Result[List[TeamMemberResponse]]:
        async with self.uow:
            ctx_result = await load_team_context(self.uow, login_id, team_id)
            if ctx_result.is_err():
                return ctx_result
            ctx = ctx_result.value

            auth = require_membership(ctx.team, ctx.user, ctx.membership)
            if auth.is_err():
                return auth

            memberships = await self.uow.memberships.get_by_team_id(ctx.team.id)
            users = {
                user.id: user
                for user in await self.uow.users.get_by_ids(
                    [m.user_id for m in memberships]
                )
            }

            return Return.ok(
                [
                    TeamMemberResponse.from_membership(m, users[m.user_id])
                    for m in memberships
                    if m.user_id in users
                ]
            )
