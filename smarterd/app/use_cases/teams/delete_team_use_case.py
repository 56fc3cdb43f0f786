"""
Delete Team Use Case

Removes a team together with everything it owns.
"""

import logging
from uuid import UUID

from smarterd.app.services.unit_of_work import UnitOfWork
from smarterd.domain.authorization import require_membership
from smarterd.domain.errors import AuthorizationError
from smarterd.libs.result import Result, Return

from ..common import load_team_context
from .dtos import DeleteTeamResponse

logger = logging.getLogger(__name__)


class DeleteTeamUseCase:
    """
    Use case for deleting a team.

    Business Rules:
    - Only the team owner can delete the team (ADMIN is not enough)
    - Cascades: diagrams -> projects -> terms -> domains -> memberships -> team
    - All deletes happen in one transaction
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, login_id: str, team_id: UUID) -> Result[DeleteTeamResponse]:
        """
        Execute delete team use case.

        Args:
            login_id: Login ID of the requester
            team_id: Team ID to delete

        Returns:
            Result with DeleteTeamResponse, or Error
        """
        async with self.uow:
            ctx_result = await load_team_context(self.uow, login_id, team_id)
            if ctx_result.is_err():
                return ctx_result
            ctx = ctx_result.value

            auth = require_membership(ctx.team, ctx.user, ctx.membership)
            if auth.is_err():
                return auth

            if ctx.team.owner_id != ctx.user.id:
                return Return.err(
                    AuthorizationError(
                        "OWNER_REQUIRED", "Only the team owner can delete the team"
                    )
                )

            projects = await self.uow.projects.get_by_team_id(ctx.team.id)
            await self.uow.diagrams.delete_by_project_ids([p.id for p in projects])
            await self.uow.projects.delete_by_team_id(ctx.team.id)
            await self.uow.terms.delete_by_team_id(ctx.team.id)
            await self.uow.domains.delete_by_team_id(ctx.team.id)
            await self.uow.memberships.delete_by_team_id(ctx.team.id)
            await self.uow.teams.delete(ctx.team)

            await self.uow.commit()

            logger.info(f"Team deleted: {team_id} by {ctx.user.login_id}")

            return Return.ok(DeleteTeamResponse(status="deleted"))
