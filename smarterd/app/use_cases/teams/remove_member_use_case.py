"""
Remove Member from Team Use Case

Handles removing members from a team.
"""

import logging
from uuid import UUID

from smarterd.app.services.unit_of_work import UnitOfWork
from smarterd.domain.authorization import require_admin, require_owner_untouched
from smarterd.domain.entities import MembershipKey
from smarterd.domain.errors import NotFoundError
from smarterd.libs.result import Result, Return

from ..common import load_team_context
from .dtos import RemoveMemberResponse

logger = logging.getLogger(__name__)


class RemoveMemberUseCase:
    """
    Use case for removing members from a team.

    Business Rules:
    - Only ADMIN members can remove members
    - The team owner can never be removed, whoever asks
    - Target must currently be a member
    - Membership row is deleted (hard delete)
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        login_id: str,
        team_id: UUID,
        target_user_id: UUID,
    ) -> Result[RemoveMemberResponse]:
        """
        Execute remove member use case.

        Args:
            login_id: Login ID of the person removing the member
            team_id: Team ID
            target_user_id: User ID of the member to remove

        Returns:
            Result with RemoveMemberResponse DTO, or Error
        """
        async with self.uow:
            ctx_result = await load_team_context(self.uow, login_id, team_id)
            if ctx_result.is_err():
                return ctx_result
            ctx = ctx_result.value

            auth = require_admin(ctx.team, ctx.user, ctx.membership)
            if auth.is_err():
                return auth

            owner_check = require_owner_untouched(ctx.team, target_user_id, "remove")
            if owner_check.is_err():
                return owner_check

            target_membership = await self.uow.memberships.get(
                MembershipKey(ctx.team.id, target_user_id)
            )
            if target_membership is None:
                return Return.err(
                    NotFoundError(
                        "MEMBERSHIP_NOT_FOUND",
                        "Target user is not a member of this team",
                    )
                )

            await self.uow.memberships.delete(target_membership)

            await self.uow.commit()

            logger.info(
                f"Member removed: team={ctx.team.id} user={target_user_id} "
                f"by={ctx.user.login_id}"
            )

            return Return.ok(RemoveMemberResponse(status="removed"))
