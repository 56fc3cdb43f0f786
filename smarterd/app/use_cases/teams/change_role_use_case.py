"""
Change Member Role Use Case

Handles changing a member's role within a team.
"""

import logging
from typing import Union
from uuid import UUID

from smarterd.app.services.unit_of_work import UnitOfWork
from smarterd.domain.authorization import require_admin, require_owner_untouched
from smarterd.domain.entities import MembershipKey, TeamMemberRole
from smarterd.domain.errors import NotFoundError
from smarterd.libs.result import Result, Return

from ..common import load_team_context, parse_role
from .dtos import TeamMemberResponse

logger = logging.getLogger(__name__)


class ChangeRoleUseCase:
    """
    Use case for changing a member's role within a team.

    Business Rules:
    - Only ADMIN members can change roles
    - The owner's role can never be changed, whoever asks
    - Target user must be a member
    - Role must be one of ADMIN, MEMBER, VIEWER
    - Membership.role is mutated in place; created_at is preserved
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        login_id: str,
        team_id: UUID,
        target_user_id: UUID,
        new_role: Union[str, TeamMemberRole],
    ) -> Result[TeamMemberResponse]:
        """
        Execute change role use case.

        Args:
            login_id: Login ID of the ADMIN making the change
            team_id: Team ID
            target_user_id: User ID whose role is being changed
            new_role: New role to assign (ADMIN/MEMBER/VIEWER)

        Returns:
            Result with updated TeamMemberResponse, or Error
        """
        async with self.uow:
            role_result = parse_role(new_role)
            if role_result.is_err():
                return role_result
            membership_role = role_result.value

            ctx_result = await load_team_context(self.uow, login_id, team_id)
            if ctx_result.is_err():
                return ctx_result
            ctx = ctx_result.value

            auth = require_admin(ctx.team, ctx.user, ctx.membership)
            if auth.is_err():
                return auth

            owner_check = require_owner_untouched(
                ctx.team, target_user_id, "change the role of"
            )
            if owner_check.is_err():
                return owner_check

            target_membership = await self.uow.memberships.get(
                MembershipKey(ctx.team.id, target_user_id)
            )
            if target_membership is None:
                return Return.err(
                    NotFoundError(
                        "MEMBERSHIP_NOT_FOUND",
                        "User is not a member of this team",
                    )
                )

            target_user = await self.uow.users.get_by_id(target_user_id)
            if target_user is None:
                return Return.err(
                    NotFoundError("USER_NOT_FOUND", f"User not found: {target_user_id}")
                )

            old_role = target_membership.role.value

            target_membership.role = membership_role
            target_membership = await self.uow.memberships.update(target_membership)

            await self.uow.commit()

            logger.info(
                f"Role changed: team={ctx.team.id} user={target_user.login_id} "
                f"{old_role} -> {membership_role.value} by={ctx.user.login_id}"
            )

            return Return.ok(
                TeamMemberResponse.from_membership(target_membership, target_user)
            )
