"""
Add Team Member Use Case

Handles adding an existing user to a team with a given role.
"""

import logging
from typing import Union
from uuid import UUID

from smarterd.app.services.unit_of_work import UnitOfWork
from smarterd.domain.authorization import require_admin
from smarterd.domain.entities import Membership, MembershipKey, TeamMemberRole
from smarterd.domain.errors import ConflictError, DuplicateRecordError
from smarterd.libs.result import Result, Return

from ..common import find_user, load_team_context, parse_role
from .dtos import TeamMemberResponse

logger = logging.getLogger(__name__)


class AddMemberUseCase:
    """
    Use case for adding members to a team.

    Business Rules:
    - Only ADMIN members can add members
    - Role must be one of ADMIN, MEMBER, VIEWER
    - Target user must exist
    - At most one membership per (team, user); a duplicate is a conflict,
      including one that slips past the pre-check and is rejected by the
      repository as a duplicate record
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        login_id: str,
        team_id: UUID,
        target_login_id: str,
        role: Union[str, TeamMemberRole],
    ) -> Result[TeamMemberResponse]:
        """
        Execute add member use case.

        Args:
            login_id: Login ID of the requester
            team_id: Target team ID
            target_login_id: Login ID of the user to add
            role: Role to assign (ADMIN/MEMBER/VIEWER)

        Returns:
            Result with TeamMemberResponse, or Error
        """
        async with self.uow:
            role_result = parse_role(role)
            if role_result.is_err():
                return role_result
            member_role = role_result.value

            ctx_result = await load_team_context(self.uow, login_id, team_id)
            if ctx_result.is_err():
                return ctx_result
            ctx = ctx_result.value

            auth = require_admin(ctx.team, ctx.user, ctx.membership)
            if auth.is_err():
                return auth

            target_result = await find_user(self.uow, target_login_id)
            if target_result.is_err():
                return target_result
            target_user = target_result.value

            key = MembershipKey(ctx.team.id, target_user.id)
            if await self.uow.memberships.exists(key):
                return Return.err(
                    ConflictError(
                        "ALREADY_MEMBER", "User is already a member of this team"
                    )
                )

            membership = Membership(
                team_id=key.team_id,
                user_id=key.user_id,
                role=member_role,
            )

            try:
                membership = await self.uow.memberships.create(membership)
                await self.uow.commit()
            except DuplicateRecordError:
                await self.uow.rollback()
                return Return.err(
                    ConflictError(
                        "ALREADY_MEMBER", "User is already a member of this team"
                    )
                )

            logger.info(
                f"Member added: team={ctx.team.id} user={target_user.login_id} "
                f"role={member_role.value} by={ctx.user.login_id}"
            )

            return Return.ok(TeamMemberResponse.from_membership(membership, target_user))
