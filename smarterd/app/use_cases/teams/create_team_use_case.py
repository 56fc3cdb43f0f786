"""
Create Team Use Case

Creates a team and makes the requester its owner and first ADMIN.
"""

import logging

from smarterd.app.services.unit_of_work import UnitOfWork
from smarterd.domain.entities import Membership, Team, TeamMemberRole
from smarterd.domain.errors import validate_length
from smarterd.libs.result import Result, Return

from ..common import find_user
from .dtos import TeamResponse

logger = logging.getLogger(__name__)


class CreateTeamUseCase:
    """
    Use case for creating a team.

    Business Rules:
    - Team name must be 1-100 characters
    - Requester becomes Team.owner
    - Requester gets an ADMIN membership in the same transaction
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, login_id: str, name: str) -> Result[TeamResponse]:
        """
        Execute create team use case.

        Args:
            login_id: Login ID of the requester (future owner)
            name: Team name

        Returns:
            Result with TeamResponse, or ValidationError / NotFoundError
        """
        error = validate_length("Team name", name, 1, 100, "INVALID_TEAM_NAME")
        if error is not None:
            return Return.err(error)

        async with self.uow:
            user_result = await find_user(self.uow, login_id)
            if user_result.is_err():
                return user_result
            owner = user_result.value

            team = Team(name=name.strip(), owner_id=owner.id)
            team = await self.uow.teams.create(team)

            # Owner is always an ADMIN member of their own team
            membership = Membership(
                team_id=team.id,
                user_id=owner.id,
                role=TeamMemberRole.admin,
            )
            await self.uow.memberships.create(membership)

            # Commit team + membership atomically
            await self.uow.commit()

            logger.info(f"Team created: {team.id} by {owner.login_id}")

            return Return.ok(TeamResponse.from_team(team, owner, member_count=1))
