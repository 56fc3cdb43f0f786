from typing import List

from smarterd.app.services.unit_of_work import UnitOfWork
from smarterd.libs.result import Result, Return

from ..common import find_user
from .dtos import TeamResponse


class GetMyTeamsUseCase:
    """Lists every team the requester is a member of, in membership order"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, login_id: str) -> Result[List[TeamResponse]]:
        async with self.uow:
            user_result = await find_user(self.uow, login_id)
            if user_result.is_err():
                return user_result
            user = user_result.value

            memberships = await self.uow.memberships.get_by_user_id(user.id)
            memberships.sort(key=lambda m: m.created_at)

            teams = {
                team.id: team
                for team in await self.uow.teams.get_by_ids(
                    [m.team_id for m in memberships]
                )
            }
            owners = {
                owner.id: owner
                for owner in await self.uow.users.get_by_ids(
                    list({team.owner_id for team in teams.values()})
                )
            }

            responses = []
            for membership in memberships:
                team = teams.get(membership.team_id)
                if team is None:
                    continue
                member_count = await self.uow.memberships.count_by_team_id(team.id)
                responses.append(
                    TeamResponse.from_team(team, owners[team.owner_id], member_count)
                )

            return Return.ok(responses)
