from uuid import UUID

from smarterd.app.services.unit_of_work import UnitOfWork
from smarterd.domain.authorization import require_editor
from smarterd.domain.entities import Domain
from smarterd.domain.errors import validate_length
from smarterd.libs.result import Result, Return

from ..common import load_team_context
from .dtos import DomainResponse


class CreateDomainUseCase:
    """
    Use case for registering a standard data type for a team.

    Business Rules:
    - Requester must be an ADMIN or MEMBER of the team
    - logical_name 1-100 characters, physical_type 1-50 characters
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, login_id: str, team_id: UUID, logical_name: str, physical_type: str
    ) -> Result[DomainResponse]:
        for error in (
            validate_length("logical_name", logical_name, 1, 100, "INVALID_LOGICAL_NAME"),
            validate_length("physical_type", physical_type, 1, 50, "INVALID_PHYSICAL_TYPE"),
        ):
            if error is not None:
                return Return.err(error)

        async with self.uow:
            ctx_result = await load_team_context(self.uow, login_id, team_id)
            if ctx_result.is_err():
                return ctx_result
            ctx = ctx_result.value

            auth = require_editor(ctx.team, ctx.user, ctx.membership)
            if auth.is_err():
                return auth

            domain = Domain(
                logical_name=logical_name.strip(),
                physical_type=physical_type.strip(),
                team_id=ctx.team.id,
            )
            domain = await self.uow.domains.create(domain)

            await self.uow.commit()

            return Return.ok(DomainResponse.from_domain(domain))
