from uuid import UUID

from smarterd.app.services.unit_of_work import UnitOfWork
from smarterd.domain.authorization import require_membership
from smarterd.libs.result import Result, Return

from ..common import load_team_context
from .dtos import DomainResponse
from .lookups import load_team_domain


class GetDomainUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, login_id: str, team_id: UUID, domain_id: UUID
    ) -> Result[DomainResponse]:
        async with self.uow:
            ctx_result = await load_team_context(self.uow, login_id, team_id)
            if ctx_result.is_err():
                return ctx_result
            ctx = ctx_result.value

            auth = require_membership(ctx.team, ctx.user, ctx.membership)
            if auth.is_err():
                return auth

            domain_result = await load_team_domain(self.uow, ctx.team, domain_id)
            if domain_result.is_err():
                return domain_result

            return Return.ok(DomainResponse.from_domain(domain_result.value))
