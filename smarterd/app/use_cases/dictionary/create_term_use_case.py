"""
Create Term Use Case
"""

from typing import Optional
from uuid import UUID

from smarterd.app.services.unit_of_work import UnitOfWork
from smarterd.domain.authorization import require_editor
from smarterd.domain.entities import Term
from smarterd.domain.errors import validate_length
from smarterd.libs.result import Result, Return

from ..common import load_team_context
from .dtos import TermResponse
from .lookups import load_team_domain


class CreateTermUseCase:
    """
    Use case for adding a naming dictionary entry.

    Business Rules:
    - Requester must be an ADMIN or MEMBER of the team
    - logical_name and physical_name 1-100 characters
    - Optional domain must exist and belong to the same team
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        login_id: str,
        team_id: UUID,
        logical_name: str,
        physical_name: str,
        domain_id: Optional[UUID] = None,
    ) -> Result[TermResponse]:
        """
        Execute create term use case.

        Args:
            login_id: Login ID of the requester
            team_id: Owning team ID
            logical_name: Business name (e.g. "User name")
            physical_name: Column name (e.g. "user_name")
            domain_id: Optional domain standardizing the type

        Returns:
            Result with TermResponse, or Error
        """
        for error in (
            validate_length("logical_name", logical_name, 1, 100, "INVALID_LOGICAL_NAME"),
            validate_length("physical_name", physical_name, 1, 100, "INVALID_PHYSICAL_NAME"),
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

            if domain_id is not None:
                domain_result = await load_team_domain(self.uow, ctx.team, domain_id)
                if domain_result.is_err():
                    return domain_result

            term = Term(
                logical_name=logical_name.strip(),
                physical_name=physical_name.strip(),
                team_id=ctx.team.id,
                domain_id=domain_id,
            )
            term = await self.uow.terms.create(term)

            await self.uow.commit()

            return Return.ok(TermResponse.from_term(term))
