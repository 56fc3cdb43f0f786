from uuid import UUID

from smarterd.app.services.unit_of_work import UnitOfWork
from smarterd.domain.entities import Domain, Team, Term
from smarterd.domain.errors import BusinessRuleError, NotFoundError
from smarterd.libs.result import Result, Return


async def load_team_domain(uow: UnitOfWork, team: Team, domain_id: UUID) -> Result[Domain]:
    domain = await uow.domains.get_by_id(domain_id)
    if domain is None:
        return Return.err(
            NotFoundError("DOMAIN_NOT_FOUND", f"Domain not found: {domain_id}")
        )
    if domain.team_id != team.id:
        return Return.err(
            BusinessRuleError("DOMAIN_TEAM_MISMATCH", "Domain does not belong to this team")
        )
    return Return.ok(domain)


async def load_team_term(uow: UnitOfWork, team: Team, term_id: UUID) -> Result[Term]:
    term = await uow.terms.get_by_id(term_id)
    if term is None:
        return Return.err(NotFoundError("TERM_NOT_FOUND", f"Term not found: {term_id}"))
    if term.team_id != team.id:
        return Return.err(
            BusinessRuleError("TERM_TEAM_MISMATCH", "Term does not belong to this team")
        )
    return Return.ok(term)
