from typing import List, Optional

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from smarterd.api.error import parse_uuid, raise_for_error
from smarterd.app.services.unit_of_work import UnitOfWork
from smarterd.app.use_cases.dictionary import (
    CreateDomainUseCase,
    CreateTermUseCase,
    DeleteDictionaryEntryResponse,
    DeleteDomainUseCase,
    DeleteTermUseCase,
    DomainResponse,
    GetDomainsUseCase,
    GetDomainUseCase,
    GetTermsUseCase,
    GetTermUseCase,
    TermResponse,
)
from smarterd.depends import get_current_user, get_unit_of_work

router = APIRouter(prefix="/teams/{team_id}", tags=["Dictionary"])


class CreateDomainRequest(BaseModel):
    logical_name: str = Field(..., description="Domain name, e.g. 'Name' (1-100 chars)")
    physical_type: str = Field(..., description="SQL type, e.g. 'VARCHAR(50)' (1-50 chars)")


class CreateTermRequest(BaseModel):
    logical_name: str = Field(..., description="Business name (1-100 chars)")
    physical_name: str = Field(..., description="Column name (1-100 chars)")
    domain_id: Optional[str] = Field(None, description="Domain standardizing the type")


# ============================================================================
# Domains
# ============================================================================


@router.post(
    "/domains", status_code=status.HTTP_201_CREATED, response_model=DomainResponse
)
async def create_domain(
    team_id: str,
    request: CreateDomainRequest,
    current_user: str = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    team_uuid = parse_uuid(team_id, "INVALID_TEAM_ID", "team")

    use_case = CreateDomainUseCase(uow)
    result = await use_case.execute(
        current_user, team_uuid, request.logical_name, request.physical_type
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/domains", response_model=List[DomainResponse])
async def get_domains(
    team_id: str,
    current_user: str = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    team_uuid = parse_uuid(team_id, "INVALID_TEAM_ID", "team")

    use_case = GetDomainsUseCase(uow)
    result = await use_case.execute(current_user, team_uuid)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/domains/{domain_id}", response_model=DomainResponse)
async def get_domain(
    team_id: str,
    domain_id: str,
    current_user: str = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    team_uuid = parse_uuid(team_id, "INVALID_TEAM_ID", "team")
    domain_uuid = parse_uuid(domain_id, "INVALID_DOMAIN_ID", "domain")

    use_case = GetDomainUseCase(uow)
    result = await use_case.execute(current_user, team_uuid, domain_uuid)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.delete("/domains/{domain_id}", response_model=DeleteDictionaryEntryResponse)
async def delete_domain(
    team_id: str,
    domain_id: str,
    current_user: str = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Delete Domain

    Terms that used the domain are kept with an empty domain reference.
    """
    team_uuid = parse_uuid(team_id, "INVALID_TEAM_ID", "team")
    domain_uuid = parse_uuid(domain_id, "INVALID_DOMAIN_ID", "domain")

    use_case = DeleteDomainUseCase(uow)
    result = await use_case.execute(current_user, team_uuid, domain_uuid)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


# ============================================================================
# Terms
# ============================================================================


@router.post("/terms", status_code=status.HTTP_201_CREATED, response_model=TermResponse)
async def create_term(
    team_id: str,
    request: CreateTermRequest,
    current_user: str = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create Term

    Raises:
        - 400 Bad Request: Field length violated or DOMAIN_TEAM_MISMATCH
        - 403 Forbidden: NOT_A_MEMBER or EDITOR_REQUIRED
        - 404 Not Found: TEAM_NOT_FOUND or DOMAIN_NOT_FOUND
    """
    team_uuid = parse_uuid(team_id, "INVALID_TEAM_ID", "team")
    domain_uuid = None
    if request.domain_id is not None:
        domain_uuid = parse_uuid(request.domain_id, "INVALID_DOMAIN_ID", "domain")

    use_case = CreateTermUseCase(uow)
    result = await use_case.execute(
        current_user,
        team_uuid,
        request.logical_name,
        request.physical_name,
        domain_id=domain_uuid,
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/terms", response_model=List[TermResponse])
async def get_terms(
    team_id: str,
    current_user: str = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    team_uuid = parse_uuid(team_id, "INVALID_TEAM_ID", "team")

    use_case = GetTermsUseCase(uow)
    result = await use_case.execute(current_user, team_uuid)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/terms/{term_id}", response_model=TermResponse)
async def get_term(
    team_id: str,
    term_id: str,
    current_user: str = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    team_uuid = parse_uuid(team_id, "INVALID_TEAM_ID", "team")
    term_uuid = parse_uuid(term_id, "INVALID_TERM_ID", "term")

    use_case = GetTermUseCase(uow)
    result = await use_case.execute(current_user, team_uuid, term_uuid)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.delete("/terms/{term_id}", response_model=DeleteDictionaryEntryResponse)
async def delete_term(
    team_id: str,
    term_id: str,
    current_user: str = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    team_uuid = parse_uuid(team_id, "INVALID_TEAM_ID", "team")
    term_uuid = parse_uuid(term_id, "INVALID_TERM_ID", "term")

    use_case = DeleteTermUseCase(uow)
    result = await use_case.execute(current_user, team_uuid, term_uuid)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
