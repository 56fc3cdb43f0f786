"""
Data Dictionary Use Case DTOs

Domains standardize physical types; terms map logical names to
physical names and may point at a domain.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from smarterd.domain.entities import Domain, Term


class DomainResponse(BaseModel):
    id: str
    logical_name: str
    physical_type: str
    team_id: str
    created_at: datetime

    @classmethod
    def from_domain(cls, domain: Domain) -> "DomainResponse":
        return cls(
            id=str(domain.id),
            logical_name=domain.logical_name,
            physical_type=domain.physical_type,
            team_id=str(domain.team_id),
            created_at=domain.created_at,
        )


class TermResponse(BaseModel):
    id: str
    logical_name: str
    physical_name: str
    team_id: str
    domain_id: Optional[str] = None
    created_at: datetime

    @classmethod
    def from_term(cls, term: Term) -> "TermResponse":
        return cls(
            id=str(term.id),
            logical_name=term.logical_name,
            physical_name=term.physical_name,
            team_id=str(term.team_id),
            domain_id=str(term.domain_id) if term.domain_id else None,
            created_at=term.created_at,
        )


class DeleteDictionaryEntryResponse(BaseModel):
    """Response for delete term / delete domain use cases"""

    status: str
