"""
Data Dictionary Use Cases

Team-wide terms (naming) and domains (types).
"""

from .create_domain_use_case import CreateDomainUseCase
from .create_term_use_case import CreateTermUseCase
from .delete_domain_use_case import DeleteDomainUseCase
from .delete_term_use_case import DeleteTermUseCase
from .dtos import DeleteDictionaryEntryResponse, DomainResponse, TermResponse
from .get_domain_use_case import GetDomainUseCase
from .get_domains_use_case import GetDomainsUseCase
from .get_term_use_case import GetTermUseCase
from .get_terms_use_case import GetTermsUseCase

__all__ = [
    "CreateDomainUseCase",
    "GetDomainsUseCase",
    "GetDomainUseCase",
    "DeleteDomainUseCase",
    "CreateTermUseCase",
    "GetTermsUseCase",
    "GetTermUseCase",
    "DeleteTermUseCase",
    "DomainResponse",
    "TermResponse",
    "DeleteDictionaryEntryResponse",
]
