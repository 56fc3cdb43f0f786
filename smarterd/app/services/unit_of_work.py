from abc import ABC, abstractmethod

from smarterd.app.repositories.diagram_repository import IDiagramRepository
from smarterd.app.repositories.domain_repository import IDomainRepository
from smarterd.app.repositories.membership_repository import IMembershipRepository
from smarterd.app.repositories.project_repository import IProjectRepository
from smarterd.app.repositories.team_repository import ITeamRepository
from smarterd.app.repositories.term_repository import ITermRepository
from smarterd.app.repositories.user_repository import IUserRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    users: IUserRepository
    teams: ITeamRepository
    memberships: IMembershipRepository
    projects: IProjectRepository
    diagrams: IDiagramRepository
    domains: IDomainRepository
    terms: ITermRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
