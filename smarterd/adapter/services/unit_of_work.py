from sqlmodel.ext.asyncio.session import AsyncSession

from smarterd.adapter.repositories.diagram_repository import DiagramRepository
from smarterd.adapter.repositories.domain_repository import DomainRepository
from smarterd.adapter.repositories.membership_repository import MembershipRepository
from smarterd.adapter.repositories.project_repository import ProjectRepository
from smarterd.adapter.repositories.team_repository import TeamRepository
from smarterd.adapter.repositories.term_repository import TermRepository
from smarterd.adapter.repositories.user_repository import UserRepository
from smarterd.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.users = UserRepository(self.session)
        self.teams = TeamRepository(self.session)
        self.memberships = MembershipRepository(self.session)
        self.projects = ProjectRepository(self.session)
        self.diagrams = DiagramRepository(self.session)
        self.domains = DomainRepository(self.session)
        self.terms = TermRepository(self.session)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
