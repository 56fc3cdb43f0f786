"""
Shared lookups for team-scoped use cases.

Each helper loads records through the unit of work and reports a
missing record as a NotFoundError (or a scope mismatch as a
BusinessRuleError); authorization decisions stay in
smarterd.domain.authorization.
"""

from typing import NamedTuple, Optional, Union
from uuid import UUID

from smarterd.app.services.unit_of_work import UnitOfWork
from smarterd.domain.entities import (
    Diagram,
    Membership,
    MembershipKey,
    Project,
    Team,
    TeamMemberRole,
    User,
)
from smarterd.domain.errors import BusinessRuleError, NotFoundError, ValidationError
from smarterd.libs.result import Result, Return


class TeamContext(NamedTuple):
    """Requester, target team and the requester's membership (None if not a member)"""

    user: User
    team: Team
    membership: Optional[Membership]


def parse_role(role: Union[str, TeamMemberRole]) -> Result[TeamMemberRole]:
    if isinstance(role, TeamMemberRole):
        return Return.ok(role)
    try:
        return Return.ok(TeamMemberRole(str(role).upper()))
    except ValueError:
        return Return.err(
            ValidationError(
                "INVALID_ROLE",
                f"Invalid role: {role}. Must be one of: ADMIN, MEMBER, VIEWER",
            )
        )


async def find_user(uow: UnitOfWork, login_id: str) -> Result[User]:
    user = await uow.users.get_by_login_id(login_id)
    if user is None:
        return Return.err(NotFoundError("USER_NOT_FOUND", f"User not found: {login_id}"))
    return Return.ok(user)


async def load_team_context(
    uow: UnitOfWork, login_id: str, team_id: UUID
) -> Result[TeamContext]:
    """Resolve requester and team; membership is loaded but not yet checked"""
    user_result = await find_user(uow, login_id)
    if user_result.is_err():
        return user_result
    user = user_result.value

    team = await uow.teams.get_by_id(team_id)
    if team is None:
        return Return.err(NotFoundError("TEAM_NOT_FOUND", f"Team not found: {team_id}"))

    membership = await uow.memberships.get(MembershipKey(team.id, user.id))
    return Return.ok(TeamContext(user=user, team=team, membership=membership))


async def load_team_project(
    uow: UnitOfWork, team: Team, project_id: UUID
) -> Result[Project]:
    """Fetch a project and verify it belongs to the team named in the path"""
    project = await uow.projects.get_by_id(project_id)
    if project is None:
        return Return.err(
            NotFoundError("PROJECT_NOT_FOUND", f"Project not found: {project_id}")
        )

    if project.team_id != team.id:
        return Return.err(
            BusinessRuleError(
                "PROJECT_TEAM_MISMATCH", "Project does not belong to this team"
            )
        )
    return Return.ok(project)


async def load_project_diagram(
    uow: UnitOfWork, project: Project, diagram_id: UUID
) -> Result[Diagram]:
    """Fetch a diagram and verify it belongs to the project named in the path"""
    diagram = await uow.diagrams.get_by_id(diagram_id)
    if diagram is None:
        return Return.err(
            NotFoundError("DIAGRAM_NOT_FOUND", f"Diagram not found: {diagram_id}")
        )

    if diagram.project_id != project.id:
        return Return.err(
            BusinessRuleError(
                "DIAGRAM_PROJECT_MISMATCH", "Diagram does not belong to this project"
            )
        )
    return Return.ok(diagram)
