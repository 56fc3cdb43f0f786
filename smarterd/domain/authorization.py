"""
Team Authorization Engine

Pure decision logic over already-loaded records. No repository access,
no side effects: callers load the team, the requester and the
requester's membership, then compose these checks.

Role capabilities:
- ADMIN:  read, write, manage membership
- MEMBER: read, write
- VIEWER: read
"""

from typing import Dict, Optional
from uuid import UUID

from smarterd.domain.entities import Membership, Team, TeamMemberRole, User
from smarterd.domain.errors import AuthorizationError, BusinessRuleError
from smarterd.libs.result import Result, Return

# Every role must appear in both tables; a missing role raises KeyError
# instead of silently granting access.
CAN_MANAGE_MEMBERS: Dict[TeamMemberRole, bool] = {
    TeamMemberRole.admin: True,
    TeamMemberRole.member: False,
    TeamMemberRole.viewer: False,
}

CAN_EDIT_RESOURCES: Dict[TeamMemberRole, bool] = {
    TeamMemberRole.admin: True,
    TeamMemberRole.member: True,
    TeamMemberRole.viewer: False,
}


def require_membership(
    team: Team, user: User, membership: Optional[Membership]
) -> Result[Membership]:
    """Fail with AuthorizationError unless membership links user to team"""
    if (
        membership is None
        or membership.team_id != team.id
        or membership.user_id != user.id
    ):
        return Return.err(
            AuthorizationError("NOT_A_MEMBER", "User is not a member of this team")
        )
    return Return.ok(membership)


def require_admin(
    team: Team, user: User, membership: Optional[Membership]
) -> Result[Membership]:
    """Membership first, then the ADMIN role"""
    result = require_membership(team, user, membership)
    if result.is_err():
        return result

    if not CAN_MANAGE_MEMBERS[membership.role]:
        return Return.err(
            AuthorizationError("ADMIN_REQUIRED", "Only ADMIN can perform this action")
        )
    return Return.ok(membership)


def require_editor(
    team: Team, user: User, membership: Optional[Membership]
) -> Result[Membership]:
    """Membership first, then a role allowed to modify team resources"""
    result = require_membership(team, user, membership)
    if result.is_err():
        return result

    if not CAN_EDIT_RESOURCES[membership.role]:
        return Return.err(
            AuthorizationError(
                "EDITOR_REQUIRED", "VIEWER members have read-only access"
            )
        )
    return Return.ok(membership)


def require_owner_untouched(team: Team, target_user_id: UUID, action: str) -> Result[None]:
    """The owner's membership can never be removed or have its role changed"""
    if target_user_id == team.owner_id:
        return Return.err(
            BusinessRuleError("CANNOT_MODIFY_OWNER", f"Cannot {action} the team owner")
        )
    return Return.ok()
