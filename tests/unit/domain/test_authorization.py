from uuid import uuid4

import pytest

from smarterd.domain.authorization import (
    CAN_EDIT_RESOURCES,
    CAN_MANAGE_MEMBERS,
    require_admin,
    require_editor,
    require_membership,
    require_owner_untouched,
)
from smarterd.domain.entities import Membership, Team, TeamMemberRole, User
from smarterd.domain.errors import AuthorizationError, BusinessRuleError


@pytest.fixture
def owner():
    return User(login_id="alice", password_hash="x" * 60, name="Alice")


@pytest.fixture
def team(owner):
    return Team(name="Backend Team", owner_id=owner.id)


def member_of(team, user, role):
    return Membership(team_id=team.id, user_id=user.id, role=role)


def test_every_role_has_capabilities():
    for role in TeamMemberRole:
        assert role in CAN_MANAGE_MEMBERS
        assert role in CAN_EDIT_RESOURCES


def test_require_membership_without_membership(team, owner):
    result = require_membership(team, owner, None)

    assert result.is_err()
    assert isinstance(result.error, AuthorizationError)
    assert result.error.code == "NOT_A_MEMBER"


def test_require_membership_rejects_membership_of_another_team(team, owner):
    other_team = Team(name="Other", owner_id=owner.id)
    membership = member_of(other_team, owner, TeamMemberRole.admin)

    result = require_membership(team, owner, membership)

    assert result.is_err()
    assert result.error.code == "NOT_A_MEMBER"


def test_require_membership_rejects_membership_of_another_user(team, owner):
    someone = User(login_id="bob", password_hash="x" * 60, name="Bob")
    membership = member_of(team, someone, TeamMemberRole.admin)

    result = require_membership(team, owner, membership)

    assert result.is_err()
    assert result.error.code == "NOT_A_MEMBER"


@pytest.mark.parametrize("role", list(TeamMemberRole))
def test_require_membership_accepts_any_role(team, owner, role):
    membership = member_of(team, owner, role)

    result = require_membership(team, owner, membership)

    assert result.is_ok()
    assert result.value is membership


@pytest.mark.parametrize(
    "role, allowed",
    [
        (TeamMemberRole.admin, True),
        (TeamMemberRole.member, False),
        (TeamMemberRole.viewer, False),
    ],
)
def test_require_admin(team, owner, role, allowed):
    result = require_admin(team, owner, member_of(team, owner, role))

    assert result.is_ok() is allowed
    if not allowed:
        assert isinstance(result.error, AuthorizationError)
        assert result.error.code == "ADMIN_REQUIRED"
        assert result.error.message == "Only ADMIN can perform this action"


def test_require_admin_checks_membership_first(team, owner):
    result = require_admin(team, owner, None)

    assert result.error.code == "NOT_A_MEMBER"


@pytest.mark.parametrize(
    "role, allowed",
    [
        (TeamMemberRole.admin, True),
        (TeamMemberRole.member, True),
        (TeamMemberRole.viewer, False),
    ],
)
def test_require_editor(team, owner, role, allowed):
    result = require_editor(team, owner, member_of(team, owner, role))

    assert result.is_ok() is allowed
    if not allowed:
        assert result.error.code == "EDITOR_REQUIRED"


def test_owner_cannot_be_targeted(team, owner):
    result = require_owner_untouched(team, owner.id, "remove")

    assert result.is_err()
    assert isinstance(result.error, BusinessRuleError)
    assert result.error.code == "CANNOT_MODIFY_OWNER"
    assert result.error.message == "Cannot remove the team owner"


def test_non_owner_target_is_allowed(team):
    assert require_owner_untouched(team, uuid4(), "remove").is_ok()
