import pytest

from smarterd.app.use_cases.teams import AddMemberUseCase
from smarterd.domain.entities import Membership, Team, TeamMemberRole, User
from smarterd.domain.errors import (
    AuthorizationError,
    ConflictError,
    DuplicateRecordError,
    NotFoundError,
    ValidationError,
)


@pytest.fixture
def alice():
    return User(login_id="alice", password_hash="x" * 60, name="Alice")


@pytest.fixture
def bob():
    return User(login_id="bob", password_hash="x" * 60, name="Bob")


@pytest.fixture
def team(alice):
    return Team(name="Backend Team", owner_id=alice.id)


def arrange(mock_uow, requester, team, requester_role, target):
    mock_uow.users.get_by_login_id.side_effect = [requester, target]
    mock_uow.teams.get_by_id.return_value = team
    mock_uow.memberships.get.return_value = (
        Membership(team_id=team.id, user_id=requester.id, role=requester_role)
        if requester_role is not None
        else None
    )
    mock_uow.memberships.exists.return_value = False


@pytest.mark.asyncio
async def test_admin_adds_member(mock_uow, alice, bob, team):
    arrange(mock_uow, alice, team, TeamMemberRole.admin, bob)

    use_case = AddMemberUseCase(mock_uow)
    result = await use_case.execute("alice", team.id, "bob", "MEMBER")

    assert result.is_ok()
    assert result.value.user_id == str(bob.id)
    assert result.value.login_id == "bob"
    assert result.value.role == "MEMBER"

    created = mock_uow.memberships.create.call_args[0][0]
    assert created.team_id == team.id
    assert created.user_id == bob.id
    assert created.role == TeamMemberRole.member
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_role_is_case_insensitive(mock_uow, alice, bob, team):
    arrange(mock_uow, alice, team, TeamMemberRole.admin, bob)

    use_case = AddMemberUseCase(mock_uow)
    result = await use_case.execute("alice", team.id, "bob", "viewer")

    assert result.is_ok()
    assert result.value.role == "VIEWER"


@pytest.mark.asyncio
async def test_invalid_role(mock_uow, alice, bob, team):
    arrange(mock_uow, alice, team, TeamMemberRole.admin, bob)

    use_case = AddMemberUseCase(mock_uow)
    result = await use_case.execute("alice", team.id, "bob", "OWNER")

    assert result.is_err()
    assert isinstance(result.error, ValidationError)
    assert result.error.code == "INVALID_ROLE"
    mock_uow.memberships.create.assert_not_called()


@pytest.mark.asyncio
@pytest.mark.parametrize("role", [TeamMemberRole.member, TeamMemberRole.viewer])
async def test_non_admin_cannot_add(mock_uow, alice, bob, team, role):
    arrange(mock_uow, bob, team, role, alice)

    use_case = AddMemberUseCase(mock_uow)
    result = await use_case.execute("bob", team.id, "carol", "MEMBER")

    assert result.is_err()
    assert isinstance(result.error, AuthorizationError)
    assert result.error.code == "ADMIN_REQUIRED"
    mock_uow.memberships.create.assert_not_called()


@pytest.mark.asyncio
async def test_non_member_cannot_add(mock_uow, alice, bob, team):
    arrange(mock_uow, bob, team, None, alice)

    use_case = AddMemberUseCase(mock_uow)
    result = await use_case.execute("bob", team.id, "alice", "MEMBER")

    assert result.is_err()
    assert result.error.code == "NOT_A_MEMBER"


@pytest.mark.asyncio
async def test_team_not_found(mock_uow, alice, bob, team):
    arrange(mock_uow, alice, team, TeamMemberRole.admin, bob)
    mock_uow.teams.get_by_id.return_value = None

    use_case = AddMemberUseCase(mock_uow)
    result = await use_case.execute("alice", team.id, "bob", "MEMBER")

    assert result.is_err()
    assert isinstance(result.error, NotFoundError)
    assert result.error.code == "TEAM_NOT_FOUND"


@pytest.mark.asyncio
async def test_target_user_not_found(mock_uow, alice, team):
    arrange(mock_uow, alice, team, TeamMemberRole.admin, None)

    use_case = AddMemberUseCase(mock_uow)
    result = await use_case.execute("alice", team.id, "ghost", "MEMBER")

    assert result.is_err()
    assert isinstance(result.error, NotFoundError)
    assert result.error.code == "USER_NOT_FOUND"


@pytest.mark.asyncio
async def test_already_member(mock_uow, alice, bob, team):
    arrange(mock_uow, alice, team, TeamMemberRole.admin, bob)
    mock_uow.memberships.exists.return_value = True

    use_case = AddMemberUseCase(mock_uow)
    result = await use_case.execute("alice", team.id, "bob", "MEMBER")

    assert result.is_err()
    assert isinstance(result.error, ConflictError)
    assert result.error.code == "ALREADY_MEMBER"
    mock_uow.memberships.create.assert_not_called()


@pytest.mark.asyncio
async def test_racing_duplicate_is_a_conflict(mock_uow, alice, bob, team):
    """Both requests pass the existence check; the store rejects the second insert"""
    arrange(mock_uow, alice, team, TeamMemberRole.admin, bob)
    mock_uow.memberships.create.side_effect = DuplicateRecordError(
        f"Membership already exists: team={team.id} user={bob.id}"
    )

    use_case = AddMemberUseCase(mock_uow)
    result = await use_case.execute("alice", team.id, "bob", "MEMBER")

    assert result.is_err()
    assert isinstance(result.error, ConflictError)
    assert result.error.code == "ALREADY_MEMBER"
    mock_uow.rollback.assert_called_once()
    mock_uow.commit.assert_not_called()
