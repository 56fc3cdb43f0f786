import pytest

from smarterd.app.use_cases.teams import RemoveMemberUseCase
from smarterd.domain.entities import Membership, Team, TeamMemberRole, User
from smarterd.domain.errors import AuthorizationError, BusinessRuleError, NotFoundError


@pytest.fixture
def users():
    return {
        name: User(login_id=name, password_hash="x" * 60, name=name.title())
        for name in ("alice", "bob", "carol")
    }


@pytest.fixture
def team(users):
    return Team(name="Backend Team", owner_id=users["alice"].id)


def membership(team, user, role):
    return Membership(team_id=team.id, user_id=user.id, role=role)


@pytest.mark.asyncio
async def test_admin_removes_member(mock_uow, users, team):
    target = membership(team, users["bob"], TeamMemberRole.member)
    mock_uow.users.get_by_login_id.return_value = users["alice"]
    mock_uow.teams.get_by_id.return_value = team
    mock_uow.memberships.get.side_effect = [
        membership(team, users["alice"], TeamMemberRole.admin),  # requester
        target,  # target
    ]

    use_case = RemoveMemberUseCase(mock_uow)
    result = await use_case.execute("alice", team.id, users["bob"].id)

    assert result.is_ok()
    assert result.value.status == "removed"
    mock_uow.memberships.delete.assert_called_once_with(target)
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_owner_cannot_be_removed(mock_uow, users, team):
    """Even a second ADMIN cannot remove the owner"""
    mock_uow.users.get_by_login_id.return_value = users["bob"]
    mock_uow.teams.get_by_id.return_value = team
    mock_uow.memberships.get.return_value = membership(
        team, users["bob"], TeamMemberRole.admin
    )

    use_case = RemoveMemberUseCase(mock_uow)
    result = await use_case.execute("bob", team.id, users["alice"].id)

    assert result.is_err()
    assert isinstance(result.error, BusinessRuleError)
    assert result.error.code == "CANNOT_MODIFY_OWNER"
    mock_uow.memberships.delete.assert_not_called()


@pytest.mark.asyncio
async def test_member_cannot_remove(mock_uow, users, team):
    mock_uow.users.get_by_login_id.return_value = users["bob"]
    mock_uow.teams.get_by_id.return_value = team
    mock_uow.memberships.get.return_value = membership(
        team, users["bob"], TeamMemberRole.member
    )

    use_case = RemoveMemberUseCase(mock_uow)
    result = await use_case.execute("bob", team.id, users["carol"].id)

    assert result.is_err()
    assert isinstance(result.error, AuthorizationError)
    assert result.error.code == "ADMIN_REQUIRED"


@pytest.mark.asyncio
async def test_target_not_in_team(mock_uow, users, team):
    mock_uow.users.get_by_login_id.return_value = users["alice"]
    mock_uow.teams.get_by_id.return_value = team
    mock_uow.memberships.get.side_effect = [
        membership(team, users["alice"], TeamMemberRole.admin),
        None,
    ]

    use_case = RemoveMemberUseCase(mock_uow)
    result = await use_case.execute("alice", team.id, users["carol"].id)

    assert result.is_err()
    assert isinstance(result.error, NotFoundError)
    assert result.error.code == "MEMBERSHIP_NOT_FOUND"
    mock_uow.commit.assert_not_called()
