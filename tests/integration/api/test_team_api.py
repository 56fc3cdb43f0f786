from uuid import UUID, uuid4

import pytest
from httpx import AsyncClient
from sqlmodel import select

from smarterd.domain.entities import Membership, Project, Team
from tests.utils.json_compare import exclude_keys


async def create_team(client, headers, test_data, key="backend"):
    response = await client.post(
        "/teams", json=test_data.payload("teams", key), headers=headers
    )
    assert response.status_code == 201, response.text
    return response.json()


async def add_member(client, headers, team_id, login_id, role):
    return await client.post(
        f"/teams/{team_id}/members",
        json={"login_id": login_id, "role": role},
        headers=headers,
    )


async def member_ids(client, headers, team_id):
    response = await client.get(f"/teams/{team_id}/members", headers=headers)
    assert response.status_code == 200
    return {m["login_id"]: m["user_id"] for m in response.json()}


@pytest.mark.asyncio
async def test_backend_team_scenario(client: AsyncClient, signup, test_data):
    """A owns the team, adds B as MEMBER; B sees two members but cannot add"""
    alice = await signup("alice")
    bob = await signup("bob")
    await signup("carol")

    team = await create_team(client, alice, test_data)
    assert exclude_keys(team, {"id", "owner_id", "created_at"}) == {
        "name": "Backend Team",
        "owner_name": "Alice",
        "member_count": 1,
    }

    response = await add_member(client, alice, team["id"], "bob", "MEMBER")
    assert response.status_code == 201
    assert response.json()["role"] == "MEMBER"

    members = await client.get(f"/teams/{team['id']}/members", headers=bob)
    assert members.status_code == 200
    assert {(m["login_id"], m["role"]) for m in members.json()} == {
        ("alice", "ADMIN"),
        ("bob", "MEMBER"),
    }

    response = await add_member(client, bob, team["id"], "carol", "VIEWER")
    assert response.status_code == 403
    assert response.json()["error"] == {
        "code": "ADMIN_REQUIRED",
        "message": "Only ADMIN can perform this action",
    }


@pytest.mark.asyncio
async def test_owner_holds_admin_membership(client: AsyncClient, signup, test_data, db_session):
    alice = await signup("alice")
    team = await create_team(client, alice, test_data)

    result = await db_session.exec(
        select(Membership).where(Membership.team_id == UUID(team["id"]))
    )
    memberships = result.all()
    assert len(memberships) == 1
    assert str(memberships[0].user_id) == team["owner_id"]
    assert memberships[0].role.value == "ADMIN"


@pytest.mark.asyncio
async def test_add_existing_member_conflicts(client: AsyncClient, signup, test_data):
    alice = await signup("alice")
    await signup("bob")
    team = await create_team(client, alice, test_data)

    first = await add_member(client, alice, team["id"], "bob", "MEMBER")
    second = await add_member(client, alice, team["id"], "bob", "VIEWER")

    assert first.status_code == 201
    assert second.status_code == 409
    assert second.json()["error"]["code"] == "ALREADY_MEMBER"


@pytest.mark.asyncio
async def test_add_member_invalid_role_and_unknown_user(client: AsyncClient, signup, test_data):
    alice = await signup("alice")
    await signup("bob")
    team = await create_team(client, alice, test_data)

    invalid_role = await add_member(client, alice, team["id"], "bob", "OWNER")
    assert invalid_role.status_code == 400
    assert invalid_role.json()["error"]["code"] == "INVALID_ROLE"

    unknown_user = await add_member(client, alice, team["id"], "ghost", "MEMBER")
    assert unknown_user.status_code == 404
    assert unknown_user.json()["error"]["code"] == "USER_NOT_FOUND"


@pytest.mark.asyncio
async def test_owner_cannot_be_removed_or_demoted(client: AsyncClient, signup, test_data):
    alice = await signup("alice")
    bob = await signup("bob")
    team = await create_team(client, alice, test_data)
    await add_member(client, alice, team["id"], "bob", "ADMIN")
    owner_id = team["owner_id"]

    removal = await client.delete(f"/teams/{team['id']}/members/{owner_id}", headers=bob)
    assert removal.status_code == 400
    assert removal.json()["error"]["code"] == "CANNOT_MODIFY_OWNER"

    demotion = await client.patch(
        f"/teams/{team['id']}/members/{owner_id}",
        json={"role": "VIEWER"},
        headers=bob,
    )
    assert demotion.status_code == 400
    assert demotion.json()["error"]["code"] == "CANNOT_MODIFY_OWNER"

    # The owner is not exempt either
    self_removal = await client.delete(
        f"/teams/{team['id']}/members/{owner_id}", headers=alice
    )
    assert self_removal.status_code == 400


@pytest.mark.asyncio
async def test_change_role_keeps_membership_row(client: AsyncClient, signup, test_data, db_session):
    alice = await signup("alice")
    await signup("bob")
    team = await create_team(client, alice, test_data)
    added = (await add_member(client, alice, team["id"], "bob", "MEMBER")).json()

    response = await client.patch(
        f"/teams/{team['id']}/members/{added['user_id']}",
        json={"role": "viewer"},
        headers=alice,
    )

    assert response.status_code == 200
    changed = response.json()
    assert changed["role"] == "VIEWER"
    assert changed["created_at"] == added["created_at"]
    assert changed["updated_at"] >= added["updated_at"]

    result = await db_session.exec(
        select(Membership).where(Membership.team_id == UUID(team["id"]))
    )
    assert len(result.all()) == 2


@pytest.mark.asyncio
async def test_remove_member(client: AsyncClient, signup, test_data):
    alice = await signup("alice")
    bob = await signup("bob")
    team = await create_team(client, alice, test_data)
    await add_member(client, alice, team["id"], "bob", "MEMBER")
    bob_id = (await member_ids(client, alice, team["id"]))["bob"]

    response = await client.delete(f"/teams/{team['id']}/members/{bob_id}", headers=alice)
    assert response.status_code == 200
    assert response.json() == {"status": "removed"}

    # Bob lost access
    response = await client.get(f"/teams/{team['id']}", headers=bob)
    assert response.status_code == 403
    assert response.json()["error"]["code"] == "NOT_A_MEMBER"

    # Removing again reports the missing membership
    response = await client.delete(f"/teams/{team['id']}/members/{bob_id}", headers=alice)
    assert response.status_code == 404
    assert response.json()["error"]["code"] == "MEMBERSHIP_NOT_FOUND"


@pytest.mark.asyncio
async def test_non_member_is_refused_everywhere(client: AsyncClient, signup, test_data):
    alice = await signup("alice")
    dave = await signup("dave")
    team = await create_team(client, alice, test_data)
    team_id = team["id"]
    owner_id = team["owner_id"]

    requests = [
        client.get(f"/teams/{team_id}", headers=dave),
        client.get(f"/teams/{team_id}/members", headers=dave),
        client.post(
            f"/teams/{team_id}/members",
            json={"login_id": "dave", "role": "ADMIN"},
            headers=dave,
        ),
        client.patch(
            f"/teams/{team_id}/members/{owner_id}", json={"role": "VIEWER"}, headers=dave
        ),
        client.get(f"/teams/{team_id}/projects", headers=dave),
        client.post(f"/teams/{team_id}/projects", json={"name": "x"}, headers=dave),
        client.get(f"/teams/{team_id}/terms", headers=dave),
        client.get(f"/teams/{team_id}/domains", headers=dave),
        client.delete(f"/teams/{team_id}", headers=dave),
    ]
    for pending in requests:
        response = await pending
        assert response.status_code == 403, response.request.url
        assert response.json()["error"]["code"] == "NOT_A_MEMBER"


@pytest.mark.asyncio
async def test_get_my_teams(client: AsyncClient, signup, test_data):
    alice = await signup("alice")
    bob = await signup("bob")
    backend = await create_team(client, alice, test_data, "backend")
    await create_team(client, bob, test_data, "frontend")
    await add_member(client, alice, backend["id"], "bob", "VIEWER")

    response = await client.get("/teams", headers=bob)

    assert response.status_code == 200
    teams = {t["name"]: t for t in response.json()}
    assert set(teams) == {"Backend Team", "Frontend Team"}
    assert teams["Backend Team"]["member_count"] == 2
    assert teams["Backend Team"]["owner_name"] == "Alice"


@pytest.mark.asyncio
async def test_delete_team_cascades(client: AsyncClient, signup, test_data, db_session):
    alice = await signup("alice")
    bob = await signup("bob")
    team = await create_team(client, alice, test_data)
    team_id = team["id"]
    await add_member(client, alice, team_id, "bob", "ADMIN")

    project = (
        await client.post(
            f"/teams/{team_id}/projects",
            json=test_data.payload("projects", "erd1"),
            headers=alice,
        )
    ).json()
    await client.post(
        f"/teams/{team_id}/projects/{project['id']}/diagrams",
        json=test_data.payload("diagrams", "orders"),
        headers=alice,
    )
    await client.post(
        f"/teams/{team_id}/terms", json=test_data.payload("terms", "user_name"), headers=alice
    )

    # An ADMIN who is not the owner cannot delete
    response = await client.delete(f"/teams/{team_id}", headers=bob)
    assert response.status_code == 403
    assert response.json()["error"]["code"] == "OWNER_REQUIRED"

    response = await client.delete(f"/teams/{team_id}", headers=alice)
    assert response.status_code == 200
    assert response.json() == {"status": "deleted"}

    response = await client.get(f"/teams/{team_id}", headers=alice)
    assert response.status_code == 404
    assert response.json()["error"]["code"] == "TEAM_NOT_FOUND"

    assert (await db_session.exec(select(Team))).all() == []
    assert (await db_session.exec(select(Membership))).all() == []
    assert (await db_session.exec(select(Project))).all() == []


@pytest.mark.asyncio
async def test_malformed_and_unknown_team_ids(client: AsyncClient, signup):
    alice = await signup("alice")

    malformed = await client.get("/teams/not-a-uuid", headers=alice)
    assert malformed.status_code == 400
    assert malformed.json()["error"]["code"] == "INVALID_TEAM_ID"

    unknown = await client.get(f"/teams/{uuid4()}", headers=alice)
    assert unknown.status_code == 404
    assert unknown.json()["error"]["code"] == "TEAM_NOT_FOUND"
