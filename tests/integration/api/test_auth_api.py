import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_health(client: AsyncClient):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


@pytest.mark.asyncio
async def test_signup_then_login(client: AsyncClient, test_data):
    alice = test_data.payload("users", "alice")

    signup_response = await client.post("/auth/signup", json=alice)
    assert signup_response.status_code == 201
    data = signup_response.json()
    assert data["login_id"] == "alice"
    assert data["name"] == "Alice"
    assert data["token"]

    login_response = await client.post(
        "/auth/login",
        json={"login_id": alice["login_id"], "password": alice["password"]},
    )
    assert login_response.status_code == 200
    token = login_response.json()["token"]

    teams_response = await client.get(
        "/teams", headers={"Authorization": f"Bearer {token}"}
    )
    assert teams_response.status_code == 200
    assert teams_response.json() == []


@pytest.mark.asyncio
async def test_signup_duplicate_login_id(client: AsyncClient, test_data):
    alice = test_data.payload("users", "alice")
    await client.post("/auth/signup", json=alice)

    response = await client.post("/auth/signup", json=alice)

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "LOGIN_ID_ALREADY_EXISTS"


@pytest.mark.asyncio
async def test_signup_short_password(client: AsyncClient, test_data):
    alice = test_data.payload("users", "alice")
    alice["password"] = "short"

    response = await client.post("/auth/signup", json=alice)

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_PASSWORD"


@pytest.mark.asyncio
@pytest.mark.parametrize("password", ["p" * 100, "비밀번호" * 25])
async def test_signup_and_login_with_long_password(client: AsyncClient, test_data, password):
    alice = test_data.payload("users", "alice")
    alice["password"] = password

    signup_response = await client.post("/auth/signup", json=alice)
    assert signup_response.status_code == 201

    login_response = await client.post(
        "/auth/login", json={"login_id": alice["login_id"], "password": password}
    )
    assert login_response.status_code == 200

    unknown_response = await client.post(
        "/auth/login", json={"login_id": "nobody", "password": password}
    )
    assert unknown_response.status_code == 401
    assert unknown_response.json()["error"]["code"] == "INVALID_CREDENTIALS"


@pytest.mark.asyncio
async def test_login_wrong_password(client: AsyncClient, test_data):
    alice = test_data.payload("users", "alice")
    await client.post("/auth/signup", json=alice)

    response = await client.post(
        "/auth/login", json={"login_id": "alice", "password": "WrongPass123"}
    )

    assert response.status_code == 401
    assert response.json()["error"]["code"] == "INVALID_CREDENTIALS"


@pytest.mark.asyncio
async def test_missing_token(client: AsyncClient):
    response = await client.get("/teams")

    # HTTPBearer answers 403 on older FastAPI releases and 401 on newer ones
    assert response.status_code in (401, 403)


@pytest.mark.asyncio
async def test_invalid_token(client: AsyncClient):
    response = await client.get(
        "/teams", headers={"Authorization": "Bearer not-a-real-token"}
    )

    assert response.status_code == 401
