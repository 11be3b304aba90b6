import pytest
from httpx import AsyncClient

from tenant_auth.domain.entities import User


def _auth(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.mark.asyncio
async def test_get_current_user(client: AsyncClient, register):
    registered = await register()

    response = await client.get("/auth/user", headers=_auth(registered.json()["access_token"]))

    assert response.status_code == 200
    data = response.json()
    assert data["email"] == "alice@example.com"
    assert data["first_name"] == "Alice"
    assert "password_hash" not in data
    assert "mfa_secret" not in data


@pytest.mark.asyncio
@pytest.mark.parametrize("headers", [{}, {"Authorization": "Bearer garbage"}])
async def test_get_current_user_unauthorized(client: AsyncClient, headers):
    response = await client.get("/auth/user", headers=headers)

    assert response.status_code == 401
    assert response.json()["error"]["code"] == "INVALID_OR_EXPIRED_TOKEN"


@pytest.mark.asyncio
async def test_deactivated_user_is_rejected(client: AsyncClient, register, db_session):
    registered = await register()
    user = await db_session.get(User, registered.json()["user"]["id"])
    user.is_active = False
    db_session.add(user)
    await db_session.commit()

    response = await client.get("/auth/user", headers=_auth(registered.json()["access_token"]))

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_update_profile(client: AsyncClient, register):
    registered = await register()
    headers = _auth(registered.json()["access_token"])

    response = await client.patch("/auth/user", headers=headers, json={"last_name": "Baker"})

    assert response.status_code == 200
    assert response.json()["first_name"] == "Alice"
    assert response.json()["last_name"] == "Baker"

    me = await client.get("/auth/user", headers=headers)
    assert me.json()["last_name"] == "Baker"
