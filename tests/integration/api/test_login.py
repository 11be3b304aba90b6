import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_successful_login(client: AsyncClient, register):
    await register()

    response = await client.post("/auth/login", json={
        "email": "alice@example.com",
        "password": "SecurePass123",
        "tenant_id": "acme-corp",
    })

    assert response.status_code == 200
    data = response.json()
    assert data["user"]["email"] == "alice@example.com"
    assert isinstance(data["access_token"], str)
    assert isinstance(data["refresh_token"], str)
    assert "requires_mfa" not in data


@pytest.mark.asyncio
async def test_login_remember_me_is_accepted(client: AsyncClient, register):
    await register()

    response = await client.post("/auth/login", json={
        "email": "alice@example.com",
        "password": "SecurePass123",
        "tenant_id": "acme-corp",
        "remember_me": True,
    })

    assert response.status_code == 200


@pytest.mark.asyncio
async def test_login_invalid_credentials(client: AsyncClient, register):
    await register()

    response = await client.post("/auth/login", json={
        "email": "alice@example.com",
        "password": "WrongPass123",
        "tenant_id": "acme-corp",
    })

    assert response.status_code == 401
    data = response.json()
    assert data["error"]["code"] == "INVALID_CREDENTIALS"


@pytest.mark.asyncio
async def test_login_unknown_user_looks_like_wrong_password(client: AsyncClient, register):
    """No account enumeration: unknown account and wrong password are identical"""
    await register()

    wrong_password = await client.post("/auth/login", json={
        "email": "alice@example.com",
        "password": "WrongPass123",
        "tenant_id": "acme-corp",
    })
    unknown_user = await client.post("/auth/login", json={
        "email": "nobody@example.com",
        "password": "WrongPass123",
        "tenant_id": "acme-corp",
    })
    other_tenant = await client.post("/auth/login", json={
        "email": "alice@example.com",
        "password": "SecurePass123",
        "tenant_id": "demo-tenant",
    })

    assert wrong_password.status_code == unknown_user.status_code == other_tenant.status_code == 401
    assert wrong_password.json() == unknown_user.json() == other_tenant.json()


@pytest.mark.asyncio
async def test_login_lockout_after_repeated_failures(client: AsyncClient, register):
    """Five failures in the window block the sixth attempt, even with the right password"""
    await register()

    for _ in range(5):
        response = await client.post("/auth/login", json={
            "email": "alice@example.com",
            "password": "WrongPass123",
            "tenant_id": "acme-corp",
        })
        assert response.status_code == 401

    response = await client.post("/auth/login", json={
        "email": "alice@example.com",
        "password": "SecurePass123",
        "tenant_id": "acme-corp",
    })

    assert response.status_code == 429
    assert response.json()["error"]["code"] == "RATE_LIMITED"


@pytest.mark.asyncio
async def test_lockout_is_scoped_to_tenant(client: AsyncClient, register):
    await register(tenant_id="acme-corp")
    await register(tenant_id="demo-tenant")

    for _ in range(5):
        await client.post("/auth/login", json={
            "email": "alice@example.com",
            "password": "WrongPass123",
            "tenant_id": "acme-corp",
        })

    response = await client.post("/auth/login", json={
        "email": "alice@example.com",
        "password": "SecurePass123",
        "tenant_id": "demo-tenant",
    })

    assert response.status_code == 200


@pytest.mark.asyncio
async def test_login_validation_error(client: AsyncClient):
    response = await client.post("/auth/login", json={
        "email": "alice@example.com",
        "password": "123",
        "tenant_id": "acme-corp",
    })

    assert response.status_code == 422
    data = response.json()
    assert data["error"]["code"] == "VALIDATION_ERROR"
    assert data["error"]["message"].startswith("password")
