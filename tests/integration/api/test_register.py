import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_successful_registration(register):
    """Registering inside an existing tenant signs the user in"""
    response = await register()

    assert response.status_code == 201
    data = response.json()
    assert data["user"]["email"] == "alice@example.com"
    assert data["user"]["tenant_id"] == "acme-corp"
    assert data["user"]["mfa_enabled"] is False
    assert "password_hash" not in data["user"]
    assert "mfa_secret" not in data["user"]
    assert len(data["access_token"]) > 0
    assert len(data["refresh_token"]) > 0


@pytest.mark.asyncio
async def test_register_duplicate_email_same_tenant(register):
    await register()

    response = await register()

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "USER_ALREADY_EXISTS"


@pytest.mark.asyncio
async def test_same_email_in_two_tenants(register):
    """Identity is the (email, tenant) pair"""
    first = await register(tenant_id="acme-corp")
    second = await register(tenant_id="demo-tenant")

    assert first.status_code == 201
    assert second.status_code == 201
    assert first.json()["user"]["id"] != second.json()["user"]["id"]


@pytest.mark.asyncio
async def test_register_unknown_tenant(register):
    response = await register(tenant_id="no-such-tenant")

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "TENANT_NOT_FOUND"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "password",
    ["short1A", "alllowercase1", "ALLUPPERCASE1", "NoDigitsHere"],
)
async def test_register_weak_password(register, password):
    response = await register(password=password)

    assert response.status_code == 422
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"


@pytest.mark.asyncio
async def test_register_password_mismatch(client: AsyncClient):
    response = await client.post("/auth/register", json={
        "email": "alice@example.com",
        "password": "SecurePass123",
        "confirm_password": "SecurePass124",
        "first_name": "Alice",
        "last_name": "Anders",
        "tenant_id": "acme-corp",
    })

    assert response.status_code == 422
    data = response.json()
    assert data["error"]["code"] == "VALIDATION_ERROR"
    assert "Passwords don't match" in data["error"]["message"]


@pytest.mark.asyncio
async def test_register_invalid_email(register):
    response = await register(email="not-an-email")

    assert response.status_code == 422
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"


@pytest.mark.asyncio
@pytest.mark.parametrize("password", ["Aa1" + "x" * 80, "Aa1" + "é" * 35])
async def test_register_password_over_72_bytes(register, password):
    """bcrypt cannot hash more than 72 bytes; reject at the boundary"""
    response = await register(password=password)

    assert response.status_code == 422
    data = response.json()
    assert data["error"]["code"] == "VALIDATION_ERROR"
    assert "72 bytes" in data["error"]["message"]


@pytest.mark.asyncio
async def test_register_password_of_exactly_72_bytes(register):
    response = await register(password="Aa1" + "x" * 69)

    assert response.status_code == 201
