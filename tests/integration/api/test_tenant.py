import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_get_tenant(client: AsyncClient):
    response = await client.get("/tenant/acme-corp")

    assert response.status_code == 200
    data = response.json()
    assert data["id"] == "acme-corp"
    assert data["name"] == "ACME Corp"
    assert data["primary_color"] == "#1976D2"
    assert data["config"]["mfa_required"] is False
    assert data["config"]["sso_providers"] == ["google", "microsoft"]


@pytest.mark.asyncio
async def test_get_unknown_tenant(client: AsyncClient):
    response = await client.get("/tenant/unknown")

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "TENANT_NOT_FOUND"


@pytest.mark.asyncio
async def test_get_tenant_style(client: AsyncClient):
    response = await client.get("/tenant/acme-corp/style")

    assert response.status_code == 200
    data = response.json()
    assert data["tenant_id"] == "acme-corp"
    assert data["css_variables"]["--tenant-primary"] == "210 79% 46%"
    assert data["css_variables"]["--primary"] == "210 79% 46%"
    assert data["css_variables"]["--secondary"] == "0 0% 26%"
