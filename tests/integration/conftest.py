import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from tenant_auth.adapter.services.db_bootstrap import seed_default_tenants
from tenant_auth.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from tenant_auth.api.app import create_app
from tenant_auth.config import ApplicationConfig
from tenant_auth.depends import get_unit_of_work


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite:///./test.db")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with Session() as session:
        # ASGITransport skips the lifespan, so provision tenants here
        await seed_default_tenants(session)
        yield session


@pytest_asyncio.fixture
async def client(db_session):
    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def register(client):
    async def _register(
        email="alice@example.com",
        password="SecurePass123",
        tenant_id="acme-corp",
        first_name="Alice",
        last_name="Anders",
    ):
        return await client.post("/auth/register", json={
            "email": email,
            "password": password,
            "confirm_password": password,
            "first_name": first_name,
            "last_name": last_name,
            "tenant_id": tenant_id,
        })

    return _register
