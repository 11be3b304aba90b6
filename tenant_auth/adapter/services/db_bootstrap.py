"""
Database bootstrap

Creates tables and provisions the default tenants on startup.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncEngine
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from tenant_auth.adapter.repositories.tenant_repository import TenantRepository
from tenant_auth.domain.entities import Tenant, TenantConfig

logger = logging.getLogger(__name__)

DEFAULT_TENANTS = [
    Tenant(
        id="acme-corp",
        name="ACME Corp",
        logo="/assets/acme-corp/logo.svg",
        primary_color="#1976D2",
        secondary_color="#424242",
        config=TenantConfig(
            welcome_message="Secure Enterprise Authentication",
            sso_providers=["google", "microsoft"],
            mfa_required=False,
        ).model_dump(),
    ),
    Tenant(
        id="demo-tenant",
        name="Demo Tenant",
        logo="/assets/demo-tenant/logo.svg",
        primary_color="#673AB7",
        secondary_color="#37474F",
        config=TenantConfig(
            welcome_message="Welcome to Demo Portal",
            sso_providers=["google"],
            mfa_required=True,
        ).model_dump(),
    ),
]


async def seed_default_tenants(session: AsyncSession) -> int:
    """Insert missing default tenants. Returns count of tenants created."""
    tenants = TenantRepository(session)
    created = 0
    for default in DEFAULT_TENANTS:
        if await tenants.get_by_id(default.id) is None:
            await tenants.create(Tenant(**default.model_dump()))
            created += 1
    await session.commit()
    return created


async def init_db(engine: AsyncEngine, seed: bool = True) -> None:
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    if seed:
        async with AsyncSession(engine, expire_on_commit=False) as session:
            created = await seed_default_tenants(session)
        if created:
            logger.info(f"Seeded {created} default tenant(s)")
