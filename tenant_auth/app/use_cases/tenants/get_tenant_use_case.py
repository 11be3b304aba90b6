from tenant_auth.app.services.unit_of_work import UnitOfWork
from tenant_auth.result import Error, Result, Return
from .dtos import StyleDirectives, TenantInfo
from .style_directives import build_style_directives

TENANT_NOT_FOUND = Error("TENANT_NOT_FOUND", "Tenant not found")


class GetTenantUseCase:
    """Read a tenant's public branding and configuration"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, tenant_id: str) -> Result[TenantInfo]:
        async with self.uow:
            tenant = await self.uow.tenants.get_by_id(tenant_id)
            if tenant is None:
                return Return.err(TENANT_NOT_FOUND)
            return Return.ok(TenantInfo.from_tenant(tenant))

    async def style(self, tenant_id: str) -> Result[StyleDirectives]:
        async with self.uow:
            tenant = await self.uow.tenants.get_by_id(tenant_id)
            if tenant is None:
                return Return.err(TENANT_NOT_FOUND)
            return Return.ok(build_style_directives(tenant))
