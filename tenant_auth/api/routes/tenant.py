from fastapi import APIRouter, Depends, status

from tenant_auth.api.error import ClientError, ServerError
from tenant_auth.app.services.unit_of_work import UnitOfWork
from tenant_auth.app.use_cases.tenants import GetTenantUseCase, StyleDirectives, TenantInfo
from tenant_auth.depends import get_unit_of_work

router = APIRouter(prefix="/tenant", tags=["Tenant"])


@router.get("/{tenant_id}", status_code=status.HTTP_200_OK, response_model=TenantInfo)
async def get_tenant(tenant_id: str, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Tenant Configuration

    Public branding and login configuration of a tenant.

    Raises:
        - 404 Not Found: Unknown tenant
    """
    result = await GetTenantUseCase(uow).execute(tenant_id)

    if result.is_err():
        error = result.error
        if error.code == "TENANT_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value


@router.get(
    "/{tenant_id}/style", status_code=status.HTTP_200_OK, response_model=StyleDirectives
)
async def get_tenant_style(tenant_id: str, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Tenant Style Directives

    CSS custom properties derived from the tenant colors.

    Raises:
        - 404 Not Found: Unknown tenant
    """
    result = await GetTenantUseCase(uow).style(tenant_id)

    if result.is_err():
        error = result.error
        if error.code == "TENANT_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value
