"""
Tenant Use Case DTOs
"""

from typing import Dict, Optional

from pydantic import BaseModel

from tenant_auth.domain.entities import Tenant, TenantConfig


class TenantInfo(BaseModel):
    """Public tenant view used by login screens"""

    id: str
    name: str
    logo: Optional[str] = None
    primary_color: Optional[str] = None
    secondary_color: Optional[str] = None
    config: TenantConfig

    @classmethod
    def from_tenant(cls, tenant: Tenant) -> "TenantInfo":
        return cls(
            id=tenant.id,
            name=tenant.name,
            logo=tenant.logo,
            primary_color=tenant.primary_color,
            secondary_color=tenant.secondary_color,
            config=tenant.get_config(),
        )


class StyleDirectives(BaseModel):
    """CSS custom properties a renderer applies for a tenant"""

    tenant_id: str
    css_variables: Dict[str, str]
