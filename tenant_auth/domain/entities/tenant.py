"""
Tenant Entity

A branding and configuration scope. Provisioned out-of-band.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel
from sqlmodel import JSON, Column, DateTime, Field, SQLModel

from tenant_auth.domain.base import utc_now


class TenantConfig(BaseModel):
    """Shape of the Tenant.config JSON blob"""

    welcome_message: Optional[str] = None
    sso_providers: List[str] = []
    mfa_required: bool = False


class Tenant(SQLModel, table=True):
    """
    Tenant entity - isolated brand scope for users.

    Business Rules:
    - id is a natural key, globally unique and immutable
    - Read-mostly for authentication flows
    """

    __tablename__ = "tenants"

    id: str = Field(primary_key=True, max_length=64)
    name: str = Field(max_length=255)
    logo: Optional[str] = Field(default=None, max_length=512)
    primary_color: Optional[str] = Field(default="#1976D2", max_length=16)
    secondary_color: Optional[str] = Field(default="#424242", max_length=16)
    config: Optional[dict] = Field(default=None, sa_column=Column(JSON))

    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    def get_config(self) -> TenantConfig:
        return TenantConfig.model_validate(self.config or {})
