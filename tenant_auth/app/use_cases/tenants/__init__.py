"""
Tenant Use Cases

Tenant lookup and branding.
"""

from .get_tenant_use_case import GetTenantUseCase
from .dtos import StyleDirectives, TenantInfo
from .style_directives import build_style_directives, hex_to_hsl

__all__ = [
    "GetTenantUseCase",
    "StyleDirectives",
    "TenantInfo",
    "build_style_directives",
    "hex_to_hsl",
]
