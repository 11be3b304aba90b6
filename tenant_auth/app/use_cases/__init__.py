"""
Use Cases

Organized into domain folders:
- auth/: Session lifecycle flows
- tenants/: Tenant lookup and branding
"""

from .auth import (
    LoginUseCase,
    RegisterUseCase,
    VerifyMFAUseCase,
    RefreshTokenUseCase,
    LogoutUseCase,
    LogoutAllUseCase,
    ForgotPasswordUseCase,
    GetCurrentUserUseCase,
    UpdateProfileUseCase,
)
from .tenants import GetTenantUseCase

__all__ = [
    # Auth
    "LoginUseCase",
    "RegisterUseCase",
    "VerifyMFAUseCase",
    "RefreshTokenUseCase",
    "LogoutUseCase",
    "LogoutAllUseCase",
    "ForgotPasswordUseCase",
    "GetCurrentUserUseCase",
    "UpdateProfileUseCase",
    # Tenants
    "GetTenantUseCase",
]
