"""
Authentication Use Case DTOs (Data Transfer Objects)

All Command and Response classes for auth domain.
Provides type safety and clear contracts between layers.
"""

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel

from tenant_auth.domain.entities import User


# ============================================================================
# Command DTOs
# ============================================================================


class RegisterCommand(BaseModel):
    """
    Register command - represents validated registration intent

    Created by API layer after request validation passes
    (including the password confirmation check).
    """

    email: str
    password: str
    first_name: str
    last_name: str
    tenant_id: str


# ============================================================================
# Response DTOs
# ============================================================================


class UserInfo(BaseModel):
    """User as returned to callers. Never carries password hash or MFA secret."""

    id: int
    email: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    tenant_id: str
    is_active: bool
    mfa_enabled: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_user(cls, user: User) -> "UserInfo":
        return cls(
            id=user.id,
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            tenant_id=user.tenant_id,
            is_active=user.is_active,
            mfa_enabled=user.mfa_enabled,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class AuthResponse(BaseModel):
    """Session issued: login, register and MFA verification"""

    user: UserInfo
    access_token: str
    refresh_token: str


class MFAChallengeResponse(BaseModel):
    """Login accepted primary credentials, second factor pending"""

    requires_mfa: Literal[True] = True
    temp_token: str
    message: str = "MFA verification required"


class RefreshTokenResponse(BaseModel):
    """Response for refresh token use case"""

    access_token: str
    refresh_token: str


class LogoutResponse(BaseModel):
    """Response for logout use cases"""

    ok: bool = True
    message: str = "Logged out successfully"


class ForgotPasswordResponse(BaseModel):
    """Identical for existing and unknown accounts"""

    ok: bool = True
    message: str = "If an account exists, a password reset email has been sent"
