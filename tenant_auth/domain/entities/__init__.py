"""
Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

from .enums import LoginState

from .tenant import Tenant, TenantConfig
from .user import User
from .refresh_token import RefreshToken
from .auth_attempt import AuthAttempt

__all__ = [
    # Enums
    "LoginState",
    # Entities
    "Tenant",
    "TenantConfig",
    "User",
    "RefreshToken",
    "AuthAttempt",
]
