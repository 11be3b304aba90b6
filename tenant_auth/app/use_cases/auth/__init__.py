"""
Authentication Use Cases

All session lifecycle operations.
"""

from .login_use_case import LoginUseCase
from .register_use_case import RegisterUseCase
from .verify_mfa_use_case import VerifyMFAUseCase
from .refresh_token_use_case import RefreshTokenUseCase
from .logout_use_case import LogoutAllUseCase, LogoutUseCase
from .forgot_password_use_case import ForgotPasswordUseCase
from .current_user_use_case import GetCurrentUserUseCase, UpdateProfileUseCase
from .dtos import (
    AuthResponse,
    ForgotPasswordResponse,
    LogoutResponse,
    MFAChallengeResponse,
    RefreshTokenResponse,
    RegisterCommand,
    UserInfo,
)

__all__ = [
    # Use Cases
    "LoginUseCase",
    "RegisterUseCase",
    "VerifyMFAUseCase",
    "RefreshTokenUseCase",
    "LogoutUseCase",
    "LogoutAllUseCase",
    "ForgotPasswordUseCase",
    "GetCurrentUserUseCase",
    "UpdateProfileUseCase",
    # DTOs - Commands
    "RegisterCommand",
    # DTOs - Responses
    "AuthResponse",
    "MFAChallengeResponse",
    "RefreshTokenResponse",
    "LogoutResponse",
    "ForgotPasswordResponse",
    # DTOs - Nested Models
    "UserInfo",
]
