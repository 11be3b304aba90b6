import re
from typing import Optional, Union

from fastapi import APIRouter, BackgroundTasks, Depends, Request, status
from pydantic import BaseModel, EmailStr, Field, ValidationInfo, field_validator

from tenant_auth.api.error import ClientError, ServerError
from tenant_auth.app.services.unit_of_work import UnitOfWork
from tenant_auth.app.use_cases.auth import (
    AuthResponse,
    ForgotPasswordResponse,
    ForgotPasswordUseCase,
    GetCurrentUserUseCase,
    LoginUseCase,
    LogoutAllUseCase,
    LogoutResponse,
    LogoutUseCase,
    MFAChallengeResponse,
    RefreshTokenResponse,
    RefreshTokenUseCase,
    RegisterCommand,
    RegisterUseCase,
    UpdateProfileUseCase,
    UserInfo,
    VerifyMFAUseCase,
)
from tenant_auth.depends import get_current_user_id, get_unit_of_work

router = APIRouter(prefix="/auth", tags=["Authentication"])

PASSWORD_COMPLEXITY = re.compile(r"^(?=.*[a-z])(?=.*[A-Z])(?=.*\d)")

# bcrypt only looks at the first 72 bytes
MAX_PASSWORD_BYTES = 72


class LoginRequest(BaseModel):
    """
    Login HTTP request payload

    Validates incoming login request.
    """

    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., min_length=6, description="User password")
    tenant_id: str = Field(..., min_length=1, description="Tenant the user belongs to")
    remember_me: Optional[bool] = Field(default=None, description="Client-side hint")


@router.post(
    "/login",
    status_code=status.HTTP_200_OK,
    response_model=Union[AuthResponse, MFAChallengeResponse],
)
async def login(
    request: LoginRequest,
    http_request: Request,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    User Login

    Authenticates a user within a tenant. Users with MFA enabled receive
    a pending-MFA token instead of session tokens.

    Raises:
        - 401 Unauthorized: Invalid credentials (unknown, inactive or wrong password)
        - 429 Too Many Requests: Too many failed attempts in the lockout window
        - 500 Internal Server Error: Server error
    """
    use_case = LoginUseCase(uow)
    result = await use_case.execute(
        request.email,
        request.password,
        request.tenant_id,
        ip_address=http_request.client.host if http_request.client else None,
        user_agent=http_request.headers.get("user-agent"),
    )

    # Handle errors
    if result.is_err():
        error = result.error
        if error.code == "INVALID_CREDENTIALS":
            raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
        elif error.code == "RATE_LIMITED":
            raise ClientError(error, status_code=status.HTTP_429_TOO_MANY_REQUESTS)
        raise ServerError(error)

    return result.value


class RegisterRequest(BaseModel):
    """
    Register HTTP request payload

    Validates incoming HTTP request before converting to RegisterCommand.
    """

    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., min_length=8, description="User password (min 8 chars)")
    confirm_password: str = Field(..., description="Must equal password")
    first_name: str = Field(..., min_length=1, max_length=255)
    last_name: str = Field(..., min_length=1, max_length=255)
    tenant_id: str = Field(..., min_length=1, description="Tenant to register with")

    @field_validator("password")
    @classmethod
    def password_complexity(cls, value: str) -> str:
        if not PASSWORD_COMPLEXITY.match(value):
            raise ValueError("Password must contain uppercase, lowercase, and number")
        if len(value.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
        return value

    @field_validator("confirm_password")
    @classmethod
    def passwords_match(cls, value: str, info: ValidationInfo) -> str:
        if "password" in info.data and value != info.data["password"]:
            raise ValueError("Passwords don't match")
        return value


@router.post(
    "/register", status_code=status.HTTP_201_CREATED, response_model=AuthResponse
)
async def register(request: RegisterRequest, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    User Registration

    Creates a user inside an existing tenant and signs them in.

    Raises:
        - 400 Bad Request: Unknown tenant
        - 409 Conflict: Email already registered in this tenant
        - 422 Unprocessable Entity: Invalid input
        - 500 Internal Server Error: Server error
    """
    # Map HTTP request to Command (validated business intent)
    command = RegisterCommand(
        email=request.email,
        password=request.password,
        first_name=request.first_name,
        last_name=request.last_name,
        tenant_id=request.tenant_id,
    )

    use_case = RegisterUseCase(uow)
    result = await use_case.execute(command)

    if result.is_err():
        error = result.error
        if error.code == "TENANT_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        elif error.code == "USER_ALREADY_EXISTS":
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        raise ServerError(error)

    return result.value


class MFAVerifyRequest(BaseModel):
    """MFA verification HTTP request payload"""

    code: str = Field(..., description="Six digit code")
    user_id: int = Field(..., description="User completing the challenge")
    temp_token: Optional[str] = Field(default=None, description="Pending-MFA token")


@router.post("/mfa/verify", status_code=status.HTTP_200_OK, response_model=AuthResponse)
async def verify_mfa(request: MFAVerifyRequest, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    MFA Verification

    Completes a login that answered with requires_mfa.

    Raises:
        - 400 Bad Request: MFA not enabled, invalid code or invalid pending token
        - 500 Internal Server Error: Server error
    """
    use_case = VerifyMFAUseCase(uow)
    result = await use_case.execute(request.code, request.user_id, request.temp_token)

    if result.is_err():
        error = result.error
        if error.code == "MFA_INVALID":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    return result.value


class RefreshRequest(BaseModel):
    """
    Refresh token HTTP request payload

    Validates incoming refresh request.
    """

    refresh_token: str = Field(..., description="Refresh token")


@router.post("/refresh", status_code=status.HTTP_200_OK, response_model=RefreshTokenResponse)
async def refresh(request: RefreshRequest, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Refresh Token

    Exchanges a refresh token for a new pair. The presented token stops
    working immediately.

    Raises:
        - 401 Unauthorized: Invalid, expired or already used refresh token
        - 500 Internal Server Error: Server error
    """
    use_case = RefreshTokenUseCase(uow)
    result = await use_case.execute(request.refresh_token)

    if result.is_err():
        error = result.error
        if error.code == "INVALID_OR_EXPIRED_TOKEN":
            raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
        raise ServerError(error)

    return result.value


class LogoutRequest(BaseModel):
    """Logout HTTP request payload"""

    refresh_token: Optional[str] = Field(default=None, description="Refresh token to revoke")


@router.post("/logout", status_code=status.HTTP_200_OK, response_model=LogoutResponse)
async def logout(
    request: Optional[LogoutRequest] = None,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Logout

    Revokes the given refresh token. Always succeeds, whether or not the
    token existed.
    """
    use_case = LogoutUseCase(uow)
    result = await use_case.execute(request.refresh_token if request else None)

    if result.is_err():
        raise ServerError(result.error)

    return result.value


@router.post("/logout-all", status_code=status.HTTP_200_OK, response_model=LogoutResponse)
async def logout_all(
    user_id: int = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Logout Everywhere

    Revokes every refresh token of the authenticated user.

    Raises:
        - 401 Unauthorized: Missing, invalid or expired access token
    """
    use_case = LogoutAllUseCase(uow)
    result = await use_case.execute(user_id)

    if result.is_err():
        raise ServerError(result.error)

    return result.value


class ForgotPasswordRequest(BaseModel):
    """
    Forgot password HTTP request payload

    Validates incoming password reset request.
    """

    email: EmailStr = Field(..., description="User email address")
    tenant_id: str = Field(..., min_length=1, description="Tenant the user belongs to")


@router.post(
    "/forgot-password", status_code=status.HTTP_200_OK, response_model=ForgotPasswordResponse
)
async def forgot_password(
    request: ForgotPasswordRequest,
    background_tasks: BackgroundTasks,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Forgot Password

    Security:
        - No email enumeration (same response for existing and unknown accounts)
        - The reset notification is sent after the response

    Returns:
        - 200 OK: Always returns success
    """
    use_case = ForgotPasswordUseCase(uow, schedule=background_tasks.add_task)
    result = await use_case.execute(request.email, request.tenant_id)

    if result.is_err():
        raise ServerError(result.error)

    return result.value


@router.get("/user", status_code=status.HTTP_200_OK, response_model=UserInfo)
async def get_current_user(
    user_id: int = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Current User

    Raises:
        - 401 Unauthorized: Invalid token, or the user is gone or inactive
    """
    use_case = GetCurrentUserUseCase(uow)
    result = await use_case.execute(user_id)

    if result.is_err():
        error = result.error
        if error.code == "INVALID_OR_EXPIRED_TOKEN":
            raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
        raise ServerError(error)

    return result.value


class UpdateProfileRequest(BaseModel):
    """Profile update HTTP request payload"""

    first_name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    last_name: Optional[str] = Field(default=None, min_length=1, max_length=255)


@router.patch("/user", status_code=status.HTTP_200_OK, response_model=UserInfo)
async def update_current_user(
    request: UpdateProfileRequest,
    user_id: int = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update Profile

    Raises:
        - 401 Unauthorized: Invalid token, or the user is gone or inactive
    """
    use_case = UpdateProfileUseCase(uow)
    result = await use_case.execute(user_id, request.first_name, request.last_name)

    if result.is_err():
        error = result.error
        if error.code == "INVALID_OR_EXPIRED_TOKEN":
            raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
        raise ServerError(error)

    return result.value
