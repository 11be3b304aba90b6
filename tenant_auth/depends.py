from typing import Optional

from fastapi import Depends, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from tenant_auth.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from tenant_auth.api.error import ClientError
from tenant_auth.app.services.token_issuer import TokenIssuer
from tenant_auth.config import ApplicationConfig
from tenant_auth.result import Error

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

security = HTTPBearer(auto_error=False)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


async def get_current_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> int:
    """
    Dependency to extract and verify the access token from the Authorization header.

    Returns:
        The user id carried by the token

    Raises:
        ClientError: 401 if the token is missing, invalid or expired
    """
    user_id = None
    if credentials is not None:
        user_id = TokenIssuer().verify_access(credentials.credentials)

    if user_id is None:
        raise ClientError(
            Error("INVALID_OR_EXPIRED_TOKEN", "Invalid or expired token"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    return user_id
