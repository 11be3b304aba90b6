"""
Logout Use Cases

Refresh token revocation. Idempotent: always reports success.
"""

from typing import Optional

from tenant_auth.app.services.token_issuer import TokenIssuer
from tenant_auth.app.services.unit_of_work import UnitOfWork
from tenant_auth.result import Result, Return
from .dtos import LogoutResponse


class LogoutUseCase:
    """Delete one refresh token if it exists"""

    def __init__(self, uow: UnitOfWork, token_issuer: TokenIssuer = None):
        self.uow = uow
        self.token_issuer = token_issuer or TokenIssuer(uow)

    async def execute(self, refresh_token: Optional[str]) -> Result[LogoutResponse]:
        async with self.uow:
            if refresh_token:
                await self.token_issuer.revoke(refresh_token)
                await self.uow.commit()
            return Return.ok(LogoutResponse())


class LogoutAllUseCase:
    """Delete every refresh token of a user (sign out everywhere)"""

    def __init__(self, uow: UnitOfWork, token_issuer: TokenIssuer = None):
        self.uow = uow
        self.token_issuer = token_issuer or TokenIssuer(uow)

    async def execute(self, user_id: int) -> Result[LogoutResponse]:
        async with self.uow:
            await self.token_issuer.revoke_all(user_id)
            await self.uow.commit()
            return Return.ok(LogoutResponse(message="Logged out from all sessions"))
