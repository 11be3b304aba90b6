"""
Refresh Token Use Case

Handles token refresh with refresh token rotation.
"""

from tenant_auth.app.services.token_issuer import TokenIssuer
from tenant_auth.app.services.unit_of_work import UnitOfWork
from tenant_auth.result import Result, Return
from .dtos import RefreshTokenResponse


class RefreshTokenUseCase:
    """
    Use case for refreshing access tokens.

    Business Rules:
    - Refresh token rotation: old token deleted, new token issued
    - Token must verify cryptographically AND have an unexpired stored record
    - Of two concurrent refreshes of one token, only one succeeds
    - A rejected token's stored record is deleted
    - Every failure collapses to INVALID_OR_EXPIRED_TOKEN
    """

    def __init__(self, uow: UnitOfWork, token_issuer: TokenIssuer = None):
        self.uow = uow
        self.token_issuer = token_issuer or TokenIssuer(uow)

    async def execute(self, refresh_token: str) -> Result[RefreshTokenResponse]:
        async with self.uow:
            result = await self.token_issuer.rotate_refresh(refresh_token)

            # Commit on failure too, keeping the cleanup delete
            await self.uow.commit()

            if result.is_err():
                return Return.err(result.error)

            return Return.ok(
                RefreshTokenResponse(
                    access_token=result.value.access_token,
                    refresh_token=result.value.refresh_token,
                )
            )
