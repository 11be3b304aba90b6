"""
Verify MFA Use Case

Completes the second phase of an MFA login.
"""

import logging
from typing import Optional

from tenant_auth.app.services.mfa import MFAChallengeCoordinator
from tenant_auth.app.services.token_issuer import TokenIssuer
from tenant_auth.app.services.unit_of_work import UnitOfWork
from tenant_auth.config import ApplicationConfig
from tenant_auth.result import Error, Result, Return
from .dtos import AuthResponse, UserInfo

logger = logging.getLogger(__name__)


class VerifyMFAUseCase:
    """
    Use case for MFA verification (mfa_pending -> issued).

    Business Rules:
    - User must exist, be active and have MFA enabled with a secret
    - A pending-MFA token, when presented, must be valid and name the same user
    - With require_temp_token (MFA_REQUIRE_PENDING_TOKEN) the pending-MFA token
      is mandatory; otherwise a user id and a code are enough
    - Code must be exactly six digits and pass the configured verifier
    - Success issues tokens exactly as a direct login does
    """

    def __init__(
        self,
        uow: UnitOfWork,
        token_issuer: TokenIssuer = None,
        mfa: MFAChallengeCoordinator = None,
        require_temp_token: bool = None,
    ):
        self.uow = uow
        self.token_issuer = token_issuer or TokenIssuer(uow)
        self.mfa = mfa or MFAChallengeCoordinator()
        if require_temp_token is None:
            require_temp_token = ApplicationConfig.MFA_REQUIRE_PENDING_TOKEN
        self.require_temp_token = require_temp_token

    async def execute(
        self, code: str, user_id: int, temp_token: Optional[str] = None
    ) -> Result[AuthResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None or not user.is_active or not self.mfa.requires_mfa(user):
                return Return.err(
                    Error("MFA_INVALID", "MFA not enabled for this user")
                )

            if temp_token is not None or self.require_temp_token:
                if (
                    temp_token is None
                    or self.token_issuer.verify_mfa_token(temp_token) != user.id
                ):
                    return Return.err(
                        Error("MFA_INVALID", "MFA session is invalid or has expired")
                    )

            if not self.mfa.check_code(user, code):
                logger.warning(f"Rejected MFA code for user {user.id}")
                return Return.err(Error("MFA_INVALID", "Invalid MFA code"))

            tokens = await self.token_issuer.issue(user.id)
            await self.uow.commit()

            return Return.ok(
                AuthResponse(
                    user=UserInfo.from_user(user),
                    access_token=tokens.access_token,
                    refresh_token=tokens.refresh_token,
                )
            )
