"""
Login Use Case

Verifies tenant-scoped credentials behind the attempt ledger and either
issues a session or opens an MFA challenge.
"""

import logging
from typing import Optional, Union

from tenant_auth.app.services.attempt_ledger import AttemptLedger
from tenant_auth.app.services.mfa import MFAChallengeCoordinator
from tenant_auth.app.services.password_hasher import BcryptPasswordHasher, PasswordHasher
from tenant_auth.app.services.token_issuer import TokenIssuer
from tenant_auth.app.services.unit_of_work import UnitOfWork
from tenant_auth.domain.entities import LoginState
from tenant_auth.result import Error, Result, Return
from .dtos import AuthResponse, MFAChallengeResponse, UserInfo

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = Error("INVALID_CREDENTIALS", "Invalid email or password")
RATE_LIMITED = Error(
    "RATE_LIMITED", "Too many failed attempts. Please try again later."
)


class LoginUseCase:
    """
    Use case for user login.

    Business Rules:
    - Lockout is checked before credentials are touched; a locked-out
      request is itself recorded as a failed attempt
    - Unknown, inactive and wrong-password logins share one error and one
      hashing cost (no existence leak)
    - Exactly one attempt is recorded per call, and committed even when
      the login fails
    - Users with MFA enabled and a secret get a pending-MFA token, never
      session tokens
    """

    def __init__(
        self,
        uow: UnitOfWork,
        password_hasher: PasswordHasher = None,
        token_issuer: TokenIssuer = None,
        attempt_ledger: AttemptLedger = None,
        mfa: MFAChallengeCoordinator = None,
    ):
        self.uow = uow
        self.password_hasher = password_hasher or BcryptPasswordHasher()
        self.token_issuer = token_issuer or TokenIssuer(uow)
        self.attempt_ledger = attempt_ledger or AttemptLedger(uow)
        self.mfa = mfa or MFAChallengeCoordinator()

    async def execute(
        self,
        email: str,
        password: str,
        tenant_id: str,
        ip_address: Optional[str] = None,
        user_agent: Optional[str] = None,
    ) -> Result[Union[AuthResponse, MFAChallengeResponse]]:
        """
        Execute login use case.

        Args:
            email: User email
            password: Plain text password
            tenant_id: Tenant the user belongs to
            ip_address: Client address, stored on the attempt record
            user_agent: Client user agent, stored on the attempt record

        Returns:
            Result with AuthResponse or MFAChallengeResponse, or Error
        """
        async with self.uow:

            async def record(success: bool) -> None:
                await self.attempt_ledger.record(
                    email, tenant_id, success, ip_address, user_agent
                )
                await self.uow.commit()

            if await self.attempt_ledger.is_locked(email, tenant_id):
                await record(False)
                return Return.err(RATE_LIMITED)

            user = await self.uow.users.get_by_email(email, tenant_id)

            if user is None or not user.is_active:
                # Same hashing cost as a real verification
                self.password_hasher.dummy_verify(password)
                await record(False)
                return Return.err(INVALID_CREDENTIALS)

            if not self.password_hasher.verify(password, user.password_hash):
                await record(False)
                return Return.err(INVALID_CREDENTIALS)

            if self.mfa.state_after_primary(user) == LoginState.mfa_pending:
                await record(True)
                logger.info(f"MFA challenge opened for user {user.id}")
                return Return.ok(
                    MFAChallengeResponse(
                        temp_token=self.token_issuer.issue_mfa_token(user.id)
                    )
                )

            tokens = await self.token_issuer.issue(user.id)
            await record(True)

            return Return.ok(
                AuthResponse(
                    user=UserInfo.from_user(user),
                    access_token=tokens.access_token,
                    refresh_token=tokens.refresh_token,
                )
            )
