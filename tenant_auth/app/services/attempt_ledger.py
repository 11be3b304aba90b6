"""
Attempt Ledger

Records login attempts and answers the sliding-window lockout question.
"""

import logging
from typing import Optional

from tenant_auth.app.services.unit_of_work import UnitOfWork
from tenant_auth.config import ApplicationConfig
from tenant_auth.domain.entities import AuthAttempt

logger = logging.getLogger(__name__)


class AttemptLedger:
    """
    Per (email, tenant_id) login attempt log.

    Business Rules:
    - Locked when max_failures or more failures fall inside the trailing window
    - Window slides with the current time, it is re-queried on every check
    - Successes are recorded but never reset earlier failures
    - Each call to record() appends exactly one row
    """

    def __init__(
        self,
        uow: UnitOfWork,
        max_failures: int = None,
        window_minutes: int = None,
    ):
        self.uow = uow
        self.max_failures = max_failures or ApplicationConfig.LOGIN_MAX_FAILED_ATTEMPTS
        self.window_minutes = (
            window_minutes or ApplicationConfig.LOGIN_LOCKOUT_WINDOW_MINUTES
        )

    async def record(
        self,
        email: str,
        tenant_id: str,
        success: bool,
        ip_address: Optional[str] = None,
        user_agent: Optional[str] = None,
    ) -> AuthAttempt:
        attempt = AuthAttempt(
            email=email,
            tenant_id=tenant_id,
            success=success,
            ip_address=ip_address,
            user_agent=user_agent,
        )
        return await self.uow.auth_attempts.create(attempt)

    async def is_locked(self, email: str, tenant_id: str) -> bool:
        failures = await self.uow.auth_attempts.get_recent_failed(
            email, tenant_id, self.window_minutes
        )
        locked = len(failures) >= self.max_failures
        if locked:
            logger.warning(
                f"Login locked for tenant={tenant_id}: "
                f"{len(failures)} failures in {self.window_minutes}m"
            )
        return locked
