"""
Forgot Password Use Case

Handles password reset requests without revealing account existence.
"""

import logging
from typing import Callable, Optional

from tenant_auth.app.services.password_reset_notifier import (
    LoggingPasswordResetNotifier,
    PasswordResetNotifier,
)
from tenant_auth.app.services.unit_of_work import UnitOfWork
from tenant_auth.domain.entities import User
from tenant_auth.result import Result, Return
from .dtos import ForgotPasswordResponse

logger = logging.getLogger(__name__)


class ForgotPasswordUseCase:
    """
    Use case for requesting a password reset.

    Business Rules:
    - No email enumeration: the same response whether or not the account exists
    - The notifier is only called for existing, active users
    - Notifier failures are logged and never change the response
    - With a scheduler the notification runs after the response is sent
    """

    def __init__(
        self,
        uow: UnitOfWork,
        notifier: PasswordResetNotifier = None,
        schedule: Optional[Callable] = None,
    ):
        self.uow = uow
        self.notifier = notifier or LoggingPasswordResetNotifier()
        self.schedule = schedule

    async def execute(self, email: str, tenant_id: str) -> Result[ForgotPasswordResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_email(email, tenant_id)
            if user is None or not user.is_active:
                return Return.ok(ForgotPasswordResponse())
            # Detached copy, the session is rolled back on exit
            recipient = User(**user.model_dump())

        if self.schedule is not None:
            self.schedule(self.notify, recipient)
        else:
            await self.notify(recipient)

        return Return.ok(ForgotPasswordResponse())

    async def notify(self, user: User) -> None:
        try:
            await self.notifier.send_password_reset(user)
        except Exception:
            # Best effort: delivery problems must not reveal the account
            logger.exception(f"Password reset notification failed for user {user.id}")
