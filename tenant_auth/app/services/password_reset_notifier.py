"""
Password Reset Notifier

Outbound collaborator for password reset mail. Delivery lives outside this
service; the default implementation only logs the request.
"""

import logging
from abc import ABC, abstractmethod

from tenant_auth.domain.entities import User

logger = logging.getLogger(__name__)


class PasswordResetNotifier(ABC):
    @abstractmethod
    async def send_password_reset(self, user: User) -> None:
        pass


class LoggingPasswordResetNotifier(PasswordResetNotifier):
    async def send_password_reset(self, user: User) -> None:
        logger.info(
            f"Password reset requested for user {user.id} in tenant {user.tenant_id}"
        )
