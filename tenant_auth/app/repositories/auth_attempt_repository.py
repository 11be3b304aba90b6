from abc import ABC, abstractmethod
from typing import List

from tenant_auth.domain.entities import AuthAttempt


class IAuthAttemptRepository(ABC):
    """AuthAttempt repository interface - application layer"""

    @abstractmethod
    async def create(self, attempt: AuthAttempt) -> AuthAttempt:
        """Append an attempt (immutable)"""
        pass

    @abstractmethod
    async def get_recent_failed(
        self, email: str, tenant_id: str, minutes: int
    ) -> List[AuthAttempt]:
        """Failed attempts for (email, tenant_id) newer than now - minutes"""
        pass
