from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from tenant_auth.domain.entities import RefreshToken


class IRefreshTokenRepository(ABC):
    """RefreshToken repository interface - application layer"""

    @abstractmethod
    async def create(
        self, user_id: int, token: str, expires_at: datetime
    ) -> RefreshToken:
        """Persist a refresh token"""
        pass

    @abstractmethod
    async def get_by_token(self, token: str) -> Optional[RefreshToken]:
        """Get the stored record for a token value"""
        pass

    @abstractmethod
    async def delete(self, token: str) -> bool:
        """
        Delete a token record.

        Returns True only for the caller whose delete removed the row, so
        concurrent deletes of the same token have exactly one winner.
        """
        pass

    @abstractmethod
    async def delete_by_user_id(self, user_id: int) -> int:
        """Delete every token of a user. Returns count of deleted tokens."""
        pass
