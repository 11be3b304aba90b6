from abc import ABC, abstractmethod
from typing import Optional

from tenant_auth.domain.entities import User


class DuplicateUserError(Exception):
    """Raised by create() when (email, tenant_id) is already taken"""


class IUserRepository(ABC):
    """User repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, user_id: int) -> Optional[User]:
        """Get user by ID"""
        pass

    @abstractmethod
    async def get_by_email(self, email: str, tenant_id: str) -> Optional[User]:
        """Get user by email address within a tenant"""
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        """Create a new user. Raises DuplicateUserError on (email, tenant_id) clash."""
        pass

    @abstractmethod
    async def update(self, user_id: int, **fields) -> Optional[User]:
        """Apply field changes to a user. Returns None if the user does not exist."""
        pass
