from abc import ABC, abstractmethod

from tenant_auth.app.repositories.auth_attempt_repository import IAuthAttemptRepository
from tenant_auth.app.repositories.refresh_token_repository import IRefreshTokenRepository
from tenant_auth.app.repositories.tenant_repository import ITenantRepository
from tenant_auth.app.repositories.user_repository import IUserRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    users: IUserRepository
    tenants: ITenantRepository
    refresh_tokens: IRefreshTokenRepository
    auth_attempts: IAuthAttemptRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
