from tenant_auth.adapter.repositories.in_memory import (
    InMemoryAuthAttemptRepository,
    InMemoryRefreshTokenRepository,
    InMemoryStore,
    InMemoryTenantRepository,
    InMemoryUserRepository,
)
from tenant_auth.app.services.unit_of_work import UnitOfWork


class InMemoryUnitOfWork(UnitOfWork):
    """UnitOfWork over an InMemoryStore. Writes are visible immediately."""

    def __init__(self, store: InMemoryStore = None):
        self.store = store or InMemoryStore()
        self.committed = False

    async def __aenter__(self):
        self.users = InMemoryUserRepository(self.store)
        self.tenants = InMemoryTenantRepository(self.store)
        self.refresh_tokens = InMemoryRefreshTokenRepository(self.store)
        self.auth_attempts = InMemoryAuthAttemptRepository(self.store)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        self.committed = True

    async def rollback(self):
        pass
