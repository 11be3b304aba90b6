"""
In-memory repositories

Dict-backed Credential Store used as a test double and for local demos.
Writes apply immediately (commit/rollback are no-ops). Every read yields to
the event loop once, the way real I/O would, so concurrent callers interleave.
"""

import asyncio
from datetime import datetime, timedelta
from typing import Dict, List, Optional

from tenant_auth.app.repositories.auth_attempt_repository import IAuthAttemptRepository
from tenant_auth.app.repositories.refresh_token_repository import IRefreshTokenRepository
from tenant_auth.app.repositories.tenant_repository import ITenantRepository
from tenant_auth.app.repositories.user_repository import DuplicateUserError, IUserRepository
from tenant_auth.domain.base import utc_now
from tenant_auth.domain.entities import AuthAttempt, RefreshToken, Tenant, User


class InMemoryStore:
    """Shared state behind the in-memory repositories"""

    def __init__(self):
        self.users: Dict[int, User] = {}
        self.tenants: Dict[str, Tenant] = {}
        self.refresh_tokens: Dict[str, RefreshToken] = {}
        self.auth_attempts: List[AuthAttempt] = []
        self._next_user_id = 1
        self._next_refresh_token_id = 1
        self._next_auth_attempt_id = 1

    def next_user_id(self) -> int:
        value = self._next_user_id
        self._next_user_id += 1
        return value

    def next_refresh_token_id(self) -> int:
        value = self._next_refresh_token_id
        self._next_refresh_token_id += 1
        return value

    def next_auth_attempt_id(self) -> int:
        value = self._next_auth_attempt_id
        self._next_auth_attempt_id += 1
        return value


class InMemoryUserRepository(IUserRepository):
    def __init__(self, store: InMemoryStore):
        self.store = store

    async def get_by_id(self, user_id: int) -> Optional[User]:
        await asyncio.sleep(0)
        return self.store.users.get(user_id)

    async def get_by_email(self, email: str, tenant_id: str) -> Optional[User]:
        await asyncio.sleep(0)
        for user in self.store.users.values():
            if user.email == email and user.tenant_id == tenant_id:
                return user
        return None

    async def create(self, user: User) -> User:
        # Check-and-insert with no await in between
        for existing in self.store.users.values():
            if existing.email == user.email and existing.tenant_id == user.tenant_id:
                raise DuplicateUserError(user.email)
        user.id = self.store.next_user_id()
        self.store.users[user.id] = user
        return user

    async def update(self, user_id: int, **fields) -> Optional[User]:
        user = self.store.users.get(user_id)
        if user is None:
            return None
        for key, value in fields.items():
            setattr(user, key, value)
        user.updated_at = utc_now()
        return user


class InMemoryTenantRepository(ITenantRepository):
    def __init__(self, store: InMemoryStore):
        self.store = store

    async def get_by_id(self, tenant_id: str) -> Optional[Tenant]:
        await asyncio.sleep(0)
        return self.store.tenants.get(tenant_id)

    async def create(self, tenant: Tenant) -> Tenant:
        self.store.tenants[tenant.id] = tenant
        return tenant


class InMemoryRefreshTokenRepository(IRefreshTokenRepository):
    def __init__(self, store: InMemoryStore):
        self.store = store

    async def create(
        self, user_id: int, token: str, expires_at: datetime
    ) -> RefreshToken:
        if token in self.store.refresh_tokens:
            raise ValueError("Refresh token already exists")
        refresh_token = RefreshToken(
            id=self.store.next_refresh_token_id(),
            user_id=user_id,
            token=token,
            expires_at=expires_at,
        )
        self.store.refresh_tokens[token] = refresh_token
        return refresh_token

    async def get_by_token(self, token: str) -> Optional[RefreshToken]:
        await asyncio.sleep(0)
        return self.store.refresh_tokens.get(token)

    async def delete(self, token: str) -> bool:
        # Single pop: the first caller removes the record, later ones get None
        return self.store.refresh_tokens.pop(token, None) is not None

    async def delete_by_user_id(self, user_id: int) -> int:
        tokens = [
            token
            for token, record in self.store.refresh_tokens.items()
            if record.user_id == user_id
        ]
        for token in tokens:
            del self.store.refresh_tokens[token]
        return len(tokens)


class InMemoryAuthAttemptRepository(IAuthAttemptRepository):
    def __init__(self, store: InMemoryStore):
        self.store = store

    async def create(self, attempt: AuthAttempt) -> AuthAttempt:
        attempt.id = self.store.next_auth_attempt_id()
        self.store.auth_attempts.append(attempt)
        return attempt

    async def get_recent_failed(
        self, email: str, tenant_id: str, minutes: int
    ) -> List[AuthAttempt]:
        await asyncio.sleep(0)
        cutoff = utc_now() - timedelta(minutes=minutes)
        return [
            attempt
            for attempt in self.store.auth_attempts
            if attempt.email == email
            and attempt.tenant_id == tenant_id
            and not attempt.success
            and attempt.created_at > cutoff
        ]
