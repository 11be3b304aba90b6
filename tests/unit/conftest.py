from unittest.mock import AsyncMock, MagicMock

import pytest

from tenant_auth.adapter.repositories.in_memory import InMemoryStore
from tenant_auth.adapter.services.in_memory_unit_of_work import InMemoryUnitOfWork
from tenant_auth.app.services.password_hasher import BcryptPasswordHasher
from tenant_auth.domain.entities import Tenant, User


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()
    return uow


@pytest.fixture
def hasher():
    """Minimum bcrypt cost keeps the suite fast"""
    return BcryptPasswordHasher(rounds=4)


@pytest.fixture
def store():
    store = InMemoryStore()
    store.tenants["acme-corp"] = Tenant(
        id="acme-corp", name="ACME Corp", config={"mfa_required": False}
    )
    store.tenants["demo-tenant"] = Tenant(
        id="demo-tenant", name="Demo Tenant", config={"mfa_required": True}
    )
    return store


@pytest.fixture
def make_uow(store):
    """Fresh UnitOfWork per call, all sharing one store (one per request)"""
    return lambda: InMemoryUnitOfWork(store)


@pytest.fixture
def add_user(store, hasher):
    def _add(
        email="alice@acme.test",
        password="Passw0rd1",
        tenant_id="acme-corp",
        **fields,
    ) -> User:
        user = User(
            email=email,
            password_hash=hasher.hash(password),
            tenant_id=tenant_id,
            **fields,
        )
        user.id = store.next_user_id()
        store.users[user.id] = user
        return user

    return _add
