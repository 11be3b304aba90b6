from datetime import timedelta

import pytest

from tenant_auth.app.services.attempt_ledger import AttemptLedger
from tenant_auth.domain.base import utc_now
from tenant_auth.domain.entities import AuthAttempt


async def _fail(ledger, times, email="alice@acme.test", tenant_id="acme-corp"):
    for _ in range(times):
        await ledger.record(email, tenant_id, False)


@pytest.mark.asyncio
async def test_locks_at_five_failures(make_uow):
    async with make_uow() as uow:
        ledger = AttemptLedger(uow)

        await _fail(ledger, 4)
        assert await ledger.is_locked("alice@acme.test", "acme-corp") is False

        await _fail(ledger, 1)
        assert await ledger.is_locked("alice@acme.test", "acme-corp") is True


@pytest.mark.asyncio
async def test_success_does_not_reset_failures(make_uow):
    async with make_uow() as uow:
        ledger = AttemptLedger(uow)

        await _fail(ledger, 4)
        await ledger.record("alice@acme.test", "acme-corp", True)
        await _fail(ledger, 1)

        assert await ledger.is_locked("alice@acme.test", "acme-corp") is True


@pytest.mark.asyncio
async def test_lockout_is_scoped_to_email_and_tenant(make_uow):
    async with make_uow() as uow:
        ledger = AttemptLedger(uow)
        await _fail(ledger, 5)

        assert await ledger.is_locked("alice@acme.test", "demo-tenant") is False
        assert await ledger.is_locked("bob@acme.test", "acme-corp") is False


@pytest.mark.asyncio
async def test_failures_leave_the_window(store, make_uow):
    """A failure at t stops counting at t + 15m + epsilon"""
    stale = utc_now() - timedelta(minutes=15, seconds=1)
    for _ in range(5):
        store.auth_attempts.append(
            AuthAttempt(
                email="alice@acme.test",
                tenant_id="acme-corp",
                success=False,
                created_at=stale,
            )
        )

    async with make_uow() as uow:
        ledger = AttemptLedger(uow)
        assert await ledger.is_locked("alice@acme.test", "acme-corp") is False

        # One fresh failure inside the window is not enough on its own
        await _fail(ledger, 1)
        assert await ledger.is_locked("alice@acme.test", "acme-corp") is False


@pytest.mark.asyncio
async def test_failures_inside_window_still_count(store, make_uow):
    recent = utc_now() - timedelta(minutes=14, seconds=50)
    for _ in range(5):
        store.auth_attempts.append(
            AuthAttempt(
                email="alice@acme.test",
                tenant_id="acme-corp",
                success=False,
                created_at=recent,
            )
        )

    async with make_uow() as uow:
        assert await AttemptLedger(uow).is_locked("alice@acme.test", "acme-corp") is True


@pytest.mark.asyncio
async def test_record_appends_exactly_one_row(store, make_uow):
    async with make_uow() as uow:
        attempt = await AttemptLedger(uow).record(
            "alice@acme.test", "acme-corp", False, "10.0.0.1", "pytest"
        )

    assert len(store.auth_attempts) == 1
    assert attempt.ip_address == "10.0.0.1"
    assert attempt.user_agent == "pytest"


@pytest.mark.asyncio
async def test_custom_thresholds(make_uow):
    async with make_uow() as uow:
        ledger = AttemptLedger(uow, max_failures=2, window_minutes=1)
        await _fail(ledger, 2)

        assert await ledger.is_locked("alice@acme.test", "acme-corp") is True
