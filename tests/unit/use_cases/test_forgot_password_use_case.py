import pytest

from tenant_auth.app.services.password_reset_notifier import PasswordResetNotifier
from tenant_auth.app.use_cases.auth import ForgotPasswordUseCase


class RecordingNotifier(PasswordResetNotifier):
    def __init__(self, fail=False):
        self.sent = []
        self.fail = fail

    async def send_password_reset(self, user):
        self.sent.append(user.id)
        if self.fail:
            raise RuntimeError("smtp down")


@pytest.mark.asyncio
async def test_existing_user_is_notified(make_uow, add_user):
    user = add_user()
    notifier = RecordingNotifier()

    result = await ForgotPasswordUseCase(make_uow(), notifier).execute(
        "alice@acme.test", "acme-corp"
    )

    assert result.is_ok()
    assert notifier.sent == [user.id]


@pytest.mark.asyncio
async def test_same_response_for_unknown_account(make_uow, add_user):
    add_user()
    notifier = RecordingNotifier()

    known = await ForgotPasswordUseCase(make_uow(), notifier).execute(
        "alice@acme.test", "acme-corp"
    )
    unknown = await ForgotPasswordUseCase(make_uow(), notifier).execute(
        "nobody@acme.test", "acme-corp"
    )
    other_tenant = await ForgotPasswordUseCase(make_uow(), notifier).execute(
        "alice@acme.test", "demo-tenant"
    )

    assert known.value == unknown.value == other_tenant.value
    assert len(notifier.sent) == 1


@pytest.mark.asyncio
async def test_inactive_user_not_notified(make_uow, add_user):
    add_user(is_active=False)
    notifier = RecordingNotifier()

    result = await ForgotPasswordUseCase(make_uow(), notifier).execute(
        "alice@acme.test", "acme-corp"
    )

    assert result.is_ok()
    assert notifier.sent == []


@pytest.mark.asyncio
async def test_notifier_failure_does_not_change_response(make_uow, add_user):
    add_user()

    failing = await ForgotPasswordUseCase(make_uow(), RecordingNotifier(fail=True)).execute(
        "alice@acme.test", "acme-corp"
    )
    unknown = await ForgotPasswordUseCase(make_uow(), RecordingNotifier()).execute(
        "nobody@acme.test", "acme-corp"
    )

    assert failing.is_ok()
    assert failing.value == unknown.value


@pytest.mark.asyncio
async def test_scheduled_notification_runs_after_response(make_uow, add_user):
    user = add_user()
    notifier = RecordingNotifier()
    scheduled = []

    result = await ForgotPasswordUseCase(
        make_uow(), notifier, schedule=lambda func, *args: scheduled.append((func, args))
    ).execute("alice@acme.test", "acme-corp")

    assert result.is_ok()
    assert notifier.sent == []
    assert len(scheduled) == 1

    func, args = scheduled[0]
    await func(*args)

    assert notifier.sent == [user.id]


@pytest.mark.asyncio
async def test_nothing_scheduled_for_unknown_account(make_uow):
    scheduled = []

    result = await ForgotPasswordUseCase(
        make_uow(), RecordingNotifier(), schedule=lambda *args: scheduled.append(args)
    ).execute("nobody@acme.test", "acme-corp")

    assert result.is_ok()
    assert scheduled == []
