from datetime import timedelta
from typing import List

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from tenant_auth.app.repositories.auth_attempt_repository import IAuthAttemptRepository
from tenant_auth.domain.base import utc_now
from tenant_auth.domain.entities import AuthAttempt


class AuthAttemptRepository(IAuthAttemptRepository):
    """AuthAttempt repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, attempt: AuthAttempt) -> AuthAttempt:
        """Append an attempt (immutable)"""
        self.session.add(attempt)
        await self.session.flush()
        await self.session.refresh(attempt)
        return attempt

    async def get_recent_failed(
        self, email: str, tenant_id: str, minutes: int
    ) -> List[AuthAttempt]:
        """Failed attempts newer than now - minutes (idx_auth_attempt_lookup)"""
        cutoff = utc_now() - timedelta(minutes=minutes)
        stmt = select(AuthAttempt).where(
            AuthAttempt.email == email,
            AuthAttempt.tenant_id == tenant_id,
            AuthAttempt.success == False,  # noqa: E712
            AuthAttempt.created_at > cutoff,
        )
        result = await self.session.exec(stmt)
        return list(result.all())
