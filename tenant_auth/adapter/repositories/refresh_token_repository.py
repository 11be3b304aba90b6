from datetime import datetime
from typing import Optional

from sqlalchemy import delete
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from tenant_auth.app.repositories.refresh_token_repository import IRefreshTokenRepository
from tenant_auth.domain.entities import RefreshToken


class RefreshTokenRepository(IRefreshTokenRepository):
    """RefreshToken repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(
        self, user_id: int, token: str, expires_at: datetime
    ) -> RefreshToken:
        """Persist a refresh token"""
        refresh_token = RefreshToken(user_id=user_id, token=token, expires_at=expires_at)
        self.session.add(refresh_token)
        await self.session.flush()
        await self.session.refresh(refresh_token)
        return refresh_token

    async def get_by_token(self, token: str) -> Optional[RefreshToken]:
        """Get the stored record for a token value"""
        stmt = select(RefreshToken).where(RefreshToken.token == token)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def delete(self, token: str) -> bool:
        """
        Delete a token record.

        The row count of the DELETE decides the winner between concurrent
        callers: the database serializes the two deletes and the second one
        matches no row.
        """
        stmt = delete(RefreshToken).where(RefreshToken.token == token)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    async def delete_by_user_id(self, user_id: int) -> int:
        """Delete every token of a user"""
        stmt = delete(RefreshToken).where(RefreshToken.user_id == user_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount
