from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from tenant_auth.app.repositories.user_repository import DuplicateUserError, IUserRepository
from tenant_auth.domain.base import utc_now
from tenant_auth.domain.entities import User


class UserRepository(IUserRepository):
    """User repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, user_id: int) -> Optional[User]:
        """Get user by ID"""
        stmt = select(User).where(User.id == user_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_email(self, email: str, tenant_id: str) -> Optional[User]:
        """Get user by email address within a tenant (uq_user_email_tenant index)"""
        stmt = select(User).where(User.email == email, User.tenant_id == tenant_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def create(self, user: User) -> User:
        """Create a new user"""
        self.session.add(user)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            await self.session.rollback()
            raise DuplicateUserError(user.email) from exc
        await self.session.refresh(user)
        return user

    async def update(self, user_id: int, **fields) -> Optional[User]:
        """Update existing user"""
        user = await self.get_by_id(user_id)
        if user is None:
            return None
        for key, value in fields.items():
            setattr(user, key, value)
        user.updated_at = utc_now()
        self.session.add(user)
        await self.session.flush()
        await self.session.refresh(user)
        return user
