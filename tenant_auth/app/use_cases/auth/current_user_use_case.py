"""
Current User Use Cases

Read and update the profile of the authenticated user.
"""

from typing import Optional

from tenant_auth.app.services.unit_of_work import UnitOfWork
from tenant_auth.result import Error, Result, Return
from .dtos import UserInfo

USER_UNAVAILABLE = Error("INVALID_OR_EXPIRED_TOKEN", "Invalid or expired token")


class GetCurrentUserUseCase:
    """Resolve the user behind a verified access token"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: int) -> Result[UserInfo]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None or not user.is_active:
                return Return.err(USER_UNAVAILABLE)
            return Return.ok(UserInfo.from_user(user))


class UpdateProfileUseCase:
    """Change first/last name of the authenticated user"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        user_id: int,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
    ) -> Result[UserInfo]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None or not user.is_active:
                return Return.err(USER_UNAVAILABLE)

            fields = {}
            if first_name is not None:
                fields["first_name"] = first_name
            if last_name is not None:
                fields["last_name"] = last_name

            user = await self.uow.users.update(user_id, **fields)
            await self.uow.commit()
            return Return.ok(UserInfo.from_user(user))
