"""
Register Use Case

Creates a tenant-scoped user and signs them in.
"""

import logging

from tenant_auth.app.repositories.user_repository import DuplicateUserError
from tenant_auth.app.services.attempt_ledger import AttemptLedger
from tenant_auth.app.services.password_hasher import BcryptPasswordHasher, PasswordHasher
from tenant_auth.app.services.token_issuer import TokenIssuer
from tenant_auth.app.services.unit_of_work import UnitOfWork
from tenant_auth.domain.entities import User
from tenant_auth.result import Error, Result, Return
from .dtos import AuthResponse, RegisterCommand, UserInfo

logger = logging.getLogger(__name__)

USER_ALREADY_EXISTS = Error("USER_ALREADY_EXISTS", "User already exists")


class RegisterUseCase:
    """
    Register Use Case

    Command/Response Pattern:
    - Input: RegisterCommand (validated business intent)
    - Output: Result[AuthResponse] (user + session tokens)

    Business Logic:
    1. Tenant must exist
    2. (email, tenant_id) must be free; a concurrent registration that wins
       the unique constraint makes this one fail the same way
    3. Hash password with bcrypt
    4. Create user with MFA disabled
    5. Issue access + refresh tokens, record a successful attempt
    6. Commit transaction atomically
    """

    def __init__(
        self,
        uow: UnitOfWork,
        password_hasher: PasswordHasher = None,
        token_issuer: TokenIssuer = None,
        attempt_ledger: AttemptLedger = None,
    ):
        self.uow = uow
        self.password_hasher = password_hasher or BcryptPasswordHasher()
        self.token_issuer = token_issuer or TokenIssuer(uow)
        self.attempt_ledger = attempt_ledger or AttemptLedger(uow)

    async def execute(self, command: RegisterCommand) -> Result[AuthResponse]:
        async with self.uow:
            tenant = await self.uow.tenants.get_by_id(command.tenant_id)
            if tenant is None:
                return Return.err(Error("TENANT_NOT_FOUND", "Invalid tenant"))

            existing_user = await self.uow.users.get_by_email(
                command.email, command.tenant_id
            )
            if existing_user:
                return Return.err(USER_ALREADY_EXISTS)

            user = User(
                email=command.email,
                password_hash=self.password_hasher.hash(command.password),
                first_name=command.first_name,
                last_name=command.last_name,
                tenant_id=command.tenant_id,
                is_active=True,
                mfa_enabled=False,
            )
            try:
                user = await self.uow.users.create(user)
            except DuplicateUserError:
                logger.info(f"Concurrent registration lost for tenant {command.tenant_id}")
                return Return.err(USER_ALREADY_EXISTS)

            tokens = await self.token_issuer.issue(user.id)
            await self.attempt_ledger.record(command.email, command.tenant_id, True)

            await self.uow.commit()

            return Return.ok(
                AuthResponse(
                    user=UserInfo.from_user(user),
                    access_token=tokens.access_token,
                    refresh_token=tokens.refresh_token,
                )
            )
