"""
Token Issuer

Mints access/refresh token pairs and rotates refresh tokens.

Access tokens are stateless HS256 JWTs checked by signature and expiry only.
Refresh tokens are JWTs signed with a separate secret AND persisted; both
the signature and the stored record must agree for a refresh to succeed.
"""

import logging
import secrets
from datetime import UTC, datetime, timedelta
from typing import Optional

from jose import JWTError, jwt
from pydantic import BaseModel

from tenant_auth.app.services.unit_of_work import UnitOfWork
from tenant_auth.config import ApplicationConfig
from tenant_auth.domain.base import utc_now
from tenant_auth.result import Error, Result, Return

logger = logging.getLogger(__name__)

INVALID_OR_EXPIRED_TOKEN = Error(
    "INVALID_OR_EXPIRED_TOKEN", "Invalid or expired refresh token"
)


class TokenPair(BaseModel):
    """Access + refresh token pair"""

    access_token: str
    refresh_token: str


class TokenIssuer:
    """
    Issues, verifies and rotates session tokens.

    Business Rules:
    - Access token: claim user_id, 15 minute TTL, never checked against storage
    - Refresh token: claims user_id + random jti, 7 day TTL, persisted
    - Rotation deletes the presented record before creating the new one;
      only the caller whose delete removed the row may proceed
    - Refresh expiry is recomputed on every rotation
    - Pending-MFA tokens are signed with the access secret but are never
      accepted as access tokens
    """

    def __init__(
        self,
        uow: Optional[UnitOfWork] = None,
        secret: str = None,
        refresh_secret: str = None,
        access_ttl: timedelta = None,
        refresh_ttl: timedelta = None,
        mfa_ttl: timedelta = None,
    ):
        self.uow = uow
        self.secret = secret or ApplicationConfig.JWT_SECRET
        self.refresh_secret = refresh_secret or ApplicationConfig.JWT_REFRESH_SECRET
        self.algorithm = ApplicationConfig.JWT_ALGORITHM
        self.access_ttl = access_ttl or timedelta(
            minutes=ApplicationConfig.ACCESS_TOKEN_TTL_MINUTES
        )
        self.refresh_ttl = refresh_ttl or timedelta(
            days=ApplicationConfig.REFRESH_TOKEN_TTL_DAYS
        )
        self.mfa_ttl = mfa_ttl or timedelta(
            minutes=ApplicationConfig.MFA_TOKEN_TTL_MINUTES
        )

    def _encode(self, claims: dict, secret: str, ttl: timedelta) -> str:
        now = datetime.now(UTC)
        payload = {**claims, "exp": now + ttl, "iat": now}
        return jwt.encode(payload, secret, algorithm=self.algorithm)

    def _decode(self, token: str, secret: str) -> Optional[dict]:
        try:
            return jwt.decode(token, secret, algorithms=[self.algorithm])
        except JWTError:
            return None

    def create_access_token(self, user_id: int) -> str:
        return self._encode({"user_id": user_id}, self.secret, self.access_ttl)

    def verify_access(self, token: str) -> Optional[int]:
        """
        Verify an access token.

        Returns:
            The user id, or None if the token is forged, expired or is a
            pending-MFA token
        """
        payload = self._decode(token, self.secret)
        if payload is None or payload.get("mfa_pending"):
            return None
        user_id = payload.get("user_id")
        if not isinstance(user_id, int):
            return None
        return user_id

    def issue_mfa_token(self, user_id: int) -> str:
        return self._encode(
            {"user_id": user_id, "mfa_pending": True}, self.secret, self.mfa_ttl
        )

    def verify_mfa_token(self, token: str) -> Optional[int]:
        payload = self._decode(token, self.secret)
        if payload is None or payload.get("mfa_pending") is not True:
            return None
        return payload.get("user_id")

    async def issue(self, user_id: int) -> TokenPair:
        """Mint a pair and persist the refresh half. Caller commits."""
        access_token = self.create_access_token(user_id)
        refresh_token = self._encode(
            {"user_id": user_id, "jti": secrets.token_urlsafe(16)},
            self.refresh_secret,
            self.refresh_ttl,
        )
        await self.uow.refresh_tokens.create(
            user_id, refresh_token, utc_now() + self.refresh_ttl
        )
        return TokenPair(access_token=access_token, refresh_token=refresh_token)

    async def rotate_refresh(self, token: str) -> Result[TokenPair]:
        """
        Replace a refresh token with a new pair. Caller commits, including on
        failure so that the cleanup of a rejected token is kept.
        """
        payload = self._decode(token, self.refresh_secret)
        if payload is None:
            await self.uow.refresh_tokens.delete(token)
            return Return.err(INVALID_OR_EXPIRED_TOKEN)

        stored = await self.uow.refresh_tokens.get_by_token(token)
        if stored is None:
            return Return.err(INVALID_OR_EXPIRED_TOKEN)

        # Compare-and-delete: a concurrent rotation that already removed the
        # row leaves nothing for this caller to delete.
        if not await self.uow.refresh_tokens.delete(token):
            logger.warning(f"Refresh token for user {stored.user_id} already consumed")
            return Return.err(INVALID_OR_EXPIRED_TOKEN)

        if stored.expires_at <= utc_now():
            return Return.err(INVALID_OR_EXPIRED_TOKEN)

        if payload.get("user_id") != stored.user_id:
            return Return.err(INVALID_OR_EXPIRED_TOKEN)

        user = await self.uow.users.get_by_id(stored.user_id)
        if user is None or not user.is_active:
            return Return.err(INVALID_OR_EXPIRED_TOKEN)

        pair = await self.issue(user.id)
        return Return.ok(pair)

    async def revoke(self, token: str) -> bool:
        return await self.uow.refresh_tokens.delete(token)

    async def revoke_all(self, user_id: int) -> int:
        return await self.uow.refresh_tokens.delete_by_user_id(user_id)
