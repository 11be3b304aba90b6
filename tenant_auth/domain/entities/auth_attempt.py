"""
AuthAttempt Entity

Immutable log of login attempts, used for lockout windows.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from tenant_auth.domain.base import utc_now


class AuthAttempt(SQLModel, table=True):
    """
    AuthAttempt entity - append-only audit and gating record.

    Business Rules:
    - Immutable (never updated or deleted)
    - Scoped by (email, tenant_id), the user may not exist
    - Failed rows inside the trailing window drive the lockout
    """

    __tablename__ = "auth_attempts"

    id: Optional[int] = Field(default=None, primary_key=True)

    email: str = Field(max_length=255)
    tenant_id: str = Field(max_length=64)
    success: bool = Field(nullable=False)

    ip_address: Optional[str] = Field(default=None, max_length=64)
    user_agent: Optional[str] = Field(default=None, max_length=512)

    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_auth_attempt_lookup", "email", "tenant_id", "created_at"),
    )
