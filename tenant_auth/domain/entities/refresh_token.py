"""
RefreshToken Entity

Persisted half of the refresh credential.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from tenant_auth.domain.base import utc_now


class RefreshToken(SQLModel, table=True):
    """
    RefreshToken entity - single-use session continuation credential.

    Business Rules:
    - token is unique; each value is accepted by exactly one refresh
    - Rotation deletes the presented row and inserts a new one
    - Deleted on refresh, logout or failed validation
    """

    __tablename__ = "refresh_tokens"

    id: Optional[int] = Field(default=None, primary_key=True)
    token: str = Field(unique=True, index=True, max_length=1024)
    user_id: int = Field(foreign_key="users.id", nullable=False, index=True)

    expires_at: datetime = Field(sa_column=Column(DateTime, nullable=False))
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_refresh_token_expires_at", "expires_at"),)
