"""
User Entity

Represents a person registered with exactly one tenant.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Column, DateTime, Field, Index, SQLModel, UniqueConstraint

from tenant_auth.domain.base import utc_now


class User(SQLModel, table=True):
    """
    User entity - identity scoped to a single tenant.

    Business Rules:
    - (email, tenant_id) is unique; the same email may exist in other tenants
    - Password stored as bcrypt hash
    - Never hard-deleted, deactivated through is_active
    - MFA challenge applies only when mfa_enabled and mfa_secret are both set
    """

    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True)
    email: str = Field(max_length=255)
    password_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars

    first_name: Optional[str] = Field(default=None, max_length=255)
    last_name: Optional[str] = Field(default=None, max_length=255)

    tenant_id: str = Field(foreign_key="tenants.id", nullable=False, max_length=64)
    is_active: bool = Field(default=True)

    mfa_enabled: bool = Field(default=False)
    mfa_secret: Optional[str] = Field(default=None, max_length=255)

    # Timestamps
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    __table_args__ = (
        UniqueConstraint("email", "tenant_id", name="uq_user_email_tenant"),
        Index("idx_user_tenant", "tenant_id"),
    )
