"""
AdminUser Entity

Full tenant administrator account.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from civicgate.domain.base import utcnow
from .enums import AdminRole


class AdminUser(SQLModel, table=True):
    """
    AdminUser entity - owner-side administrator of a tenant.

    Business Rules:
    - Email unique across admin users
    - Password stored as bcrypt hash (cost factor 12)
    - Access to every admin menu by account kind
    """

    __tablename__ = "admin_users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    tenant_id: UUID = Field(foreign_key="tenants.id", nullable=False, index=True)

    name: str = Field(max_length=255)
    email: str = Field(unique=True, index=True, max_length=255)
    password_hash: str = Field(max_length=60)
    role: AdminRole = Field(default=AdminRole.admin)

    account_blocked: bool = Field(default=False)
    block_reason: Optional[str] = Field(default=None, max_length=500)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    last_login_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
