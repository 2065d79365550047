"""
ElectedOfficial Entity

Delegated admin account for an elected official, with menu-level permissions.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from civicgate.domain.base import utcnow
from .enums import AdminMenuCode


class ElectedOfficial(SQLModel, table=True):
    """
    ElectedOfficial entity - partial-access admin of one tenant.

    Business Rules:
    - password_hash stays empty until the invitation link is redeemed
    - has_full_access grants every menu and makes the allow-list irrelevant
    - Inactive officials cannot sign in
    """

    __tablename__ = "elected_officials"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    tenant_id: UUID = Field(foreign_key="tenants.id", nullable=False, index=True)

    first_name: str = Field(max_length=120)
    last_name: str = Field(max_length=120)
    function: str = Field(max_length=255)
    email: Optional[str] = Field(default=None, max_length=255, index=True)
    password_hash: Optional[str] = Field(default=None, max_length=60)

    is_active: bool = Field(default=True)
    has_full_access: bool = Field(default=False)

    account_blocked: bool = Field(default=False)
    block_reason: Optional[str] = Field(default=None, max_length=500)

    invited_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    last_login_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_elected_official_tenant_email", "tenant_id", "email"),
    )


class ElectedOfficialMenuPermission(SQLModel, table=True):
    """Explicit allow-list row: one menu code granted to one official"""

    __tablename__ = "elected_official_menu_permissions"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    elected_official_id: UUID = Field(
        foreign_key="elected_officials.id", nullable=False, index=True
    )
    menu_code: AdminMenuCode = Field(nullable=False)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index(
            "idx_official_menu_code",
            "elected_official_id",
            "menu_code",
            unique=True,
        ),
    )
