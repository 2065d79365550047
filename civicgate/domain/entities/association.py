"""
Association Entity

Local association nested under a tenant, with its own login realm.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from civicgate.domain.base import utcnow


class Association(SQLModel, table=True):
    """
    Association entity - strict child of one tenant.

    Business Rules:
    - Always addressed by (tenant slug, association slug); slug unique per tenant
    - Inherits feature flags from its parent tenant
    - Blocked when either itself or its parent tenant is blocked
    """

    __tablename__ = "associations"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    tenant_id: UUID = Field(foreign_key="tenants.id", nullable=False, index=True)

    name: str = Field(max_length=255)
    slug: str = Field(max_length=120)
    is_active: bool = Field(default=True)

    account_blocked: bool = Field(default=False)
    block_reason: Optional[str] = Field(default=None, max_length=500)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_association_tenant_slug", "tenant_id", "slug", unique=True),
    )
