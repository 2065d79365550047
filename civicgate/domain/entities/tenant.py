"""
Tenant Entity

A commune or inter-municipal body (EPCI) subscribing to the platform.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from civicgate.domain.base import utcnow
from .enums import BillingStatus, TenantType


class Tenant(SQLModel, table=True):
    """
    Tenant entity - top-level organization.

    Business Rules:
    - slug is unique and URL-safe; every public route addresses the tenant by it
    - subscription_plan_id may be empty (trial without a chosen plan)
    - Never hard-deleted: billing transitions and block/unblock are soft states
    - A blocked tenant blocks every admin actor attached to it
    """

    __tablename__ = "tenants"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=255)
    slug: str = Field(max_length=120, unique=True, index=True)

    tenant_type: TenantType = Field(default=TenantType.mairie)

    subscription_plan_id: Optional[UUID] = Field(
        default=None, foreign_key="subscription_plans.id"
    )
    billing_status: BillingStatus = Field(default=BillingStatus.trial)
    trial_ends_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    account_blocked: bool = Field(default=False)
    block_reason: Optional[str] = Field(default=None, max_length=500)

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_tenant_billing_status", "billing_status"),
        Index("idx_tenant_blocked", "account_blocked"),
    )
