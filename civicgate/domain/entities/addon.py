"""
Addon Entities

Optional modules, their quantity-tiered prices, per-plan access and the
tenant subscriptions reported by billing.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from civicgate.domain.base import utcnow
from .enums import AddonCode, AddonSubscriptionStatus


class Addon(SQLModel, table=True):
    """Named optional module (e.g. ASSOCIATIONS), referenced by its stable code"""

    __tablename__ = "addons"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    code: AddonCode = Field(unique=True, index=True)
    name: str = Field(max_length=255)
    description: Optional[str] = Field(default=None)
    is_active: bool = Field(default=True)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))


class AddonTier(SQLModel, table=True):
    """
    AddonTier entity - one quantity band of an addon's price ladder.

    Business Rules:
    - Band is [min_quantity, max_quantity]; max_quantity None means "and above"
    - Bands of one addon are contiguous and non-overlapping, ascending by min
    - monthly_price and yearly_price are independent minor-unit amounts
    """

    __tablename__ = "addon_tiers"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    addon_id: UUID = Field(foreign_key="addons.id", nullable=False, index=True)

    name: str = Field(max_length=255)
    min_quantity: int = Field(nullable=False)
    max_quantity: Optional[int] = Field(default=None)
    monthly_price: int = Field(default=0)
    yearly_price: int = Field(default=0)
    display_order: int = Field(default=0)

    __table_args__ = (Index("idx_addon_tier_min", "addon_id", "min_quantity"),)


class PlanAddonAccess(SQLModel, table=True):
    """
    Which addons a plan may purchase.

    Non-null unit prices replace the addon's tier ladder for this plan.
    """

    __tablename__ = "plan_addon_access"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    plan_id: UUID = Field(foreign_key="subscription_plans.id", nullable=False)
    addon_id: UUID = Field(foreign_key="addons.id", nullable=False)

    is_enabled: bool = Field(default=True)
    unit_monthly_price: Optional[int] = Field(default=None)
    unit_yearly_price: Optional[int] = Field(default=None)

    __table_args__ = (
        Index("idx_plan_addon_access", "plan_id", "addon_id", unique=True),
    )


class TenantAddon(SQLModel, table=True):
    """Tenant subscription to an addon, as supplied by the billing collaborator"""

    __tablename__ = "tenant_addons"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    tenant_id: UUID = Field(foreign_key="tenants.id", nullable=False, index=True)
    addon_id: UUID = Field(foreign_key="addons.id", nullable=False)

    quantity: int = Field(default=1)
    status: AddonSubscriptionStatus = Field(default=AddonSubscriptionStatus.active)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
