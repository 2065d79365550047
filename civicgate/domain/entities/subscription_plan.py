"""
SubscriptionPlan Entity

Catalog plan carrying the tenant's native feature flags.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from civicgate.domain.base import utcnow


class SubscriptionPlan(SQLModel, table=True):
    """
    SubscriptionPlan entity - operator-owned catalog row.

    Business Rules:
    - Prices are integers in minor currency units (cents)
    - yearly_price is its own catalog value, never 12 x monthly_price
    - Feature flags are plan-level; addons never change them
    """

    __tablename__ = "subscription_plans"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    code: str = Field(unique=True, index=True, max_length=50)
    name: str = Field(max_length=255)

    monthly_price: int = Field(default=0)
    yearly_price: int = Field(default=0)

    has_ideas: bool = Field(default=True)
    has_incidents: bool = Field(default=True)
    has_meetings: bool = Field(default=True)
    has_events: bool = Field(default=True)

    max_admins: int = Field(default=1)
    associations_included: int = Field(default=0)

    is_active: bool = Field(default=True)
    display_order: int = Field(default=0)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
