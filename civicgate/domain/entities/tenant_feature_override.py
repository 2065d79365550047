"""
TenantFeatureOverride Entity

Superadmin override of a tenant's plan flags.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from civicgate.domain.base import utcnow


class TenantFeatureOverride(SQLModel, table=True):
    """None on a flag means "inherit from the plan"."""

    __tablename__ = "tenant_feature_overrides"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    tenant_id: UUID = Field(foreign_key="tenants.id", unique=True, nullable=False)

    has_ideas: Optional[bool] = Field(default=None)
    has_incidents: Optional[bool] = Field(default=None)
    has_meetings: Optional[bool] = Field(default=None)
    has_events: Optional[bool] = Field(default=None)
    notes: Optional[str] = Field(default=None)

    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
