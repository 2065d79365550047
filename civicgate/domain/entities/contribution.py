"""
Contribution Entities

Ideas and incident reports submitted by (possibly anonymous) citizens.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from civicgate.domain.base import utcnow
from .enums import IdeaStatus, IncidentStatus


class Idea(SQLModel, table=True):
    """
    Idea entity - tenant-level when association_id is empty.

    Bound 1:1 to a public tracking token issued at creation.
    """

    __tablename__ = "ideas"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    tenant_id: UUID = Field(foreign_key="tenants.id", nullable=False, index=True)
    association_id: Optional[UUID] = Field(default=None, foreign_key="associations.id")

    title: str = Field(max_length=255)
    description: str
    status: IdeaStatus = Field(default=IdeaStatus.new)
    anonymous_id: Optional[str] = Field(default=None, max_length=40)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_idea_anonymous", "tenant_id", "anonymous_id"),)


class Incident(SQLModel, table=True):
    __tablename__ = "incidents"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    tenant_id: UUID = Field(foreign_key="tenants.id", nullable=False, index=True)
    association_id: Optional[UUID] = Field(default=None, foreign_key="associations.id")

    title: str = Field(max_length=255)
    description: str
    location: Optional[str] = Field(default=None, max_length=500)
    status: IncidentStatus = Field(default=IncidentStatus.new)
    anonymous_id: Optional[str] = Field(default=None, max_length=40)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_incident_anonymous", "tenant_id", "anonymous_id"),)
