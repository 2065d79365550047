"""
AuditEvent Entity

Immutable log of authentication, token and catalog events.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, JSON, SQLModel

from civicgate.domain.base import utcnow
from .enums import ActorType


class AuditEvent(SQLModel, table=True):
    """
    AuditEvent entity - immutable security log.

    Business Rules:
    - Immutable (never updated or deleted)
    - actor fields are empty for anonymous flows (reset request, token redemption)
    - Metadata never contains token secrets
    """

    __tablename__ = "audit_events"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    tenant_id: Optional[UUID] = Field(default=None, index=True)
    actor_type: Optional[ActorType] = Field(default=None)
    actor_id: Optional[UUID] = Field(default=None)

    action: str = Field(max_length=100)  # e.g., "login", "invitation_sent"
    event_metadata: Optional[dict] = Field(default=None, sa_column=Column(JSON))

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_audit_created_at", "created_at"),
        Index("idx_audit_tenant_action", "tenant_id", "action"),
    )
