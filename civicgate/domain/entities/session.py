"""
Session Entity

Server-side record behind the session cookie.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from civicgate.domain.base import utcnow
from .enums import ActorType


class Session(SQLModel, table=True):
    """
    Session entity - one signed-in actor.

    Business Rules:
    - actor_type is fixed at login and decides which account table is read
    - Revoked or expired sessions resolve to an unauthenticated actor
    - Password reset revokes every session of the account
    """

    __tablename__ = "sessions"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    actor_type: ActorType = Field(nullable=False)
    actor_id: UUID = Field(nullable=False, index=True)
    tenant_id: Optional[UUID] = Field(default=None, index=True)
    association_id: Optional[UUID] = Field(default=None)

    revoked: bool = Field(default=False)
    revoked_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    expires_at: datetime = Field(sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_session_actor", "actor_type", "actor_id"),
        Index("idx_session_revoked", "revoked"),
    )
