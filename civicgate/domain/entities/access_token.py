"""
AccessToken Entity

Opaque bearer tokens for invitation, password reset and public tracking.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from civicgate.domain.base import utcnow
from .enums import TokenKind, TokenSubjectType


class AccessToken(SQLModel, table=True):
    """
    AccessToken entity - one table for every server-issued token kind.

    Business Rules:
    - Only the SHA-256 hash of the secret is stored; the secret never encodes the subject
    - expires_at None means the token never expires (public tracking)
    - consumed_at is set exactly once, by an atomic conditional update
    """

    __tablename__ = "access_tokens"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    kind: TokenKind = Field(nullable=False)
    token_hash: str = Field(unique=True, index=True, max_length=64)

    subject_type: TokenSubjectType = Field(nullable=False)
    subject_id: UUID = Field(nullable=False)
    tenant_id: Optional[UUID] = Field(default=None, index=True)

    issued_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    expires_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    consumed_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_access_token_subject", "kind", "subject_type", "subject_id"),
    )
