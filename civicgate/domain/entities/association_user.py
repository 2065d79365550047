"""
AssociationUser Entity

Login account of an association's own admin area.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from civicgate.domain.base import utcnow
from .enums import AssociationRole


class AssociationUser(SQLModel, table=True):
    __tablename__ = "association_users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    association_id: UUID = Field(
        foreign_key="associations.id", nullable=False, index=True
    )

    name: str = Field(max_length=255)
    email: str = Field(max_length=255)
    password_hash: str = Field(max_length=60)
    role: AssociationRole = Field(default=AssociationRole.admin)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_association_user_email", "association_id", "email", unique=True),
    )
