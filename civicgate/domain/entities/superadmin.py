"""
Superadmin Entity

Platform operator account; owns the plan and addon catalog.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from civicgate.domain.base import utcnow


class Superadmin(SQLModel, table=True):
    __tablename__ = "superadmins"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    email: str = Field(unique=True, index=True, max_length=255)
    password_hash: str = Field(max_length=60)
    name: str = Field(max_length=255)
    is_active: bool = Field(default=True)

    last_login_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
