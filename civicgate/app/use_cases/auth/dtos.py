"""
Authentication Use Case DTOs (Data Transfer Objects)

Response classes for the login realms, admin sessions and password reset.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from civicgate.domain.actor import Actor
from civicgate.domain.base import CamelModel
from civicgate.domain.entities import ActorType, AdminMenuCode


# ============================================================================
# Internal results
# ============================================================================


@dataclass(frozen=True)
class OpenedSession:
    """A freshly created session; the route turns it into a cookie"""

    session_id: UUID
    actor_type: ActorType
    actor_id: UUID
    expires_at: datetime
    display_name: str
    tenant_slug: Optional[str] = None
    association_slug: Optional[str] = None


@dataclass(frozen=True)
class AdminAccess:
    """Authorized actor of an admin area, with the realm it was checked against"""

    actor: Actor
    tenant_id: Optional[UUID] = None
    tenant_slug: Optional[str] = None
    association_id: Optional[UUID] = None


# ============================================================================
# Response DTOs
# ============================================================================


class LoginResponse(CamelModel):
    """Body of every login endpoint (the session travels in the cookie)"""

    actor_type: ActorType
    name: str
    tenant_slug: Optional[str] = None
    association_slug: Optional[str] = None


class LogoutResponse(CamelModel):
    status: str
    revoked: bool


class ElectedOfficialInfo(CamelModel):
    id: UUID
    first_name: str
    last_name: str
    email: Optional[str] = None
    has_full_access: bool
    menu_permissions: List[AdminMenuCode]


class AdminSessionResponse(CamelModel):
    """Current tenant-admin identity as shown to the admin area"""

    id: UUID
    name: str
    email: Optional[str] = None
    role: str
    is_elected_official: bool
    account_blocked: bool
    block_reason: Optional[str] = None
    elected_official: Optional[ElectedOfficialInfo] = None


class AssociationSessionResponse(CamelModel):
    id: UUID
    name: str
    email: str
    role: str
    association_id: UUID
    account_blocked: bool
    block_reason: Optional[str] = None


class SuperadminSessionResponse(CamelModel):
    id: UUID
    name: str
    email: str


class RequestPasswordResetResponse(CamelModel):
    """Response for request password reset use case"""

    status: str
    message: str


class ValidatePasswordResetResponse(CamelModel):
    valid: bool
    account_type: ActorType


class ConfirmPasswordResetResponse(CamelModel):
    """Response for confirm password reset use case"""

    status: str
    message: str
    sessions_revoked: int
