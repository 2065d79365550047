from datetime import datetime
from typing import List
from uuid import UUID

from civicgate.domain.base import CamelModel
from civicgate.domain.entities import AdminMenuCode


class InviteElectedOfficialResponse(CamelModel):
    message: str
    invite_link: str
    expires_at: datetime


class InvitationInfoResponse(CamelModel):
    """Shown on the set-password page before the official picks a password"""

    first_name: str
    last_name: str
    tenant_name: str


class SetPasswordResponse(CamelModel):
    status: str
    tenant_slug: str


class MenuPermissionsResponse(CamelModel):
    elected_official_id: UUID
    has_full_access: bool
    menu_permissions: List[AdminMenuCode]
