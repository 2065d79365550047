"""Elected official invitation and permission use cases"""

from .dtos import (
    InvitationInfoResponse,
    InviteElectedOfficialResponse,
    MenuPermissionsResponse,
    SetPasswordResponse,
)
from .invite_elected_official_use_case import InviteElectedOfficialUseCase
from .menu_permissions_use_case import GetMenuPermissionsUseCase, UpdateMenuPermissionsUseCase
from .set_elected_official_password_use_case import SetElectedOfficialPasswordUseCase
from .validate_invitation_use_case import ValidateInvitationUseCase

__all__ = [
    "GetMenuPermissionsUseCase",
    "InviteElectedOfficialUseCase",
    "SetElectedOfficialPasswordUseCase",
    "UpdateMenuPermissionsUseCase",
    "ValidateInvitationUseCase",
    "InvitationInfoResponse",
    "InviteElectedOfficialResponse",
    "MenuPermissionsResponse",
    "SetPasswordResponse",
]
