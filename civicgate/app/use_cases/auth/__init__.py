"""Authentication use cases"""

from .association_login_use_case import AssociationLoginUseCase
from .authorize_admin_area_use_case import (
    SUPERADMIN_LOGIN_PATH,
    AuthorizeAssociationAdminUseCase,
    AuthorizeSuperadminUseCase,
    AuthorizeTenantAdminUseCase,
    association_login_path,
    tenant_login_path,
)
from .confirm_password_reset_use_case import ConfirmPasswordResetUseCase
from .dtos import (
    AdminAccess,
    AdminSessionResponse,
    AssociationSessionResponse,
    ConfirmPasswordResetResponse,
    ElectedOfficialInfo,
    LoginResponse,
    LogoutResponse,
    OpenedSession,
    RequestPasswordResetResponse,
    SuperadminSessionResponse,
    ValidatePasswordResetResponse,
)
from .load_admin_session_use_case import (
    LoadAdminSessionUseCase,
    LoadAssociationSessionUseCase,
    LoadSuperadminSessionUseCase,
    admin_session_response,
)
from .logout_use_case import LogoutUseCase
from .request_password_reset_use_case import RequestPasswordResetUseCase
from .superadmin_login_use_case import SuperadminLoginUseCase
from .tenant_admin_login_use_case import TenantAdminLoginUseCase
from .validate_password_reset_use_case import ValidatePasswordResetUseCase

__all__ = [
    "AssociationLoginUseCase",
    "AuthorizeAssociationAdminUseCase",
    "AuthorizeSuperadminUseCase",
    "AuthorizeTenantAdminUseCase",
    "ConfirmPasswordResetUseCase",
    "LoadAdminSessionUseCase",
    "LoadAssociationSessionUseCase",
    "LoadSuperadminSessionUseCase",
    "LogoutUseCase",
    "RequestPasswordResetUseCase",
    "SuperadminLoginUseCase",
    "TenantAdminLoginUseCase",
    "ValidatePasswordResetUseCase",
    "AdminAccess",
    "AdminSessionResponse",
    "AssociationSessionResponse",
    "ConfirmPasswordResetResponse",
    "ElectedOfficialInfo",
    "LoginResponse",
    "LogoutResponse",
    "OpenedSession",
    "RequestPasswordResetResponse",
    "SuperadminSessionResponse",
    "ValidatePasswordResetResponse",
    "SUPERADMIN_LOGIN_PATH",
    "admin_session_response",
    "association_login_path",
    "tenant_login_path",
]
