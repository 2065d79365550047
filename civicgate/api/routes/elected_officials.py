from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from pydantic import Field

from config import ApplicationConfig
from civicgate.api.error import raise_for_error
from civicgate.api.utils.session_auth import require_tenant_admin
from civicgate.app.services.token_service import TokenService
from civicgate.app.services.unit_of_work import UnitOfWork
from civicgate.app.use_cases.auth import AdminAccess
from civicgate.app.use_cases.elected_officials import (
    GetMenuPermissionsUseCase,
    InvitationInfoResponse,
    InviteElectedOfficialResponse,
    InviteElectedOfficialUseCase,
    MenuPermissionsResponse,
    SetElectedOfficialPasswordUseCase,
    SetPasswordResponse,
    UpdateMenuPermissionsUseCase,
    ValidateInvitationUseCase,
)
from civicgate.depends import get_token_service, get_unit_of_work
from civicgate.domain.base import CamelModel
from civicgate.domain.entities import AdminMenuCode

router = APIRouter(tags=["Elected Officials"])


@router.get(
    "/tenants/{slug}/admin/elus/{official_id}/permissions",
    status_code=status.HTTP_200_OK,
    response_model=MenuPermissionsResponse,
)
async def get_permissions(
    official_id: UUID,
    access: AdminAccess = Depends(require_tenant_admin(AdminMenuCode.elus)),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Elected Official Menu Permissions (ELUS menu)

    Raises:
        - 401/423/403: Session, block and menu checks
        - 404 Not Found: Official not in this tenant
    """
    result = await GetMenuPermissionsUseCase(uow).execute(access.tenant_id, official_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


class UpdatePermissionsRequest(CamelModel):
    has_full_access: bool = False
    menu_permissions: List[AdminMenuCode] = Field(default_factory=list)


@router.put(
    "/tenants/{slug}/admin/elus/{official_id}/permissions",
    status_code=status.HTTP_200_OK,
    response_model=MenuPermissionsResponse,
)
async def update_permissions(
    official_id: UUID,
    request: UpdatePermissionsRequest,
    access: AdminAccess = Depends(require_tenant_admin(AdminMenuCode.elus)),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Replace an elected official's menu allow-list (ELUS menu).

    Unknown menu codes are rejected with 422 by validation.
    """
    result = await UpdateMenuPermissionsUseCase(uow).execute(
        access.tenant_id,
        official_id,
        request.has_full_access,
        request.menu_permissions,
        access.actor,
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post(
    "/tenants/{slug}/admin/elus/{official_id}/invite",
    status_code=status.HTTP_201_CREATED,
    response_model=InviteElectedOfficialResponse,
)
async def invite_elected_official(
    official_id: UUID,
    access: AdminAccess = Depends(require_tenant_admin(AdminMenuCode.elus)),
    uow: UnitOfWork = Depends(get_unit_of_work),
    tokens: TokenService = Depends(get_token_service),
):
    """
    Invite Elected Official (ELUS menu)

    Issues a 72-hour single-use invitation and returns the inviteLink.
    Re-inviting supersedes the previous link.

    Raises:
        - 400 Bad Request: Official inactive or without email
        - 404 Not Found: Official not in this tenant
    """
    use_case = InviteElectedOfficialUseCase(uow, tokens, ApplicationConfig.PUBLIC_BASE_URL)
    result = await use_case.execute(access.tenant_id, official_id, access.actor)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get(
    "/elus/validate-token",
    status_code=status.HTTP_200_OK,
    response_model=InvitationInfoResponse,
)
async def validate_invitation(
    token: str = Query(..., min_length=1),
    uow: UnitOfWork = Depends(get_unit_of_work),
    tokens: TokenService = Depends(get_token_service),
):
    """
    Validate Invitation

    Returns {firstName, lastName, tenantName} for the set-password page.
    Does not consume the invitation.

    Raises:
        - 400 Bad Request: INVALID_TOKEN (unknown, expired or used)
    """
    result = await ValidateInvitationUseCase(uow, tokens).execute(token)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


class ValidateInvitationRequest(CamelModel):
    token: str = Field(..., min_length=1)


@router.post(
    "/elus/validate-token",
    status_code=status.HTTP_200_OK,
    response_model=InvitationInfoResponse,
)
async def validate_invitation_body(
    request: ValidateInvitationRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    tokens: TokenService = Depends(get_token_service),
):
    """Same as the GET form, with the token in the JSON body."""
    result = await ValidateInvitationUseCase(uow, tokens).execute(request.token)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


class SetPasswordRequest(CamelModel):
    token: str = Field(..., min_length=1)
    password: str


@router.post(
    "/elus/set-password",
    status_code=status.HTTP_200_OK,
    response_model=SetPasswordResponse,
)
async def set_password(
    request: SetPasswordRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    tokens: TokenService = Depends(get_token_service),
):
    """
    Redeem Invitation

    Consumes the invitation and sets the official's password. Returns the
    tenantSlug so the client can redirect to the tenant login page.

    Raises:
        - 400 Bad Request: INVALID_TOKEN or INVALID_PASSWORD
    """
    result = await SetElectedOfficialPasswordUseCase(uow, tokens).execute(
        request.token, request.password
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value
