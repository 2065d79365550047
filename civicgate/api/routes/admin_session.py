"""
Admin-area sessions: login, logout and "me" for tenant admins (admin users
and elected officials) and association users.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel, EmailStr, Field

from civicgate.api.error import raise_for_error
from civicgate.api.utils.session_auth import clear_session_cookie, set_session_cookie
from civicgate.app.services.session_resolver import SessionResolver
from civicgate.app.services.unit_of_work import UnitOfWork
from civicgate.app.use_cases.auth import (
    AdminSessionResponse,
    AssociationLoginUseCase,
    AssociationSessionResponse,
    LoadAdminSessionUseCase,
    LoadAssociationSessionUseCase,
    LoginResponse,
    LogoutResponse,
    LogoutUseCase,
    OpenedSession,
    TenantAdminLoginUseCase,
)
from civicgate.depends import (
    get_session_claims,
    get_session_resolver,
    get_unit_of_work,
    session_ttl,
)

router = APIRouter(tags=["Admin Session"])


class LoginRequest(BaseModel):
    """Login HTTP request payload"""

    email: EmailStr = Field(..., description="Account email address")
    password: str = Field(..., min_length=1, description="Account password")


def _login_response(response: Response, opened: OpenedSession) -> LoginResponse:
    set_session_cookie(response, opened)
    return LoginResponse(
        actor_type=opened.actor_type,
        name=opened.display_name,
        tenant_slug=opened.tenant_slug,
        association_slug=opened.association_slug,
    )


@router.post(
    "/tenants/{slug}/admin/login",
    status_code=status.HTTP_200_OK,
    response_model=LoginResponse,
)
async def tenant_admin_login(
    slug: str,
    request: LoginRequest,
    response: Response,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Tenant Admin Login

    One form for admin users and elected officials of the tenant. Sets the
    HTTP-only session cookie.

    Raises:
        - 401 Unauthorized: Invalid credentials
        - 404 Not Found: Unknown tenant
    """
    use_case = TenantAdminLoginUseCase(uow, session_ttl())
    result = await use_case.execute(slug, request.email, request.password)
    if result.is_err():
        raise_for_error(result.error)
    return _login_response(response, result.value)


@router.post(
    "/tenants/{slug}/admin/logout",
    status_code=status.HTTP_200_OK,
    response_model=LogoutResponse,
)
async def tenant_admin_logout(
    slug: str,
    response: Response,
    claims: Optional[dict] = Depends(get_session_claims),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Revoke the current session and clear the cookie. Always succeeds."""
    result = await LogoutUseCase(uow).execute(claims)
    clear_session_cookie(response)
    return result.value


@router.get(
    "/tenants/{slug}/admin/me",
    status_code=status.HTTP_200_OK,
    response_model=AdminSessionResponse,
)
async def tenant_admin_me(
    slug: str,
    claims: Optional[dict] = Depends(get_session_claims),
    uow: UnitOfWork = Depends(get_unit_of_work),
    resolver: SessionResolver = Depends(get_session_resolver),
):
    """
    Current Admin Session

    Identity of the signed-in admin or elected official, with its effective
    menu permissions. Blocked accounts get 200 with accountBlocked=true and
    the blockReason.

    Raises:
        - 401 Unauthorized: No valid session for this tenant (details.loginPath)
        - 404 Not Found: Unknown tenant
    """
    result = await LoadAdminSessionUseCase(uow, resolver).execute(slug, claims)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post(
    "/structures/{tenant_slug}/{association_slug}/admin/login",
    status_code=status.HTTP_200_OK,
    response_model=LoginResponse,
)
async def association_login(
    tenant_slug: str,
    association_slug: str,
    request: LoginRequest,
    response: Response,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Association Admin Login

    Raises:
        - 401 Unauthorized: Invalid credentials
        - 404 Not Found: Unknown tenant or association
    """
    use_case = AssociationLoginUseCase(uow, session_ttl())
    result = await use_case.execute(
        tenant_slug, association_slug, request.email, request.password
    )
    if result.is_err():
        raise_for_error(result.error)
    return _login_response(response, result.value)


@router.post(
    "/structures/{tenant_slug}/{association_slug}/admin/logout",
    status_code=status.HTTP_200_OK,
    response_model=LogoutResponse,
)
async def association_logout(
    tenant_slug: str,
    association_slug: str,
    response: Response,
    claims: Optional[dict] = Depends(get_session_claims),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await LogoutUseCase(uow).execute(claims)
    clear_session_cookie(response)
    return result.value


@router.get(
    "/structures/{tenant_slug}/{association_slug}/admin/me",
    status_code=status.HTTP_200_OK,
    response_model=AssociationSessionResponse,
)
async def association_me(
    tenant_slug: str,
    association_slug: str,
    claims: Optional[dict] = Depends(get_session_claims),
    uow: UnitOfWork = Depends(get_unit_of_work),
    resolver: SessionResolver = Depends(get_session_resolver),
):
    """
    Current Association Session

    Raises:
        - 401 Unauthorized: No valid session for this association
        - 404 Not Found: Unknown tenant or association
    """
    result = await LoadAssociationSessionUseCase(uow, resolver).execute(
        tenant_slug, association_slug, claims
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value
