"""
Session authentication dependencies

Route guards for the three admin realms. Each resolves the session cookie to
an actor, scopes it to the realm addressed by the URL and applies the
blocked/menu checks before the handler runs.
"""

from typing import Optional

from fastapi import Depends, Response

from config import ApplicationConfig
from civicgate.api.error import raise_for_error
from civicgate.api.utils.jwt import create_session_token
from civicgate.app.services.session_resolver import SessionResolver
from civicgate.app.services.unit_of_work import UnitOfWork
from civicgate.app.use_cases.auth import (
    AdminAccess,
    AuthorizeAssociationAdminUseCase,
    AuthorizeSuperadminUseCase,
    AuthorizeTenantAdminUseCase,
    OpenedSession,
)
from civicgate.depends import get_session_claims, get_session_resolver, get_unit_of_work
from civicgate.domain.base import utcnow
from civicgate.domain.entities import AdminMenuCode


def require_tenant_admin(menu_code: Optional[AdminMenuCode] = None):
    """
    Guard for /tenants/{slug}/admin/... routes.

    Args:
        menu_code: Admin menu the route belongs to; None only requires a
            signed-in, unblocked actor of the tenant

    Raises:
        ClientError: 401 AUTHENTICATION_REQUIRED, 423 ACCOUNT_BLOCKED,
            403 FORBIDDEN, 404 TENANT_NOT_FOUND
    """

    async def dependency(
        slug: str,
        claims: Optional[dict] = Depends(get_session_claims),
        uow: UnitOfWork = Depends(get_unit_of_work),
        resolver: SessionResolver = Depends(get_session_resolver),
    ) -> AdminAccess:
        result = await AuthorizeTenantAdminUseCase(uow, resolver).execute(
            slug, claims, menu_code
        )
        if result.is_err():
            raise_for_error(result.error)
        return result.value

    return dependency


async def require_association_user(
    tenant_slug: str,
    association_slug: str,
    claims: Optional[dict] = Depends(get_session_claims),
    uow: UnitOfWork = Depends(get_unit_of_work),
    resolver: SessionResolver = Depends(get_session_resolver),
) -> AdminAccess:
    result = await AuthorizeAssociationAdminUseCase(uow, resolver).execute(
        tenant_slug, association_slug, claims
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


async def require_superadmin(
    claims: Optional[dict] = Depends(get_session_claims),
    uow: UnitOfWork = Depends(get_unit_of_work),
    resolver: SessionResolver = Depends(get_session_resolver),
) -> AdminAccess:
    result = await AuthorizeSuperadminUseCase(uow, resolver).execute(claims)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


def set_session_cookie(response: Response, opened: OpenedSession) -> None:
    max_age = int((opened.expires_at - utcnow()).total_seconds())
    response.set_cookie(
        key=ApplicationConfig.SESSION_COOKIE_NAME,
        value=create_session_token(opened.session_id, opened.actor_type, opened.expires_at),
        max_age=max(max_age, 0),
        httponly=True,
        secure=ApplicationConfig.SESSION_COOKIE_SECURE,
        samesite="lax",
        path="/",
    )


def clear_session_cookie(response: Response) -> None:
    response.delete_cookie(key=ApplicationConfig.SESSION_COOKIE_NAME, path="/")
