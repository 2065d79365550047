from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel, EmailStr, Field

from civicgate.api.error import raise_for_error
from civicgate.api.utils.session_auth import (
    clear_session_cookie,
    require_superadmin,
    set_session_cookie,
)
from civicgate.app.services.catalog_cache import CatalogCache
from civicgate.app.services.session_resolver import SessionResolver
from civicgate.app.services.unit_of_work import UnitOfWork
from civicgate.app.use_cases.auth import (
    AdminAccess,
    LoadSuperadminSessionUseCase,
    LoginResponse,
    LogoutResponse,
    LogoutUseCase,
    SuperadminLoginUseCase,
    SuperadminSessionResponse,
)
from civicgate.app.use_cases.billing import (
    AddonTiersResponse,
    ReplaceAddonTiersUseCase,
    TierInput,
)
from civicgate.app.use_cases.tenants import (
    BlockTenantUseCase,
    TenantBlockResponse,
    UnblockTenantUseCase,
)
from civicgate.depends import (
    get_catalog_cache,
    get_session_claims,
    get_session_resolver,
    get_unit_of_work,
    session_ttl,
)

router = APIRouter(prefix="/superadmin", tags=["Superadmin"])


class SuperadminLoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


@router.post("/login", status_code=status.HTTP_200_OK, response_model=LoginResponse)
async def superadmin_login(
    request: SuperadminLoginRequest,
    response: Response,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Superadmin Login

    Raises:
        - 401 Unauthorized: Invalid credentials or inactive account
    """
    result = await SuperadminLoginUseCase(uow, session_ttl()).execute(
        request.email, request.password
    )
    if result.is_err():
        raise_for_error(result.error)

    opened = result.value
    set_session_cookie(response, opened)
    return LoginResponse(actor_type=opened.actor_type, name=opened.display_name)


@router.post("/logout", status_code=status.HTTP_200_OK, response_model=LogoutResponse)
async def superadmin_logout(
    response: Response,
    claims: Optional[dict] = Depends(get_session_claims),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await LogoutUseCase(uow).execute(claims)
    clear_session_cookie(response)
    return result.value


@router.get("/me", status_code=status.HTTP_200_OK, response_model=SuperadminSessionResponse)
async def superadmin_me(
    claims: Optional[dict] = Depends(get_session_claims),
    uow: UnitOfWork = Depends(get_unit_of_work),
    resolver: SessionResolver = Depends(get_session_resolver),
):
    """
    Raises:
        - 401 Unauthorized: No superadmin session (details.loginPath)
    """
    result = await LoadSuperadminSessionUseCase(uow, resolver).execute(claims)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


class ReplaceTiersRequest(BaseModel):
    tiers: List[TierInput] = Field(..., min_length=1)


@router.put(
    "/addons/{addon_id}/tiers",
    status_code=status.HTTP_200_OK,
    response_model=AddonTiersResponse,
)
async def replace_addon_tiers(
    addon_id: UUID,
    request: ReplaceTiersRequest,
    access: AdminAccess = Depends(require_superadmin),
    uow: UnitOfWork = Depends(get_unit_of_work),
    cache: CatalogCache = Depends(get_catalog_cache),
):
    """
    Replace Addon Tier Ladder

    The whole ladder is validated (starts at 1, contiguous, no overlap, only
    the last tier unbounded) before anything is written; the catalog cache
    is invalidated afterwards.

    Raises:
        - 400 Bad Request: INVALID_TIERS (details.problems)
        - 401 Unauthorized: No superadmin session
        - 404 Not Found: Unknown addon
    """
    use_case = ReplaceAddonTiersUseCase(uow, cache)
    result = await use_case.execute(addon_id, request.tiers, access.actor.id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


class BlockTenantRequest(BaseModel):
    reason: str = Field(..., min_length=1, max_length=500)


@router.post(
    "/tenants/{tenant_id}/block",
    status_code=status.HTTP_200_OK,
    response_model=TenantBlockResponse,
)
async def block_tenant(
    tenant_id: UUID,
    request: BlockTenantRequest,
    access: AdminAccess = Depends(require_superadmin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Block Tenant

    Every admin actor of the tenant is answered 423 ACCOUNT_BLOCKED with
    this reason until unblocked.

    Raises:
        - 401 Unauthorized: No superadmin session
        - 404 Not Found: Unknown tenant
    """
    result = await BlockTenantUseCase(uow).execute(tenant_id, request.reason, access.actor.id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post(
    "/tenants/{tenant_id}/unblock",
    status_code=status.HTTP_200_OK,
    response_model=TenantBlockResponse,
)
async def unblock_tenant(
    tenant_id: UUID,
    access: AdminAccess = Depends(require_superadmin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await UnblockTenantUseCase(uow).execute(tenant_id, access.actor.id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value
