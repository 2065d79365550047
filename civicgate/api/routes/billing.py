from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from civicgate.api.error import raise_for_error
from civicgate.api.utils.session_auth import require_tenant_admin
from civicgate.app.services.catalog_cache import CatalogCache
from civicgate.app.services.unit_of_work import UnitOfWork
from civicgate.app.use_cases.auth import AdminAccess
from civicgate.app.use_cases.billing import (
    AddonPriceResponse,
    AddonTiersResponse,
    ListAddonTiersUseCase,
    ListTenantAddonChargesUseCase,
    QuoteAddonPriceUseCase,
    TenantAddonChargesResponse,
)
from civicgate.app.use_cases.tenants import GetTenantQuotasUseCase, TenantQuotasResponse
from civicgate.depends import get_catalog_cache, get_unit_of_work
from civicgate.domain.entities import AddonCode, AdminMenuCode, BillingPeriod

router = APIRouter(tags=["Billing"])


@router.get(
    "/addons/{code}/price",
    status_code=status.HTTP_200_OK,
    response_model=AddonPriceResponse,
)
async def addon_price(
    code: AddonCode,
    quantity: int = Query(..., ge=0),
    period: BillingPeriod = Query(BillingPeriod.monthly),
    plan: Optional[str] = Query(None, description="Plan code; applies its per-unit price"),
    uow: UnitOfWork = Depends(get_unit_of_work),
    cache: CatalogCache = Depends(get_catalog_cache),
):
    """
    Addon Price Quote

    Amount in minor currency units for ``quantity`` over ``period``.
    Quantity 0 is not priced (amount 0).

    Raises:
        - 404 Not Found: Unknown or inactive addon, unknown plan code
        - 500 Internal Server Error: No tier covers the quantity
    """
    result = await QuoteAddonPriceUseCase(uow, cache).execute(code, quantity, period, plan)
    if result.is_err():
        raise_for_error(result.error, PLAN_NOT_FOUND=status.HTTP_404_NOT_FOUND)
    return result.value


@router.get(
    "/addons/{code}/tiers",
    status_code=status.HTTP_200_OK,
    response_model=AddonTiersResponse,
)
async def addon_tiers(
    code: AddonCode,
    uow: UnitOfWork = Depends(get_unit_of_work),
    cache: CatalogCache = Depends(get_catalog_cache),
):
    """Public tier ladder of an addon, ascending."""
    result = await ListAddonTiersUseCase(uow, cache).execute(code)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get(
    "/tenants/{slug}/admin/billing/addons",
    status_code=status.HTTP_200_OK,
    response_model=TenantAddonChargesResponse,
)
async def tenant_addon_charges(
    access: AdminAccess = Depends(require_tenant_admin(AdminMenuCode.billing)),
    uow: UnitOfWork = Depends(get_unit_of_work),
    cache: CatalogCache = Depends(get_catalog_cache),
):
    """
    Tenant Addon Charges (BILLING menu)

    Raises:
        - 401/423/403: Session, block and menu checks
        - 500 Internal Server Error: Catalog cannot price a subscribed quantity
    """
    result = await ListTenantAddonChargesUseCase(uow, cache).execute(access.tenant_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get(
    "/tenants/{slug}/admin/quotas",
    status_code=status.HTTP_200_OK,
    response_model=TenantQuotasResponse,
)
async def tenant_quotas(
    access: AdminAccess = Depends(require_tenant_admin()),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Admin Seat and Association Quotas

    ``admins`` is returned to actors managing ADMINS, ``associations`` to
    actors managing ASSOCIATIONS.

    Raises:
        - 401/423: Session and block checks
        - 403 Forbidden: Neither ADMINS nor ASSOCIATIONS menu
    """
    result = await GetTenantQuotasUseCase(uow).execute(access.tenant_id, access.actor)
    if result.is_err():
        raise_for_error(result.error)
    return result.value
