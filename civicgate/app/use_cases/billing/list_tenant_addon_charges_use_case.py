from uuid import UUID

from civicgate.app.services.catalog_cache import CatalogCache
from civicgate.app.services.pricing_service import AddonPricingService
from civicgate.app.services.unit_of_work import UnitOfWork
from civicgate.domain.entities import BillingPeriod
from civicgate.domain.result import Error, Result, Return
from .dtos import AddonCharge, TenantAddonChargesResponse


class ListTenantAddonChargesUseCase:
    """
    Current addon charges of a tenant (BILLING menu).

    Business Rules:
    - One line per ACTIVE addon subscription with quantity >= 1
    - Monthly and yearly amounts priced independently
    - Plan per-unit prices apply when the tenant has a plan that sets them
    - A quantity the catalog cannot price fails with CATALOG_MISCONFIGURED
    """

    def __init__(self, uow: UnitOfWork, cache: CatalogCache):
        self.uow = uow
        self.cache = cache

    async def execute(self, tenant_id: UUID) -> Result[TenantAddonChargesResponse]:
        async with self.uow:
            tenant = await self.uow.tenants.get_by_id(tenant_id)
            if tenant is None:
                return Return.err(Error("TENANT_NOT_FOUND", "Tenant not found"))

            pricing = AddonPricingService(self.uow, self.cache)
            items = []
            for subscription in await self.uow.addons.list_active_tenant_addons(tenant.id):
                addon = await self.uow.addons.get_by_id(subscription.addon_id)
                if addon is None:
                    continue

                amounts = {}
                tier_name = None
                for period in (BillingPeriod.monthly, BillingPeriod.yearly):
                    quote = await pricing.quote(
                        addon.id, subscription.quantity, period, tenant.subscription_plan_id
                    )
                    if quote.is_err():
                        return Return.err(quote.error)
                    amounts[period] = quote.value.amount
                    if quote.value.tier is not None:
                        tier_name = quote.value.tier.name

                items.append(
                    AddonCharge(
                        addon_code=addon.code,
                        name=addon.name,
                        quantity=subscription.quantity,
                        monthly_amount=amounts[BillingPeriod.monthly],
                        yearly_amount=amounts[BillingPeriod.yearly],
                        tier_name=tier_name,
                    )
                )

            return Return.ok(
                TenantAddonChargesResponse(
                    items=items,
                    monthly_total=sum(item.monthly_amount for item in items),
                    yearly_total=sum(item.yearly_amount for item in items),
                )
            )
