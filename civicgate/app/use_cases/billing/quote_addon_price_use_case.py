"""
Quote Addon Price Use Case

Public price lookup used by the pricing page and the checkout form.
"""

from typing import Optional

from civicgate.app.services.catalog_cache import CatalogCache
from civicgate.app.services.pricing_service import AddonPricingService
from civicgate.app.services.unit_of_work import UnitOfWork
from civicgate.domain.entities import AddonCode, BillingPeriod
from civicgate.domain.result import Error, Result, Return
from .dtos import AddonPriceResponse, AddonTiersResponse, TierView


class QuoteAddonPriceUseCase:
    """
    Business Rules:
    - Addon must exist and be active
    - quantity <= 0 is not priced (amount 0, no tier)
    - With a plan code, the plan's per-unit price wins when set
    - Otherwise the single tier containing the quantity prices it
    """

    def __init__(self, uow: UnitOfWork, cache: CatalogCache):
        self.uow = uow
        self.cache = cache

    async def execute(
        self,
        addon_code: AddonCode,
        quantity: int,
        period: BillingPeriod,
        plan_code: Optional[str] = None,
    ) -> Result[AddonPriceResponse]:
        async with self.uow:
            addon = await self.uow.addons.get_by_code(addon_code)
            if addon is None or not addon.is_active:
                return Return.err(Error("ADDON_NOT_FOUND", "Addon not found"))

            plan_id = None
            if plan_code is not None:
                plan = await self.uow.plans.get_by_code(plan_code)
                if plan is None:
                    return Return.err(Error("PLAN_NOT_FOUND", "Subscription plan not found"))
                plan_id = plan.id

            pricing = AddonPricingService(self.uow, self.cache)
            quote = await pricing.quote(addon.id, quantity, period, plan_id)
            if quote.is_err():
                return Return.err(quote.error)

            return Return.ok(
                AddonPriceResponse(
                    addon_code=addon.code,
                    quantity=quantity,
                    period=period,
                    amount=quote.value.amount,
                    tier_name=quote.value.tier.name if quote.value.tier else None,
                    unit_price=quote.value.unit_price,
                )
            )


class ListAddonTiersUseCase:
    """Tier ladder of an addon, ascending."""

    def __init__(self, uow: UnitOfWork, cache: CatalogCache):
        self.uow = uow
        self.cache = cache

    async def execute(self, addon_code: AddonCode) -> Result[AddonTiersResponse]:
        async with self.uow:
            addon = await self.uow.addons.get_by_code(addon_code)
            if addon is None or not addon.is_active:
                return Return.err(Error("ADDON_NOT_FOUND", "Addon not found"))

            bands = await AddonPricingService(self.uow, self.cache).tiers_for(addon.id)
            return Return.ok(
                AddonTiersResponse(
                    addon_id=addon.id,
                    addon_code=addon.code,
                    tiers=[
                        TierView.from_band(band)
                        for band in sorted(bands, key=lambda b: b.min_quantity)
                    ],
                )
            )
