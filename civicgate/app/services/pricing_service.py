"""
Addon Tier Pricing

Maps a purchased quantity to the tier that prices it, and turns the tier (or
a plan's per-unit override) into an amount in minor currency units.

Tier bounds are inclusive on both ends; ``max_quantity=None`` is unbounded.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence
from uuid import UUID

from civicgate.app.services.catalog_cache import CatalogCache, TierBand
from civicgate.app.services.unit_of_work import UnitOfWork
from civicgate.domain.entities import BillingPeriod, PlanAddonAccess
from civicgate.domain.result import Error, Result, Return

logger = logging.getLogger(__name__)


class CatalogConfigurationError(Exception):
    """The addon catalog cannot price a quantity it should cover."""


def _ordered(tiers: Sequence[TierBand]) -> List[TierBand]:
    return sorted(tiers, key=lambda tier: tier.min_quantity)


def validate_tiers(tiers: Sequence[TierBand]) -> List[str]:
    """
    Check that a tier ladder partitions [1, inf).

    Returns a list of problems; empty means well formed.
    """
    problems = []
    ordered = _ordered(tiers)
    if not ordered:
        return ["at least one tier is required"]

    if ordered[0].min_quantity != 1:
        problems.append("first tier must start at quantity 1")

    for index, tier in enumerate(ordered):
        if tier.max_quantity is not None and tier.max_quantity < tier.min_quantity:
            problems.append(f"tier '{tier.name}' has max_quantity below min_quantity")
        if tier.monthly_price < 0 or tier.yearly_price < 0:
            problems.append(f"tier '{tier.name}' has a negative price")

        is_last = index == len(ordered) - 1
        if tier.max_quantity is None:
            if not is_last:
                problems.append(f"only the last tier may be unbounded ('{tier.name}' is not last)")
            continue

        if not is_last:
            following = ordered[index + 1]
            if following.min_quantity <= tier.max_quantity:
                problems.append(f"tiers '{tier.name}' and '{following.name}' overlap")
            elif following.min_quantity != tier.max_quantity + 1:
                problems.append(
                    f"gap between '{tier.name}' and '{following.name}' "
                    f"({tier.max_quantity + 1}..{following.min_quantity - 1} not priced)"
                )
    return problems


def select_tier(tiers: Sequence[TierBand], quantity: int) -> Optional[TierBand]:
    """
    Find the tier pricing ``quantity``.

    Returns None for quantity <= 0 (nothing to price).

    Raises:
        CatalogConfigurationError: no tier covers a positive quantity
    """
    if quantity <= 0:
        return None
    for tier in _ordered(tiers):
        if tier.contains(quantity):
            return tier
    raise CatalogConfigurationError(f"No addon tier covers quantity {quantity}")


def tier_price(tier: TierBand, period: BillingPeriod) -> int:
    if period == BillingPeriod.yearly:
        return tier.yearly_price
    return tier.monthly_price


def unit_price(access: Optional[PlanAddonAccess], period: BillingPeriod) -> Optional[int]:
    if access is None:
        return None
    if period == BillingPeriod.yearly:
        return access.unit_yearly_price
    return access.unit_monthly_price


@dataclass(frozen=True)
class PriceQuote:
    quantity: int
    period: BillingPeriod
    amount: int
    tier: Optional[TierBand] = None
    unit_price: Optional[int] = None


class AddonPricingService:
    """
    Prices addon quantities against the catalog.

    Business Rules:
    - A plan's per-unit price, when set for the period, wins over tiers:
      amount = unit price x quantity
    - Otherwise the matching tier's flat price for the period applies
    - Monthly and yearly prices are independent catalog values
    - Tier snapshots are served from the process-wide CatalogCache

    Runs inside the caller's ``async with uow`` block.
    """

    def __init__(self, uow: UnitOfWork, cache: CatalogCache):
        self.uow = uow
        self.cache = cache

    async def tiers_for(self, addon_id: UUID) -> List[TierBand]:
        cached = self.cache.get_tiers(addon_id)
        if cached is None:
            generation = self.cache.generation(addon_id)
            rows = await self.uow.addons.list_tiers(addon_id)
            cached = tuple(TierBand.from_entity(row) for row in rows)
            self.cache.put_tiers(addon_id, cached, generation)
        return list(cached)

    async def quote(
        self,
        addon_id: UUID,
        quantity: int,
        period: BillingPeriod,
        plan_id: Optional[UUID] = None,
    ) -> Result[PriceQuote]:
        if quantity <= 0:
            return Return.ok(PriceQuote(quantity=quantity, period=period, amount=0))

        if plan_id is not None:
            access = await self.uow.addons.get_plan_access(plan_id, addon_id)
            per_unit = unit_price(access, period)
            if per_unit is not None:
                return Return.ok(
                    PriceQuote(
                        quantity=quantity,
                        period=period,
                        amount=per_unit * quantity,
                        unit_price=per_unit,
                    )
                )

        tiers = await self.tiers_for(addon_id)
        try:
            tier = select_tier(tiers, quantity)
        except CatalogConfigurationError as e:
            logger.error("Addon %s: %s", addon_id, e)
            return Return.err(
                Error("CATALOG_MISCONFIGURED", "Addon pricing is not configured for this quantity")
            )

        return Return.ok(
            PriceQuote(
                quantity=quantity,
                period=period,
                amount=tier_price(tier, period),
                tier=tier,
            )
        )
