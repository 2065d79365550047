"""
Replace Addon Tiers Use Case

Superadmin catalog edit: swaps an addon's whole tier ladder.
"""

from typing import List
from uuid import UUID, uuid4

from civicgate.app.services.catalog_cache import CatalogCache, TierBand
from civicgate.app.services.pricing_service import validate_tiers
from civicgate.app.services.unit_of_work import UnitOfWork
from civicgate.domain.entities import ActorType, AddonTier, AuditEvent
from civicgate.domain.result import Error, Result, Return
from .dtos import AddonTiersResponse, TierInput, TierView


class ReplaceAddonTiersUseCase:
    """
    Business Rules:
    - The new ladder must partition [1, inf): starts at 1, contiguous,
      non-overlapping, only the last tier unbounded, non-negative prices
    - Rejected ladders leave the catalog untouched (INVALID_TIERS with problems)
    - The catalog cache is invalidated after commit
    """

    def __init__(self, uow: UnitOfWork, cache: CatalogCache):
        self.uow = uow
        self.cache = cache

    async def execute(
        self, addon_id: UUID, tiers: List[TierInput], superadmin_id: UUID
    ) -> Result[AddonTiersResponse]:
        bands = [
            TierBand(
                id=uuid4(),
                name=tier.name,
                min_quantity=tier.min_quantity,
                max_quantity=tier.max_quantity,
                monthly_price=tier.monthly_price,
                yearly_price=tier.yearly_price,
            )
            for tier in tiers
        ]
        problems = validate_tiers(bands)
        if problems:
            return Return.err(
                Error("INVALID_TIERS", "Tier ladder is not well formed", {"problems": problems})
            )

        ordered = sorted(bands, key=lambda band: band.min_quantity)

        async with self.uow:
            addon = await self.uow.addons.get_by_id(addon_id)
            if addon is None:
                return Return.err(Error("ADDON_NOT_FOUND", "Addon not found"))

            await self.uow.addons.replace_tiers(
                addon.id,
                [
                    AddonTier(
                        id=band.id,
                        addon_id=addon.id,
                        name=band.name,
                        min_quantity=band.min_quantity,
                        max_quantity=band.max_quantity,
                        monthly_price=band.monthly_price,
                        yearly_price=band.yearly_price,
                        display_order=index,
                    )
                    for index, band in enumerate(ordered)
                ],
            )

            await self.uow.audit_events.create(
                AuditEvent(
                    actor_type=ActorType.superadmin,
                    actor_id=superadmin_id,
                    action="addon_tiers_replaced",
                    event_metadata={"addon_id": str(addon.id), "tiers": len(ordered)},
                )
            )

            await self.uow.commit()
            addon_code = addon.code

        self.cache.invalidate(addon_id)

        return Return.ok(
            AddonTiersResponse(
                addon_id=addon_id,
                addon_code=addon_code,
                tiers=[TierView.from_band(band) for band in ordered],
            )
        )
