"""
Catalog Cache

Process-wide store of addon tier snapshots. The catalog changes only through
superadmin writes, which call ``invalidate``.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional, Tuple
from uuid import UUID

from civicgate.domain.entities import AddonTier

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TierBand:
    """Immutable snapshot of an AddonTier row"""

    id: UUID
    name: str
    min_quantity: int
    max_quantity: Optional[int]
    monthly_price: int
    yearly_price: int
    display_order: int = 0

    @classmethod
    def from_entity(cls, tier: AddonTier) -> "TierBand":
        return cls(
            id=tier.id,
            name=tier.name,
            min_quantity=tier.min_quantity,
            max_quantity=tier.max_quantity,
            monthly_price=tier.monthly_price,
            yearly_price=tier.yearly_price,
            display_order=tier.display_order,
        )

    def contains(self, quantity: int) -> bool:
        if quantity < self.min_quantity:
            return False
        return self.max_quantity is None or quantity <= self.max_quantity


class CatalogCache:
    """
    Tier snapshots per addon, guarded by a per-addon generation.

    ``invalidate`` bumps the generation; a loader reads ``generation`` before
    hitting the database and passes it to ``put_tiers``, which drops the
    snapshot if a catalog write happened in between.

    State is per process: with several workers, a write only busts the
    worker that served it, the others keep their snapshot until their own
    invalidation or restart.
    """

    def __init__(self):
        self._tiers: Dict[UUID, Tuple[TierBand, ...]] = {}
        self._generations: Dict[UUID, int] = {}
        self._epoch = 0

    def generation(self, addon_id: UUID) -> Tuple[int, int]:
        return self._epoch, self._generations.get(addon_id, 0)

    def get_tiers(self, addon_id: UUID) -> Optional[Tuple[TierBand, ...]]:
        return self._tiers.get(addon_id)

    def put_tiers(
        self,
        addon_id: UUID,
        tiers: Tuple[TierBand, ...],
        generation: Optional[Tuple[int, int]] = None,
    ) -> bool:
        """Store a snapshot; returns False when it was loaded before an invalidation"""
        if generation is not None and generation != self.generation(addon_id):
            logger.info("Discarded stale tier snapshot for addon %s", addon_id)
            return False
        self._tiers[addon_id] = tuple(tiers)
        return True

    def invalidate(self, addon_id: Optional[UUID] = None) -> None:
        if addon_id is None:
            self._tiers.clear()
            self._epoch += 1
        else:
            self._tiers.pop(addon_id, None)
            self._generations[addon_id] = self._generations.get(addon_id, 0) + 1
        logger.info("Catalog cache invalidated (%s)", addon_id or "all")
