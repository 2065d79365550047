"""
Billing Use Case DTOs
"""

from typing import List, Optional
from uuid import UUID

from pydantic import Field

from civicgate.app.services.catalog_cache import TierBand
from civicgate.domain.base import CamelModel
from civicgate.domain.entities import AddonCode, BillingPeriod


class TierInput(CamelModel):
    """One tier of a replacement ladder, as sent by the superadmin"""

    name: str = Field(..., min_length=1, max_length=255)
    min_quantity: int
    max_quantity: Optional[int] = None
    monthly_price: int
    yearly_price: int


class TierView(CamelModel):
    id: UUID
    name: str
    min_quantity: int
    max_quantity: Optional[int] = None
    monthly_price: int
    yearly_price: int

    @classmethod
    def from_band(cls, band: TierBand) -> "TierView":
        return cls(
            id=band.id,
            name=band.name,
            min_quantity=band.min_quantity,
            max_quantity=band.max_quantity,
            monthly_price=band.monthly_price,
            yearly_price=band.yearly_price,
        )


class AddonTiersResponse(CamelModel):
    addon_id: UUID
    addon_code: AddonCode
    tiers: List[TierView]


class AddonPriceResponse(CamelModel):
    """Price of a quantity, in minor currency units"""

    addon_code: AddonCode
    quantity: int
    period: BillingPeriod
    amount: int
    tier_name: Optional[str] = None
    unit_price: Optional[int] = None


class AddonCharge(CamelModel):
    addon_code: AddonCode
    name: str
    quantity: int
    monthly_amount: int
    yearly_amount: int
    tier_name: Optional[str] = None


class TenantAddonChargesResponse(CamelModel):
    items: List[AddonCharge]
    monthly_total: int
    yearly_total: int
