"""Addon pricing and billing use cases"""

from .dtos import (
    AddonCharge,
    AddonPriceResponse,
    AddonTiersResponse,
    TenantAddonChargesResponse,
    TierInput,
    TierView,
)
from .list_tenant_addon_charges_use_case import ListTenantAddonChargesUseCase
from .quote_addon_price_use_case import ListAddonTiersUseCase, QuoteAddonPriceUseCase
from .replace_addon_tiers_use_case import ReplaceAddonTiersUseCase

__all__ = [
    "ListAddonTiersUseCase",
    "ListTenantAddonChargesUseCase",
    "QuoteAddonPriceUseCase",
    "ReplaceAddonTiersUseCase",
    "AddonCharge",
    "AddonPriceResponse",
    "AddonTiersResponse",
    "TenantAddonChargesResponse",
    "TierInput",
    "TierView",
]
