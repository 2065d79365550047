from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from civicgate.domain.entities import Addon, AddonTier, PlanAddonAccess, TenantAddon


class IAddonRepository(ABC):
    """Addon catalog and tenant addon subscription interface - application layer"""

    @abstractmethod
    async def get_by_id(self, addon_id: UUID) -> Optional[Addon]:
        pass

    @abstractmethod
    async def get_by_code(self, code: str) -> Optional[Addon]:
        pass

    @abstractmethod
    async def list_tiers(self, addon_id: UUID) -> List[AddonTier]:
        """Tiers of an addon, ascending by min_quantity"""
        pass

    @abstractmethod
    async def replace_tiers(self, addon_id: UUID, tiers: List[AddonTier]) -> List[AddonTier]:
        """Delete the addon's tiers and insert the given ones"""
        pass

    @abstractmethod
    async def get_plan_access(
        self, plan_id: UUID, addon_id: UUID
    ) -> Optional[PlanAddonAccess]:
        pass

    @abstractmethod
    async def list_enabled_plan_access(self, plan_id: UUID) -> List[PlanAddonAccess]:
        pass

    @abstractmethod
    async def list_active_tenant_addons(self, tenant_id: UUID) -> List[TenantAddon]:
        """ACTIVE subscriptions with quantity >= 1"""
        pass
