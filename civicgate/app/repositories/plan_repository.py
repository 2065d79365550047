from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from civicgate.domain.entities import SubscriptionPlan, TenantFeatureOverride


class IPlanRepository(ABC):
    """SubscriptionPlan repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, plan_id: UUID) -> Optional[SubscriptionPlan]:
        pass

    @abstractmethod
    async def get_by_code(self, code: str) -> Optional[SubscriptionPlan]:
        pass

    @abstractmethod
    async def get_feature_override(
        self, tenant_id: UUID
    ) -> Optional[TenantFeatureOverride]:
        """Superadmin override of the tenant's plan flags, if any"""
        pass
