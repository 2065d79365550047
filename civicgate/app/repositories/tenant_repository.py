from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from civicgate.domain.entities import Tenant


class ITenantRepository(ABC):
    """Tenant repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, tenant_id: UUID) -> Optional[Tenant]:
        pass

    @abstractmethod
    async def get_by_slug(self, slug: str) -> Optional[Tenant]:
        """Resolve the tenant addressed by a URL; slugs compare case-insensitively"""
        pass

    @abstractmethod
    async def update(self, tenant: Tenant) -> Tenant:
        """Persist plan, billing or block changes"""
        pass
