from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from civicgate.domain.entities import Association, AssociationUser


class IAssociationRepository(ABC):
    """Association and association-user repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, association_id: UUID) -> Optional[Association]:
        pass

    @abstractmethod
    async def get_by_slug(self, tenant_id: UUID, slug: str) -> Optional[Association]:
        """Get association by (tenant, slug)"""
        pass

    @abstractmethod
    async def get_user_by_id(self, user_id: UUID) -> Optional[AssociationUser]:
        pass

    @abstractmethod
    async def get_user_by_email(
        self, association_id: UUID, email: str
    ) -> Optional[AssociationUser]:
        pass

    @abstractmethod
    async def count_active_by_tenant(self, tenant_id: UUID) -> int:
        pass
