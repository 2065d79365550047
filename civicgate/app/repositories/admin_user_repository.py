from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from civicgate.domain.entities import AdminUser


class IAdminUserRepository(ABC):
    """AdminUser repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, user_id: UUID) -> Optional[AdminUser]:
        pass

    @abstractmethod
    async def get_by_email_and_tenant(
        self, email: str, tenant_id: UUID
    ) -> Optional[AdminUser]:
        pass

    @abstractmethod
    async def update(self, user: AdminUser) -> AdminUser:
        pass

    @abstractmethod
    async def count_by_tenant(self, tenant_id: UUID) -> int:
        """Admin seats in use"""
        pass
