from abc import ABC, abstractmethod
from typing import Iterable, List, Optional
from uuid import UUID

from civicgate.domain.entities import AdminMenuCode, ElectedOfficial


class IElectedOfficialRepository(ABC):
    """ElectedOfficial repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, official_id: UUID) -> Optional[ElectedOfficial]:
        pass

    @abstractmethod
    async def get_by_email_and_tenant(
        self, email: str, tenant_id: UUID
    ) -> Optional[ElectedOfficial]:
        pass

    @abstractmethod
    async def update(self, official: ElectedOfficial) -> ElectedOfficial:
        pass

    @abstractmethod
    async def get_menu_permissions(self, official_id: UUID) -> List[AdminMenuCode]:
        """Explicit allow-list of the official"""
        pass

    @abstractmethod
    async def set_menu_permissions(
        self, official_id: UUID, menu_codes: Iterable[AdminMenuCode]
    ) -> List[AdminMenuCode]:
        """Replace the allow-list"""
        pass
