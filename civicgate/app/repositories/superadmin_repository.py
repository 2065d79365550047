from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from civicgate.domain.entities import Superadmin


class ISuperadminRepository(ABC):
    @abstractmethod
    async def get_by_id(self, superadmin_id: UUID) -> Optional[Superadmin]:
        pass

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[Superadmin]:
        pass

    @abstractmethod
    async def update(self, superadmin: Superadmin) -> Superadmin:
        pass
