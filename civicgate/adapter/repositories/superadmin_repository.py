from typing import Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from civicgate.app.repositories.superadmin_repository import ISuperadminRepository
from civicgate.domain.entities import Superadmin


class SuperadminRepository(ISuperadminRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, superadmin_id: UUID) -> Optional[Superadmin]:
        stmt = select(Superadmin).where(Superadmin.id == superadmin_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_email(self, email: str) -> Optional[Superadmin]:
        stmt = select(Superadmin).where(Superadmin.email == email)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def update(self, superadmin: Superadmin) -> Superadmin:
        self.session.add(superadmin)
        await self.session.flush()
        await self.session.refresh(superadmin)
        return superadmin
