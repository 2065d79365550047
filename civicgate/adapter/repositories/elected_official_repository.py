from typing import Iterable, List, Optional
from uuid import UUID

from sqlalchemy import delete
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from civicgate.app.repositories.elected_official_repository import IElectedOfficialRepository
from civicgate.domain.entities import (
    AdminMenuCode,
    ElectedOfficial,
    ElectedOfficialMenuPermission,
)


class ElectedOfficialRepository(IElectedOfficialRepository):
    """ElectedOfficial repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, official_id: UUID) -> Optional[ElectedOfficial]:
        stmt = select(ElectedOfficial).where(ElectedOfficial.id == official_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_email_and_tenant(
        self, email: str, tenant_id: UUID
    ) -> Optional[ElectedOfficial]:
        stmt = select(ElectedOfficial).where(
            ElectedOfficial.email == email, ElectedOfficial.tenant_id == tenant_id
        )
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def update(self, official: ElectedOfficial) -> ElectedOfficial:
        self.session.add(official)
        await self.session.flush()
        await self.session.refresh(official)
        return official

    async def get_menu_permissions(self, official_id: UUID) -> List[AdminMenuCode]:
        stmt = select(ElectedOfficialMenuPermission.menu_code).where(
            ElectedOfficialMenuPermission.elected_official_id == official_id
        )
        result = await self.session.execute(stmt)
        return [AdminMenuCode(code) for code in result.scalars().all()]

    async def set_menu_permissions(
        self, official_id: UUID, menu_codes: Iterable[AdminMenuCode]
    ) -> List[AdminMenuCode]:
        await self.session.execute(
            delete(ElectedOfficialMenuPermission).where(
                ElectedOfficialMenuPermission.elected_official_id == official_id
            )
        )
        codes = list(dict.fromkeys(menu_codes))
        for code in codes:
            self.session.add(
                ElectedOfficialMenuPermission(elected_official_id=official_id, menu_code=code)
            )
        await self.session.flush()
        return codes
