from typing import Optional
from uuid import UUID

from sqlmodel import func, select
from sqlmodel.ext.asyncio.session import AsyncSession

from civicgate.app.repositories.association_repository import IAssociationRepository
from civicgate.domain.entities import Association, AssociationUser


class AssociationRepository(IAssociationRepository):
    """Association repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, association_id: UUID) -> Optional[Association]:
        stmt = select(Association).where(Association.id == association_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_slug(self, tenant_id: UUID, slug: str) -> Optional[Association]:
        stmt = select(Association).where(
            Association.tenant_id == tenant_id, Association.slug == slug
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_user_by_id(self, user_id: UUID) -> Optional[AssociationUser]:
        stmt = select(AssociationUser).where(AssociationUser.id == user_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_user_by_email(
        self, association_id: UUID, email: str
    ) -> Optional[AssociationUser]:
        stmt = select(AssociationUser).where(
            AssociationUser.association_id == association_id,
            AssociationUser.email == email,
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def count_active_by_tenant(self, tenant_id: UUID) -> int:
        stmt = (
            select(func.count())
            .select_from(Association)
            .where(Association.tenant_id == tenant_id, Association.is_active == True)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()
