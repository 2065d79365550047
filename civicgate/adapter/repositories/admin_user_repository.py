from typing import Optional
from uuid import UUID

from sqlmodel import func, select
from sqlmodel.ext.asyncio.session import AsyncSession

from civicgate.app.repositories.admin_user_repository import IAdminUserRepository
from civicgate.domain.entities import AdminUser


class AdminUserRepository(IAdminUserRepository):
    """AdminUser repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, user_id: UUID) -> Optional[AdminUser]:
        stmt = select(AdminUser).where(AdminUser.id == user_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_email_and_tenant(
        self, email: str, tenant_id: UUID
    ) -> Optional[AdminUser]:
        stmt = select(AdminUser).where(
            AdminUser.email == email, AdminUser.tenant_id == tenant_id
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def update(self, user: AdminUser) -> AdminUser:
        self.session.add(user)
        await self.session.flush()
        await self.session.refresh(user)
        return user

    async def count_by_tenant(self, tenant_id: UUID) -> int:
        stmt = select(func.count()).select_from(AdminUser).where(AdminUser.tenant_id == tenant_id)
        result = await self.session.execute(stmt)
        return result.scalar_one()
