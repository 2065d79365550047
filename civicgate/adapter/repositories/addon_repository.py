from typing import List, Optional
from uuid import UUID

from sqlalchemy import delete
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from civicgate.app.repositories.addon_repository import IAddonRepository
from civicgate.domain.entities import (
    Addon,
    AddonSubscriptionStatus,
    AddonTier,
    PlanAddonAccess,
    TenantAddon,
)


class AddonRepository(IAddonRepository):
    """Addon catalog repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, addon_id: UUID) -> Optional[Addon]:
        stmt = select(Addon).where(Addon.id == addon_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_code(self, code: str) -> Optional[Addon]:
        stmt = select(Addon).where(Addon.code == code)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_tiers(self, addon_id: UUID) -> List[AddonTier]:
        stmt = (
            select(AddonTier)
            .where(AddonTier.addon_id == addon_id)
            .order_by(AddonTier.min_quantity)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def replace_tiers(self, addon_id: UUID, tiers: List[AddonTier]) -> List[AddonTier]:
        await self.session.execute(delete(AddonTier).where(AddonTier.addon_id == addon_id))
        for tier in tiers:
            self.session.add(tier)
        await self.session.flush()
        return tiers

    async def get_plan_access(
        self, plan_id: UUID, addon_id: UUID
    ) -> Optional[PlanAddonAccess]:
        stmt = select(PlanAddonAccess).where(
            PlanAddonAccess.plan_id == plan_id, PlanAddonAccess.addon_id == addon_id
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_enabled_plan_access(self, plan_id: UUID) -> List[PlanAddonAccess]:
        stmt = select(PlanAddonAccess).where(
            PlanAddonAccess.plan_id == plan_id, PlanAddonAccess.is_enabled == True
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_active_tenant_addons(self, tenant_id: UUID) -> List[TenantAddon]:
        stmt = select(TenantAddon).where(
            TenantAddon.tenant_id == tenant_id,
            TenantAddon.status == AddonSubscriptionStatus.active,
            TenantAddon.quantity >= 1,
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
