from typing import Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from civicgate.app.repositories.plan_repository import IPlanRepository
from civicgate.domain.entities import SubscriptionPlan, TenantFeatureOverride


class PlanRepository(IPlanRepository):
    """SubscriptionPlan repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, plan_id: UUID) -> Optional[SubscriptionPlan]:
        stmt = select(SubscriptionPlan).where(SubscriptionPlan.id == plan_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_code(self, code: str) -> Optional[SubscriptionPlan]:
        stmt = select(SubscriptionPlan).where(SubscriptionPlan.code == code)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_feature_override(
        self, tenant_id: UUID
    ) -> Optional[TenantFeatureOverride]:
        stmt = select(TenantFeatureOverride).where(
            TenantFeatureOverride.tenant_id == tenant_id
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()
