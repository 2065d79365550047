"""
Catalog seeding

Loads the subscription plans, the addon catalog and the per-plan addon
access rows. Idempotent: rows already present (by code) are left alone.

Usage:
    python -m civicgate.adapter.seed
"""

import asyncio
import logging

from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel, select
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from civicgate.domain.entities import (
    Addon,
    AddonCode,
    AddonTier,
    PlanAddonAccess,
    SubscriptionPlan,
)

logger = logging.getLogger(__name__)

PLANS = [
    {
        "code": "STANDARD",
        "name": "Standard",
        "monthly_price": 4900,
        "yearly_price": 49000,
        "max_admins": 2,
        "display_order": 1,
    },
    {
        "code": "PREMIUM",
        "name": "Premium",
        "monthly_price": 9900,
        "yearly_price": 99000,
        "max_admins": 5,
        "display_order": 2,
    },
]

ADDONS = [
    {
        "code": AddonCode.associations,
        "name": "Associations",
        "description": "Local associations with their own admin area",
    },
    {
        "code": AddonCode.admin,
        "name": "Additional administrators",
        "description": "Extra admin seats beyond the plan allowance",
    },
    {
        "code": AddonCode.mairies,
        "name": "Member communes",
        "description": "Communes attached to an inter-municipal body",
    },
]

ASSOCIATIONS_TIERS = [
    ("Up to 5 associations", 1, 5, 1500, 15000),
    ("6 to 20 associations", 6, 20, 3000, 30000),
    ("21 to 50 associations", 21, 50, 5000, 50000),
    ("51 to 100 associations", 51, 100, 8000, 80000),
    ("More than 100 associations", 101, None, 12000, 120000),
]

# Per-unit plan prices (minor units): addon code -> (monthly, yearly)
UNIT_PRICES = {
    AddonCode.admin: (15, 150),
    AddonCode.mairies: (50, 500),
}


async def _get_or_create_plan(session: AsyncSession, data: dict) -> SubscriptionPlan:
    result = await session.execute(
        select(SubscriptionPlan).where(SubscriptionPlan.code == data["code"])
    )
    plan = result.scalar_one_or_none()
    if plan is None:
        plan = SubscriptionPlan(**data)
        session.add(plan)
        await session.flush()
        logger.info("Created plan %s", plan.code)
    return plan


async def _get_or_create_addon(session: AsyncSession, data: dict) -> Addon:
    result = await session.execute(select(Addon).where(Addon.code == data["code"]))
    addon = result.scalar_one_or_none()
    if addon is None:
        addon = Addon(**data)
        session.add(addon)
        await session.flush()
        logger.info("Created addon %s", addon.code.value)
    return addon


async def seed_catalog(session: AsyncSession) -> None:
    plans = [await _get_or_create_plan(session, data) for data in PLANS]
    addons = {data["code"]: await _get_or_create_addon(session, data) for data in ADDONS}

    associations = addons[AddonCode.associations]
    result = await session.execute(
        select(AddonTier).where(AddonTier.addon_id == associations.id)
    )
    if not result.scalars().first():
        for order, (name, low, high, monthly, yearly) in enumerate(ASSOCIATIONS_TIERS, start=1):
            session.add(
                AddonTier(
                    addon_id=associations.id,
                    name=name,
                    min_quantity=low,
                    max_quantity=high,
                    monthly_price=monthly,
                    yearly_price=yearly,
                    display_order=order,
                )
            )
        logger.info("Created %d tiers for %s", len(ASSOCIATIONS_TIERS), associations.code.value)

    for plan in plans:
        for code, addon in addons.items():
            result = await session.execute(
                select(PlanAddonAccess).where(
                    PlanAddonAccess.plan_id == plan.id,
                    PlanAddonAccess.addon_id == addon.id,
                )
            )
            if result.scalar_one_or_none() is not None:
                continue
            monthly, yearly = UNIT_PRICES.get(code, (None, None))
            session.add(
                PlanAddonAccess(
                    plan_id=plan.id,
                    addon_id=addon.id,
                    is_enabled=True,
                    unit_monthly_price=monthly,
                    unit_yearly_price=yearly,
                )
            )

    await session.commit()


async def main() -> None:
    engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    session_factory = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        await seed_catalog(session)

    await engine.dispose()
    logger.info("Catalog seeded")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(main())
