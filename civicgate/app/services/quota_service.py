"""
Seat and association quotas

allowed = what the subscription plan includes + the quantity purchased
through the matching addon (ADMIN for admin seats, ASSOCIATIONS for
associations). Only ACTIVE addon subscriptions count.
"""

import logging
from typing import Optional

from civicgate.app.services.unit_of_work import UnitOfWork
from civicgate.domain.base import CamelModel
from civicgate.domain.entities import (
    AddonCode,
    AddonSubscriptionStatus,
    SubscriptionPlan,
    Tenant,
)
from civicgate.domain.result import Error, Result, Return

logger = logging.getLogger(__name__)

# A tenant always has its first admin seat, plan or not
MIN_ADMIN_SEATS = 1


class Quota(CamelModel):
    used: int
    allowed: int
    remaining: int


def compute_quota(included: int, purchased: int, used: int) -> Quota:
    allowed = included + purchased
    return Quota(used=used, allowed=allowed, remaining=max(0, allowed - used))


class QuotaService:
    """
    Runs inside the caller's ``async with uow`` block.

    Business Rules:
    - Admin seats: plan max_admins (at least 1, also without a plan)
      + ADMIN addon quantity; used = admin users of the tenant
    - Associations: plan associations_included (0 without a plan)
      + ASSOCIATIONS addon quantity; used = active associations
    - A tenant pointing at a missing plan is a catalog defect: PLAN_NOT_FOUND
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def _plan(self, tenant: Tenant) -> Result[Optional[SubscriptionPlan]]:
        if tenant.subscription_plan_id is None:
            return Return.ok(None)
        plan = await self.uow.plans.get_by_id(tenant.subscription_plan_id)
        if plan is None:
            logger.error(
                "Tenant %s references missing plan %s", tenant.slug, tenant.subscription_plan_id
            )
            return Return.err(Error("PLAN_NOT_FOUND", "Subscription plan is not configured"))
        return Return.ok(plan)

    async def purchased_quantity(self, tenant: Tenant, code: AddonCode) -> int:
        total = 0
        for subscription in await self.uow.addons.list_active_tenant_addons(tenant.id):
            if subscription.status != AddonSubscriptionStatus.active:
                continue
            addon = await self.uow.addons.get_by_id(subscription.addon_id)
            if addon is not None and addon.code == code:
                total += max(subscription.quantity, 0)
        return total

    async def admin_quota(self, tenant: Tenant) -> Result[Quota]:
        plan = await self._plan(tenant)
        if plan.is_err():
            return Return.err(plan.error)

        included = MIN_ADMIN_SEATS
        if plan.value is not None:
            included = max(plan.value.max_admins, MIN_ADMIN_SEATS)

        purchased = await self.purchased_quantity(tenant, AddonCode.admin)
        used = await self.uow.admin_users.count_by_tenant(tenant.id)
        return Return.ok(compute_quota(included, purchased, used))

    async def association_quota(self, tenant: Tenant) -> Result[Quota]:
        plan = await self._plan(tenant)
        if plan.is_err():
            return Return.err(plan.error)

        included = plan.value.associations_included if plan.value is not None else 0
        purchased = await self.purchased_quantity(tenant, AddonCode.associations)
        used = await self.uow.associations.count_active_by_tenant(tenant.id)
        return Return.ok(compute_quota(included, purchased, used))
