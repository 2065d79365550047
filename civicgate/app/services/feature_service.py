"""
Feature Flag Evaluator

Answers "which features has this tenant unlocked" from its subscription
plan, its superadmin override and its active addon subscriptions.
"""

import logging
from typing import Iterable, List, Optional
from uuid import UUID

from civicgate.app.services.unit_of_work import UnitOfWork
from civicgate.domain.base import CamelModel
from civicgate.domain.entities import (
    AddonCode,
    AddonSubscriptionStatus,
    SubscriptionPlan,
    Tenant,
    TenantFeatureOverride,
)
from civicgate.domain.result import Error, Result, Return

logger = logging.getLogger(__name__)

FLAG_NAMES = ("has_ideas", "has_incidents", "has_meetings", "has_events")


class EffectiveFeatures(CamelModel):
    has_ideas: bool
    has_incidents: bool
    has_meetings: bool
    has_events: bool
    features: List[AddonCode] = []
    plan_name: Optional[str] = None

    def is_enabled(self, flag: str) -> bool:
        return bool(getattr(self, flag))


def resolve_features(
    plan: Optional[SubscriptionPlan],
    enabled_addon_codes: Iterable[AddonCode],
    override: Optional[TenantFeatureOverride] = None,
    fail_open: bool = True,
) -> EffectiveFeatures:
    """
    Compute the effective feature set.

    Boolean flags come from the plan alone; addons add entries to
    ``features`` but never flip a flag. A non-null override column replaces
    the plan flag. Without a plan every flag equals ``fail_open``.
    """
    if plan is None:
        flags = {name: fail_open for name in FLAG_NAMES}
    else:
        flags = {name: bool(getattr(plan, name)) for name in FLAG_NAMES}

    if override is not None:
        for name in FLAG_NAMES:
            value = getattr(override, name)
            if value is not None:
                flags[name] = value

    codes = sorted({AddonCode(code) for code in enabled_addon_codes}, key=lambda c: c.value)
    return EffectiveFeatures(
        features=codes,
        plan_name=plan.name if plan is not None else None,
        **flags,
    )


class FeatureService:
    """
    Loads the inputs of ``resolve_features`` for a tenant.

    Business Rules:
    - An addon counts as enabled when the tenant's plan grants it
      (PlanAddonAccess.is_enabled), the addon is active, and the tenant holds
      an ACTIVE subscription with quantity >= 1
    - The plan's own is_active flag does not affect existing subscribers
    - A tenant with no plan follows the fail-open policy (logged)
    - A tenant pointing at a missing plan is a catalog defect: PLAN_NOT_FOUND

    Runs inside the caller's ``async with uow`` block.
    """

    def __init__(self, uow: UnitOfWork, fail_open_on_missing_plan: bool = True):
        self.uow = uow
        self.fail_open_on_missing_plan = fail_open_on_missing_plan

    async def enabled_addon_codes(self, tenant_id: UUID, plan_id: UUID) -> List[AddonCode]:
        granted = {
            access.addon_id
            for access in await self.uow.addons.list_enabled_plan_access(plan_id)
        }
        codes = []
        for subscription in await self.uow.addons.list_active_tenant_addons(tenant_id):
            if subscription.addon_id not in granted:
                continue
            if subscription.status != AddonSubscriptionStatus.active or subscription.quantity < 1:
                continue
            addon = await self.uow.addons.get_by_id(subscription.addon_id)
            if addon is None or not addon.is_active:
                continue
            codes.append(addon.code)
        return codes

    async def for_tenant(self, tenant: Tenant) -> Result[EffectiveFeatures]:
        override = await self.uow.plans.get_feature_override(tenant.id)

        if tenant.subscription_plan_id is None:
            logger.warning(
                "Tenant %s has no subscription plan; features fail %s",
                tenant.slug, "open" if self.fail_open_on_missing_plan else "closed",
            )
            return Return.ok(
                resolve_features(None, [], override, self.fail_open_on_missing_plan)
            )

        plan = await self.uow.plans.get_by_id(tenant.subscription_plan_id)
        if plan is None:
            logger.error(
                "Tenant %s references missing plan %s", tenant.slug, tenant.subscription_plan_id
            )
            return Return.err(
                Error("PLAN_NOT_FOUND", "Subscription plan is not configured")
            )

        codes = await self.enabled_addon_codes(tenant.id, plan.id)
        return Return.ok(resolve_features(plan, codes, override))
