"""
Unit tests for effective feature resolution.
"""
from uuid import uuid4

import pytest

from civicgate.app.services.feature_service import FeatureService, resolve_features
from civicgate.domain.entities import (
    Addon,
    AddonCode,
    AddonSubscriptionStatus,
    PlanAddonAccess,
    SubscriptionPlan,
    Tenant,
    TenantAddon,
    TenantFeatureOverride,
)


@pytest.fixture
def standard_plan():
    return SubscriptionPlan(
        code="STANDARD",
        name="Standard",
        has_ideas=True,
        has_incidents=True,
        has_meetings=True,
        has_events=False,
    )


def test_standard_plan_without_addons(standard_plan):
    features = resolve_features(standard_plan, [])

    assert features.features == []
    assert features.has_ideas and features.has_incidents and features.has_meetings
    assert features.plan_name == "Standard"


def test_addon_adds_feature_without_changing_flags(standard_plan):
    without = resolve_features(standard_plan, [])
    with_addon = resolve_features(standard_plan, [AddonCode.associations])

    assert with_addon.features == [AddonCode.associations]
    for flag in ("has_ideas", "has_incidents", "has_meetings", "has_events"):
        assert with_addon.is_enabled(flag) == without.is_enabled(flag)


def test_features_are_sorted_and_unique(standard_plan):
    features = resolve_features(
        standard_plan, [AddonCode.mairies, AddonCode.admin, AddonCode.mairies]
    )

    assert features.features == [AddonCode.admin, AddonCode.mairies]


def test_override_replaces_only_non_null_flags(standard_plan):
    override = TenantFeatureOverride(tenant_id=uuid4(), has_ideas=False, has_events=True)

    features = resolve_features(standard_plan, [], override)

    assert features.has_ideas is False
    assert features.has_events is True
    assert features.has_incidents is True


@pytest.mark.parametrize("fail_open", [True, False])
def test_missing_plan_follows_policy(fail_open):
    features = resolve_features(None, [], fail_open=fail_open)

    assert features.has_ideas is fail_open
    assert features.has_incidents is fail_open
    assert features.has_meetings is fail_open
    assert features.plan_name is None


def test_serializes_with_camel_case_keys(standard_plan):
    payload = resolve_features(standard_plan, [AddonCode.associations]).model_dump(
        by_alias=True, mode="json"
    )

    assert payload["hasIdeas"] is True
    assert payload["features"] == ["ASSOCIATIONS"]
    assert payload["planName"] == "Standard"


@pytest.mark.asyncio
async def test_enabled_addon_requires_access_active_addon_and_subscription(mock_uow):
    tenant_id, plan_id = uuid4(), uuid4()
    associations = Addon(code=AddonCode.associations, name="Associations")
    admin = Addon(code=AddonCode.admin, name="Admins")
    mairies = Addon(code=AddonCode.mairies, name="Communes", is_active=False)
    addons = {addon.id: addon for addon in (associations, admin, mairies)}

    mock_uow.addons.list_enabled_plan_access.return_value = [
        PlanAddonAccess(plan_id=plan_id, addon_id=associations.id),
        PlanAddonAccess(plan_id=plan_id, addon_id=mairies.id),
    ]
    mock_uow.addons.list_active_tenant_addons.return_value = [
        TenantAddon(tenant_id=tenant_id, addon_id=associations.id, quantity=3),
        # Not granted by the plan
        TenantAddon(tenant_id=tenant_id, addon_id=admin.id, quantity=2),
        # Addon withdrawn from the catalog
        TenantAddon(tenant_id=tenant_id, addon_id=mairies.id, quantity=1),
    ]
    mock_uow.addons.get_by_id.side_effect = lambda addon_id: addons.get(addon_id)

    codes = await FeatureService(mock_uow).enabled_addon_codes(tenant_id, plan_id)

    assert codes == [AddonCode.associations]


@pytest.mark.asyncio
async def test_zero_quantity_or_cancelled_subscription_is_not_enabled(mock_uow):
    tenant_id, plan_id = uuid4(), uuid4()
    associations = Addon(code=AddonCode.associations, name="Associations")
    mock_uow.addons.list_enabled_plan_access.return_value = [
        PlanAddonAccess(plan_id=plan_id, addon_id=associations.id)
    ]
    mock_uow.addons.list_active_tenant_addons.return_value = [
        TenantAddon(tenant_id=tenant_id, addon_id=associations.id, quantity=0),
        TenantAddon(
            tenant_id=tenant_id,
            addon_id=associations.id,
            quantity=4,
            status=AddonSubscriptionStatus.cancelled,
        ),
    ]
    mock_uow.addons.get_by_id.return_value = associations

    codes = await FeatureService(mock_uow).enabled_addon_codes(tenant_id, plan_id)

    assert codes == []


@pytest.mark.asyncio
async def test_tenant_without_plan_fails_closed_when_configured(mock_uow):
    tenant = Tenant(name="Ville", slug="ville")
    mock_uow.plans.get_feature_override.return_value = None

    result = await FeatureService(mock_uow, fail_open_on_missing_plan=False).for_tenant(tenant)

    assert result.is_ok()
    assert result.value.has_ideas is False
    mock_uow.plans.get_by_id.assert_not_awaited()


@pytest.mark.asyncio
async def test_dangling_plan_reference_is_plan_not_found(mock_uow):
    tenant = Tenant(name="Ville", slug="ville", subscription_plan_id=uuid4())
    mock_uow.plans.get_feature_override.return_value = None
    mock_uow.plans.get_by_id.return_value = None

    result = await FeatureService(mock_uow).for_tenant(tenant)

    assert result.is_err()
    assert result.error.code == "PLAN_NOT_FOUND"
