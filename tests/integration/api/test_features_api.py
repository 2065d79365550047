import pytest
from httpx import AsyncClient

from civicgate.domain.entities import AddonCode
from tests.integration.factories import (
    create_association,
    create_tenant,
    override_features,
    subscribe_addon,
)


@pytest.mark.asyncio
async def test_standard_tenant_without_addons(client: AsyncClient, db_session, catalog):
    """
    Given a tenant on plan STANDARD with no addon subscription
    When the client asks for its features
    Then all plan flags are true and no addon feature is listed
    """
    await create_tenant(db_session, "lyon", catalog.plans["STANDARD"])

    response = await client.get("/api/tenants/lyon/features")

    assert response.status_code == 200
    data = response.json()
    assert data["hasIdeas"] is True
    assert data["hasIncidents"] is True
    assert data["hasMeetings"] is True
    assert data["features"] == []
    assert data["planName"] == "Standard"


@pytest.mark.asyncio
async def test_associations_addon_adds_feature_only(client: AsyncClient, db_session, catalog):
    tenant_id = await create_tenant(db_session, "lyon", catalog.plans["STANDARD"])
    before = (await client.get("/api/tenants/lyon/features")).json()

    await subscribe_addon(db_session, tenant_id, catalog.addons[AddonCode.associations], 3)
    after = (await client.get("/api/tenants/lyon/features")).json()

    assert after["features"] == ["ASSOCIATIONS"]
    for flag in ("hasIdeas", "hasIncidents", "hasMeetings", "hasEvents"):
        assert after[flag] == before[flag]


@pytest.mark.asyncio
async def test_zero_quantity_subscription_is_not_enabled(client: AsyncClient, db_session, catalog):
    tenant_id = await create_tenant(db_session, "lyon", catalog.plans["STANDARD"])
    await subscribe_addon(db_session, tenant_id, catalog.addons[AddonCode.associations], 0)

    response = await client.get("/api/tenants/lyon/features")

    assert response.json()["features"] == []


@pytest.mark.asyncio
async def test_association_inherits_tenant_features(client: AsyncClient, db_session, catalog):
    tenant_id = await create_tenant(db_session, "lyon", catalog.plans["PREMIUM"])
    await create_association(db_session, tenant_id, "club-rugby")
    await override_features(db_session, tenant_id, has_incidents=False)

    tenant = (await client.get("/api/tenants/lyon/features")).json()
    association = (await client.get("/api/structures/lyon/club-rugby/features")).json()

    assert association == tenant
    assert association["hasIncidents"] is False
    assert association["hasIdeas"] is True


@pytest.mark.asyncio
async def test_tenant_without_plan_fails_open(client: AsyncClient, db_session, catalog):
    await create_tenant(db_session, "trial")

    data = (await client.get("/api/tenants/trial/features")).json()

    assert data["hasIdeas"] and data["hasIncidents"] and data["hasMeetings"]
    assert data["planName"] is None


@pytest.mark.asyncio
async def test_unknown_tenant_and_association(client: AsyncClient, db_session, catalog):
    await create_tenant(db_session, "lyon", catalog.plans["STANDARD"])

    tenant = await client.get("/api/tenants/nowhere/features")
    association = await client.get("/api/structures/lyon/ghost/features")

    assert tenant.status_code == 404
    assert tenant.json()["error"]["code"] == "TENANT_NOT_FOUND"
    assert association.status_code == 404
    assert association.json()["error"]["code"] == "ASSOCIATION_NOT_FOUND"


@pytest.mark.asyncio
async def test_health(client: AsyncClient):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
