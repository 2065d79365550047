import pytest
import pytest_asyncio
from httpx import AsyncClient

from tests.integration.factories import create_association, create_tenant, override_features

ANONYMOUS_ID = "anon_" + "0f1e2d3c4b5a6978" * 2


@pytest_asyncio.fixture
async def lyon(db_session, catalog):
    return await create_tenant(db_session, "lyon", catalog.plans["STANDARD"])


@pytest.mark.asyncio
async def test_submit_and_track_idea(client: AsyncClient, lyon):
    """
    Given a tenant whose plan includes ideas
    When a resident submits an idea
    Then they receive a tracking token that keeps working
    """
    response = await client.post(
        "/api/tenants/lyon/ideas",
        json={"title": "More benches", "description": "Along the river", "anonymousId": ANONYMOUS_ID},
    )

    assert response.status_code == 201
    data = response.json()
    assert data["kind"] == "IDEA"
    assert data["status"] == "NEW"
    token = data["trackingToken"]

    for _ in range(2):
        tracked = await client.get(f"/api/tenants/lyon/ideas/track/{token}")
        assert tracked.status_code == 200
        assert tracked.json()["id"] == data["id"]
        assert tracked.json()["title"] == "More benches"


@pytest.mark.asyncio
async def test_tracking_token_is_bound_to_its_contribution(client: AsyncClient, db_session, catalog, lyon):
    await create_tenant(db_session, "paris", catalog.plans["STANDARD"])
    response = await client.post(
        "/api/tenants/lyon/ideas", json={"title": "Trees", "description": "Plant some"}
    )
    token = response.json()["trackingToken"]

    other_tenant = await client.get(f"/api/tenants/paris/ideas/track/{token}")
    other_kind = await client.get(f"/api/tenants/lyon/incidents/track/{token}")
    made_up = await client.get("/api/tenants/lyon/ideas/track/not-a-token")

    for rejected in (other_tenant, other_kind, made_up):
        assert rejected.status_code == 400
        assert rejected.json()["error"]["code"] == "INVALID_TOKEN"


@pytest.mark.asyncio
async def test_incident_with_location(client: AsyncClient, lyon):
    response = await client.post(
        "/api/tenants/lyon/incidents",
        json={"title": "Pothole", "description": "Deep one", "location": "Rue Garibaldi"},
    )
    token = response.json()["trackingToken"]

    tracked = await client.get(f"/api/tenants/lyon/incidents/track/{token}")

    assert response.status_code == 201
    assert tracked.json()["location"] == "Rue Garibaldi"
    assert tracked.json()["kind"] == "INCIDENT"


@pytest.mark.asyncio
async def test_feature_gate(client: AsyncClient, db_session, lyon):
    await override_features(db_session, lyon, has_ideas=False)

    response = await client.post(
        "/api/tenants/lyon/ideas", json={"title": "Benches", "description": "Please"}
    )

    assert response.status_code == 403
    assert response.json()["error"]["code"] == "FEATURE_NOT_AVAILABLE"


@pytest.mark.asyncio
async def test_malformed_anonymous_id(client: AsyncClient, lyon):
    response = await client.post(
        "/api/tenants/lyon/ideas",
        json={"title": "Benches", "description": "Please", "anonymousId": "anon_123"},
    )

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_ANONYMOUS_ID"


@pytest.mark.asyncio
async def test_my_contributions(client: AsyncClient, lyon):
    await client.post(
        "/api/tenants/lyon/ideas",
        json={"title": "Benches", "description": "Please", "anonymousId": ANONYMOUS_ID},
    )
    await client.post(
        "/api/tenants/lyon/incidents",
        json={"title": "Pothole", "description": "Deep", "anonymousId": ANONYMOUS_ID},
    )
    await client.post(
        "/api/tenants/lyon/ideas", json={"title": "Someone else", "description": "Not mine"}
    )

    response = await client.get(
        "/api/tenants/lyon/my-contributions", params={"anonymousId": ANONYMOUS_ID}
    )
    invalid = await client.get(
        "/api/tenants/lyon/my-contributions", params={"anonymousId": "me"}
    )

    assert response.status_code == 200
    assert [idea["title"] for idea in response.json()["ideas"]] == ["Benches"]
    assert [incident["title"] for incident in response.json()["incidents"]] == ["Pothole"]
    assert invalid.status_code == 400


@pytest.mark.asyncio
async def test_association_idea(client: AsyncClient, db_session, lyon):
    await create_association(db_session, lyon, "club")

    response = await client.post(
        "/api/structures/lyon/club/ideas", json={"title": "Training", "description": "More"}
    )
    token = response.json()["trackingToken"]

    at_association = await client.get(f"/api/structures/lyon/club/ideas/track/{token}")
    at_tenant = await client.get(f"/api/tenants/lyon/ideas/track/{token}")
    unknown = await client.post(
        "/api/structures/lyon/ghost/ideas", json={"title": "x", "description": "y"}
    )

    assert response.status_code == 201
    assert at_association.status_code == 200
    assert at_tenant.status_code == 400
    assert unknown.status_code == 404
