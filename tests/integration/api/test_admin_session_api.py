import pytest
import pytest_asyncio
from httpx import AsyncClient

from config import ApplicationConfig
from civicgate.domain.entities import AdminMenuCode
from tests.integration.factories import (
    create_admin,
    create_association,
    create_association_user,
    create_elected_official,
    create_superadmin,
    create_tenant,
    login,
)


@pytest_asyncio.fixture
async def lyon(db_session, catalog):
    return await create_tenant(db_session, "lyon", catalog.plans["STANDARD"])


@pytest.mark.asyncio
async def test_admin_login_me_logout(client: AsyncClient, db_session, lyon):
    """
    Given an admin of tenant lyon
    When they log in, read their session and log out
    Then the cookie authenticates them until the session is revoked
    """
    admin_id = await create_admin(db_session, lyon, "alice@lyon.fr")

    response = await login(client, "/api/tenants/lyon/admin/login", "alice@lyon.fr")

    assert response.status_code == 200
    assert response.json()["actorType"] == "ADMIN"
    assert ApplicationConfig.SESSION_COOKIE_NAME in response.cookies
    set_cookie = response.headers["set-cookie"].lower()
    assert "httponly" in set_cookie
    assert "samesite=lax" in set_cookie

    me = await client.get("/api/tenants/lyon/admin/me")
    assert me.status_code == 200
    assert me.json()["id"] == str(admin_id)
    assert me.json()["isElectedOfficial"] is False
    assert me.json()["accountBlocked"] is False

    logout = await client.post("/api/tenants/lyon/admin/logout")
    assert logout.status_code == 200
    assert logout.json()["revoked"] is True

    after = await client.get("/api/tenants/lyon/admin/me")
    assert after.status_code == 401
    assert after.json()["error"]["details"]["loginPath"] == "/structures/lyon/admin/login"


@pytest.mark.asyncio
async def test_invalid_credentials(client: AsyncClient, db_session, lyon):
    await create_admin(db_session, lyon, "alice@lyon.fr")

    wrong = await login(client, "/api/tenants/lyon/admin/login", "alice@lyon.fr", "WrongPass!")
    unknown = await login(client, "/api/tenants/lyon/admin/login", "bob@lyon.fr")

    assert wrong.status_code == 401
    assert unknown.status_code == 401
    assert wrong.json()["error"] == unknown.json()["error"]
    assert wrong.json()["error"]["code"] == "INVALID_CREDENTIALS"


@pytest.mark.asyncio
async def test_logout_without_session_is_idempotent(client: AsyncClient, lyon):
    response = await client.post("/api/tenants/lyon/admin/logout")

    assert response.status_code == 200
    assert response.json()["revoked"] is False


@pytest.mark.asyncio
async def test_session_only_counts_for_its_own_tenant(client: AsyncClient, db_session, catalog, lyon):
    await create_tenant(db_session, "paris", catalog.plans["STANDARD"])
    await create_admin(db_session, lyon, "alice@lyon.fr")
    await login(client, "/api/tenants/lyon/admin/login", "alice@lyon.fr")

    response = await client.get("/api/tenants/paris/admin/me")

    assert response.status_code == 401
    assert response.json()["error"]["code"] == "AUTHENTICATION_REQUIRED"
    assert response.json()["error"]["details"]["loginPath"] == "/structures/paris/admin/login"


@pytest.mark.asyncio
async def test_tampered_cookie_is_anonymous(client: AsyncClient, db_session, lyon):
    client.cookies.set(ApplicationConfig.SESSION_COOKIE_NAME, "not.a.jwt")

    response = await client.get("/api/tenants/lyon/admin/me")

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_elected_official_menu_permissions(client: AsyncClient, db_session, lyon):
    """
    Given an elected official allowed only on IDEAS
    Then BILLING is forbidden and the session lists IDEAS only
    """
    await create_elected_official(
        db_session, lyon, "claire@lyon.fr", menus=[AdminMenuCode.ideas]
    )
    response = await login(client, "/api/tenants/lyon/admin/login", "claire@lyon.fr")
    assert response.json()["actorType"] == "ELU"

    me = (await client.get("/api/tenants/lyon/admin/me")).json()
    assert me["isElectedOfficial"] is True
    assert me["electedOfficial"]["menuPermissions"] == ["IDEAS"]

    billing = await client.get("/api/tenants/lyon/admin/billing/addons")
    assert billing.status_code == 403
    assert billing.json()["error"]["code"] == "FORBIDDEN"


@pytest.mark.asyncio
async def test_full_access_official_reaches_every_menu(client: AsyncClient, db_session, lyon):
    await create_elected_official(db_session, lyon, "maire@lyon.fr", has_full_access=True)
    await login(client, "/api/tenants/lyon/admin/login", "maire@lyon.fr")

    me = (await client.get("/api/tenants/lyon/admin/me")).json()
    billing = await client.get("/api/tenants/lyon/admin/billing/addons")

    assert me["electedOfficial"]["menuPermissions"] == [code.value for code in AdminMenuCode]
    assert billing.status_code == 200


@pytest.mark.asyncio
async def test_uninvited_official_cannot_login(client: AsyncClient, db_session, lyon):
    await create_elected_official(db_session, lyon, "claire@lyon.fr", with_password=False)

    response = await login(client, "/api/tenants/lyon/admin/login", "claire@lyon.fr")

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_blocked_admin(client: AsyncClient, db_session, lyon):
    """
    Given a blocked admin
    Then guarded routes answer 423 with the reason (never 403)
    And the session endpoint still identifies them with the block
    """
    await create_admin(
        db_session, lyon, "alice@lyon.fr", account_blocked=True, block_reason="Unpaid invoice"
    )
    response = await login(client, "/api/tenants/lyon/admin/login", "alice@lyon.fr")
    assert response.status_code == 200

    billing = await client.get("/api/tenants/lyon/admin/billing/addons")
    assert billing.status_code == 423
    assert billing.json()["error"]["code"] == "ACCOUNT_BLOCKED"
    assert billing.json()["error"]["details"]["blockReason"] == "Unpaid invoice"

    me = await client.get("/api/tenants/lyon/admin/me")
    assert me.status_code == 200
    assert me.json()["accountBlocked"] is True
    assert me.json()["blockReason"] == "Unpaid invoice"


@pytest.mark.asyncio
async def test_blocked_official_gets_blocked_not_forbidden(client: AsyncClient, db_session, catalog):
    tenant_id = await create_tenant(
        db_session,
        "lyon",
        catalog.plans["STANDARD"],
        account_blocked=True,
        block_reason="Contract ended",
    )
    await create_elected_official(db_session, tenant_id, "claire@lyon.fr")
    await login(client, "/api/tenants/lyon/admin/login", "claire@lyon.fr")

    # No menu grant at all; the tenant block still wins
    response = await client.get("/api/tenants/lyon/admin/billing/addons")

    assert response.status_code == 423
    assert response.json()["error"]["details"]["blockReason"] == "Contract ended"


@pytest.mark.asyncio
async def test_superadmin_reaches_tenant_admin_area(client: AsyncClient, db_session, lyon):
    await create_superadmin(db_session)
    await login(client, "/api/superadmin/login", "ops@civicgate.io")

    me = await client.get("/api/tenants/lyon/admin/me")
    billing = await client.get("/api/tenants/lyon/admin/billing/addons")

    assert me.status_code == 200
    assert me.json()["role"] == "SUPERADMIN"
    assert billing.status_code == 200


@pytest.mark.asyncio
async def test_association_session_realm(client: AsyncClient, db_session, lyon):
    club = await create_association(db_session, lyon, "club")
    await create_association(db_session, lyon, "chorale")
    await create_association_user(db_session, club, "bob@club.fr")

    response = await login(client, "/api/structures/lyon/club/admin/login", "bob@club.fr")
    assert response.status_code == 200
    assert response.json()["associationSlug"] == "club"

    me = await client.get("/api/structures/lyon/club/admin/me")
    assert me.status_code == 200
    assert me.json()["associationId"] == str(club)

    other = await client.get("/api/structures/lyon/chorale/admin/me")
    assert other.status_code == 401
    assert other.json()["error"]["details"]["loginPath"] == "/structures/lyon/chorale/admin/login"

    tenant_area = await client.get("/api/tenants/lyon/admin/me")
    assert tenant_area.status_code == 401

    await client.post("/api/structures/lyon/club/admin/logout")
    assert (await client.get("/api/structures/lyon/club/admin/me")).status_code == 401


@pytest.mark.asyncio
async def test_blocked_association(client: AsyncClient, db_session, lyon):
    club = await create_association(
        db_session, lyon, "club", account_blocked=True, block_reason="Dissolved"
    )
    await create_association_user(db_session, club, "bob@club.fr")
    await login(client, "/api/structures/lyon/club/admin/login", "bob@club.fr")

    me = await client.get("/api/structures/lyon/club/admin/me")

    assert me.status_code == 200
    assert me.json()["accountBlocked"] is True
    assert me.json()["blockReason"] == "Dissolved"
