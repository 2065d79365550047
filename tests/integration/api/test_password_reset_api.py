from datetime import timedelta

import pytest
import pytest_asyncio
from httpx import AsyncClient
from sqlmodel import select

from civicgate.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from civicgate.app.services.token_service import TokenService
from civicgate.domain.entities import AccessToken, TokenKind, TokenSubjectType
from tests.integration.factories import create_admin, create_tenant, login


@pytest_asyncio.fixture
async def lyon(db_session, catalog):
    return await create_tenant(db_session, "lyon", catalog.plans["STANDARD"])


async def issue_reset_token(db_session, subject_id, ttl=None) -> str:
    """Stands in for the emailed link: the plaintext never leaves the service otherwise"""
    uow = SqlAlchemyUnitOfWork(db_session)
    async with uow:
        token = await TokenService(uow).issue(
            TokenKind.password_reset, TokenSubjectType.admin_user, subject_id, ttl=ttl
        )
        await uow.commit()
    return token


@pytest.mark.asyncio
async def test_request_does_not_reveal_accounts(client: AsyncClient, db_session, lyon):
    await create_admin(db_session, lyon, "alice@lyon.fr")

    known = await client.post(
        "/api/password-reset/request", json={"email": "alice@lyon.fr", "tenantSlug": "lyon"}
    )
    unknown = await client.post(
        "/api/password-reset/request", json={"email": "ghost@lyon.fr", "tenantSlug": "lyon"}
    )

    assert known.status_code == unknown.status_code == 200
    assert known.json() == unknown.json()


@pytest.mark.asyncio
async def test_request_stores_hashed_token(client: AsyncClient, db_session, lyon):
    admin_id = await create_admin(db_session, lyon, "alice@lyon.fr")

    await client.post(
        "/api/password-reset/request", json={"email": "alice@lyon.fr", "tenantSlug": "lyon"}
    )

    rows = (
        await db_session.execute(select(AccessToken).where(AccessToken.subject_id == admin_id))
    ).scalars().all()
    assert len(rows) == 1
    assert rows[0].kind == TokenKind.password_reset
    assert len(rows[0].token_hash) == 64
    assert rows[0].expires_at - rows[0].issued_at == timedelta(hours=1)


@pytest.mark.asyncio
async def test_reset_flow_revokes_sessions(client: AsyncClient, db_session, lyon):
    """
    Given a signed-in admin with a valid reset token
    When the password is reset
    Then the old session stops working and the new password logs in
    And the token cannot be used twice
    """
    admin_id = await create_admin(db_session, lyon, "alice@lyon.fr")
    await login(client, "/api/tenants/lyon/admin/login", "alice@lyon.fr")
    assert (await client.get("/api/tenants/lyon/admin/me")).status_code == 200

    token = await issue_reset_token(db_session, admin_id)

    validate = await client.get("/api/password-reset/validate", params={"token": token})
    assert validate.status_code == 200
    assert validate.json() == {"valid": True, "accountType": "ADMIN"}

    confirm = await client.post(
        "/api/password-reset/confirm", json={"token": token, "newPassword": "BrandNew123!"}
    )
    assert confirm.status_code == 200
    assert confirm.json()["sessionsRevoked"] == 1

    assert (await client.get("/api/tenants/lyon/admin/me")).status_code == 401

    reuse = await client.post(
        "/api/password-reset/confirm", json={"token": token, "newPassword": "Another123!"}
    )
    assert reuse.status_code == 400
    assert reuse.json()["error"]["code"] == "INVALID_TOKEN"

    old = await login(client, "/api/tenants/lyon/admin/login", "alice@lyon.fr")
    new = await login(client, "/api/tenants/lyon/admin/login", "alice@lyon.fr", "BrandNew123!")
    assert old.status_code == 401
    assert new.status_code == 200


@pytest.mark.asyncio
async def test_expired_token(client: AsyncClient, db_session, lyon):
    admin_id = await create_admin(db_session, lyon, "alice@lyon.fr")
    token = await issue_reset_token(db_session, admin_id, ttl=timedelta(seconds=-1))

    validate = await client.get("/api/password-reset/validate", params={"token": token})
    confirm = await client.post(
        "/api/password-reset/confirm", json={"token": token, "newPassword": "BrandNew123!"}
    )

    assert validate.status_code == 400
    assert confirm.status_code == 400
    assert confirm.json()["error"]["code"] == "INVALID_TOKEN"


@pytest.mark.asyncio
async def test_weak_password_rejected(client: AsyncClient, db_session, lyon):
    admin_id = await create_admin(db_session, lyon, "alice@lyon.fr")
    token = await issue_reset_token(db_session, admin_id)

    response = await client.post(
        "/api/password-reset/confirm", json={"token": token, "newPassword": "short"}
    )

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_PASSWORD"
    assert (
        await client.get("/api/password-reset/validate", params={"token": token})
    ).status_code == 200
