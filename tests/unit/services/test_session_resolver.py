"""
Unit tests for session resolution and admin-area authorization.
"""
from datetime import timedelta
from uuid import uuid4

import pytest

from civicgate.app.services.session_resolver import SessionResolver, authorize
from civicgate.domain.actor import (
    ANONYMOUS,
    AdminActor,
    AssociationUserActor,
    BlockState,
    ElectedOfficialActor,
    SuperadminActor,
)
from civicgate.domain.entities import (
    ActorType,
    AdminMenuCode,
    AdminUser,
    Association,
    AssociationUser,
    ElectedOfficial,
    Session,
    Superadmin,
    Tenant,
)

LOGIN_PATH = "/structures/ville/admin/login"


def official_actor(**overrides):
    fields = dict(
        id=uuid4(),
        tenant_id=uuid4(),
        first_name="Claire",
        last_name="Martin",
        email="claire@ville.fr",
        has_full_access=False,
        menu_permissions=frozenset({AdminMenuCode.ideas}),
    )
    fields.update(overrides)
    return ElectedOfficialActor(**fields)


# ============================================================================
# authorize
# ============================================================================


def test_anonymous_gets_authentication_required_with_login_path():
    result = authorize(ANONYMOUS, AdminMenuCode.ideas, LOGIN_PATH)

    assert result.error.code == "AUTHENTICATION_REQUIRED"
    assert result.error.details == {"loginPath": LOGIN_PATH}


def test_blocked_actor_gets_account_blocked_before_menu_check():
    actor = official_actor(block=BlockState(True, "Unpaid invoice"))

    # BILLING is outside the allow-list, but the block is reported first
    result = authorize(actor, AdminMenuCode.billing, LOGIN_PATH)

    assert result.error.code == "ACCOUNT_BLOCKED"
    assert result.error.details == {"blockReason": "Unpaid invoice"}


def test_blocked_actor_passes_when_block_not_enforced():
    actor = official_actor(block=BlockState(True, "Unpaid invoice"))

    result = authorize(actor, None, LOGIN_PATH, enforce_block=False)

    assert result.is_ok()


def test_menu_outside_allow_list_is_forbidden():
    result = authorize(official_actor(), AdminMenuCode.billing, LOGIN_PATH)

    assert result.error.code == "FORBIDDEN"


def test_menu_in_allow_list_is_allowed():
    assert authorize(official_actor(), AdminMenuCode.ideas, LOGIN_PATH).is_ok()


def test_no_menu_only_requires_a_session():
    assert authorize(official_actor(menu_permissions=frozenset()), None, LOGIN_PATH).is_ok()


# ============================================================================
# SessionResolver
# ============================================================================


def open_session(actor_type, actor_id, clock, **overrides):
    fields = dict(
        actor_type=actor_type,
        actor_id=actor_id,
        created_at=clock.now,
        expires_at=clock.now + timedelta(days=7),
    )
    fields.update(overrides)
    return Session(**fields)


def claims_for(session):
    return {"sid": str(session.id), "typ": session.actor_type.value}


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "claims",
    [None, {}, {"sid": "not-a-uuid", "typ": "ADMIN"}, {"sid": str(uuid4())}, {"typ": "ADMIN"}],
)
async def test_missing_or_malformed_claims_are_anonymous(mock_uow, claims):
    actor = await SessionResolver(mock_uow).resolve(claims)

    assert actor is ANONYMOUS
    mock_uow.sessions.get_by_id.assert_not_awaited()


@pytest.mark.asyncio
async def test_unknown_marker_is_anonymous(mock_uow):
    actor = await SessionResolver(mock_uow).resolve({"sid": str(uuid4()), "typ": "ROOT"})

    assert actor is ANONYMOUS


@pytest.mark.asyncio
async def test_revoked_session_is_anonymous(mock_uow, clock):
    session = open_session(ActorType.admin, uuid4(), clock, revoked=True)
    mock_uow.sessions.get_by_id.return_value = session

    actor = await SessionResolver(mock_uow, clock).resolve(claims_for(session))

    assert actor is ANONYMOUS


@pytest.mark.asyncio
async def test_expired_session_is_anonymous(mock_uow, clock):
    session = open_session(ActorType.admin, uuid4(), clock)
    mock_uow.sessions.get_by_id.return_value = session
    clock.advance(timedelta(days=7))

    actor = await SessionResolver(mock_uow, clock).resolve(claims_for(session))

    assert actor is ANONYMOUS


@pytest.mark.asyncio
async def test_marker_must_match_session_type(mock_uow, clock):
    session = open_session(ActorType.elected_official, uuid4(), clock)
    mock_uow.sessions.get_by_id.return_value = session

    actor = await SessionResolver(mock_uow, clock).resolve(
        {"sid": str(session.id), "typ": ActorType.superadmin.value}
    )

    assert actor is ANONYMOUS
    mock_uow.superadmins.get_by_id.assert_not_awaited()


@pytest.mark.asyncio
async def test_admin_inherits_tenant_block(mock_uow, clock):
    tenant = Tenant(name="Ville", slug="ville", account_blocked=True, block_reason="Suspended")
    admin = AdminUser(
        tenant_id=tenant.id, name="Alice", email="alice@ville.fr", password_hash="x"
    )
    session = open_session(ActorType.admin, admin.id, clock)
    mock_uow.sessions.get_by_id.return_value = session
    mock_uow.admin_users.get_by_id.return_value = admin
    mock_uow.tenants.get_by_id.return_value = tenant

    actor = await SessionResolver(mock_uow, clock).resolve(claims_for(session))

    assert isinstance(actor, AdminActor)
    assert actor.is_blocked
    assert actor.block_reason == "Suspended"


@pytest.mark.asyncio
async def test_account_block_reason_wins_over_tenant(mock_uow, clock):
    tenant = Tenant(name="Ville", slug="ville", account_blocked=True, block_reason="Suspended")
    admin = AdminUser(
        tenant_id=tenant.id,
        name="Alice",
        email="alice@ville.fr",
        password_hash="x",
        account_blocked=True,
        block_reason="Left the council",
    )
    session = open_session(ActorType.admin, admin.id, clock)
    mock_uow.sessions.get_by_id.return_value = session
    mock_uow.admin_users.get_by_id.return_value = admin
    mock_uow.tenants.get_by_id.return_value = tenant

    actor = await SessionResolver(mock_uow, clock).resolve(claims_for(session))

    assert actor.block_reason == "Left the council"


@pytest.mark.asyncio
async def test_full_access_official_skips_allow_list(mock_uow, clock):
    tenant = Tenant(name="Ville", slug="ville")
    official = ElectedOfficial(
        tenant_id=tenant.id,
        first_name="Claire",
        last_name="Martin",
        function="Maire",
        password_hash="x",
        has_full_access=True,
    )
    session = open_session(ActorType.elected_official, official.id, clock)
    mock_uow.sessions.get_by_id.return_value = session
    mock_uow.elected_officials.get_by_id.return_value = official
    mock_uow.tenants.get_by_id.return_value = tenant

    actor = await SessionResolver(mock_uow, clock).resolve(claims_for(session))

    assert isinstance(actor, ElectedOfficialActor)
    assert actor.can_manage(AdminMenuCode.billing)
    mock_uow.elected_officials.get_menu_permissions.assert_not_awaited()


@pytest.mark.asyncio
async def test_partial_official_loads_allow_list(mock_uow, clock):
    tenant = Tenant(name="Ville", slug="ville")
    official = ElectedOfficial(
        tenant_id=tenant.id,
        first_name="Claire",
        last_name="Martin",
        function="Adjointe",
        password_hash="x",
    )
    session = open_session(ActorType.elected_official, official.id, clock)
    mock_uow.sessions.get_by_id.return_value = session
    mock_uow.elected_officials.get_by_id.return_value = official
    mock_uow.elected_officials.get_menu_permissions.return_value = [AdminMenuCode.ideas]
    mock_uow.tenants.get_by_id.return_value = tenant

    actor = await SessionResolver(mock_uow, clock).resolve(claims_for(session))

    assert actor.menu_permissions == frozenset({AdminMenuCode.ideas})
    assert actor.can_manage(AdminMenuCode.ideas)
    assert not actor.can_manage(AdminMenuCode.billing)


@pytest.mark.asyncio
@pytest.mark.parametrize("is_active,password_hash", [(False, "x"), (True, None)])
async def test_inactive_or_uninvited_official_is_anonymous(
    mock_uow, clock, is_active, password_hash
):
    official = ElectedOfficial(
        tenant_id=uuid4(),
        first_name="Claire",
        last_name="Martin",
        function="Adjointe",
        password_hash=password_hash,
        is_active=is_active,
    )
    session = open_session(ActorType.elected_official, official.id, clock)
    mock_uow.sessions.get_by_id.return_value = session
    mock_uow.elected_officials.get_by_id.return_value = official

    actor = await SessionResolver(mock_uow, clock).resolve(claims_for(session))

    assert actor is ANONYMOUS


@pytest.mark.asyncio
async def test_association_user_blocked_by_association(mock_uow, clock):
    tenant = Tenant(name="Ville", slug="ville")
    association = Association(
        tenant_id=tenant.id,
        name="Club",
        slug="club",
        account_blocked=True,
        block_reason="Dissolved",
    )
    user = AssociationUser(
        association_id=association.id, name="Bob", email="bob@club.fr", password_hash="x"
    )
    session = open_session(ActorType.association_user, user.id, clock)
    mock_uow.sessions.get_by_id.return_value = session
    mock_uow.associations.get_user_by_id.return_value = user
    mock_uow.associations.get_by_id.return_value = association
    mock_uow.tenants.get_by_id.return_value = tenant

    actor = await SessionResolver(mock_uow, clock).resolve(claims_for(session))

    assert isinstance(actor, AssociationUserActor)
    assert actor.association_id == association.id
    assert actor.block_reason == "Dissolved"


@pytest.mark.asyncio
async def test_inactive_superadmin_is_anonymous(mock_uow, clock):
    superadmin = Superadmin(
        email="ops@civicgate.io", password_hash="x", name="Ops", is_active=False
    )
    session = open_session(ActorType.superadmin, superadmin.id, clock)
    mock_uow.sessions.get_by_id.return_value = session
    mock_uow.superadmins.get_by_id.return_value = superadmin

    actor = await SessionResolver(mock_uow, clock).resolve(claims_for(session))

    assert actor is ANONYMOUS


@pytest.mark.asyncio
async def test_active_superadmin(mock_uow, clock):
    superadmin = Superadmin(email="ops@civicgate.io", password_hash="x", name="Ops")
    session = open_session(ActorType.superadmin, superadmin.id, clock)
    mock_uow.sessions.get_by_id.return_value = session
    mock_uow.superadmins.get_by_id.return_value = superadmin

    actor = await SessionResolver(mock_uow, clock).resolve(claims_for(session))

    assert isinstance(actor, SuperadminActor)
    assert actor.id == superadmin.id
