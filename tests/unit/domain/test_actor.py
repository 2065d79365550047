from uuid import uuid4

import pytest

from civicgate.domain.actor import (
    ANONYMOUS,
    AdminActor,
    AssociationUserActor,
    BlockState,
    ElectedOfficialActor,
    SuperadminActor,
    has_menu_access,
)
from civicgate.domain.entities import AdminMenuCode

ALL_MENUS = list(AdminMenuCode)


def admin():
    return AdminActor(
        id=uuid4(), tenant_id=uuid4(), name="Alice", email="alice@ville.fr", role="ADMIN"
    )


def official(has_full_access=False, menus=()):
    return ElectedOfficialActor(
        id=uuid4(),
        tenant_id=uuid4(),
        first_name="Claire",
        last_name="Martin",
        email=None,
        has_full_access=has_full_access,
        menu_permissions=frozenset(menus),
    )


def association_user():
    return AssociationUserActor(
        id=uuid4(),
        tenant_id=uuid4(),
        association_id=uuid4(),
        name="Bob",
        email="bob@club.fr",
        role="ADMIN",
    )


def superadmin():
    return SuperadminActor(id=uuid4(), name="Ops", email="ops@civicgate.io")


@pytest.mark.parametrize("menu", ALL_MENUS)
def test_menu_access_truth_table(menu):
    assert has_menu_access(ANONYMOUS, menu) is False
    assert has_menu_access(admin(), menu) is True
    assert has_menu_access(superadmin(), menu) is True
    assert has_menu_access(association_user(), menu) is True
    assert has_menu_access(official(has_full_access=True), menu) is True
    assert has_menu_access(official(menus=[menu]), menu) is True
    others = [code for code in ALL_MENUS if code != menu]
    assert has_menu_access(official(menus=others), menu) is False


def test_full_access_ignores_allow_list():
    actor = official(has_full_access=True, menus=[AdminMenuCode.ideas])

    assert has_menu_access(actor, AdminMenuCode.billing)


def test_anonymous_is_not_authenticated():
    assert not ANONYMOUS.is_authenticated
    assert not ANONYMOUS.is_blocked
    assert admin().is_authenticated


def test_block_state_prefers_first_blocked():
    account = BlockState(True, "account")
    tenant = BlockState(True, "tenant")

    assert BlockState.first_of(BlockState(), tenant) == tenant
    assert BlockState.first_of(account, tenant) == account
    assert BlockState.first_of(BlockState(), BlockState()).blocked is False


def test_block_reason_hidden_when_not_blocked():
    actor = AdminActor(
        id=uuid4(),
        tenant_id=uuid4(),
        name="Alice",
        email="alice@ville.fr",
        role="ADMIN",
        block=BlockState(False, "stale reason"),
    )

    assert actor.block_reason is None
