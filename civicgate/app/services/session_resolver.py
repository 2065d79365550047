"""
Session and Permission Resolver

Turns decoded session-cookie claims into an Actor, and decides whether that
actor may reach an admin menu section.
"""

import logging
from datetime import datetime
from typing import Any, Callable, Mapping, Optional
from uuid import UUID

from civicgate.app.services.unit_of_work import UnitOfWork
from civicgate.domain.actor import (
    ANONYMOUS,
    Actor,
    AdminActor,
    AssociationUserActor,
    BlockState,
    ElectedOfficialActor,
    SuperadminActor,
    has_menu_access,
)
from civicgate.domain.base import utcnow
from civicgate.domain.entities import ActorType, AdminMenuCode, Session
from civicgate.domain.result import Error, Result, Return

logger = logging.getLogger(__name__)


def _block_of(entity: Any) -> BlockState:
    if entity is None:
        return BlockState()
    return BlockState(bool(entity.account_blocked), entity.block_reason)


def authorize(
    actor: Actor,
    menu_code: Optional[AdminMenuCode],
    login_path: str,
    enforce_block: bool = True,
) -> Result[Actor]:
    """
    Gate an admin area request.

    Checks, in order: authenticated, not blocked, may manage ``menu_code``
    (skipped when None). A blocked actor always gets ACCOUNT_BLOCKED, never
    FORBIDDEN. ``enforce_block=False`` lets a blocked actor read its own
    session so the client can show the block reason.
    """
    if not actor.is_authenticated:
        return Return.err(
            Error(
                "AUTHENTICATION_REQUIRED",
                "Authentication required",
                {"loginPath": login_path},
            )
        )

    if actor.is_blocked:
        if not enforce_block:
            return Return.ok(actor)
        return Return.err(
            Error(
                "ACCOUNT_BLOCKED",
                "This account has been blocked",
                {"blockReason": actor.block_reason},
            )
        )

    if menu_code is not None and not has_menu_access(actor, menu_code):
        return Return.err(Error("FORBIDDEN", "Access denied"))

    return Return.ok(actor)


class SessionResolver:
    """
    Resolves the acting identity behind a session.

    Business Rules:
    - Claims must carry a session id (``sid``) and account-type marker (``typ``)
    - The session must exist, be unrevoked, unexpired and of the same type
    - The account is loaded from the table the marker names
    - Elected officials must be active and have set a password; their
      allow-list is only loaded when they lack full access
    - Block state combines the account with its tenant (and association)
    - Any failure resolves to the anonymous actor, never an exception

    Runs inside the caller's ``async with uow`` block.
    """

    def __init__(self, uow: UnitOfWork, clock: Callable[[], datetime] = utcnow):
        self.uow = uow
        self.clock = clock

    async def resolve(self, claims: Optional[Mapping[str, Any]]) -> Actor:
        if not claims:
            return ANONYMOUS

        try:
            session_id = UUID(str(claims["sid"]))
            actor_type = ActorType(claims["typ"])
        except (KeyError, TypeError, ValueError):
            logger.debug("Session claims malformed")
            return ANONYMOUS

        session = await self.uow.sessions.get_by_id(session_id)
        if session is None or session.revoked:
            return ANONYMOUS
        if session.expires_at is not None and self.clock() >= session.expires_at:
            return ANONYMOUS
        if session.actor_type != actor_type:
            logger.warning("Session %s type mismatch (%s)", session.id, actor_type.value)
            return ANONYMOUS

        loaders = {
            ActorType.admin: self._load_admin,
            ActorType.elected_official: self._load_elected_official,
            ActorType.association_user: self._load_association_user,
            ActorType.superadmin: self._load_superadmin,
        }
        return await loaders[actor_type](session)

    async def _load_admin(self, session: Session) -> Actor:
        user = await self.uow.admin_users.get_by_id(session.actor_id)
        if user is None:
            return ANONYMOUS
        tenant = await self.uow.tenants.get_by_id(user.tenant_id)
        return AdminActor(
            id=user.id,
            tenant_id=user.tenant_id,
            name=user.name,
            email=user.email,
            role=user.role.value,
            block=BlockState.first_of(_block_of(user), _block_of(tenant)),
        )

    async def _load_elected_official(self, session: Session) -> Actor:
        official = await self.uow.elected_officials.get_by_id(session.actor_id)
        if official is None or not official.is_active or not official.password_hash:
            return ANONYMOUS

        permissions = frozenset()
        if not official.has_full_access:
            permissions = frozenset(
                await self.uow.elected_officials.get_menu_permissions(official.id)
            )

        tenant = await self.uow.tenants.get_by_id(official.tenant_id)
        return ElectedOfficialActor(
            id=official.id,
            tenant_id=official.tenant_id,
            first_name=official.first_name,
            last_name=official.last_name,
            email=official.email,
            has_full_access=official.has_full_access,
            menu_permissions=permissions,
            block=BlockState.first_of(_block_of(official), _block_of(tenant)),
        )

    async def _load_association_user(self, session: Session) -> Actor:
        user = await self.uow.associations.get_user_by_id(session.actor_id)
        if user is None:
            return ANONYMOUS
        association = await self.uow.associations.get_by_id(user.association_id)
        if association is None:
            return ANONYMOUS
        tenant = await self.uow.tenants.get_by_id(association.tenant_id)
        return AssociationUserActor(
            id=user.id,
            tenant_id=association.tenant_id,
            association_id=association.id,
            name=user.name,
            email=user.email,
            role=user.role.value,
            block=BlockState.first_of(_block_of(association), _block_of(tenant)),
        )

    async def _load_superadmin(self, session: Session) -> Actor:
        superadmin = await self.uow.superadmins.get_by_id(session.actor_id)
        if superadmin is None or not superadmin.is_active:
            return ANONYMOUS
        return SuperadminActor(
            id=superadmin.id, name=superadmin.name, email=superadmin.email
        )
