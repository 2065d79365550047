"""
Load Admin Session Use Cases

"Who am I" for each admin realm. A blocked actor still gets its identity
back (with accountBlocked and blockReason) so the client can render the
block page instead of a login loop.
"""

from typing import Any, Mapping, Optional

from civicgate.app.services.session_resolver import SessionResolver
from civicgate.app.services.unit_of_work import UnitOfWork
from civicgate.domain.actor import Actor, AdminActor, ElectedOfficialActor, SuperadminActor
from civicgate.domain.entities import AdminMenuCode
from civicgate.domain.result import Result, Return
from .authorize_admin_area_use_case import (
    AuthorizeAssociationAdminUseCase,
    AuthorizeSuperadminUseCase,
    AuthorizeTenantAdminUseCase,
)
from .dtos import (
    AdminSessionResponse,
    AssociationSessionResponse,
    ElectedOfficialInfo,
    SuperadminSessionResponse,
)


def _effective_menus(actor: ElectedOfficialActor):
    if actor.has_full_access:
        return list(AdminMenuCode)
    return [code for code in AdminMenuCode if code in actor.menu_permissions]


def admin_session_response(actor: Actor) -> AdminSessionResponse:
    if isinstance(actor, ElectedOfficialActor):
        return AdminSessionResponse(
            id=actor.id,
            name=f"{actor.first_name} {actor.last_name}",
            email=actor.email,
            role=actor.actor_type.value,
            is_elected_official=True,
            account_blocked=actor.is_blocked,
            block_reason=actor.block_reason,
            elected_official=ElectedOfficialInfo(
                id=actor.id,
                first_name=actor.first_name,
                last_name=actor.last_name,
                email=actor.email,
                has_full_access=actor.has_full_access,
                menu_permissions=_effective_menus(actor),
            ),
        )

    if isinstance(actor, AdminActor):
        role = actor.role
    elif isinstance(actor, SuperadminActor):
        role = actor.actor_type.value
    else:
        raise TypeError(f"{actor!r} has no tenant admin session")

    return AdminSessionResponse(
        id=actor.id,
        name=actor.name,
        email=actor.email,
        role=role,
        is_elected_official=False,
        account_blocked=actor.is_blocked,
        block_reason=actor.block_reason,
    )


class LoadAdminSessionUseCase:
    def __init__(self, uow: UnitOfWork, resolver: SessionResolver):
        self.uow = uow
        self.resolver = resolver

    async def execute(
        self, tenant_slug: str, claims: Optional[Mapping[str, Any]]
    ) -> Result[AdminSessionResponse]:
        access = await AuthorizeTenantAdminUseCase(self.uow, self.resolver).execute(
            tenant_slug, claims, enforce_block=False
        )
        if access.is_err():
            return Return.err(access.error)
        return Return.ok(admin_session_response(access.value.actor))


class LoadAssociationSessionUseCase:
    def __init__(self, uow: UnitOfWork, resolver: SessionResolver):
        self.uow = uow
        self.resolver = resolver

    async def execute(
        self, tenant_slug: str, association_slug: str, claims: Optional[Mapping[str, Any]]
    ) -> Result[AssociationSessionResponse]:
        access = await AuthorizeAssociationAdminUseCase(self.uow, self.resolver).execute(
            tenant_slug, association_slug, claims, enforce_block=False
        )
        if access.is_err():
            return Return.err(access.error)

        actor = access.value.actor
        return Return.ok(
            AssociationSessionResponse(
                id=actor.id,
                name=actor.name,
                email=actor.email,
                role=actor.role,
                association_id=actor.association_id,
                account_blocked=actor.is_blocked,
                block_reason=actor.block_reason,
            )
        )


class LoadSuperadminSessionUseCase:
    def __init__(self, uow: UnitOfWork, resolver: SessionResolver):
        self.uow = uow
        self.resolver = resolver

    async def execute(
        self, claims: Optional[Mapping[str, Any]]
    ) -> Result[SuperadminSessionResponse]:
        access = await AuthorizeSuperadminUseCase(self.uow, self.resolver).execute(claims)
        if access.is_err():
            return Return.err(access.error)

        actor = access.value.actor
        return Return.ok(
            SuperadminSessionResponse(id=actor.id, name=actor.name, email=actor.email)
        )
