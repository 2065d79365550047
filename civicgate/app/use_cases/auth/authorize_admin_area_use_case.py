"""
Authorize Admin Area Use Cases

Realm-scoped gatekeeping for the three admin areas: tenant admin,
association admin and superadmin. A session only authenticates inside the
realm it was opened for.
"""

from typing import Any, Mapping, Optional

from civicgate.app.services.session_resolver import SessionResolver, authorize
from civicgate.app.services.unit_of_work import UnitOfWork
from civicgate.domain.actor import (
    ANONYMOUS,
    Actor,
    AdminActor,
    AssociationUserActor,
    ElectedOfficialActor,
    SuperadminActor,
)
from civicgate.domain.entities import AdminMenuCode
from civicgate.domain.result import Error, Result, Return
from .dtos import AdminAccess

SUPERADMIN_LOGIN_PATH = "/superadmin/login"


def tenant_login_path(tenant_slug: str) -> str:
    return f"/structures/{tenant_slug}/admin/login"


def association_login_path(tenant_slug: str, association_slug: str) -> str:
    return f"/structures/{tenant_slug}/{association_slug}/admin/login"


class AuthorizeTenantAdminUseCase:
    """
    Gate a request to a tenant's admin area.

    Business Rules:
    - Unknown tenant slug: TENANT_NOT_FOUND
    - Admin and elected-official sessions count only for their own tenant
    - Superadmin sessions count for every tenant
    - Association sessions never count here
    - Then: AUTHENTICATION_REQUIRED, ACCOUNT_BLOCKED, FORBIDDEN (in that order)
    """

    def __init__(self, uow: UnitOfWork, resolver: SessionResolver):
        self.uow = uow
        self.resolver = resolver

    @staticmethod
    def _in_realm(actor: Actor, tenant_id) -> Actor:
        if isinstance(actor, SuperadminActor):
            return actor
        if isinstance(actor, (AdminActor, ElectedOfficialActor)) and actor.tenant_id == tenant_id:
            return actor
        return ANONYMOUS

    async def execute(
        self,
        tenant_slug: str,
        claims: Optional[Mapping[str, Any]],
        menu_code: Optional[AdminMenuCode] = None,
        enforce_block: bool = True,
    ) -> Result[AdminAccess]:
        async with self.uow:
            tenant = await self.uow.tenants.get_by_slug(tenant_slug)
            if tenant is None:
                return Return.err(Error("TENANT_NOT_FOUND", "Tenant not found"))

            actor = self._in_realm(await self.resolver.resolve(claims), tenant.id)
            result = authorize(
                actor, menu_code, tenant_login_path(tenant.slug), enforce_block
            )
            if result.is_err():
                return Return.err(result.error)

            return Return.ok(
                AdminAccess(actor=actor, tenant_id=tenant.id, tenant_slug=tenant.slug)
            )


class AuthorizeAssociationAdminUseCase:
    """
    Gate a request to an association's admin area.

    Business Rules:
    - Unknown tenant or association slug: *_NOT_FOUND
    - Only sessions of that association's own users count
    - Blocked when the association or its tenant is blocked
    """

    def __init__(self, uow: UnitOfWork, resolver: SessionResolver):
        self.uow = uow
        self.resolver = resolver

    async def execute(
        self,
        tenant_slug: str,
        association_slug: str,
        claims: Optional[Mapping[str, Any]],
        enforce_block: bool = True,
    ) -> Result[AdminAccess]:
        async with self.uow:
            tenant = await self.uow.tenants.get_by_slug(tenant_slug)
            if tenant is None:
                return Return.err(Error("TENANT_NOT_FOUND", "Tenant not found"))

            association = await self.uow.associations.get_by_slug(tenant.id, association_slug)
            if association is None:
                return Return.err(
                    Error("ASSOCIATION_NOT_FOUND", "Association not found")
                )

            actor = await self.resolver.resolve(claims)
            if not (
                isinstance(actor, AssociationUserActor)
                and actor.association_id == association.id
            ):
                actor = ANONYMOUS

            result = authorize(
                actor,
                None,
                association_login_path(tenant.slug, association.slug),
                enforce_block,
            )
            if result.is_err():
                return Return.err(result.error)

            return Return.ok(
                AdminAccess(
                    actor=actor,
                    tenant_id=tenant.id,
                    tenant_slug=tenant.slug,
                    association_id=association.id,
                )
            )


class AuthorizeSuperadminUseCase:
    """Only an active superadmin session opens the platform back office."""

    def __init__(self, uow: UnitOfWork, resolver: SessionResolver):
        self.uow = uow
        self.resolver = resolver

    async def execute(self, claims: Optional[Mapping[str, Any]]) -> Result[AdminAccess]:
        async with self.uow:
            actor = await self.resolver.resolve(claims)
            if not isinstance(actor, SuperadminActor):
                actor = ANONYMOUS

            result = authorize(actor, None, SUPERADMIN_LOGIN_PATH)
            if result.is_err():
                return Return.err(result.error)

            return Return.ok(AdminAccess(actor=actor))
