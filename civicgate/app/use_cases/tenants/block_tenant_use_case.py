"""
Use Cases: Block / Unblock Tenant

Superadmin moderation of a whole tenant. Blocking does not end sessions:
every admin actor of the tenant is reported ACCOUNT_BLOCKED (with the reason)
until the tenant is unblocked.
"""

from typing import Optional
from uuid import UUID

from civicgate.domain.base import CamelModel, utcnow
from civicgate.app.services.unit_of_work import UnitOfWork
from civicgate.domain.entities import ActorType, AuditEvent
from civicgate.domain.result import Error, Result, Return


class TenantBlockResponse(CamelModel):
    tenant_id: UUID
    account_blocked: bool
    block_reason: Optional[str] = None


class BlockTenantUseCase:
    """
    Business Logic:
    1. Validate tenant exists
    2. Mark it blocked with the given reason
    3. Create audit event

    Idempotent: blocking a blocked tenant updates the reason.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, tenant_id: UUID, reason: str, superadmin_id: UUID
    ) -> Result[TenantBlockResponse]:
        async with self.uow:
            tenant = await self.uow.tenants.get_by_id(tenant_id)
            if tenant is None:
                return Return.err(Error("TENANT_NOT_FOUND", "Tenant not found"))

            tenant.account_blocked = True
            tenant.block_reason = reason
            tenant.updated_at = utcnow()
            await self.uow.tenants.update(tenant)

            await self.uow.audit_events.create(
                AuditEvent(
                    tenant_id=tenant.id,
                    actor_type=ActorType.superadmin,
                    actor_id=superadmin_id,
                    action="tenant_blocked",
                    event_metadata={"reason": reason},
                )
            )

            await self.uow.commit()

            return Return.ok(
                TenantBlockResponse(
                    tenant_id=tenant_id, account_blocked=True, block_reason=reason
                )
            )


class UnblockTenantUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, tenant_id: UUID, superadmin_id: UUID) -> Result[TenantBlockResponse]:
        async with self.uow:
            tenant = await self.uow.tenants.get_by_id(tenant_id)
            if tenant is None:
                return Return.err(Error("TENANT_NOT_FOUND", "Tenant not found"))

            tenant.account_blocked = False
            tenant.block_reason = None
            tenant.updated_at = utcnow()
            await self.uow.tenants.update(tenant)

            await self.uow.audit_events.create(
                AuditEvent(
                    tenant_id=tenant.id,
                    actor_type=ActorType.superadmin,
                    actor_id=superadmin_id,
                    action="tenant_unblocked",
                )
            )

            await self.uow.commit()

            return Return.ok(TenantBlockResponse(tenant_id=tenant_id, account_blocked=False))
