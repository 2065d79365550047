"""
Get Tenant Quotas Use Case

Admin seats and associations: used, allowed and remaining.
"""

from typing import Optional
from uuid import UUID

from civicgate.app.services.quota_service import Quota, QuotaService
from civicgate.app.services.unit_of_work import UnitOfWork
from civicgate.domain.actor import Actor
from civicgate.domain.base import CamelModel
from civicgate.domain.entities import AdminMenuCode
from civicgate.domain.result import Error, Result, Return


class TenantQuotasResponse(CamelModel):
    admins: Optional[Quota] = None
    associations: Optional[Quota] = None


class GetTenantQuotasUseCase:
    """
    Business Rules:
    - The admin seat quota is shown to actors managing ADMINS
    - The association quota is shown to actors managing ASSOCIATIONS
    - An actor with neither menu gets FORBIDDEN
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, tenant_id: UUID, actor: Actor) -> Result[TenantQuotasResponse]:
        show_admins = actor.can_manage(AdminMenuCode.admins)
        show_associations = actor.can_manage(AdminMenuCode.associations)
        if not (show_admins or show_associations):
            return Return.err(Error("FORBIDDEN", "Access denied"))

        async with self.uow:
            tenant = await self.uow.tenants.get_by_id(tenant_id)
            if tenant is None:
                return Return.err(Error("TENANT_NOT_FOUND", "Tenant not found"))

            quotas = QuotaService(self.uow)
            response = TenantQuotasResponse()

            if show_admins:
                admins = await quotas.admin_quota(tenant)
                if admins.is_err():
                    return Return.err(admins.error)
                response.admins = admins.value

            if show_associations:
                associations = await quotas.association_quota(tenant)
                if associations.is_err():
                    return Return.err(associations.error)
                response.associations = associations.value

            return Return.ok(response)
