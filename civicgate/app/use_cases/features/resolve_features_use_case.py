"""
Resolve Features Use Cases

Effective feature flags of a tenant, or of an association (inherited from
its tenant).
"""

from civicgate.app.services.feature_service import EffectiveFeatures, FeatureService
from civicgate.app.services.unit_of_work import UnitOfWork
from civicgate.domain.result import Error, Result, Return


class ResolveTenantFeaturesUseCase:
    """
    Business Rules:
    - Unknown slug: TENANT_NOT_FOUND
    - Flags from the plan (or superadmin override), features from enabled addons
    - Tenant without a plan: configurable fail-open policy
    """

    def __init__(self, uow: UnitOfWork, fail_open_on_missing_plan: bool = True):
        self.uow = uow
        self.fail_open_on_missing_plan = fail_open_on_missing_plan

    async def execute(self, tenant_slug: str) -> Result[EffectiveFeatures]:
        async with self.uow:
            tenant = await self.uow.tenants.get_by_slug(tenant_slug)
            if tenant is None:
                return Return.err(Error("TENANT_NOT_FOUND", "Tenant not found"))

            service = FeatureService(self.uow, self.fail_open_on_missing_plan)
            return await service.for_tenant(tenant)


class ResolveAssociationFeaturesUseCase:
    """An association has exactly the features of its parent tenant."""

    def __init__(self, uow: UnitOfWork, fail_open_on_missing_plan: bool = True):
        self.uow = uow
        self.fail_open_on_missing_plan = fail_open_on_missing_plan

    async def execute(self, tenant_slug: str, association_slug: str) -> Result[EffectiveFeatures]:
        async with self.uow:
            tenant = await self.uow.tenants.get_by_slug(tenant_slug)
            if tenant is None:
                return Return.err(Error("TENANT_NOT_FOUND", "Tenant not found"))

            association = await self.uow.associations.get_by_slug(tenant.id, association_slug)
            if association is None:
                return Return.err(
                    Error("ASSOCIATION_NOT_FOUND", "Association not found")
                )

            service = FeatureService(self.uow, self.fail_open_on_missing_plan)
            return await service.for_tenant(tenant)
