from civicgate.app.services.token_service import is_valid_anonymous_id
from civicgate.app.services.unit_of_work import UnitOfWork
from civicgate.domain.result import Error, Result, Return
from .dtos import ContributionKind, MyContributionsResponse
from .track_contribution_use_case import contribution_view


class ListMyContributionsUseCase:
    """Contributions a browser submitted under its client-held anonymous id."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, tenant_slug: str, anonymous_id: str) -> Result[MyContributionsResponse]:
        if not is_valid_anonymous_id(anonymous_id):
            return Return.err(
                Error("INVALID_ANONYMOUS_ID", "Anonymous identifier is malformed")
            )

        async with self.uow:
            tenant = await self.uow.tenants.get_by_slug(tenant_slug)
            if tenant is None:
                return Return.err(Error("TENANT_NOT_FOUND", "Tenant not found"))

            ideas = await self.uow.contributions.list_ideas_by_anonymous_id(tenant.id, anonymous_id)
            incidents = await self.uow.contributions.list_incidents_by_anonymous_id(
                tenant.id, anonymous_id
            )

            return Return.ok(
                MyContributionsResponse(
                    ideas=[contribution_view(ContributionKind.idea, idea) for idea in ideas],
                    incidents=[
                        contribution_view(ContributionKind.incident, incident)
                        for incident in incidents
                    ],
                )
            )
