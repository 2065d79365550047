from typing import Optional, Union

from civicgate.app.services.token_service import TokenService
from civicgate.app.services.unit_of_work import UnitOfWork
from civicgate.domain.entities import Idea, Incident, TokenKind
from civicgate.domain.result import Error, Result, Return
from .dtos import ContributionKind, ContributionView


def contribution_view(kind: ContributionKind, item: Union[Idea, Incident]) -> ContributionView:
    return ContributionView(
        id=item.id,
        kind=kind,
        title=item.title,
        description=item.description,
        status=item.status.value,
        location=getattr(item, "location", None),
        created_at=item.created_at,
    )


class TrackContributionUseCase:
    """
    Public status lookup through a tracking token.

    Business Rules:
    - Token must be a PUBLIC_TRACKING token for this kind of contribution
    - The contribution must belong to the addressed tenant (and association)
    - Any mismatch reports INVALID_TOKEN; validation never mutates the token
    """

    def __init__(self, uow: UnitOfWork, tokens: TokenService):
        self.uow = uow
        self.tokens = tokens

    async def execute(
        self,
        kind: ContributionKind,
        tenant_slug: str,
        token: str,
        association_slug: Optional[str] = None,
    ) -> Result[ContributionView]:
        invalid = Error("INVALID_TOKEN", "Invalid or expired token")

        async with self.uow:
            tenant = await self.uow.tenants.get_by_slug(tenant_slug)
            if tenant is None:
                return Return.err(Error("TENANT_NOT_FOUND", "Tenant not found"))

            association_id = None
            if association_slug is not None:
                association = await self.uow.associations.get_by_slug(tenant.id, association_slug)
                if association is None:
                    return Return.err(
                        Error("ASSOCIATION_NOT_FOUND", "Association not found")
                    )
                association_id = association.id

            grant = await self.tokens.validate(TokenKind.public_tracking, token)
            if grant.is_err():
                return Return.err(grant.error)
            if grant.value.subject_type != kind.subject_type:
                return Return.err(invalid)

            if kind is ContributionKind.idea:
                item = await self.uow.contributions.get_idea(grant.value.subject_id)
            else:
                item = await self.uow.contributions.get_incident(grant.value.subject_id)

            if item is None or item.tenant_id != tenant.id or item.association_id != association_id:
                return Return.err(invalid)

            return Return.ok(contribution_view(kind, item))
