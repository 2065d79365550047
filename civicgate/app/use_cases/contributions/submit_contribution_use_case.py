"""
Submit Contribution Use Case

Public idea and incident submission, at tenant or association level.
Each contribution gets a reusable tracking token at creation.
"""

from typing import Optional

from civicgate.app.services.feature_service import FeatureService
from civicgate.app.services.token_service import TokenService, is_valid_anonymous_id
from civicgate.app.services.unit_of_work import UnitOfWork
from civicgate.domain.entities import Idea, Incident, TokenKind
from civicgate.domain.result import Error, Result, Return
from .dtos import ContributionCreatedResponse, ContributionKind, SubmitContributionCommand


class SubmitContributionUseCase:
    """
    Business Rules:
    - Ideas need the tenant's has_ideas flag, incidents has_incidents
      (associations inherit the tenant's flags): FEATURE_NOT_AVAILABLE otherwise
    - An anonymous id, when given, must match anon_ + 32 lowercase hex chars
    - A PUBLIC_TRACKING token (no expiry, reusable) is bound to the contribution
    """

    def __init__(
        self, uow: UnitOfWork, tokens: TokenService, fail_open_on_missing_plan: bool = True
    ):
        self.uow = uow
        self.tokens = tokens
        self.fail_open_on_missing_plan = fail_open_on_missing_plan

    async def execute(
        self,
        kind: ContributionKind,
        tenant_slug: str,
        command: SubmitContributionCommand,
        association_slug: Optional[str] = None,
    ) -> Result[ContributionCreatedResponse]:
        if command.anonymous_id is not None and not is_valid_anonymous_id(command.anonymous_id):
            return Return.err(
                Error("INVALID_ANONYMOUS_ID", "Anonymous identifier is malformed")
            )

        async with self.uow:
            tenant = await self.uow.tenants.get_by_slug(tenant_slug)
            if tenant is None:
                return Return.err(Error("TENANT_NOT_FOUND", "Tenant not found"))

            association_id = None
            if association_slug is not None:
                association = await self.uow.associations.get_by_slug(tenant.id, association_slug)
                if association is None or not association.is_active:
                    return Return.err(
                        Error("ASSOCIATION_NOT_FOUND", "Association not found")
                    )
                association_id = association.id

            features = await FeatureService(
                self.uow, self.fail_open_on_missing_plan
            ).for_tenant(tenant)
            if features.is_err():
                return Return.err(features.error)
            if not features.value.is_enabled(kind.feature_flag):
                return Return.err(
                    Error("FEATURE_NOT_AVAILABLE", "This feature is not available")
                )

            if kind is ContributionKind.idea:
                contribution = await self.uow.contributions.create_idea(
                    Idea(
                        tenant_id=tenant.id,
                        association_id=association_id,
                        title=command.title,
                        description=command.description,
                        anonymous_id=command.anonymous_id,
                    )
                )
            else:
                contribution = await self.uow.contributions.create_incident(
                    Incident(
                        tenant_id=tenant.id,
                        association_id=association_id,
                        title=command.title,
                        description=command.description,
                        location=command.location,
                        anonymous_id=command.anonymous_id,
                    )
                )

            tracking_token = await self.tokens.issue(
                TokenKind.public_tracking,
                kind.subject_type,
                contribution.id,
                tenant_id=tenant.id,
            )

            await self.uow.commit()

            return Return.ok(
                ContributionCreatedResponse(
                    id=contribution.id,
                    kind=kind,
                    status=contribution.status.value,
                    tracking_token=tracking_token,
                )
            )
