"""
Public contributions: ideas and incidents submitted by residents, tracked
through the token handed back at submission.
"""

from fastapi import APIRouter, Depends, Query, status

from config import ApplicationConfig
from civicgate.api.error import raise_for_error
from civicgate.app.services.token_service import TokenService
from civicgate.app.services.unit_of_work import UnitOfWork
from civicgate.app.use_cases.contributions import (
    ContributionCreatedResponse,
    ContributionKind,
    ContributionView,
    ListMyContributionsUseCase,
    MyContributionsResponse,
    SubmitContributionCommand,
    SubmitContributionUseCase,
    TrackContributionUseCase,
)
from civicgate.depends import get_token_service, get_unit_of_work

router = APIRouter(tags=["Contributions"])

async def _submit(uow, tokens, kind, tenant_slug, command, association_slug=None):
    use_case = SubmitContributionUseCase(
        uow, tokens, ApplicationConfig.FEATURES_FAIL_OPEN_ON_MISSING_PLAN
    )
    result = await use_case.execute(kind, tenant_slug, command, association_slug)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


async def _track(uow, tokens, kind, tenant_slug, token, association_slug=None):
    result = await TrackContributionUseCase(uow, tokens).execute(
        kind, tenant_slug, token, association_slug
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post(
    "/tenants/{slug}/ideas",
    status_code=status.HTTP_201_CREATED,
    response_model=ContributionCreatedResponse,
)
async def submit_idea(
    slug: str,
    command: SubmitContributionCommand,
    uow: UnitOfWork = Depends(get_unit_of_work),
    tokens: TokenService = Depends(get_token_service),
):
    """
    Submit Idea

    Returns the contribution id and its trackingToken.

    Raises:
        - 400 Bad Request: INVALID_ANONYMOUS_ID
        - 403 Forbidden: FEATURE_NOT_AVAILABLE (plan without ideas)
        - 404 Not Found: Unknown tenant
    """
    return await _submit(uow, tokens, ContributionKind.idea, slug, command)


@router.post(
    "/tenants/{slug}/incidents",
    status_code=status.HTTP_201_CREATED,
    response_model=ContributionCreatedResponse,
)
async def submit_incident(
    slug: str,
    command: SubmitContributionCommand,
    uow: UnitOfWork = Depends(get_unit_of_work),
    tokens: TokenService = Depends(get_token_service),
):
    """Submit Incident (gated by hasIncidents)."""
    return await _submit(uow, tokens, ContributionKind.incident, slug, command)


@router.get(
    "/tenants/{slug}/ideas/track/{token}",
    status_code=status.HTTP_200_OK,
    response_model=ContributionView,
)
async def track_idea(
    slug: str,
    token: str,
    uow: UnitOfWork = Depends(get_unit_of_work),
    tokens: TokenService = Depends(get_token_service),
):
    """
    Track Idea

    The tracking token is reusable and never consumed.

    Raises:
        - 400 Bad Request: INVALID_TOKEN
        - 404 Not Found: Unknown tenant
    """
    return await _track(uow, tokens, ContributionKind.idea, slug, token)


@router.get(
    "/tenants/{slug}/incidents/track/{token}",
    status_code=status.HTTP_200_OK,
    response_model=ContributionView,
)
async def track_incident(
    slug: str,
    token: str,
    uow: UnitOfWork = Depends(get_unit_of_work),
    tokens: TokenService = Depends(get_token_service),
):
    return await _track(uow, tokens, ContributionKind.incident, slug, token)


@router.get(
    "/tenants/{slug}/my-contributions",
    status_code=status.HTTP_200_OK,
    response_model=MyContributionsResponse,
)
async def my_contributions(
    slug: str,
    anonymous_id: str = Query(..., alias="anonymousId"),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Contributions submitted under a client-held anonymous id.

    Raises:
        - 400 Bad Request: INVALID_ANONYMOUS_ID
        - 404 Not Found: Unknown tenant
    """
    result = await ListMyContributionsUseCase(uow).execute(slug, anonymous_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post(
    "/structures/{tenant_slug}/{association_slug}/ideas",
    status_code=status.HTTP_201_CREATED,
    response_model=ContributionCreatedResponse,
)
async def submit_association_idea(
    tenant_slug: str,
    association_slug: str,
    command: SubmitContributionCommand,
    uow: UnitOfWork = Depends(get_unit_of_work),
    tokens: TokenService = Depends(get_token_service),
):
    """Submit Idea to an association (features inherited from the tenant)."""
    return await _submit(
        uow, tokens, ContributionKind.idea, tenant_slug, command, association_slug
    )


@router.post(
    "/structures/{tenant_slug}/{association_slug}/incidents",
    status_code=status.HTTP_201_CREATED,
    response_model=ContributionCreatedResponse,
)
async def submit_association_incident(
    tenant_slug: str,
    association_slug: str,
    command: SubmitContributionCommand,
    uow: UnitOfWork = Depends(get_unit_of_work),
    tokens: TokenService = Depends(get_token_service),
):
    return await _submit(
        uow, tokens, ContributionKind.incident, tenant_slug, command, association_slug
    )


@router.get(
    "/structures/{tenant_slug}/{association_slug}/ideas/track/{token}",
    status_code=status.HTTP_200_OK,
    response_model=ContributionView,
)
async def track_association_idea(
    tenant_slug: str,
    association_slug: str,
    token: str,
    uow: UnitOfWork = Depends(get_unit_of_work),
    tokens: TokenService = Depends(get_token_service),
):
    return await _track(
        uow, tokens, ContributionKind.idea, tenant_slug, token, association_slug
    )


@router.get(
    "/structures/{tenant_slug}/{association_slug}/incidents/track/{token}",
    status_code=status.HTTP_200_OK,
    response_model=ContributionView,
)
async def track_association_incident(
    tenant_slug: str,
    association_slug: str,
    token: str,
    uow: UnitOfWork = Depends(get_unit_of_work),
    tokens: TokenService = Depends(get_token_service),
):
    return await _track(
        uow, tokens, ContributionKind.incident, tenant_slug, token, association_slug
    )
