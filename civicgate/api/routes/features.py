from fastapi import APIRouter, Depends, status

from config import ApplicationConfig
from civicgate.api.error import raise_for_error
from civicgate.app.services.feature_service import EffectiveFeatures
from civicgate.app.services.unit_of_work import UnitOfWork
from civicgate.app.use_cases.features import (
    ResolveAssociationFeaturesUseCase,
    ResolveTenantFeaturesUseCase,
)
from civicgate.depends import get_unit_of_work

router = APIRouter(tags=["Features"])


async def get_tenant_features(
    slug: str, uow: UnitOfWork = Depends(get_unit_of_work)
) -> EffectiveFeatures:
    """Effective features of the tenant in the path; resolved once per request."""
    use_case = ResolveTenantFeaturesUseCase(
        uow, ApplicationConfig.FEATURES_FAIL_OPEN_ON_MISSING_PLAN
    )
    result = await use_case.execute(slug)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get(
    "/tenants/{slug}/features",
    status_code=status.HTTP_200_OK,
    response_model=EffectiveFeatures,
)
async def tenant_features(features: EffectiveFeatures = Depends(get_tenant_features)):
    """
    Tenant Feature Flags

    Returns {hasIdeas, hasIncidents, hasMeetings, hasEvents, features, planName}.
    Public: drives which modules the tenant site shows.

    Raises:
        - 404 Not Found: Unknown tenant
        - 500 Internal Server Error: Tenant references a missing plan
    """
    return features


@router.get(
    "/structures/{tenant_slug}/{association_slug}/features",
    status_code=status.HTTP_200_OK,
    response_model=EffectiveFeatures,
)
async def association_features(
    tenant_slug: str,
    association_slug: str,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Association Feature Flags

    Associations inherit the feature set of their parent tenant.

    Raises:
        - 404 Not Found: Unknown tenant or association
        - 500 Internal Server Error: Tenant references a missing plan
    """
    use_case = ResolveAssociationFeaturesUseCase(
        uow, ApplicationConfig.FEATURES_FAIL_OPEN_ON_MISSING_PLAN
    )
    result = await use_case.execute(tenant_slug, association_slug)
    if result.is_err():
        raise_for_error(result.error)
    return result.value
