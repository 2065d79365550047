from .resolve_features_use_case import (
    ResolveAssociationFeaturesUseCase,
    ResolveTenantFeaturesUseCase,
)

__all__ = ["ResolveAssociationFeaturesUseCase", "ResolveTenantFeaturesUseCase"]
