"""
CivicGate Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import (
    ActorType,
    AddonCode,
    AddonSubscriptionStatus,
    AdminMenuCode,
    AdminRole,
    AssociationRole,
    BillingPeriod,
    BillingStatus,
    IdeaStatus,
    IncidentStatus,
    TenantType,
    TokenKind,
    TokenSubjectType,
)

# Export all entities
from .subscription_plan import SubscriptionPlan
from .tenant import Tenant
from .association import Association
from .admin_user import AdminUser
from .elected_official import ElectedOfficial, ElectedOfficialMenuPermission
from .association_user import AssociationUser
from .superadmin import Superadmin
from .addon import Addon, AddonTier, PlanAddonAccess, TenantAddon
from .tenant_feature_override import TenantFeatureOverride
from .access_token import AccessToken
from .session import Session
from .audit_event import AuditEvent
from .contribution import Idea, Incident

__all__ = [
    # Enums
    "ActorType",
    "AddonCode",
    "AddonSubscriptionStatus",
    "AdminMenuCode",
    "AdminRole",
    "AssociationRole",
    "BillingPeriod",
    "BillingStatus",
    "IdeaStatus",
    "IncidentStatus",
    "TenantType",
    "TokenKind",
    "TokenSubjectType",
    # Entities
    "SubscriptionPlan",
    "Tenant",
    "Association",
    "AdminUser",
    "ElectedOfficial",
    "ElectedOfficialMenuPermission",
    "AssociationUser",
    "Superadmin",
    "Addon",
    "AddonTier",
    "PlanAddonAccess",
    "TenantAddon",
    "TenantFeatureOverride",
    "AccessToken",
    "Session",
    "AuditEvent",
    "Idea",
    "Incident",
]
