"""
CivicGate Domain Enums

Closed enumerations shared by entities, route guards and client payloads.
"""

from enum import Enum


class TenantType(str, Enum):
    """Kind of top-level organization"""

    mairie = "MAIRIE"
    epci = "EPCI"


class BillingStatus(str, Enum):
    """Tenant billing state, driven by the billing collaborator"""

    trial = "TRIAL"
    active = "ACTIVE"
    suspended = "SUSPENDED"
    cancelled = "CANCELLED"


class BillingPeriod(str, Enum):
    monthly = "MONTHLY"
    yearly = "YEARLY"


class AddonCode(str, Enum):
    """Stable codes of the optional modules a plan may sell"""

    associations = "ASSOCIATIONS"
    admin = "ADMIN"
    mairies = "MAIRIES"


class AddonSubscriptionStatus(str, Enum):
    active = "ACTIVE"
    cancelled = "CANCELLED"


class AdminMenuCode(str, Enum):
    """Admin area sections; the same codes drive navigation and route guards"""

    dashboard = "DASHBOARD"
    ideas = "IDEAS"
    incidents = "INCIDENTS"
    meetings = "MEETINGS"
    associations = "ASSOCIATIONS"
    elus = "ELUS"
    domains = "DOMAINS"
    photos = "PHOTOS"
    admins = "ADMINS"
    share = "SHARE"
    settings = "SETTINGS"
    billing = "BILLING"


class AdminRole(str, Enum):
    admin = "ADMIN"
    moderator = "MODERATOR"


class AssociationRole(str, Enum):
    admin = "ADMIN"
    member = "MEMBER"


class ActorType(str, Enum):
    """Account-type marker written into the session at login"""

    admin = "ADMIN"
    elected_official = "ELU"
    association_user = "ASSOCIATION_USER"
    superadmin = "SUPERADMIN"


class TokenKind(str, Enum):
    invitation = "INVITATION"
    password_reset = "PASSWORD_RESET"
    public_tracking = "PUBLIC_TRACKING"


class TokenSubjectType(str, Enum):
    """What an access token points at"""

    admin_user = "ADMIN"
    elected_official = "ELU"
    idea = "IDEA"
    incident = "INCIDENT"


class IdeaStatus(str, Enum):
    new = "NEW"
    under_review = "UNDER_REVIEW"
    in_progress = "IN_PROGRESS"
    done = "DONE"
    rejected = "REJECTED"


class IncidentStatus(str, Enum):
    new = "NEW"
    acknowledged = "ACKNOWLEDGED"
    in_progress = "IN_PROGRESS"
    resolved = "RESOLVED"
    rejected = "REJECTED"
