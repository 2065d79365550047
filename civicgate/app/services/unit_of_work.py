from abc import ABC, abstractmethod

from civicgate.app.repositories.access_token_repository import IAccessTokenRepository
from civicgate.app.repositories.addon_repository import IAddonRepository
from civicgate.app.repositories.admin_user_repository import IAdminUserRepository
from civicgate.app.repositories.association_repository import IAssociationRepository
from civicgate.app.repositories.audit_event_repository import IAuditEventRepository
from civicgate.app.repositories.contribution_repository import IContributionRepository
from civicgate.app.repositories.elected_official_repository import IElectedOfficialRepository
from civicgate.app.repositories.plan_repository import IPlanRepository
from civicgate.app.repositories.session_repository import ISessionRepository
from civicgate.app.repositories.superadmin_repository import ISuperadminRepository
from civicgate.app.repositories.tenant_repository import ITenantRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    tenants: ITenantRepository
    associations: IAssociationRepository
    admin_users: IAdminUserRepository
    elected_officials: IElectedOfficialRepository
    superadmins: ISuperadminRepository
    plans: IPlanRepository
    addons: IAddonRepository
    access_tokens: IAccessTokenRepository
    sessions: ISessionRepository
    audit_events: IAuditEventRepository
    contributions: IContributionRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
