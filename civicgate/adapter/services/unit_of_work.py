from sqlmodel.ext.asyncio.session import AsyncSession

from civicgate.adapter.repositories.access_token_repository import AccessTokenRepository
from civicgate.adapter.repositories.addon_repository import AddonRepository
from civicgate.adapter.repositories.admin_user_repository import AdminUserRepository
from civicgate.adapter.repositories.association_repository import AssociationRepository
from civicgate.adapter.repositories.audit_event_repository import AuditEventRepository
from civicgate.adapter.repositories.contribution_repository import ContributionRepository
from civicgate.adapter.repositories.elected_official_repository import ElectedOfficialRepository
from civicgate.adapter.repositories.plan_repository import PlanRepository
from civicgate.adapter.repositories.session_repository import SessionRepository
from civicgate.adapter.repositories.superadmin_repository import SuperadminRepository
from civicgate.adapter.repositories.tenant_repository import TenantRepository
from civicgate.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.tenants = TenantRepository(self.session)
        self.associations = AssociationRepository(self.session)
        self.admin_users = AdminUserRepository(self.session)
        self.elected_officials = ElectedOfficialRepository(self.session)
        self.superadmins = SuperadminRepository(self.session)
        self.plans = PlanRepository(self.session)
        self.addons = AddonRepository(self.session)
        self.access_tokens = AccessTokenRepository(self.session)
        self.sessions = SessionRepository(self.session)
        self.audit_events = AuditEventRepository(self.session)
        self.contributions = ContributionRepository(self.session)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
