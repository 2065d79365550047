from sqlmodel.ext.asyncio.session import AsyncSession

from civicgate.app.repositories.audit_event_repository import IAuditEventRepository
from civicgate.domain.entities import AuditEvent


class AuditEventRepository(IAuditEventRepository):
    """AuditEvent repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, event: AuditEvent) -> AuditEvent:
        """Create a new audit event"""
        self.session.add(event)
        await self.session.flush()
        await self.session.refresh(event)
        return event
