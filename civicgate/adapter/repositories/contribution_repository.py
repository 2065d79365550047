from typing import List, Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from civicgate.app.repositories.contribution_repository import IContributionRepository
from civicgate.domain.entities import Idea, Incident


class ContributionRepository(IContributionRepository):
    """Idea and incident repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create_idea(self, idea: Idea) -> Idea:
        self.session.add(idea)
        await self.session.flush()
        await self.session.refresh(idea)
        return idea

    async def create_incident(self, incident: Incident) -> Incident:
        self.session.add(incident)
        await self.session.flush()
        await self.session.refresh(incident)
        return incident

    async def get_idea(self, idea_id: UUID) -> Optional[Idea]:
        stmt = select(Idea).where(Idea.id == idea_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_incident(self, incident_id: UUID) -> Optional[Incident]:
        stmt = select(Incident).where(Incident.id == incident_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_ideas_by_anonymous_id(
        self, tenant_id: UUID, anonymous_id: str
    ) -> List[Idea]:
        stmt = (
            select(Idea)
            .where(Idea.tenant_id == tenant_id, Idea.anonymous_id == anonymous_id)
            .order_by(Idea.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_incidents_by_anonymous_id(
        self, tenant_id: UUID, anonymous_id: str
    ) -> List[Incident]:
        stmt = (
            select(Incident)
            .where(Incident.tenant_id == tenant_id, Incident.anonymous_id == anonymous_id)
            .order_by(Incident.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
