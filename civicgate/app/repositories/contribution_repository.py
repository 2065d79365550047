from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from civicgate.domain.entities import Idea, Incident


class IContributionRepository(ABC):
    """Idea and incident repository interface - application layer"""

    @abstractmethod
    async def create_idea(self, idea: Idea) -> Idea:
        pass

    @abstractmethod
    async def create_incident(self, incident: Incident) -> Incident:
        pass

    @abstractmethod
    async def get_idea(self, idea_id: UUID) -> Optional[Idea]:
        pass

    @abstractmethod
    async def get_incident(self, incident_id: UUID) -> Optional[Incident]:
        pass

    @abstractmethod
    async def list_ideas_by_anonymous_id(
        self, tenant_id: UUID, anonymous_id: str
    ) -> List[Idea]:
        pass

    @abstractmethod
    async def list_incidents_by_anonymous_id(
        self, tenant_id: UUID, anonymous_id: str
    ) -> List[Incident]:
        pass
