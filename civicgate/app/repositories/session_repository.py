from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from civicgate.domain.entities import ActorType, Session


class ISessionRepository(ABC):
    """Session repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, session_id: UUID) -> Optional[Session]:
        """Get session by ID"""
        pass

    @abstractmethod
    async def create(self, session: Session) -> Session:
        """Create a new session"""
        pass

    @abstractmethod
    async def revoke_by_id(self, session_id: UUID) -> bool:
        """Revoke a specific session. Returns True if it was active."""
        pass

    @abstractmethod
    async def revoke_all_by_actor(self, actor_type: ActorType, actor_id: UUID) -> int:
        """Revoke all sessions of an account. Returns count of revoked sessions."""
        pass
