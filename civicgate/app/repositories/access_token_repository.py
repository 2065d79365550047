from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional
from uuid import UUID

from civicgate.domain.entities import AccessToken, TokenKind, TokenSubjectType


class IAccessTokenRepository(ABC):
    """AccessToken repository interface - application layer"""

    @abstractmethod
    async def create(self, token: AccessToken) -> AccessToken:
        pass

    @abstractmethod
    async def get_by_token_hash(self, token_hash: str) -> Optional[AccessToken]:
        pass

    @abstractmethod
    async def mark_consumed(self, token_id: UUID, now: datetime) -> bool:
        """
        Atomically consume a token.

        Sets consumed_at only if the token is unconsumed and unexpired at ``now``.
        Returns True for the single caller that won, False otherwise.
        """
        pass

    @abstractmethod
    async def consume_outstanding_for_subject(
        self,
        kind: TokenKind,
        subject_type: TokenSubjectType,
        subject_id: UUID,
        now: datetime,
    ) -> int:
        """Consume every still-usable token of a subject. Returns count."""
        pass
