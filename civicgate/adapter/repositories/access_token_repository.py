from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlalchemy import or_
from sqlmodel import select, update
from sqlmodel.ext.asyncio.session import AsyncSession

from civicgate.app.repositories.access_token_repository import IAccessTokenRepository
from civicgate.domain.entities import AccessToken, TokenKind, TokenSubjectType


class AccessTokenRepository(IAccessTokenRepository):
    """AccessToken repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, token: AccessToken) -> AccessToken:
        self.session.add(token)
        await self.session.flush()
        await self.session.refresh(token)
        return token

    async def get_by_token_hash(self, token_hash: str) -> Optional[AccessToken]:
        stmt = select(AccessToken).where(AccessToken.token_hash == token_hash)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def mark_consumed(self, token_id: UUID, now: datetime) -> bool:
        """Compare-and-set on consumed_at; the row count tells who won."""
        stmt = (
            update(AccessToken)
            .where(
                AccessToken.id == token_id,
                AccessToken.consumed_at == None,
                or_(AccessToken.expires_at == None, AccessToken.expires_at > now),
            )
            .values(consumed_at=now)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount == 1

    async def consume_outstanding_for_subject(
        self,
        kind: TokenKind,
        subject_type: TokenSubjectType,
        subject_id: UUID,
        now: datetime,
    ) -> int:
        stmt = (
            update(AccessToken)
            .where(
                AccessToken.kind == kind,
                AccessToken.subject_type == subject_type,
                AccessToken.subject_id == subject_id,
                AccessToken.consumed_at == None,
                or_(AccessToken.expires_at == None, AccessToken.expires_at > now),
            )
            .values(consumed_at=now)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount
