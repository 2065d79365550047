"""
Token Lifecycle

Opaque bearer tokens that let an actor without a session prove who they are:
elected-official invitations, password resets and public tracking links.

Only the SHA-256 digest of a token is stored. The plaintext leaves the
service exactly once, as the return value of ``issue``.
"""

import hashlib
import logging
import re
import secrets
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Callable, Dict, Optional
from uuid import UUID

from civicgate.app.services.unit_of_work import UnitOfWork
from civicgate.domain.base import utcnow
from civicgate.domain.entities import AccessToken, TokenKind, TokenSubjectType
from civicgate.domain.result import Error, Result, Return

logger = logging.getLogger(__name__)

ANONYMOUS_ID_PATTERN = re.compile(r"^anon_[0-9a-f]{32}$")

INVALID_TOKEN_MESSAGE = "Invalid or expired token"


@dataclass(frozen=True)
class TokenPolicy:
    ttl: Optional[timedelta]
    single_use: bool


def build_token_policies(
    invitation_ttl: timedelta = timedelta(hours=72),
    password_reset_ttl: timedelta = timedelta(hours=1),
) -> Dict[TokenKind, TokenPolicy]:
    return {
        TokenKind.invitation: TokenPolicy(ttl=invitation_ttl, single_use=True),
        TokenKind.password_reset: TokenPolicy(ttl=password_reset_ttl, single_use=True),
        # Tracking links stay valid for the lifetime of the contribution
        TokenKind.public_tracking: TokenPolicy(ttl=None, single_use=False),
    }


DEFAULT_TOKEN_POLICIES = build_token_policies()


@dataclass(frozen=True)
class TokenGrant:
    """What a valid token proves"""

    token_id: UUID
    kind: TokenKind
    subject_type: TokenSubjectType
    subject_id: UUID
    tenant_id: Optional[UUID]


def hash_token(token: str) -> str:
    return hashlib.sha256(token.encode()).hexdigest()


def is_valid_anonymous_id(value: Optional[str]) -> bool:
    """Client-held contributor id: ``anon_`` followed by 32 lowercase hex chars"""
    return bool(value) and ANONYMOUS_ID_PATTERN.match(value) is not None


def _invalid_token() -> Error:
    return Error("INVALID_TOKEN", INVALID_TOKEN_MESSAGE)


class TokenService:
    """
    Issues, validates and consumes access tokens.

    Business Rules:
    - 256 bits of entropy per token (secrets.token_urlsafe(32))
    - INVITATION: 72 h, single use; PASSWORD_RESET: 1 h, single use
    - PUBLIC_TRACKING: no expiry, reusable, never mutated by validation
    - A token is expired once now >= expires_at
    - Issuing a single-use token supersedes the subject's outstanding ones
    - Every validation failure reports the same INVALID_TOKEN error

    Must be called inside the caller's ``async with uow`` block so that
    consumption commits together with the state change it authorizes.
    """

    def __init__(
        self,
        uow: UnitOfWork,
        policies: Optional[Dict[TokenKind, TokenPolicy]] = None,
        clock: Callable[[], datetime] = utcnow,
    ):
        self.uow = uow
        self.policies = policies or DEFAULT_TOKEN_POLICIES
        self.clock = clock

    def policy_for(self, kind: TokenKind) -> TokenPolicy:
        return self.policies[kind]

    async def issue(
        self,
        kind: TokenKind,
        subject_type: TokenSubjectType,
        subject_id: UUID,
        tenant_id: Optional[UUID] = None,
        ttl: Optional[timedelta] = None,
    ) -> str:
        """
        Mint a new token for a subject.

        Args:
            kind: Token kind, selects the lifetime policy
            subject_type: What the token points at
            subject_id: ID of the subject
            tenant_id: Owning tenant, if any
            ttl: Overrides the policy lifetime

        Returns:
            The plaintext token (never stored)
        """
        policy = self.policy_for(kind)
        now = self.clock()

        if policy.single_use:
            superseded = await self.uow.access_tokens.consume_outstanding_for_subject(
                kind, subject_type, subject_id, now
            )
            if superseded:
                logger.info(
                    "Superseded %d outstanding %s token(s) for %s %s",
                    superseded, kind.value, subject_type.value, subject_id,
                )

        lifetime = ttl if ttl is not None else policy.ttl
        token = secrets.token_urlsafe(32)
        record = AccessToken(
            kind=kind,
            token_hash=hash_token(token),
            subject_type=subject_type,
            subject_id=subject_id,
            tenant_id=tenant_id,
            issued_at=now,
            expires_at=now + lifetime if lifetime is not None else None,
        )
        record = await self.uow.access_tokens.create(record)
        logger.info("Issued %s token %s for %s %s", kind.value, record.id, subject_type.value, subject_id)
        return token

    async def _check(self, kind: TokenKind, token: str, now: datetime) -> Result[AccessToken]:
        if not token:
            return Return.err(_invalid_token())

        record = await self.uow.access_tokens.get_by_token_hash(hash_token(token))
        if record is None:
            logger.debug("Token rejected: unknown")
            return Return.err(_invalid_token())

        if record.kind != kind:
            logger.debug("Token %s rejected: kind %s, expected %s", record.id, record.kind, kind)
            return Return.err(_invalid_token())

        if record.expires_at is not None and now >= record.expires_at:
            logger.debug("Token %s rejected: expired", record.id)
            return Return.err(_invalid_token())

        if record.consumed_at is not None:
            logger.debug("Token %s rejected: already consumed", record.id)
            return Return.err(_invalid_token())

        return Return.ok(record)

    @staticmethod
    def _grant(record: AccessToken) -> TokenGrant:
        return TokenGrant(
            token_id=record.id,
            kind=record.kind,
            subject_type=record.subject_type,
            subject_id=record.subject_id,
            tenant_id=record.tenant_id,
        )

    async def validate(self, kind: TokenKind, token: str) -> Result[TokenGrant]:
        """Check a token without changing it."""
        result = await self._check(kind, token, self.clock())
        if result.is_err():
            return Return.err(result.error)
        return Return.ok(self._grant(result.value))

    async def consume(self, kind: TokenKind, token: str) -> Result[TokenGrant]:
        """
        Validate and atomically mark a single-use token as consumed.

        Of two concurrent callers presenting the same token, exactly one
        succeeds; the other receives INVALID_TOKEN.

        Raises:
            ValueError: if ``kind`` is reusable
        """
        if not self.policy_for(kind).single_use:
            raise ValueError(f"{kind.value} tokens are reusable and cannot be consumed")

        now = self.clock()
        result = await self._check(kind, token, now)
        if result.is_err():
            return Return.err(result.error)

        record = result.value
        if not await self.uow.access_tokens.mark_consumed(record.id, now):
            logger.warning("Token %s lost a consumption race", record.id)
            return Return.err(_invalid_token())

        logger.info("Consumed %s token %s", kind.value, record.id)
        return Return.ok(self._grant(record))
