"""
Invite Elected Official Use Case

Issues the single-use invitation through which an elected official sets a
password and gains admin-area access.
"""

import logging
from uuid import UUID

from civicgate.app.services.token_service import TokenService
from civicgate.app.services.unit_of_work import UnitOfWork
from civicgate.domain.actor import Actor
from civicgate.domain.entities import AuditEvent, TokenKind, TokenSubjectType
from civicgate.domain.result import Error, Result, Return
from .dtos import InviteElectedOfficialResponse

logger = logging.getLogger(__name__)

SET_PASSWORD_PATH = "/elus/setup-password"


class InviteElectedOfficialUseCase:
    """
    Business Rules:
    - Official must belong to the tenant, be active and have an email
    - Invitation valid 72 hours, single use
    - Re-inviting supersedes the previous invitation
    - The link is returned to the inviting admin (email delivery is external)
    """

    def __init__(self, uow: UnitOfWork, tokens: TokenService, public_base_url: str):
        self.uow = uow
        self.tokens = tokens
        self.public_base_url = public_base_url.rstrip("/")

    async def execute(
        self, tenant_id: UUID, official_id: UUID, invited_by: Actor
    ) -> Result[InviteElectedOfficialResponse]:
        async with self.uow:
            official = await self.uow.elected_officials.get_by_id(official_id)
            if official is None or official.tenant_id != tenant_id:
                return Return.err(
                    Error("ELECTED_OFFICIAL_NOT_FOUND", "Elected official not found")
                )

            if not official.is_active:
                return Return.err(
                    Error("ELECTED_OFFICIAL_INACTIVE", "Elected official is not active")
                )

            if not official.email:
                return Return.err(
                    Error(
                        "ELECTED_OFFICIAL_EMAIL_REQUIRED",
                        "An email address is required to send an invitation",
                    )
                )

            token = await self.tokens.issue(
                TokenKind.invitation,
                TokenSubjectType.elected_official,
                official.id,
                tenant_id=tenant_id,
            )
            now = self.tokens.clock()
            expires_at = now + self.tokens.policy_for(TokenKind.invitation).ttl

            official.invited_at = now
            await self.uow.elected_officials.update(official)

            await self.uow.audit_events.create(
                AuditEvent(
                    tenant_id=tenant_id,
                    actor_type=invited_by.actor_type,
                    actor_id=getattr(invited_by, "id", None),
                    action="elected_official_invited",
                    event_metadata={"elected_official_id": str(official.id)},
                )
            )

            await self.uow.commit()

        logger.info("Invitation issued for elected official %s", official_id)
        return Return.ok(
            InviteElectedOfficialResponse(
                message="Invitation created",
                invite_link=f"{self.public_base_url}{SET_PASSWORD_PATH}?token={token}",
                expires_at=expires_at,
            )
        )
