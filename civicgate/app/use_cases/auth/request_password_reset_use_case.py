"""
Request Password Reset Use Case

Issues a password reset token for a tenant admin or elected official.
Email delivery is an external collaborator; the reset path is logged
without the token.
"""

import logging

from civicgate.app.services.token_service import TokenService
from civicgate.app.services.unit_of_work import UnitOfWork
from civicgate.domain.entities import ActorType, AuditEvent, TokenKind, TokenSubjectType
from civicgate.domain.result import Result, Return
from .dtos import RequestPasswordResetResponse

logger = logging.getLogger(__name__)

SENT_MESSAGE = "If the email exists, a password reset link has been sent"


def reset_password_path(tenant_slug: str) -> str:
    return f"/structures/{tenant_slug}/admin/reset-password"


class RequestPasswordResetUseCase:
    """
    Use case for requesting password reset.

    Business Rules:
    - Account looked up by (tenant slug, email): admin user first, then an
      elected official who has already set a password
    - Token: 256-bit, stored as SHA-256, valid 1 hour, single use
    - A new request supersedes the account's outstanding reset tokens
    - No email enumeration (same response whether or not the account exists)
    - Audit event created for security tracking
    """

    def __init__(self, uow: UnitOfWork, tokens: TokenService):
        self.uow = uow
        self.tokens = tokens

    async def execute(self, email: str, tenant_slug: str) -> Result[RequestPasswordResetResponse]:
        response = RequestPasswordResetResponse(status="sent", message=SENT_MESSAGE)
        email = email.strip().lower()

        async with self.uow:
            tenant = await self.uow.tenants.get_by_slug(tenant_slug)
            if tenant is None:
                return Return.ok(response)

            subject = None
            admin = await self.uow.admin_users.get_by_email_and_tenant(email, tenant.id)
            if admin is not None:
                subject = (TokenSubjectType.admin_user, ActorType.admin, admin.id)
            else:
                official = await self.uow.elected_officials.get_by_email_and_tenant(
                    email, tenant.id
                )
                if official is not None and official.is_active and official.password_hash:
                    subject = (
                        TokenSubjectType.elected_official,
                        ActorType.elected_official,
                        official.id,
                    )

            if subject is None:
                return Return.ok(response)

            subject_type, actor_type, subject_id = subject
            await self.tokens.issue(
                TokenKind.password_reset, subject_type, subject_id, tenant_id=tenant.id
            )

            await self.uow.audit_events.create(
                AuditEvent(
                    tenant_id=tenant.id,
                    actor_type=actor_type,
                    actor_id=subject_id,
                    action="password_reset_requested",
                )
            )

            await self.uow.commit()

        logger.info(
            "Password reset link issued for %s %s (%s)",
            actor_type.value, subject_id, reset_password_path(tenant_slug),
        )
        return Return.ok(response)
