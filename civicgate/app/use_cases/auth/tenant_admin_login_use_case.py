"""
Tenant Admin Login Use Case

One login form serves both tenant administrators and elected officials.
"""

from datetime import timedelta

from civicgate.app.services.passwords import burn_password_check, verify_password
from civicgate.app.services.unit_of_work import UnitOfWork
from civicgate.domain.base import utcnow
from civicgate.domain.entities import ActorType, AuditEvent, Session
from civicgate.domain.result import Error, Result, Return
from .dtos import OpenedSession

DEFAULT_SESSION_TTL = timedelta(days=7)


class TenantAdminLoginUseCase:
    """
    Use case for the tenant admin-area login.

    Business Rules:
    - Scoped to the tenant addressed by slug
    - Admin users are tried first, then elected officials
    - An elected official must be active and have completed the invitation
      (password set)
    - Unknown email and wrong password give the same INVALID_CREDENTIALS
    - Blocked accounts may log in; the admin area then reports the block
    - The session stores the account-type marker used to resolve it later
    """

    def __init__(self, uow: UnitOfWork, session_ttl: timedelta = DEFAULT_SESSION_TTL):
        self.uow = uow
        self.session_ttl = session_ttl

    async def execute(self, tenant_slug: str, email: str, password: str) -> Result[OpenedSession]:
        async with self.uow:
            tenant = await self.uow.tenants.get_by_slug(tenant_slug)
            if tenant is None:
                return Return.err(Error("TENANT_NOT_FOUND", "Tenant not found"))

            email = email.strip().lower()
            now = utcnow()

            actor_type = None
            admin = await self.uow.admin_users.get_by_email_and_tenant(email, tenant.id)
            if admin is not None and verify_password(password, admin.password_hash):
                actor_type = ActorType.admin
                actor_id = admin.id
                display_name = admin.name
                admin.last_login_at = now
                await self.uow.admin_users.update(admin)

            if actor_type is None:
                official = await self.uow.elected_officials.get_by_email_and_tenant(
                    email, tenant.id
                )
                if (
                    official is not None
                    and official.is_active
                    and official.password_hash
                    and verify_password(password, official.password_hash)
                ):
                    actor_type = ActorType.elected_official
                    actor_id = official.id
                    display_name = f"{official.first_name} {official.last_name}"
                    official.last_login_at = now
                    await self.uow.elected_officials.update(official)
                elif admin is None and official is None:
                    burn_password_check()

            if actor_type is None:
                return Return.err(
                    Error("INVALID_CREDENTIALS", "Invalid email or password")
                )

            session = Session(
                actor_type=actor_type,
                actor_id=actor_id,
                tenant_id=tenant.id,
                created_at=now,
                expires_at=now + self.session_ttl,
            )
            session = await self.uow.sessions.create(session)

            await self.uow.audit_events.create(
                AuditEvent(
                    tenant_id=tenant.id,
                    actor_type=actor_type,
                    actor_id=actor_id,
                    action="login",
                    event_metadata={"email": email},
                )
            )

            await self.uow.commit()

            return Return.ok(
                OpenedSession(
                    session_id=session.id,
                    actor_type=actor_type,
                    actor_id=actor_id,
                    expires_at=session.expires_at,
                    display_name=display_name,
                    tenant_slug=tenant.slug,
                )
            )
