from datetime import timedelta

from civicgate.app.services.passwords import burn_password_check, verify_password
from civicgate.app.services.unit_of_work import UnitOfWork
from civicgate.domain.base import utcnow
from civicgate.domain.entities import ActorType, AuditEvent, Session
from civicgate.domain.result import Error, Result, Return
from .dtos import OpenedSession
from .tenant_admin_login_use_case import DEFAULT_SESSION_TTL


class SuperadminLoginUseCase:
    """
    Use case for the platform operator login.

    Business Rules:
    - Account must be active
    - Session carries no tenant
    """

    def __init__(self, uow: UnitOfWork, session_ttl: timedelta = DEFAULT_SESSION_TTL):
        self.uow = uow
        self.session_ttl = session_ttl

    async def execute(self, email: str, password: str) -> Result[OpenedSession]:
        async with self.uow:
            superadmin = await self.uow.superadmins.get_by_email(email.strip().lower())
            if superadmin is None:
                burn_password_check()
                return Return.err(
                    Error("INVALID_CREDENTIALS", "Invalid email or password")
                )

            if not verify_password(password, superadmin.password_hash) or not superadmin.is_active:
                return Return.err(
                    Error("INVALID_CREDENTIALS", "Invalid email or password")
                )

            now = utcnow()
            session = await self.uow.sessions.create(
                Session(
                    actor_type=ActorType.superadmin,
                    actor_id=superadmin.id,
                    created_at=now,
                    expires_at=now + self.session_ttl,
                )
            )
            superadmin.last_login_at = now
            await self.uow.superadmins.update(superadmin)

            await self.uow.audit_events.create(
                AuditEvent(
                    actor_type=ActorType.superadmin,
                    actor_id=superadmin.id,
                    action="login",
                )
            )

            await self.uow.commit()

            return Return.ok(
                OpenedSession(
                    session_id=session.id,
                    actor_type=ActorType.superadmin,
                    actor_id=superadmin.id,
                    expires_at=session.expires_at,
                    display_name=superadmin.name,
                )
            )
