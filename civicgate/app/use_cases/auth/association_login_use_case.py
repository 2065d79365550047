"""
Association Login Use Case

Login into an association's own admin area.
"""

from datetime import timedelta

from civicgate.app.services.passwords import burn_password_check, verify_password
from civicgate.app.services.unit_of_work import UnitOfWork
from civicgate.domain.base import utcnow
from civicgate.domain.entities import ActorType, AuditEvent, Session
from civicgate.domain.result import Error, Result, Return
from .dtos import OpenedSession
from .tenant_admin_login_use_case import DEFAULT_SESSION_TTL


class AssociationLoginUseCase:
    """
    Business Rules:
    - Association addressed by (tenant slug, association slug)
    - Inactive associations cannot be logged into
    - Same INVALID_CREDENTIALS for unknown email and wrong password
    """

    def __init__(self, uow: UnitOfWork, session_ttl: timedelta = DEFAULT_SESSION_TTL):
        self.uow = uow
        self.session_ttl = session_ttl

    async def execute(
        self, tenant_slug: str, association_slug: str, email: str, password: str
    ) -> Result[OpenedSession]:
        async with self.uow:
            tenant = await self.uow.tenants.get_by_slug(tenant_slug)
            if tenant is None:
                return Return.err(Error("TENANT_NOT_FOUND", "Tenant not found"))

            association = await self.uow.associations.get_by_slug(tenant.id, association_slug)
            if association is None or not association.is_active:
                return Return.err(
                    Error("ASSOCIATION_NOT_FOUND", "Association not found")
                )

            email = email.strip().lower()
            user = await self.uow.associations.get_user_by_email(association.id, email)
            if user is None:
                burn_password_check()
                return Return.err(
                    Error("INVALID_CREDENTIALS", "Invalid email or password")
                )
            if not verify_password(password, user.password_hash):
                return Return.err(
                    Error("INVALID_CREDENTIALS", "Invalid email or password")
                )

            now = utcnow()
            session = await self.uow.sessions.create(
                Session(
                    actor_type=ActorType.association_user,
                    actor_id=user.id,
                    tenant_id=tenant.id,
                    association_id=association.id,
                    created_at=now,
                    expires_at=now + self.session_ttl,
                )
            )

            await self.uow.audit_events.create(
                AuditEvent(
                    tenant_id=tenant.id,
                    actor_type=ActorType.association_user,
                    actor_id=user.id,
                    action="login",
                    event_metadata={"association_id": str(association.id)},
                )
            )

            await self.uow.commit()

            return Return.ok(
                OpenedSession(
                    session_id=session.id,
                    actor_type=ActorType.association_user,
                    actor_id=user.id,
                    expires_at=session.expires_at,
                    display_name=user.name,
                    tenant_slug=tenant.slug,
                    association_slug=association.slug,
                )
            )
