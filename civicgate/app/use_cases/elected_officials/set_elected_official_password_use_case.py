"""
Set Elected Official Password Use Case

Redeems an invitation: the official chooses a password and can log in.
"""

from civicgate.app.services.passwords import hash_password, validate_password
from civicgate.app.services.token_service import TokenService
from civicgate.app.services.unit_of_work import UnitOfWork
from civicgate.domain.entities import ActorType, AuditEvent, TokenKind
from civicgate.domain.result import Error, Result, Return
from .dtos import SetPasswordResponse


class SetElectedOfficialPasswordUseCase:
    """
    Business Rules:
    - Password of at least 8 characters (checked before the token)
    - The invitation is consumed atomically with the password write;
      redeeming it twice yields INVALID_TOKEN
    - Returns the tenant slug so the client can open the login page
    """

    def __init__(self, uow: UnitOfWork, tokens: TokenService):
        self.uow = uow
        self.tokens = tokens

    async def execute(self, token: str, password: str) -> Result[SetPasswordResponse]:
        password_validation = validate_password(password)
        if password_validation.is_err():
            return Return.err(password_validation.error)

        async with self.uow:
            grant = await self.tokens.consume(TokenKind.invitation, token)
            if grant.is_err():
                return Return.err(grant.error)

            official = await self.uow.elected_officials.get_by_id(grant.value.subject_id)
            if official is None or not official.is_active:
                return Return.err(Error("INVALID_TOKEN", "Invalid or expired token"))

            tenant = await self.uow.tenants.get_by_id(official.tenant_id)
            if tenant is None:
                return Return.err(Error("INVALID_TOKEN", "Invalid or expired token"))

            official.password_hash = hash_password(password)
            await self.uow.elected_officials.update(official)

            await self.uow.audit_events.create(
                AuditEvent(
                    tenant_id=tenant.id,
                    actor_type=ActorType.elected_official,
                    actor_id=official.id,
                    action="invitation_accepted",
                    event_metadata={"token_id": str(grant.value.token_id)},
                )
            )

            await self.uow.commit()

            return Return.ok(SetPasswordResponse(status="success", tenant_slug=tenant.slug))
