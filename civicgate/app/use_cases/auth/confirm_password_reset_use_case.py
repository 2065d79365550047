"""
Confirm Password Reset Use Case

Redeems a password reset token and sets the new password.
"""

from civicgate.app.services.passwords import hash_password, validate_password
from civicgate.app.services.token_service import TokenService
from civicgate.app.services.unit_of_work import UnitOfWork
from civicgate.domain.entities import ActorType, AuditEvent, TokenKind, TokenSubjectType
from civicgate.domain.result import Error, Result, Return
from .dtos import ConfirmPasswordResetResponse


class ConfirmPasswordResetUseCase:
    """
    Use case for confirming password reset.

    Business Rules:
    - New password must be at least 8 characters (checked before the token)
    - Token is consumed atomically; a second use is INVALID_TOKEN
    - Password is hashed with bcrypt (cost factor 12)
    - All sessions of the account are revoked
    - Consumption, password change and revocation commit together
    """

    def __init__(self, uow: UnitOfWork, tokens: TokenService):
        self.uow = uow
        self.tokens = tokens

    async def execute(self, token: str, new_password: str) -> Result[ConfirmPasswordResetResponse]:
        password_validation = validate_password(new_password)
        if password_validation.is_err():
            return Return.err(password_validation.error)

        async with self.uow:
            grant = await self.tokens.consume(TokenKind.password_reset, token)
            if grant.is_err():
                return Return.err(grant.error)

            subject_id = grant.value.subject_id
            if grant.value.subject_type == TokenSubjectType.admin_user:
                account = await self.uow.admin_users.get_by_id(subject_id)
                repository = self.uow.admin_users
                actor_type = ActorType.admin
            else:
                account = await self.uow.elected_officials.get_by_id(subject_id)
                repository = self.uow.elected_officials
                actor_type = ActorType.elected_official

            if account is None:
                return Return.err(Error("INVALID_TOKEN", "Invalid or expired token"))

            account.password_hash = hash_password(new_password)
            await repository.update(account)

            revoked_count = await self.uow.sessions.revoke_all_by_actor(actor_type, subject_id)

            await self.uow.audit_events.create(
                AuditEvent(
                    tenant_id=account.tenant_id,
                    actor_type=actor_type,
                    actor_id=subject_id,
                    action="password_reset_confirmed",
                    event_metadata={
                        "token_id": str(grant.value.token_id),
                        "sessions_revoked": revoked_count,
                    },
                )
            )

            await self.uow.commit()

            return Return.ok(
                ConfirmPasswordResetResponse(
                    status="success",
                    message="Password has been reset successfully",
                    sessions_revoked=revoked_count,
                )
            )
