from civicgate.app.services.token_service import TokenService
from civicgate.app.services.unit_of_work import UnitOfWork
from civicgate.domain.entities import ActorType, TokenKind
from civicgate.domain.result import Result, Return
from .dtos import ValidatePasswordResetResponse


class ValidatePasswordResetUseCase:
    """Check a reset token before showing the new-password form. Never consumes it."""

    def __init__(self, uow: UnitOfWork, tokens: TokenService):
        self.uow = uow
        self.tokens = tokens

    async def execute(self, token: str) -> Result[ValidatePasswordResetResponse]:
        async with self.uow:
            grant = await self.tokens.validate(TokenKind.password_reset, token)
            if grant.is_err():
                return Return.err(grant.error)

            return Return.ok(
                ValidatePasswordResetResponse(
                    valid=True,
                    account_type=ActorType(grant.value.subject_type.value),
                )
            )
