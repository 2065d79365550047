from civicgate.app.services.token_service import TokenService
from civicgate.app.services.unit_of_work import UnitOfWork
from civicgate.domain.entities import TokenKind
from civicgate.domain.result import Error, Result, Return
from .dtos import InvitationInfoResponse


class ValidateInvitationUseCase:
    """Look up who an invitation is for. Never consumes the token."""

    def __init__(self, uow: UnitOfWork, tokens: TokenService):
        self.uow = uow
        self.tokens = tokens

    async def execute(self, token: str) -> Result[InvitationInfoResponse]:
        async with self.uow:
            grant = await self.tokens.validate(TokenKind.invitation, token)
            if grant.is_err():
                return Return.err(grant.error)

            official = await self.uow.elected_officials.get_by_id(grant.value.subject_id)
            if official is None or not official.is_active:
                return Return.err(Error("INVALID_TOKEN", "Invalid or expired token"))

            tenant = await self.uow.tenants.get_by_id(official.tenant_id)
            if tenant is None:
                return Return.err(Error("INVALID_TOKEN", "Invalid or expired token"))

            return Return.ok(
                InvitationInfoResponse(
                    first_name=official.first_name,
                    last_name=official.last_name,
                    tenant_name=tenant.name,
                )
            )
