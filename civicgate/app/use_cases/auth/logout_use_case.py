from typing import Any, Mapping, Optional
from uuid import UUID

from civicgate.app.services.unit_of_work import UnitOfWork
from civicgate.domain.result import Result, Return
from .dtos import LogoutResponse


class LogoutUseCase:
    """
    Revoke the session named by the cookie claims.

    Idempotent: unknown, malformed or already revoked sessions succeed with
    revoked=False.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, claims: Optional[Mapping[str, Any]]) -> Result[LogoutResponse]:
        try:
            session_id = UUID(str(claims["sid"])) if claims else None
        except (KeyError, ValueError):
            session_id = None

        if session_id is None:
            return Return.ok(LogoutResponse(status="logged_out", revoked=False))

        async with self.uow:
            revoked = await self.uow.sessions.revoke_by_id(session_id)
            await self.uow.commit()

        return Return.ok(LogoutResponse(status="logged_out", revoked=revoked))
