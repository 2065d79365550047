from fastapi import APIRouter, Depends, Query, status
from pydantic import EmailStr, Field

from civicgate.api.error import raise_for_error
from civicgate.app.services.token_service import TokenService
from civicgate.app.services.unit_of_work import UnitOfWork
from civicgate.app.use_cases.auth import (
    ConfirmPasswordResetResponse,
    ConfirmPasswordResetUseCase,
    RequestPasswordResetResponse,
    RequestPasswordResetUseCase,
    ValidatePasswordResetResponse,
    ValidatePasswordResetUseCase,
)
from civicgate.depends import get_token_service, get_unit_of_work
from civicgate.domain.base import CamelModel

router = APIRouter(prefix="/password-reset", tags=["Password Reset"])


class RequestPasswordResetRequest(CamelModel):
    email: EmailStr
    tenant_slug: str = Field(..., min_length=1)


@router.post(
    "/request",
    status_code=status.HTTP_200_OK,
    response_model=RequestPasswordResetResponse,
)
async def request_password_reset(
    request: RequestPasswordResetRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    tokens: TokenService = Depends(get_token_service),
):
    """
    Request Password Reset

    Always answers the same way, whether or not the account exists.
    """
    result = await RequestPasswordResetUseCase(uow, tokens).execute(
        request.email, request.tenant_slug
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get(
    "/validate",
    status_code=status.HTTP_200_OK,
    response_model=ValidatePasswordResetResponse,
)
async def validate_password_reset(
    token: str = Query(..., min_length=1),
    uow: UnitOfWork = Depends(get_unit_of_work),
    tokens: TokenService = Depends(get_token_service),
):
    """
    Raises:
        - 400 Bad Request: INVALID_TOKEN
    """
    result = await ValidatePasswordResetUseCase(uow, tokens).execute(token)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


class ConfirmPasswordResetRequest(CamelModel):
    token: str = Field(..., min_length=1)
    new_password: str


@router.post(
    "/confirm",
    status_code=status.HTTP_200_OK,
    response_model=ConfirmPasswordResetResponse,
)
async def confirm_password_reset(
    request: ConfirmPasswordResetRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    tokens: TokenService = Depends(get_token_service),
):
    """
    Confirm Password Reset

    Sets the new password and revokes every session of the account.

    Raises:
        - 400 Bad Request: INVALID_TOKEN or INVALID_PASSWORD
    """
    result = await ConfirmPasswordResetUseCase(uow, tokens).execute(
        request.token, request.new_password
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value
