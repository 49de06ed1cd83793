import logging
from typing import Annotated

from fastapi import APIRouter, Form, Query, status
from fastapi.responses import JSONResponse, RedirectResponse

from consent_portal.core.dependencies import AccountServiceDep
from consent_portal.core.settings import settings
from consent_portal.schemas.accounts import NewAccountFormResponse
from consent_portal.schemas.common import (
    ApiResponse,
    create_error_response,
    create_success_response,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["accounts"])


def _activation_error(code: str, message: str | None) -> JSONResponse:
    logger.info("Account activation refused: %s", code)
    return create_error_response(
        code=code,
        message=message or "Account activation failed",
        target="error_message_code",
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
    )


@router.get(
    "/create_account",
    response_model=ApiResponse[NewAccountFormResponse],
    summary="Account creation form",
)
async def new_account_form(
    client_id: str | None = Query(None, description="Client the user signs up from"),
) -> ApiResponse[NewAccountFormResponse]:
    return create_success_response(NewAccountFormResponse(client_id=client_id))


@router.post(
    "/create_account", response_model=None, summary="Start account activation"
)
async def create_account(
    service: AccountServiceDep,
    email: Annotated[str, Form()] = "",
    password: Annotated[str, Form()] = "",
    password_confirmation: Annotated[str, Form()] = "",
    client_id: Annotated[str | None, Form()] = None,
) -> RedirectResponse | JSONResponse:
    result = await service.begin_activation(
        email, password, password_confirmation, client_id
    )
    if not result.success:
        return _activation_error(result.error_code.value, result.error_message)
    return RedirectResponse(
        url=settings.activation_email_sent_url, status_code=status.HTTP_302_FOUND
    )


@router.get(
    "/verify_user", response_model=None, summary="Complete account activation"
)
async def verify_user(
    service: AccountServiceDep,
    code: str = Query(..., description="Activation code from the email"),
) -> RedirectResponse | JSONResponse:
    result = await service.complete_activation(code)
    if not result.success:
        return _activation_error(result.error_code.value, result.error_message)

    redirect_url = result.activation.redirect_url or settings.default_redirect_url
    response = RedirectResponse(url=redirect_url, status_code=status.HTTP_302_FOUND)
    response.set_cookie(
        key="access_token",
        value=result.access_token,
        max_age=settings.access_token_expire_seconds,
        httponly=True,
        secure=not settings.debug,
        samesite="lax",
        path="/",
    )
    return response
