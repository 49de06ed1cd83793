import logging
from dataclasses import dataclass

from pydantic import ValidationError

from consent_portal.constants.account_errors import (
    ACCOUNT_ERROR_MESSAGES,
    AccountErrorCode,
)
from consent_portal.core.security import token_service
from consent_portal.dtos.account_dtos import ActivationResultDTO, BeginActivationDTO
from consent_portal.integrations.core.exceptions import (
    AccountConflictError,
    AccountServiceRejectedError,
)
from consent_portal.integrations.core.interfaces import IAccountActivationClient

logger = logging.getLogger(__name__)


@dataclass
class AccountServiceResult:
    success: bool
    error_code: AccountErrorCode | None = None
    activation: ActivationResultDTO | None = None
    access_token: str | None = None

    @property
    def error_message(self) -> str | None:
        if self.error_code:
            return ACCOUNT_ERROR_MESSAGES.get(self.error_code)
        return None


class AccountService:
    def __init__(self, activation_client: IAccountActivationClient):
        self._activation_client = activation_client

    async def begin_activation(
        self,
        email: str,
        password: str,
        password_confirmation: str,
        client_id: str | None,
    ) -> AccountServiceResult:
        try:
            dto = BeginActivationDTO(email=email, password=password, client_id=client_id)
        except ValidationError as e:
            fields = {error["loc"][0] for error in e.errors()}
            code = (
                AccountErrorCode.INVALID_EMAIL
                if "email" in fields
                else AccountErrorCode.FORM_ERROR
            )
            return AccountServiceResult(success=False, error_code=code)

        if password != password_confirmation:
            return AccountServiceResult(
                success=False, error_code=AccountErrorCode.FORM_ERROR
            )

        try:
            await self._activation_client.begin_activation(
                dto.email, dto.password, dto.client_id
            )
        except AccountConflictError:
            logger.info("Activation refused, %s already registered", dto.email)
            return AccountServiceResult(
                success=False, error_code=AccountErrorCode.USERNAME_EXISTS
            )
        return AccountServiceResult(success=True)

    async def complete_activation(self, code: str) -> AccountServiceResult:
        try:
            activation = await self._activation_client.complete_activation(code)
        except AccountServiceRejectedError as e:
            if e.upstream_status not in (400, 404, 422):
                raise
            logger.info("Activation code rejected (%s)", e.upstream_status)
            return AccountServiceResult(
                success=False, error_code=AccountErrorCode.CODE_EXPIRED
            )
        access_token = token_service.create_access_token(
            user_id=activation.user_id,
            username=activation.username,
            email=activation.email,
        )
        logger.info("Account %s activated", activation.user_id)
        return AccountServiceResult(
            success=True, activation=activation, access_token=access_token
        )
