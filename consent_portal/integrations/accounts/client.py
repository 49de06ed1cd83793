import logging

from pydantic import ValidationError

from consent_portal.dtos.account_dtos import ActivationResultDTO
from consent_portal.integrations.core.client import ApiClient
from consent_portal.integrations.core.exceptions import (
    AccountConflictError,
    AccountServiceRejectedError,
    AccountServiceUnavailableError,
    ApiRequestError,
)
from consent_portal.integrations.core.interfaces import IAccountActivationClient
from consent_portal.integrations.core.types import (
    ApiResponse,
    HttpMethod,
    RequestDefinition,
)

logger = logging.getLogger(__name__)


class HttpAccountActivationClient(IAccountActivationClient):
    def __init__(self, api_client: ApiClient, accounts_uri: str):
        self._api_client = api_client
        self._accounts_uri = accounts_uri.rstrip("/")

    async def begin_activation(
        self, email: str, password: str, client_id: str | None
    ) -> None:
        request = RequestDefinition(
            method=HttpMethod.POST,
            url=f"{self._accounts_uri}/create_account",
            body={"username": email, "password": password, "client_id": client_id},
        )
        response = await self._send(request)
        if response.is_conflict:
            raise AccountConflictError()
        self._raise_for_status(response)
        logger.info("Activation started for %s (client_id=%s)", email, client_id)

    async def complete_activation(self, code: str) -> ActivationResultDTO:
        request = RequestDefinition(
            method=HttpMethod.POST,
            url=f"{self._accounts_uri}/verify_user",
            body={"code": code},
        )
        response = await self._send(request)
        self._raise_for_status(response)
        try:
            return ActivationResultDTO.model_validate(response.data)
        except ValidationError as e:
            raise AccountServiceRejectedError(
                response.status_code, f"malformed activation response: {e}"
            ) from e

    async def _send(self, request: RequestDefinition) -> ApiResponse:
        try:
            return await self._api_client.execute(request)
        except ApiRequestError as e:
            raise AccountServiceUnavailableError(e.message) from e

    def _raise_for_status(self, response: ApiResponse) -> None:
        if response.is_success:
            return
        if response.is_server_error:
            raise AccountServiceUnavailableError(f"status {response.status_code}")
        raise AccountServiceRejectedError(response.status_code, str(response.data))
