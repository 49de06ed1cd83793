import logging
from collections.abc import Sequence

from pydantic import ValidationError

from consent_portal.dtos.approval_dtos import ApprovalSnapshotDTO
from consent_portal.integrations.core.client import ApiClient
from consent_portal.integrations.core.exceptions import (
    ApiRequestError,
    ApprovalConflictError,
    ApprovalStoreRejectedError,
    ApprovalStoreUnavailableError,
)
from consent_portal.integrations.core.interfaces import IApprovalStoreClient
from consent_portal.integrations.core.types import (
    ApiResponse,
    AuthContext,
    HttpMethod,
    RequestDefinition,
)
from consent_portal.models.approval import Approval

logger = logging.getLogger(__name__)


class HttpApprovalStoreClient(IApprovalStoreClient):
    """Reads and replaces the user's approvals on the authorization server.

    ``GET`` returns the full collection as a JSON array, ``PUT`` overwrites it.
    An ``ETag`` on the read is echoed back as ``If-Match`` on the write.
    """

    def __init__(self, api_client: ApiClient, approvals_uri: str):
        self._api_client = api_client
        self._approvals_uri = approvals_uri

    async def fetch_all(self, auth_context: AuthContext) -> ApprovalSnapshotDTO:
        request = RequestDefinition(method=HttpMethod.GET, url=self._approvals_uri)
        response = await self._send(request, auth_context)
        self._raise_for_status(response)

        if not isinstance(response.data, list):
            raise ApprovalStoreRejectedError(
                response.status_code, "expected a JSON array of approvals"
            )
        try:
            approvals = [Approval.model_validate(item) for item in response.data]
        except ValidationError as e:
            raise ApprovalStoreRejectedError(
                response.status_code, f"malformed approval record: {e}"
            ) from e

        logger.debug(
            "Fetched %d approvals (version=%s)", len(approvals), response.etag
        )
        return ApprovalSnapshotDTO(approvals=approvals, version=response.etag)

    async def replace_all(
        self,
        auth_context: AuthContext,
        approvals: Sequence[Approval],
        version: str | None = None,
    ) -> None:
        headers = {"If-Match": version} if version else {}
        request = RequestDefinition(
            method=HttpMethod.PUT,
            url=self._approvals_uri,
            headers=headers,
            body=[approval.to_wire() for approval in approvals],
        )
        response = await self._send(request, auth_context)
        if response.is_precondition_failed:
            logger.warning("Approvals changed since version %s, write refused", version)
            raise ApprovalConflictError()
        self._raise_for_status(response)
        logger.debug("Replaced %d approvals", len(approvals))

    async def _send(
        self, request: RequestDefinition, auth_context: AuthContext
    ) -> ApiResponse:
        try:
            return await self._api_client.execute(request, auth_context)
        except ApiRequestError as e:
            raise ApprovalStoreUnavailableError(e.message) from e

    def _raise_for_status(self, response: ApiResponse) -> None:
        if response.is_success:
            return
        if response.is_server_error:
            raise ApprovalStoreUnavailableError(f"status {response.status_code}")
        raise ApprovalStoreRejectedError(response.status_code, str(response.data))
