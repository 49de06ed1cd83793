import asyncio
import logging
from types import TracebackType
from typing import Any, Self

import aiohttp
from multidict import CIMultiDict

from consent_portal.integrations.core.exceptions import ApiRequestError
from consent_portal.integrations.core.types import (
    ApiResponse,
    AuthContext,
    RequestDefinition,
)

logger = logging.getLogger(__name__)


class ApiClient:
    """Thin aiohttp wrapper shared by the downstream collaborators.

    Each call is issued exactly once; callers decide what a failure means.
    """

    def __init__(self, timeout: float = 30.0):
        self._timeout = aiohttp.ClientTimeout(total=timeout)
        self._client: aiohttp.ClientSession | None = None
        logger.debug("ApiClient initialized with timeout=%s", timeout)

    async def __aenter__(self) -> Self:
        logger.debug("ApiClient context entered, creating session")
        self._client = aiohttp.ClientSession(timeout=self._timeout)
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.close()
        logger.debug("ApiClient context exited, session closed")

    async def _get_client(self) -> aiohttp.ClientSession:
        if self._client is None or self._client.closed:
            logger.debug("Creating new aiohttp ClientSession")
            self._client = aiohttp.ClientSession(timeout=self._timeout)
        return self._client

    async def close(self) -> None:
        if self._client and not self._client.closed:
            logger.debug("Closing aiohttp ClientSession")
            await self._client.close()
            self._client = None

    async def execute(
        self,
        request: RequestDefinition,
        auth_context: AuthContext | None = None,
    ) -> ApiResponse:
        headers = self._build_headers(request, auth_context)
        try:
            return await self._make_request(request, headers)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.warning(
                "%s %s failed: %r", request.method.value, request.url, e
            )
            raise ApiRequestError(
                code="UPSTREAM_UNREACHABLE",
                message=str(e) or type(e).__name__,
                status_code=503,
                retryable=True,
            ) from e

    def _build_headers(
        self, request: RequestDefinition, auth_context: AuthContext | None
    ) -> dict[str, str]:
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        if auth_context is not None:
            headers["Authorization"] = auth_context.authorization_header
        headers.update(request.headers)
        return headers

    async def _make_request(
        self, request: RequestDefinition, headers: dict[str, str]
    ) -> ApiResponse:
        client = await self._get_client()

        kwargs: dict[str, Any] = {
            "headers": headers,
            "params": request.params or None,
        }
        if request.body is not None:
            kwargs["json"] = request.body

        logger.debug("Making %s request to %s", request.method.value, request.url)
        async with client.request(
            request.method.value, request.url, **kwargs
        ) as response:
            try:
                data = await response.json()
            except (aiohttp.ContentTypeError, ValueError):
                data = await response.text()

            return ApiResponse(
                status_code=response.status,
                data=data,
                headers=CIMultiDict(response.headers),
            )
