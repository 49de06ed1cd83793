import logging
from typing import Annotated

from fastapi import Cookie, Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from consent_portal.core.security import token_service
from consent_portal.core.settings import settings
from consent_portal.dtos.token_dtos import AccessTokenPayload
from consent_portal.integrations.accounts.client import HttpAccountActivationClient
from consent_portal.integrations.approvals.store import HttpApprovalStoreClient
from consent_portal.integrations.core.client import ApiClient
from consent_portal.integrations.core.exceptions import ConfigurationError
from consent_portal.integrations.core.interfaces import (
    IAccountActivationClient,
    IApprovalStoreClient,
)
from consent_portal.integrations.core.types import AuthContext
from consent_portal.services.account_service import AccountService
from consent_portal.services.approvals_service import ApprovalsService

logger = logging.getLogger(__name__)

http_bearer = HTTPBearer(auto_error=False)


def get_api_client(request: Request) -> ApiClient:
    return request.app.state.api_client


def get_approval_store_client(
    api_client: ApiClient = Depends(get_api_client),
) -> IApprovalStoreClient:
    return HttpApprovalStoreClient(api_client, settings.approvals_uri)


def get_account_activation_client(
    api_client: ApiClient = Depends(get_api_client),
) -> IAccountActivationClient:
    if not settings.accounts_uri:
        raise ConfigurationError("Account activation is not configured (accounts_uri)")
    return HttpAccountActivationClient(api_client, settings.accounts_uri)


def get_approvals_service(
    store: IApprovalStoreClient = Depends(get_approval_store_client),
) -> ApprovalsService:
    return ApprovalsService(store=store, links=settings.links)


def get_account_service(
    activation_client: IAccountActivationClient = Depends(
        get_account_activation_client
    ),
) -> AccountService:
    return AccountService(activation_client)


def _extract_token(
    credentials: HTTPAuthorizationCredentials | None,
    access_token_cookie: str | None,
) -> str | None:
    if credentials is not None:
        return credentials.credentials
    if access_token_cookie:
        return access_token_cookie
    return None


async def get_current_auth_context(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(http_bearer)],
    access_token_cookie: Annotated[str | None, Cookie(alias="access_token")] = None,
) -> AuthContext:
    token = _extract_token(credentials, access_token_cookie)

    if token is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )

    payload: AccessTokenPayload | None = token_service.verify_access_token(token)
    if payload is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired access token",
            headers={"WWW-Authenticate": "Bearer"},
        )
    logger.debug("Authenticated principal %s", payload.user_id)
    return AuthContext(access_token=token)


CurrentAuthDep = Annotated[AuthContext, Depends(get_current_auth_context)]
ApprovalsServiceDep = Annotated[ApprovalsService, Depends(get_approvals_service)]
AccountServiceDep = Annotated[AccountService, Depends(get_account_service)]
