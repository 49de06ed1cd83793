from consent_portal.schemas.accounts import NewAccountFormResponse
from consent_portal.schemas.approvals import ApprovalsPageResponse
from consent_portal.schemas.common import (
    ApiResponse,
    ErrorDetail,
    ErrorResponse,
    MetaResponse,
    create_error_response,
    create_success_response,
)

__all__ = [
    "ApiResponse",
    "ApprovalsPageResponse",
    "ErrorDetail",
    "ErrorResponse",
    "MetaResponse",
    "NewAccountFormResponse",
    "create_error_response",
    "create_success_response",
]
