from consent_portal.constants.account_errors import (
    ACCOUNT_ERROR_MESSAGES,
    AccountErrorCode,
)
from consent_portal.constants.enums import ApprovalStatus, TokenType

__all__ = [
    "ApprovalStatus",
    "TokenType",
    "AccountErrorCode",
    "ACCOUNT_ERROR_MESSAGES",
]
