from consent_portal.core.exceptions import AppException


class IntegrationException(AppException):
    def __init__(self, code: str, message: str, status_code: int = 400):
        super().__init__(code, message, status_code)


class ApiRequestError(IntegrationException):
    """A downstream call failed; ``retryable`` tells transport faults from rejections."""

    def __init__(
        self, code: str, message: str, status_code: int, retryable: bool = False
    ):
        super().__init__(code=code, message=message, status_code=status_code)
        self.retryable = retryable


class ApprovalStoreUnavailableError(ApiRequestError):
    def __init__(self, message: str):
        super().__init__(
            code="APPROVAL_STORE_UNAVAILABLE",
            message=f"Approvals store is unavailable: {message}",
            status_code=503,
            retryable=True,
        )


class ApprovalStoreRejectedError(ApiRequestError):
    def __init__(self, upstream_status: int, message: str):
        super().__init__(
            code="APPROVAL_STORE_REJECTED",
            message=f"Approvals store rejected the request ({upstream_status}): {message}",
            status_code=502,
        )
        self.upstream_status = upstream_status


class ApprovalConflictError(ApiRequestError):
    def __init__(self):
        super().__init__(
            code="APPROVALS_CHANGED",
            message="Approvals were modified by someone else. Reload and try again.",
            status_code=409,
        )


class AccountServiceUnavailableError(ApiRequestError):
    def __init__(self, message: str):
        super().__init__(
            code="ACCOUNT_SERVICE_UNAVAILABLE",
            message=f"Account service is unavailable: {message}",
            status_code=503,
            retryable=True,
        )


class AccountServiceRejectedError(ApiRequestError):
    def __init__(self, upstream_status: int, message: str):
        super().__init__(
            code="ACCOUNT_SERVICE_REJECTED",
            message=f"Account service rejected the request ({upstream_status}): {message}",
            status_code=upstream_status if 400 <= upstream_status < 500 else 502,
        )
        self.upstream_status = upstream_status


class AccountConflictError(IntegrationException):
    def __init__(self, message: str = "username already exists"):
        super().__init__(code="ACCOUNT_EXISTS", message=message, status_code=409)


class ConfigurationError(IntegrationException):
    def __init__(self, message: str):
        super().__init__(
            code="CONFIGURATION_ERROR",
            message=message,
            status_code=500,
        )
