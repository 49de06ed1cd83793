from consent_portal.services.account_service import AccountService
from consent_portal.services.approvals_service import ApprovalsService

__all__ = [
    "AccountService",
    "ApprovalsService",
]
