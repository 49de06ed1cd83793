from consent_portal.integrations.approvals.store import HttpApprovalStoreClient

__all__ = ["HttpApprovalStoreClient"]
