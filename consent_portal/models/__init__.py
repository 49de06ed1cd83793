from consent_portal.models.approval import Approval

__all__ = ["Approval"]
