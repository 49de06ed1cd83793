from consent_portal.integrations.accounts.client import HttpAccountActivationClient

__all__ = ["HttpAccountActivationClient"]
