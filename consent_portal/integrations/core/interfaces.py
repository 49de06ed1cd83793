from abc import ABC, abstractmethod
from collections.abc import Sequence

from consent_portal.dtos.account_dtos import ActivationResultDTO
from consent_portal.dtos.approval_dtos import ApprovalSnapshotDTO
from consent_portal.integrations.core.types import AuthContext
from consent_portal.models.approval import Approval


class IApprovalStoreClient(ABC):
    @abstractmethod
    async def fetch_all(self, auth_context: AuthContext) -> ApprovalSnapshotDTO:
        """Return every approval the authenticated user has issued."""

    @abstractmethod
    async def replace_all(
        self,
        auth_context: AuthContext,
        approvals: Sequence[Approval],
        version: str | None = None,
    ) -> None:
        """Overwrite the user's stored approvals with ``approvals``.

        When ``version`` is given the store must refuse the write if its
        approvals changed since that version was read.
        """


class IAccountActivationClient(ABC):
    @abstractmethod
    async def begin_activation(
        self, email: str, password: str, client_id: str | None
    ) -> None:
        pass

    @abstractmethod
    async def complete_activation(self, code: str) -> ActivationResultDTO:
        pass
