import logging
from collections.abc import Iterable

from consent_portal.constants.enums import ApprovalStatus
from consent_portal.dtos.approval_dtos import ApprovalsViewDTO
from consent_portal.integrations.core.interfaces import IApprovalStoreClient
from consent_portal.integrations.core.types import AuthContext
from consent_portal.services.approval_aggregator import flatten, group_by_client
from consent_portal.services.revocation_planner import decode_selection, plan

logger = logging.getLogger(__name__)


class ApprovalsService:
    """Shows a user's approvals and applies bulk approve/revoke submissions.

    A submission reads the current approvals, recomputes every status and
    writes the whole set back. Between the read and the write another writer
    may change the store: if the store returned a version on the read, the
    write is conditional on it and a concurrent change fails the submission
    with ``ApprovalConflictError``. Stores without versions are last-writer-wins.
    """

    def __init__(self, store: IApprovalStoreClient, links: dict[str, str]):
        self._store = store
        self._links = links

    async def show(self, auth_context: AuthContext) -> ApprovalsViewDTO:
        snapshot = await self._store.fetch_all(auth_context)
        return ApprovalsViewDTO(
            approvals=group_by_client(snapshot.approvals),
            links=dict(self._links),
            version=snapshot.version,
        )

    async def submit(
        self, auth_context: AuthContext, checked_scopes: Iterable[str] | None
    ) -> ApprovalsViewDTO:
        snapshot = await self._store.fetch_all(auth_context)
        current = flatten(group_by_client(snapshot.approvals))

        selection = decode_selection(checked_scopes)
        planned = plan(current, selection)
        approved = sum(
            1 for approval in planned if approval.status == ApprovalStatus.APPROVED
        )
        logger.info(
            "Replacing %d approvals (%d approved, %d denied)",
            len(planned),
            approved,
            len(planned) - approved,
        )

        await self._store.replace_all(auth_context, planned, snapshot.version)
        return await self.show(auth_context)
