from collections.abc import Iterable

from consent_portal.models.approval import Approval


def group_by_client(approvals: Iterable[Approval]) -> dict[str, list[Approval]]:
    """Group approvals by client id.

    Clients appear in the order of their first approval; each client's
    approvals keep the order they were received in.
    """
    grouped: dict[str, list[Approval]] = {}
    for approval in approvals:
        grouped.setdefault(approval.client_id, []).append(approval)
    return grouped


def flatten(grouped: dict[str, list[Approval]]) -> list[Approval]:
    return [approval for group in grouped.values() for approval in group]
