import logging
from collections.abc import Collection, Iterable

from consent_portal.constants.enums import ApprovalStatus
from consent_portal.dtos.approval_dtos import SelectionKey
from consent_portal.models.approval import Approval

logger = logging.getLogger(__name__)


def decode_selection(values: Iterable[str] | None) -> set[SelectionKey] | None:
    """Turn submitted form values into selection keys.

    ``None`` (nothing submitted) stays ``None``; malformed values are dropped.
    """
    if values is None:
        return None
    keys: set[SelectionKey] = set()
    for value in values:
        key = SelectionKey.decode(value)
        if key is None:
            logger.debug("Ignoring malformed selection key %r", value)
            continue
        keys.add(key)
    return keys


def plan(
    current: Iterable[Approval],
    selected_keys: Collection[SelectionKey] | None,
) -> list[Approval]:
    """Recompute the status of every approval from the user's selection.

    The selection is the complete set of approvals the user wants to keep:
    every approval not selected is denied, and a missing selection denies
    everything. The result has one entry per input approval, in input order,
    with only ``status`` changed. Selected keys that match nothing are ignored.
    """
    selected = selected_keys or ()
    planned: list[Approval] = []
    for approval in current:
        if SelectionKey.for_approval(approval) in selected:
            status = ApprovalStatus.APPROVED
        else:
            status = ApprovalStatus.DENIED
        planned.append(approval.model_copy(update={"status": status}))
    return planned
