from dataclasses import dataclass, field
from typing import NamedTuple

from consent_portal.models.approval import Approval

SELECTION_KEY_DELIMITER = "-"

_ESCAPES = (("%", "%25"), ("-", "%2D"))


def _escape(value: str) -> str:
    for raw, escaped in _ESCAPES:
        value = value.replace(raw, escaped)
    return value


def _unescape(value: str) -> str:
    for raw, escaped in reversed(_ESCAPES):
        value = value.replace(escaped, raw)
    return value


class SelectionKey(NamedTuple):
    """Identifies one (client, scope) pair checked on the approvals form.

    The form value is ``<client>-<scope>`` with ``%`` and ``-`` inside either
    part percent-escaped, so ids that contain the delimiter stay unambiguous.
    """

    client_id: str
    scope: str

    @classmethod
    def for_approval(cls, approval: Approval) -> "SelectionKey":
        return cls(approval.client_id, approval.scope)

    def encode(self) -> str:
        return f"{_escape(self.client_id)}{SELECTION_KEY_DELIMITER}{_escape(self.scope)}"

    @classmethod
    def decode(cls, value: str) -> "SelectionKey | None":
        parts = value.split(SELECTION_KEY_DELIMITER)
        if len(parts) != 2 or not parts[0] or not parts[1]:
            return None
        return cls(_unescape(parts[0]), _unescape(parts[1]))


@dataclass
class ApprovalSnapshotDTO:
    approvals: list[Approval]
    version: str | None = None


@dataclass
class ApprovalsViewDTO:
    approvals: dict[str, list[Approval]]
    links: dict[str, str] = field(default_factory=dict)
    version: str | None = None
