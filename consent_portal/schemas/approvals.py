from typing import Any

from pydantic import BaseModel, Field

from consent_portal.dtos.approval_dtos import ApprovalsViewDTO, SelectionKey


class ApprovalsPageResponse(BaseModel):
    """Grouped approvals as rendered for the approvals form.

    To keep an approval, clients must post back its rendered ``selectionKey``
    in ``checkedScopes``, not their own ``clientId-scope`` concatenation.
    """

    # clientId -> that client's approvals, each with the form value that selects it
    approvals: dict[str, list[dict[str, Any]]] = Field(default_factory=dict)
    links: dict[str, str] = Field(default_factory=dict)
    version: str | None = None

    @classmethod
    def from_view(cls, view: ApprovalsViewDTO) -> "ApprovalsPageResponse":
        return cls(
            approvals={
                client_id: [
                    {
                        **approval.to_wire(),
                        "selectionKey": SelectionKey.for_approval(approval).encode(),
                    }
                    for approval in approvals
                ]
                for client_id, approvals in view.approvals.items()
            },
            links=view.links,
            version=view.version,
        )
