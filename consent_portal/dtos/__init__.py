from consent_portal.dtos.account_dtos import ActivationResultDTO, BeginActivationDTO
from consent_portal.dtos.approval_dtos import (
    ApprovalSnapshotDTO,
    ApprovalsViewDTO,
    SelectionKey,
)
from consent_portal.dtos.token_dtos import AccessTokenPayload

__all__ = [
    "AccessTokenPayload",
    "ActivationResultDTO",
    "ApprovalSnapshotDTO",
    "ApprovalsViewDTO",
    "BeginActivationDTO",
    "SelectionKey",
]
