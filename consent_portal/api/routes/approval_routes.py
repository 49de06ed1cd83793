import logging
from typing import Annotated

from fastapi import APIRouter, Form

from consent_portal.core.dependencies import ApprovalsServiceDep, CurrentAuthDep
from consent_portal.schemas.approvals import ApprovalsPageResponse
from consent_portal.schemas.common import ApiResponse, create_success_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/approvals", tags=["approvals"])


@router.get(
    "",
    response_model=ApiResponse[ApprovalsPageResponse],
    summary="List the current user's approvals grouped by client",
)
async def get_approvals(
    auth_context: CurrentAuthDep,
    service: ApprovalsServiceDep,
) -> ApiResponse[ApprovalsPageResponse]:
    view = await service.show(auth_context)
    return create_success_response(ApprovalsPageResponse.from_view(view))


@router.post(
    "",
    response_model=ApiResponse[ApprovalsPageResponse],
    summary="Approve the checked scopes and revoke every other approval",
)
async def update_approvals(
    auth_context: CurrentAuthDep,
    service: ApprovalsServiceDep,
    checked_scopes: Annotated[list[str] | None, Form(alias="checkedScopes")] = None,
) -> ApiResponse[ApprovalsPageResponse]:
    logger.debug("Approvals submitted with %s checked scopes", len(checked_scopes or []))
    view = await service.submit(auth_context, checked_scopes)
    return create_success_response(ApprovalsPageResponse.from_view(view))
