from pydantic import BaseModel, ConfigDict, Field

from consent_portal.constants.enums import ApprovalStatus


class Approval(BaseModel):
    """A scope grant issued by the user to one client application.

    Attributes the store sends beyond ``clientId``/``scope``/``status`` are
    kept as extras so a read-modify-write cycle hands them back untouched.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    client_id: str = Field(..., alias="clientId", min_length=1)
    scope: str = Field(..., min_length=1)
    status: ApprovalStatus = ApprovalStatus.PENDING

    def to_wire(self) -> dict:
        return self.model_dump(by_alias=True, mode="json")
