from pydantic import BaseModel


class NewAccountFormResponse(BaseModel):
    client_id: str | None = None
