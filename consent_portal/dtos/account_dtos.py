from pydantic import BaseModel, ConfigDict, EmailStr, Field


class BeginActivationDTO(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1)
    client_id: str | None = None


class ActivationResultDTO(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    user_id: str
    username: str
    email: str
    redirect_url: str | None = Field(None, alias="redirect_location")
