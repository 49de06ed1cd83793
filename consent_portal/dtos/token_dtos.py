from datetime import datetime

from pydantic import BaseModel


class AccessTokenPayload(BaseModel):
    sub: str
    type: str
    user_id: str
    username: str | None = None
    email: str | None = None
    iat: datetime
    exp: datetime
