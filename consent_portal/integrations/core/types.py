from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from multidict import CIMultiDict


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"


@dataclass
class AuthContext:
    access_token: str
    token_type: str = "Bearer"

    @property
    def authorization_header(self) -> str:
        return f"{self.token_type} {self.access_token}"


@dataclass
class RequestDefinition:
    method: HttpMethod
    url: str
    params: dict[str, Any] = field(default_factory=dict)
    headers: dict[str, str] = field(default_factory=dict)
    body: Any = None


@dataclass
class ApiResponse:
    status_code: int
    data: Any
    # case-insensitive, header casing varies between servers
    headers: Mapping[str, str] = field(default_factory=CIMultiDict)

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def is_conflict(self) -> bool:
        return self.status_code == 409

    @property
    def is_precondition_failed(self) -> bool:
        return self.status_code == 412

    @property
    def is_server_error(self) -> bool:
        return self.status_code >= 500

    @property
    def etag(self) -> str | None:
        return self.headers.get("ETag")
