"""Pytest fixtures for consent portal tests."""

import os

os.environ.setdefault("APPROVALS_URI", "http://uaa.test/approvals")
os.environ.setdefault("ACCOUNTS_URI", "http://uaa.test")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key-with-enough-length-for-hs256")
os.environ.setdefault("LINKS", '{"passwd": "/change_password", "home": "/"}')

from collections.abc import Sequence  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from consent_portal.core.dependencies import (  # noqa: E402
    get_account_activation_client,
    get_approval_store_client,
)
from consent_portal.core.security import token_service  # noqa: E402
from consent_portal.dtos.account_dtos import ActivationResultDTO  # noqa: E402
from consent_portal.dtos.approval_dtos import ApprovalSnapshotDTO  # noqa: E402
from consent_portal.integrations.core.exceptions import (  # noqa: E402
    AccountConflictError,
    AccountServiceRejectedError,
    ApprovalConflictError,
)
from consent_portal.integrations.core.interfaces import (  # noqa: E402
    IAccountActivationClient,
    IApprovalStoreClient,
)
from consent_portal.integrations.core.types import AuthContext  # noqa: E402
from consent_portal.main import app  # noqa: E402
from consent_portal.models.approval import Approval  # noqa: E402


class InMemoryApprovalStore(IApprovalStoreClient):
    """Approval store kept in a list; bumps its version on every write."""

    def __init__(self, records: list[dict] | None = None, versioned: bool = True):
        self.records = [dict(record) for record in records or []]
        self.versioned = versioned
        self.revision = 1
        self.fetch_calls = 0
        self.replace_calls: list[tuple[list[dict], str | None]] = []
        self.fetch_error: Exception | None = None
        self.replace_error: Exception | None = None

    @property
    def version(self) -> str | None:
        return f'"{self.revision}"' if self.versioned else None

    async def fetch_all(self, auth_context: AuthContext) -> ApprovalSnapshotDTO:
        self.fetch_calls += 1
        if self.fetch_error is not None:
            raise self.fetch_error
        return ApprovalSnapshotDTO(
            approvals=[Approval.model_validate(record) for record in self.records],
            version=self.version,
        )

    async def replace_all(
        self,
        auth_context: AuthContext,
        approvals: Sequence[Approval],
        version: str | None = None,
    ) -> None:
        written = [approval.to_wire() for approval in approvals]
        self.replace_calls.append((written, version))
        if self.replace_error is not None:
            raise self.replace_error
        if version is not None and version != self.version:
            raise ApprovalConflictError()
        self.records = written
        self.revision += 1


class FakeActivationClient(IAccountActivationClient):
    def __init__(self):
        self.begin_calls: list[tuple[str, str, str | None]] = []
        self.existing_emails: set[str] = set()
        self.activations: dict[str, ActivationResultDTO] = {}

    async def begin_activation(
        self, email: str, password: str, client_id: str | None
    ) -> None:
        self.begin_calls.append((email, password, client_id))
        if email in self.existing_emails:
            raise AccountConflictError()

    async def complete_activation(self, code: str) -> ActivationResultDTO:
        if code not in self.activations:
            raise AccountServiceRejectedError(400, "invalid code")
        return self.activations[code]


def approval(client_id: str, scope: str, status: str = "PENDING", **extra) -> dict:
    return {"clientId": client_id, "scope": scope, "status": status, **extra}


@pytest.fixture
def auth_context() -> AuthContext:
    return AuthContext(access_token="token-for-marissa")


@pytest.fixture
def store() -> InMemoryApprovalStore:
    return InMemoryApprovalStore(
        [
            approval("app1", "read", userId="marissa"),
            approval("app1", "write", userId="marissa"),
            approval("app2", "read", userId="marissa"),
        ]
    )


@pytest.fixture
def activation_client() -> FakeActivationClient:
    return FakeActivationClient()


@pytest.fixture
def access_token() -> str:
    return token_service.create_access_token(
        user_id="user-1", username="marissa", email="marissa@example.com"
    )


@pytest.fixture
def client(store, activation_client):
    app.dependency_overrides[get_approval_store_client] = lambda: store
    app.dependency_overrides[get_account_activation_client] = lambda: activation_client
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_approval():
    return approval


@pytest.fixture
def store_factory():
    return InMemoryApprovalStore
