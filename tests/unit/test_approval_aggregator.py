"""Unit tests for grouping approvals by client."""

from consent_portal.models.approval import Approval
from consent_portal.services.approval_aggregator import flatten, group_by_client


def _approvals(make_approval, *pairs):
    return [Approval.model_validate(make_approval(c, s)) for c, s in pairs]


def test_empty_input_gives_empty_mapping():
    assert group_by_client([]) == {}


def test_clients_keep_first_seen_order(make_approval):
    approvals = _approvals(
        make_approval,
        ("zeta", "read"),
        ("alpha", "read"),
        ("zeta", "write"),
        ("mid", "openid"),
    )

    grouped = group_by_client(approvals)

    assert list(grouped) == ["zeta", "alpha", "mid"]
    assert [a.scope for a in grouped["zeta"]] == ["read", "write"]


def test_flatten_returns_every_approval_including_duplicates(make_approval):
    approvals = _approvals(
        make_approval,
        ("app1", "read"),
        ("app2", "read"),
        ("app1", "read"),
    )

    flat = flatten(group_by_client(approvals))

    assert len(flat) == 3
    assert sorted((a.client_id, a.scope) for a in flat) == sorted(
        (a.client_id, a.scope) for a in approvals
    )
    assert [a.client_id for a in flat] == ["app1", "app1", "app2"]
