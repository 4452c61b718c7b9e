"""
tests.server.test_url_cases

Purpose:
    URL-driven snapshot checks against the in-process fake server.

Covers:
    - GET + 200 + compare/save
    - Accept header forwarding
    - Non-200 status reported as a test failure
    - Transport errors propagate unchanged
    - url_case() registration as pytest tests
"""

from __future__ import annotations

import httpx
import pytest

from bls_snapshots.contracts.snapshot_policy import SnapshotOutcome, SnapshotPolicy
from bls_snapshots.errors import SnapshotMissingError, UnexpectedStatusError
from bls_snapshots.server.url_cases import expect_url_unchanged, fetch_json, url_case


def test_first_run_saves_then_matches(bls_client, store) -> None:
    first = expect_url_unchanged(
        "server", "info", "/", client=bls_client, store=store, policy=SnapshotPolicy.WRITE_IF_MISSING
    )
    assert first is SnapshotOutcome.WRITTEN
    assert "cacheStatus" not in store.load("server", "info")

    # Build time differs on the second call but is masked.
    second = expect_url_unchanged("server", "info", "/", client=bls_client, store=store)
    assert second is SnapshotOutcome.MATCHED


def test_missing_snapshot_fails_without_save_policy(bls_client, store) -> None:
    with pytest.raises(SnapshotMissingError):
        expect_url_unchanged("hits", "simple", "/test/hits?patt=a", client=bls_client, store=store)


def test_input_file_paths_reduced_to_names(bls_client, store) -> None:
    expect_url_unchanged(
        "hits", "simple", "/test/hits?patt=a", client=bls_client, store=store, policy=SnapshotPolicy.WRITE_IF_MISSING
    )
    saved = store.load("hits", "simple")
    assert saved["docInfos"]["0"]["fromInputFile"] == "PBsample.xml"
    assert saved["summary"]["searchParam"] == {"indexname": "test", "patt": "a"}


def test_accept_header_is_sent(bls_client) -> None:
    assert fetch_json(bls_client, "/echo-accept", "application/json; charset=utf-8") == {
        "accept": "application/json; charset=utf-8"
    }
    assert fetch_json(bls_client, "/echo-accept") == {"accept": "application/json"}


def test_non_200_status_fails(bls_client, store) -> None:
    with pytest.raises(UnexpectedStatusError) as ei:
        expect_url_unchanged(
            "hits", "bad", "/missing-index/hits", client=bls_client, store=store, policy=SnapshotPolicy.WRITE_IF_MISSING
        )
    assert ei.value.status_code == 404
    assert "CANNOT_OPEN_INDEX" in str(ei.value)
    assert isinstance(ei.value, AssertionError)
    assert not store.exists("hits", "bad")


def test_transport_error_propagates(store) -> None:
    def _refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with httpx.Client(transport=httpx.MockTransport(_refuse), base_url="http://bls.invalid") as client:
        with pytest.raises(httpx.ConnectError):
            expect_url_unchanged("server", "info", "/", client=client, store=store)


def test_settings_supply_store_and_policy(bls_client, bls_settings, snapshot_root) -> None:
    outcome = expect_url_unchanged("server", "info", "/", client=bls_client, settings=bls_settings)
    assert outcome is SnapshotOutcome.WRITTEN
    assert (snapshot_root / "server" / "info.json").is_file()


def test_url_case_builds_named_test() -> None:
    case = url_case("hits", "simple", "/test/hits?patt=a")
    assert case.__name__ == "test_hits_simple"
    assert "hits: simple" in case.__doc__


# Registered the same way a suite module would register its cases.
test_server_info_case = url_case("server", "info", "/")
test_hits_case = url_case("hits", "patt-a", "/test/hits?patt=a")
