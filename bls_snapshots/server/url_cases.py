# bls_snapshots/server/url_cases.py
"""
bls_snapshots.server.url_cases

Purpose:
    Fetch a BlackLab Server URL and compare the JSON body with its saved response.

Design Notes:
    - Any httpx.Client works (tests pass a FastAPI TestClient).
    - Transport errors propagate as-is so the test runner reports them.
    - url_case() turns one URL into a pytest test function; fixtures come from
      bls_snapshots.pytest_plugin.
"""

from __future__ import annotations

from typing import Any, Callable

import httpx

from bls_snapshots.contracts.snapshot_paths import RequestDefaults
from bls_snapshots.contracts.snapshot_policy import SnapshotOutcome, SnapshotPolicy
from bls_snapshots.errors import UnexpectedStatusError
from bls_snapshots.settings import Settings, get_settings
from bls_snapshots.snapshots.comparator import expect_unchanged
from bls_snapshots.snapshots.store import SnapshotStore
from bls_snapshots.utils.logging import get_logger, snapshot_logger

logger = get_logger(__name__)

_defaults = RequestDefaults()


def build_client(settings: Settings | None = None) -> httpx.Client:
    s = settings or get_settings()
    return httpx.Client(base_url=s.server_url, timeout=s.http_timeout_s)


def fetch_json(client: httpx.Client, url: str, expected_type: str = _defaults.accept) -> Any:
    response = client.get(url, headers={"Accept": expected_type})
    if response.status_code != _defaults.ok_status:
        logger.warning("GET %s returned %s", url, response.status_code)
        raise UnexpectedStatusError(
            url=url,
            status_code=response.status_code,
            body_excerpt=response.text[: _defaults.body_excerpt_chars],
        )
    return response.json()


def expect_url_unchanged(
    category: str,
    test_name: str,
    url: str,
    expected_type: str = _defaults.accept,
    *,
    client: httpx.Client | None = None,
    store: SnapshotStore | None = None,
    policy: SnapshotPolicy | None = None,
    settings: Settings | None = None,
) -> SnapshotOutcome:
    """
    GET url (relative to the server URL), require 200 and compare the body.

    Explicit client/store/policy win over settings; settings win over the environment.
    """
    log = snapshot_logger(logger, category, test_name, url)
    log.debug("GET Accept=%s", expected_type)

    if client is not None:
        body = fetch_json(client, url, expected_type)
    else:
        with build_client(settings) as own_client:
            body = fetch_json(own_client, url, expected_type)

    if settings is not None:
        store = store or SnapshotStore.from_settings(settings)
        policy = policy or settings.snapshot_policy

    return expect_unchanged(category, test_name, body, store=store, policy=policy)


def url_case(
    category: str,
    test_name: str,
    url: str,
    expected_type: str = _defaults.accept,
) -> Callable[..., None]:
    """
    Build a pytest test that checks url against the saved response category/test_name.

    Usage in a test module:
        test_server_info = url_case("server", "info", "/")
    """

    def _case(
        bls_client: httpx.Client,
        snapshot_store: SnapshotStore,
        snapshot_policy: SnapshotPolicy,
    ) -> None:
        expect_url_unchanged(
            category,
            test_name,
            url,
            expected_type,
            client=bls_client,
            store=snapshot_store,
            policy=snapshot_policy,
        )

    _case.__name__ = f"test_{category}_{test_name}"
    _case.__qualname__ = _case.__name__
    _case.__doc__ = f"{category}: {test_name} response should match previous"
    return _case
