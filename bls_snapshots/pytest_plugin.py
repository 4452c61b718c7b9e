"""
bls_snapshots.pytest_plugin

Purpose:
    pytest fixtures for snapshot tests against a BlackLab Server.
    Registered through the pytest11 entry point.

Fixtures:
    - bls_settings: Settings read from the environment
    - bls_client: httpx.Client bound to the server URL
    - snapshot_store: SnapshotStore rooted at the saved responses directory
    - snapshot_policy: COMPARE_ONLY unless the env flag or --save-missing-responses says otherwise

Override any of them in a conftest.py (e.g. bls_client with a TestClient).
"""

from __future__ import annotations

from typing import Iterator

import httpx
import pytest

from bls_snapshots.contracts.snapshot_policy import SnapshotPolicy
from bls_snapshots.server.url_cases import build_client
from bls_snapshots.settings import Settings, get_settings
from bls_snapshots.snapshots.store import SnapshotStore

SAVE_MISSING_OPTION = "--save-missing-responses"


def pytest_addoption(parser: pytest.Parser) -> None:
    group = parser.getgroup("bls-snapshots")
    group.addoption(
        SAVE_MISSING_OPTION,
        action="store_true",
        default=False,
        help="Save responses that have no saved snapshot yet instead of failing.",
    )


@pytest.fixture()
def bls_settings() -> Settings:
    return get_settings()


@pytest.fixture()
def bls_client(bls_settings: Settings) -> Iterator[httpx.Client]:
    with build_client(bls_settings) as client:
        yield client


@pytest.fixture()
def snapshot_store(bls_settings: Settings) -> SnapshotStore:
    return SnapshotStore.from_settings(bls_settings)


@pytest.fixture()
def snapshot_policy(request: pytest.FixtureRequest, bls_settings: Settings) -> SnapshotPolicy:
    if request.config.getoption(SAVE_MISSING_OPTION):
        return SnapshotPolicy.WRITE_IF_MISSING
    return bls_settings.snapshot_policy
