"""
tests.conftest

Shared pytest fixtures for bls_snapshots tests.
Snapshots always go to a per-test temporary directory.
"""

from __future__ import annotations

import pytest

from bls_snapshots.contracts.snapshot_policy import ENV_SAVE_MISSING_RESPONSES
from bls_snapshots.snapshots.store import SnapshotStore


@pytest.fixture()
def snapshot_root(tmp_path):
    root = tmp_path / "saved-responses"
    root.mkdir()
    return root


@pytest.fixture()
def store(snapshot_root) -> SnapshotStore:
    return SnapshotStore(root=snapshot_root)


@pytest.fixture(autouse=True)
def _no_save_missing_env(monkeypatch):
    """Tests opt in to save mode explicitly."""
    monkeypatch.delenv(ENV_SAVE_MISSING_RESPONSES, raising=False)
