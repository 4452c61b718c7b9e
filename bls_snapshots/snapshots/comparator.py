# bls_snapshots/snapshots/comparator.py
"""
bls_snapshots.snapshots.comparator

Purpose:
    Either save a response the first time a test runs, or compare it to the
    previously saved version.

Flow:
    1. Strip volatile values (bls_masks)
    2. Ensure the category directory exists
    3. Saved response present -> strict compare, SnapshotMismatchError on any difference
    4. Missing -> write it (WRITE_IF_MISSING) or SnapshotMissingError (COMPARE_ONLY)
"""

from __future__ import annotations

from typing import Any

from bls_snapshots.contracts.snapshot_policy import (
    SnapshotOutcome,
    SnapshotPolicy,
    snapshot_policy_from_env,
)
from bls_snapshots.errors import SnapshotMismatchError, SnapshotMissingError
from bls_snapshots.sanitize.bls_masks import sanitize_bls_response
from bls_snapshots.snapshots.diff import json_diff
from bls_snapshots.snapshots.store import SnapshotStore
from bls_snapshots.utils.logging import get_logger, snapshot_logger

logger = get_logger(__name__)


def expect_unchanged(
    category: str,
    test_name: str,
    actual_response: Any,
    remove_extra_params: bool = False,
    *,
    store: SnapshotStore | None = None,
    policy: SnapshotPolicy | None = None,
) -> SnapshotOutcome:
    """
    Compare a response with its saved snapshot, or save it if missing and allowed.

    Args:
        category: test category (e.g. "hits"); becomes a directory
        test_name: name of this test; becomes the file name
        actual_response: parsed JSON response
        remove_extra_params: also mask summary.searchParam, for comparing
            different requests that should have the same results
        store: snapshot storage (default: from environment settings)
        policy: behaviour for missing snapshots (default: read from the environment now)
    """
    log = snapshot_logger(logger, category, test_name)

    sanitized = sanitize_bls_response(actual_response, remove_extra_params)

    store = store or SnapshotStore.from_settings()
    store.ensure_category_dir(category)
    path = store.path_for(category, test_name)

    if path.is_file():
        saved = store.load(category, test_name)
        differences = json_diff(saved, sanitized)
        if differences:
            log.warning("response differs from %s (%d differences)", path, len(differences))
            raise SnapshotMismatchError(category, test_name, path, differences)
        log.debug("response matches %s", path)
        return SnapshotOutcome.MATCHED

    effective = SnapshotPolicy(policy) if policy is not None else snapshot_policy_from_env()
    if effective is SnapshotPolicy.WRITE_IF_MISSING:
        store.save(category, test_name, sanitized)
        log.info("saved new response to %s", path)
        return SnapshotOutcome.WRITTEN

    log.warning("no saved response at %s", path)
    raise SnapshotMissingError(category, test_name, path)
