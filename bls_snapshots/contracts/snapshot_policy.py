# bls_snapshots/contracts/snapshot_policy.py
"""
bls_snapshots.contracts.snapshot_policy

Purpose:
    What the comparator does when no snapshot exists yet, and what it reports back.

Notes:
    The environment flag is only a default source. Callers (and the pytest
    plugin) may inject a policy explicitly.

Created:
    2026-10-19
"""

from __future__ import annotations

import os
from enum import Enum

ENV_SAVE_MISSING_RESPONSES = "BLACKLAB_TEST_SAVE_MISSING_RESPONSES"

# Only this exact literal enables save mode.
SAVE_MISSING_ENABLED_VALUE = "true"


class SnapshotPolicy(str, Enum):
    COMPARE_ONLY = "compare_only"
    WRITE_IF_MISSING = "write_if_missing"


class SnapshotOutcome(str, Enum):
    MATCHED = "matched"
    WRITTEN = "written"


def save_missing_from_env() -> bool:
    return os.getenv(ENV_SAVE_MISSING_RESPONSES) == SAVE_MISSING_ENABLED_VALUE


def snapshot_policy_from_env() -> SnapshotPolicy:
    """
    Read the save-missing flag at call time.
    """
    if save_missing_from_env():
        return SnapshotPolicy.WRITE_IF_MISSING
    return SnapshotPolicy.COMPARE_ONLY
