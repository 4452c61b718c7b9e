"""
bls_snapshots

Purpose:
    Regression helpers for the BlackLab Server test suite.
    Masks volatile response fields and compares the result to saved snapshots.
"""

from __future__ import annotations

from bls_snapshots.contracts.mask_policy import VALUE_REMOVED, MaskAction
from bls_snapshots.contracts.snapshot_policy import SnapshotOutcome, SnapshotPolicy
from bls_snapshots.server.url_cases import expect_url_unchanged, url_case
from bls_snapshots.sanitize.bls_masks import sanitize_bls_response
from bls_snapshots.sanitize.sanitizer import sanitize_response
from bls_snapshots.snapshots.comparator import expect_unchanged

__all__ = [
    "VALUE_REMOVED",
    "MaskAction",
    "SnapshotOutcome",
    "SnapshotPolicy",
    "expect_unchanged",
    "expect_url_unchanged",
    "sanitize_bls_response",
    "sanitize_response",
    "url_case",
]
