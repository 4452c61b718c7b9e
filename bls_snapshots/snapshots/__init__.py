# Purpose: Snapshot storage and comparison package entrypoint.

from .comparator import expect_unchanged
from .diff import json_diff, json_equal
from .filenames import sanitize_filename
from .store import SnapshotStore

__all__ = ["SnapshotStore", "expect_unchanged", "json_diff", "json_equal", "sanitize_filename"]
