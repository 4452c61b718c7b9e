# bls_snapshots/snapshots/store.py
"""
bls_snapshots.snapshots.store

Purpose:
    File-backed snapshot storage: <root>/<category>/<test name>.json.

Notes:
    Two tests writing the same (category, test name) for the first time at the
    same moment may both write; the last write wins. Names must be unique.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from bls_snapshots.contracts.snapshot_paths import SnapshotPaths
from bls_snapshots.errors import InvalidSnapshotNameError
from bls_snapshots.settings import Settings, get_settings
from bls_snapshots.snapshots.filenames import sanitize_filename

_paths = SnapshotPaths()

# Room for the suffix so "<test name>.json" stays within the file name limit.
_TEST_NAME_MAX_BYTES = _paths.max_name_bytes - len(_paths.file_suffix.encode("utf-8"))


@dataclass(frozen=True)
class SnapshotStore:
    root: Path

    @staticmethod
    def from_settings(settings: Settings | None = None) -> "SnapshotStore":
        s = settings or get_settings()
        return SnapshotStore(root=Path(s.saved_responses_path))

    def category_dir(self, category: str) -> Path:
        root = self.root.resolve()
        d = (root / sanitize_filename(category)).resolve()
        if not d.is_relative_to(root) or d == root:
            raise InvalidSnapshotNameError(f"Category {category!r} resolves outside {root}")
        return d

    def path_for(self, category: str, test_name: str) -> Path:
        d = self.category_dir(category)
        name = sanitize_filename(test_name, max_bytes=_TEST_NAME_MAX_BYTES)
        p = (d / f"{name}{_paths.file_suffix}").resolve()
        if p.parent != d:
            raise InvalidSnapshotNameError(f"Test name {test_name!r} resolves outside {d}")
        return p

    def ensure_category_dir(self, category: str) -> Path:
        d = self.category_dir(category)
        d.mkdir(parents=True, exist_ok=True)
        return d

    def exists(self, category: str, test_name: str) -> bool:
        return self.path_for(category, test_name).is_file()

    def load(self, category: str, test_name: str) -> Any:
        p = self.path_for(category, test_name)
        return json.loads(p.read_text(encoding="utf-8"))

    def save(self, category: str, test_name: str, value: Any) -> Path:
        self.ensure_category_dir(category)
        p = self.path_for(category, test_name)
        p.write_text(
            json.dumps(value, indent=_paths.json_indent, ensure_ascii=False),
            encoding="utf-8",
        )
        return p
