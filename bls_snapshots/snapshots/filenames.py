# bls_snapshots/snapshots/filenames.py
"""
bls_snapshots.snapshots.filenames

Purpose:
    Turn category and test names into safe single path components.

Rules:
    - drop / ? < > \\ : * | " and control characters
    - names consisting only of dots are rejected ("." and "..")
    - Windows device names (con, prn, aux, nul, com0-9, lpt0-9) are rejected
    - trailing dots and spaces are dropped
    - result truncated to max_bytes UTF-8 bytes (255 by default)
"""

from __future__ import annotations

import re

from bls_snapshots.contracts.snapshot_paths import SnapshotPaths
from bls_snapshots.errors import InvalidSnapshotNameError

_paths = SnapshotPaths()

_ILLEGAL = re.compile(r'[/?<>\\:*|"]')
_CONTROL = re.compile(r"[\x00-\x1f\x80-\x9f]")
_RESERVED = re.compile(r"^\.+$")
_WINDOWS_RESERVED = re.compile(r"^(con|prn|aux|nul|com[0-9]|lpt[0-9])(\..*)?$", re.IGNORECASE)
_WINDOWS_TRAILING = re.compile(r"[. ]+$")


def _truncate_utf8(s: str, max_bytes: int) -> str:
    encoded = s.encode("utf-8")
    if len(encoded) <= max_bytes:
        return s
    return encoded[:max_bytes].decode("utf-8", errors="ignore")


def sanitize_filename(name: str, replacement: str = "", max_bytes: int = _paths.max_name_bytes) -> str:
    """
    Return name with unsafe characters and reserved forms replaced.
    The result is at most max_bytes UTF-8 bytes long.
    Raises InvalidSnapshotNameError if nothing usable remains.
    """
    s = str(name)
    s = _ILLEGAL.sub(replacement, s)
    s = _CONTROL.sub(replacement, s)
    s = _RESERVED.sub(replacement, s)
    s = _WINDOWS_RESERVED.sub(replacement, s)
    s = _WINDOWS_TRAILING.sub(replacement, s)
    s = _WINDOWS_TRAILING.sub(replacement, _truncate_utf8(s, max_bytes))

    if not s or _RESERVED.fullmatch(s):
        raise InvalidSnapshotNameError(f"Name {name!r} is empty after sanitizing")
    return s
