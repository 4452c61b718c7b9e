# bls_snapshots/contracts/snapshot_paths.py
"""
bls_snapshots.contracts.snapshot_paths

Purpose:
    Central definition of snapshot file layout and request defaults.
    Keeps naming stable and prevents string duplication.

Created:
    2026-10-19
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SnapshotPaths:
    default_root: str = "saved-responses"
    file_suffix: str = ".json"
    json_indent: int = 2
    max_name_bytes: int = 255


@dataclass(frozen=True)
class RequestDefaults:
    server_url: str = "http://localhost:8080/blacklab-server"
    accept: str = "application/json"
    timeout_s: float = 30.0
    ok_status: int = 200
    body_excerpt_chars: int = 500
