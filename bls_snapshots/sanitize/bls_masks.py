# bls_snapshots/sanitize/bls_masks.py
"""
bls_snapshots.sanitize.bls_masks

Purpose:
    Mask table for BlackLab Server responses: build time, versions, index
    timestamps, cache status and search timings vary between runs and are
    neutralized before comparison.

Notes:
    fromInputFile is not masked. Its values are rewritten to the file's base
    name by strip_dir, since corpus directories differ between machines.
"""

from __future__ import annotations

import re
from typing import Any, Optional

from bls_snapshots.contracts.mask_policy import MaskAction
from bls_snapshots.sanitize.sanitizer import sanitize_response

FROM_INPUT_FILE_KEY = "fromInputFile"

_DIR_PREFIX = re.compile(r"^.*[/\\]([^/\\]+)$")


def bls_mask_spec(remove_parameters: bool = False) -> dict[str, Any]:
    """
    Build a fresh mask spec for BlackLab Server responses.

    remove_parameters also masks summary.searchParam, for comparing different
    requests that should have the same results.
    """
    spec: dict[str, Any] = {
        # Server information page
        "blacklabBuildTime": True,
        "blacklabVersion": True,
        "indices": {
            "test": {
                "timeModified": True,
            },
        },
        "cacheStatus": MaskAction.DELETE,

        # Corpus information page
        "versionInfo": {
            "blacklabBuildTime": True,  # older API spelling
            "blacklabVersion": True,
            "blackLabBuildTime": True,
            "blackLabVersion": True,
            "indexFormat": True,
            "timeCreated": True,
            "timeModified": True,
        },
        "metadataFields": {
            FROM_INPUT_FILE_KEY: {
                "fieldValues": True,
            },
        },

        # Hits/docs response
        "summary": {
            "searchTime": True,
            "countTime": True,
        },

        # Index status page
        "timeModified": True,
    }
    if remove_parameters:
        spec["summary"]["searchParam"] = True
    return spec


def strip_dir(value: Any, key: Optional[str] = None) -> Any:
    """Reduce fromInputFile paths to their last segment ('/' or '\\' separated)."""
    if key == FROM_INPUT_FILE_KEY and isinstance(value, str):
        return _DIR_PREFIX.sub(r"\1", value)
    return value


def sanitize_bls_response(response: Any, remove_parameters: bool = False) -> Any:
    return sanitize_response(response, bls_mask_spec(remove_parameters), strip_dir)
