# bls_snapshots/contracts/mask_policy.py
"""
bls_snapshots.contracts.mask_policy

Purpose:
    Masking conventions for response sanitization.
    Centralizes the replacement marker and the per-key mask actions.

Created:
    2026-10-19
"""

from __future__ import annotations

from enum import Enum

VALUE_REMOVED = "VALUE_REMOVED"


class MaskAction(Enum):
    # Plain Enum: DELETE never equals the string "DELETE".
    REPLACE = "replace"
    DELETE = "delete"
