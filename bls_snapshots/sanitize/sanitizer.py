# bls_snapshots/sanitize/sanitizer.py
"""
bls_snapshots.sanitize.sanitizer

Purpose:
    Clean up a response tree for comparison.

Design Notes:
    - Masked keys get the VALUE_REMOVED marker, or are dropped for MaskAction.DELETE.
    - A nested spec recurses only when the actual value is a mapping too; any
      other shape under a nested spec is masked whole.
    - Values that are not masked go through the transform function, which
      receives the key when one is known.
    - The input is never mutated; a new tree is returned.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional, Protocol

from bls_snapshots.contracts.mask_policy import VALUE_REMOVED, MaskAction
from bls_snapshots.sanitize.mask_spec import EMPTY_MASK, CompiledMask, compile_mask_spec


class ValueTransform(Protocol):
    """
    Called as transform(value) for bare sequence elements and scalars, and as
    transform(value, key) for object fields and for array elements under a key.
    """

    def __call__(self, value: Any, key: Optional[str] = None) -> Any: ...


_SEQUENCE_TYPES = (list, tuple)


def identity_transform(value: Any, key: Optional[str] = None) -> Any:
    return value


def _is_sequence(value: Any) -> bool:
    return isinstance(value, _SEQUENCE_TYPES)


def _sanitize(value: Any, mask: CompiledMask, transform: ValueTransform) -> Any:
    if _is_sequence(value):
        # The same mask applies to every element; per-index masking is not supported.
        return [_sanitize(v, mask, transform) for v in value]

    if not isinstance(value, Mapping):
        return transform(value)

    cleaned: dict[str, Any] = {}
    for key, item in value.items():
        rule = mask.get(key)

        if rule is None:
            if _is_sequence(item):
                # Transform again with the key so key-specific rules see array elements.
                cleaned[key] = [transform(_sanitize(v, EMPTY_MASK, transform), key) for v in item]
            elif isinstance(item, Mapping):
                cleaned[key] = _sanitize(item, EMPTY_MASK, transform)
            else:
                cleaned[key] = transform(item, key)
            continue

        if isinstance(rule, CompiledMask) and isinstance(item, Mapping):
            cleaned[key] = _sanitize(item, rule, transform)
        elif rule is MaskAction.DELETE:
            continue
        else:
            cleaned[key] = VALUE_REMOVED

    return cleaned


def sanitize_response(
    response: Any,
    keys_to_make_constant: Any = None,
    transform: Optional[ValueTransform] = None,
) -> Any:
    """
    Replace (or delete) the keys named by the mask spec and transform all other values.

    keys_to_make_constant may be a nested mapping, a list/set of key names, a single
    key name or None; see bls_snapshots.sanitize.mask_spec. The transform is called
    as transform(value) for bare elements and transform(value, key) otherwise.
    """
    mask = compile_mask_spec(keys_to_make_constant)
    return _sanitize(response, mask, transform or identity_transform)
