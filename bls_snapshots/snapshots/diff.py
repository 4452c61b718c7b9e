# bls_snapshots/snapshots/diff.py
"""
bls_snapshots.snapshots.diff

Purpose:
    Strict deep equality for JSON values, reporting where two trees differ.

Notes:
    - Booleans never equal numbers (plain == would treat True == 1).
    - Ints and floats compare numerically (JSON has a single number type).
    - Mapping key order is ignored; list order is not.
"""

from __future__ import annotations

import json
import re
from collections.abc import Mapping
from typing import Any

ROOT_PATH = "$"

_PLAIN_KEY = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


def _kind(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, Mapping):
        return "object"
    return type(value).__name__


def _child(path: str, key: Any) -> str:
    if isinstance(key, int):
        return f"{path}[{key}]"
    if _PLAIN_KEY.fullmatch(str(key)):
        return f"{path}.{key}"
    # Keys such as file names ("a.xml") are quoted so paths stay unambiguous.
    return f"{path}[{json.dumps(str(key), ensure_ascii=False)}]"


def _short(value: Any, limit: int = 80) -> str:
    r = repr(value)
    return r if len(r) <= limit else r[: limit - 3] + "..."


def _walk(expected: Any, actual: Any, path: str, out: list[str]) -> None:
    ek, ak = _kind(expected), _kind(actual)
    if ek != ak:
        out.append(f"{path}: expected {ek} {_short(expected)}, got {ak} {_short(actual)}")
        return

    if ek == "object":
        for k in expected:
            if k not in actual:
                out.append(f"{_child(path, k)}: missing in actual response")
            else:
                _walk(expected[k], actual[k], _child(path, k), out)
        for k in actual:
            if k not in expected:
                out.append(f"{_child(path, k)}: unexpected key in actual response")
        return

    if ek == "array":
        if len(expected) != len(actual):
            out.append(f"{path}: expected {len(expected)} elements, got {len(actual)}")
        for i, (e, a) in enumerate(zip(expected, actual)):
            _walk(e, a, _child(path, i), out)
        return

    if expected != actual:
        out.append(f"{path}: expected {_short(expected)}, got {_short(actual)}")


def json_diff(expected: Any, actual: Any) -> list[str]:
    """
    Return the paths where actual differs from expected; empty means equal.
    """
    out: list[str] = []
    _walk(expected, actual, ROOT_PATH, out)
    return out


def json_equal(expected: Any, actual: Any) -> bool:
    return not json_diff(expected, actual)
