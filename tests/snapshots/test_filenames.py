"""
tests.snapshots.test_filenames

Purpose:
    Guardrail: category and test names can never escape the snapshot root.
"""

from __future__ import annotations

import pytest

from bls_snapshots.errors import InvalidSnapshotNameError
from bls_snapshots.snapshots.filenames import sanitize_filename


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("hits", "hits"),
        ("hits with spaces", "hits with spaces"),
        ("../../etc", "....etc"),
        ("a/b\\c", "abc"),
        ('what?<is>:this*|"', "whatisthis"),
        ("tab\there", "tabhere"),
        ("trailing. ", "trailing"),
        ("CON", None),
        ("lpt1.txt", None),
        ("..", None),
        (".", None),
        ("///", None),
    ],
)
def test_sanitize_filename(raw, expected) -> None:
    if expected is None:
        with pytest.raises(InvalidSnapshotNameError):
            sanitize_filename(raw)
    else:
        assert sanitize_filename(raw) == expected


def test_long_names_truncated_to_255_bytes() -> None:
    name = "é" * 200  # 2 bytes each
    out = sanitize_filename(name)
    assert len(out.encode("utf-8")) <= 255
    assert out == "é" * 127


def test_replacement_character() -> None:
    assert sanitize_filename("a/b", replacement="_") == "a_b"


def test_custom_byte_limit_drops_trailing_dots() -> None:
    assert sanitize_filename("abc.def", max_bytes=4) == "abc"
