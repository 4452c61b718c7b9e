"""
bls_snapshots.errors

Purpose:
    Exception types for snapshot comparison.
    Comparison failures subclass AssertionError so pytest reports them as test
    failures instead of errors.

Created:
    2026-10-19
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from bls_snapshots.contracts.snapshot_policy import ENV_SAVE_MISSING_RESPONSES

# Differences listed in a mismatch message; the full list stays on the exception.
MAX_REPORTED_DIFFERENCES = 20


class SnapshotAssertionError(AssertionError):
    """Base class for comparison failures."""


@dataclass(eq=False)
class SnapshotMismatchError(SnapshotAssertionError):
    category: str
    test_name: str
    path: Path
    differences: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        super().__init__(str(self))

    def __str__(self) -> str:
        shown = self.differences[:MAX_REPORTED_DIFFERENCES]
        lines = [f"Response for {self.category}/{self.test_name} differs from saved response ({self.path}):"]
        lines.extend(f"  - {d}" for d in shown)
        hidden = len(self.differences) - len(shown)
        if hidden > 0:
            lines.append(f"  ... and {hidden} more")
        return "\n".join(lines)


@dataclass(eq=False)
class SnapshotMissingError(SnapshotAssertionError):
    category: str
    test_name: str
    path: Path

    def __post_init__(self) -> None:
        super().__init__(str(self))

    def __str__(self) -> str:
        return (
            f"Response for {self.category}/{self.test_name} not found. Make sure it exists "
            f"(run with {ENV_SAVE_MISSING_RESPONSES}=true or --save-missing-responses to save responses)"
        )


@dataclass(eq=False)
class UnexpectedStatusError(SnapshotAssertionError):
    url: str
    status_code: int
    body_excerpt: str = ""

    def __post_init__(self) -> None:
        super().__init__(str(self))

    def __str__(self) -> str:
        return f"GET {self.url} returned status {self.status_code}, expected 200: {self.body_excerpt}"


class InvalidSnapshotNameError(ValueError):
    """Category or test name cannot be turned into a safe path."""


class SettingsError(ValueError):
    """Invalid configuration value in the environment."""
