# bls_snapshots/settings.py
"""
bls_snapshots.settings

Purpose:
    Centralized configuration for the regression helpers.
    Values come from the environment at call time so a test run can toggle them.

Created:
    2026-10-19
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, Field

from bls_snapshots.contracts.snapshot_paths import RequestDefaults, SnapshotPaths
from bls_snapshots.contracts.snapshot_policy import SnapshotPolicy, save_missing_from_env
from bls_snapshots.errors import SettingsError

ENV_SERVER_URL = "BLACKLAB_TEST_SERVER_URL"
ENV_SAVED_RESPONSES_PATH = "BLACKLAB_TEST_SAVED_RESPONSES_PATH"
ENV_HTTP_TIMEOUT_SECONDS = "BLACKLAB_TEST_HTTP_TIMEOUT_SECONDS"

_defaults = RequestDefaults()
_paths = SnapshotPaths()


class Settings(BaseModel):
    server_url: str = Field(default=_defaults.server_url)
    saved_responses_path: Path = Field(default=Path(_paths.default_root))
    save_missing_responses: bool = Field(default=False)
    http_timeout_s: float = Field(default=_defaults.timeout_s, gt=0)

    @property
    def snapshot_policy(self) -> SnapshotPolicy:
        if self.save_missing_responses:
            return SnapshotPolicy.WRITE_IF_MISSING
        return SnapshotPolicy.COMPARE_ONLY

    @staticmethod
    def from_env() -> "Settings":
        server_url = (os.getenv(ENV_SERVER_URL) or "").strip() or _defaults.server_url
        saved_path = (os.getenv(ENV_SAVED_RESPONSES_PATH) or "").strip() or _paths.default_root

        timeout_raw = (os.getenv(ENV_HTTP_TIMEOUT_SECONDS) or "").strip()
        try:
            timeout_s = float(timeout_raw) if timeout_raw else _defaults.timeout_s
        except ValueError as e:
            raise SettingsError(f"Invalid {ENV_HTTP_TIMEOUT_SECONDS} value: {timeout_raw!r}") from e
        if timeout_s <= 0:
            raise SettingsError(f"{ENV_HTTP_TIMEOUT_SECONDS} must be positive, got {timeout_s}")

        return Settings(
            server_url=server_url.rstrip("/"),
            saved_responses_path=Path(saved_path),
            save_missing_responses=save_missing_from_env(),
            http_timeout_s=timeout_s,
        )


def get_settings() -> Settings:
    return Settings.from_env()
