# bls_snapshots/utils/logging.py
# Purpose: Logger factory and per-snapshot log prefixes.
# Notes: pytest owns handlers and levels; nothing here configures output.

from __future__ import annotations

import logging

LOGGER_NAMESPACE = "bls_snapshots"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger under the bls_snapshots namespace."""
    if not name or name == LOGGER_NAMESPACE:
        return logging.getLogger(LOGGER_NAMESPACE)
    if name.startswith(f"{LOGGER_NAMESPACE}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAMESPACE}.{name}")


class SnapshotLogAdapter(logging.LoggerAdapter):
    """
    Prefix every message with the snapshot it concerns, e.g.
    "category=hits test=basic | saved new response to ...".
    """

    def __init__(self, logger: logging.Logger, category: str, test_name: str, url: str | None = None):
        super().__init__(logger, {"category": category, "test": test_name, "url": url})
        parts = [f"category={category}", f"test={test_name}"]
        if url is not None:
            parts.append(f"url={url}")
        self.prefix = " ".join(parts)

    def process(self, msg, kwargs):
        return f"{self.prefix} | {msg}", kwargs


def snapshot_logger(
    logger: logging.Logger, category: str, test_name: str, url: str | None = None
) -> SnapshotLogAdapter:
    return SnapshotLogAdapter(logger, category, test_name, url)
