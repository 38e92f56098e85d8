"""
Environment snapshots.

A snapshot is a plain dict of variable name to raw string value, taken once
per unmarshal call. The walker works on its own copy, so nothing here is
shared between calls.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Dict, Iterable

from dotenv import dotenv_values

logger = logging.getLogger(__name__)


def build_snapshot(environ: Iterable[str]) -> Dict[str, str]:
    """
    Convert a list of KEY=VALUE strings into a snapshot.

    Each entry is split on the first "=" only, so values may contain "=".
    A later duplicate key overwrites an earlier one.

    Raises:
        ValueError: If an entry has no "=" at all
    """
    snapshot: Dict[str, str] = {}
    for entry in environ:
        key, value = entry.split("=", 1)
        snapshot[key] = value
    return snapshot


def environ_snapshot() -> Dict[str, str]:
    """Snapshot of the live process environment."""
    return dict(os.environ)


def dotenv_snapshot(path: str | Path = ".env", *, override: bool = False) -> Dict[str, str]:
    """
    Snapshot of the process environment merged with a .env file.

    Values already present in the process environment win unless
    override is set. Keys declared without a value ("KEY" on its own
    line) are ignored. A missing file contributes nothing.
    """
    path = Path(path)
    snapshot = environ_snapshot()
    if not path.exists():
        logger.debug("No .env file at %s", path)
        return snapshot

    file_values = {k: v for k, v in dotenv_values(path).items() if v is not None}
    logger.debug("Loaded %d variable(s) from %s", len(file_values), path)

    if override:
        snapshot.update(file_values)
    else:
        for key, value in file_values.items():
            snapshot.setdefault(key, value)
    return snapshot
