"""Locations used by the sync tool."""

from __future__ import annotations

import os
from pathlib import Path

SYNC_DIR_ENV = "AW_SYNC_DIR"
DEFAULT_SYNC_DIR_NAME = "ActivityWatchSync"


def get_sync_dir() -> Path:
    """Return the sync directory.

    The ``AW_SYNC_DIR`` environment variable wins when set; otherwise the
    directory ``ActivityWatchSync`` in the user's home is used.
    """
    override = os.environ.get(SYNC_DIR_ENV)
    if override is not None:
        return Path(override)
    return Path.home() / DEFAULT_SYNC_DIR_NAME