"""Discovery of remote databases in the sync directory."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from activitysync.dirs import get_sync_dir

logger = logging.getLogger(__name__)

DB_SUFFIX = ".db"


def _entries(directory: Path) -> list[Path]:
    try:
        return sorted(directory.iterdir())
    except OSError:
        return []


def _contains_db_file(directory: Path) -> bool:
    return any(entry.suffix == DB_SUFFIX for entry in _entries(directory))


def _contains_subdir_with_db_file(directory: Path) -> bool:
    return any(entry.is_dir() and _contains_db_file(entry) for entry in _entries(directory))


def get_remotes() -> list[str]:
    """Return the names of hosts in the sync directory.

    Only directories laid out as ``./{host}/{device_id}/*.db`` count. The sync
    directory is created if it does not exist.
    """
    sync_root = get_sync_dir()
    sync_root.mkdir(parents=True, exist_ok=True)
    hostnames = [
        entry.name
        for entry in sorted(sync_root.iterdir())
        if entry.is_dir() and _contains_subdir_with_db_file(entry)
    ]
    logger.info("Found remotes: %s", hostnames)
    return hostnames


def find_remotes(sync_directory: str | os.PathLike[str]) -> list[Path]:
    """Return every ``*.db`` entry one directory level below ``sync_directory``."""
    root = Path(sync_directory)
    return [
        entry
        for subdir in sorted(root.iterdir())
        if subdir.is_dir()
        for entry in sorted(subdir.iterdir())
        if entry.suffix == DB_SUFFIX
    ]


def find_remotes_nonlocal(
    sync_directory: str | os.PathLike[str],
    device_id: str,
    sync_db: str | os.PathLike[str] | None = None,
) -> list[Path]:
    """Return the remote databases that do not belong to ``device_id``.

    When ``sync_db`` is given, only databases at or below that path are kept.
    """
    limit = Path(sync_db) if sync_db is not None else None
    return [
        path
        for path in find_remotes(sync_directory)
        if device_id not in str(path)
        and (limit is None or path.is_relative_to(limit))
    ]