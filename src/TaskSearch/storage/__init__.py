"""Task store access for TaskSearch.

Provides the read-only snapshot model and a factory that resolves the
configured snapshot location.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from TaskSearch.storage.snapshot import TaskSnapshot, load_snapshot, parse_snapshot
from TaskSearch.utils.log import log

if TYPE_CHECKING:
    from TaskSearch.config import AppConfig


def create_snapshot(config: AppConfig) -> TaskSnapshot:
    """Load the task snapshot named by the store configuration.

    Args:
        config: Application configuration.

    Returns:
        Loaded snapshot.
    """
    path = Path(config.store.resolved_path)
    log.info("Loading tasks from %s", path)
    return load_snapshot(path)


__all__ = [
    "TaskSnapshot",
    "create_snapshot",
    "load_snapshot",
    "parse_snapshot",
]
