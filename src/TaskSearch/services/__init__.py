"""Search service layer for TaskSearch.

Provides the filtering driver and a factory that wires it from configuration.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from TaskSearch.services.search import TaskSearchService

if TYPE_CHECKING:
    from TaskSearch.config import AppConfig
    from TaskSearch.storage.snapshot import TaskSnapshot


def create_search_service(config: AppConfig, snapshot: TaskSnapshot) -> TaskSearchService:
    """Create a search service over a loaded snapshot.

    Args:
        config: Application configuration containing search settings.
        snapshot: Tasks and sections to search.

    Returns:
        Configured TaskSearchService instance.
    """
    return TaskSearchService(
        snapshot=snapshot,
        include_completed=config.search.include_completed,
        limit=config.search.limit,
    )


__all__ = [
    "TaskSearchService",
    "create_search_service",
]
