"""Command implementations for the TaskSearch CLI.

Encapsulates business logic for commands, separated from CLI parameter
handling and output formatting.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Sequence

from TaskSearch.core.parser import parse_query
from TaskSearch.renderers import OutputWriter
from TaskSearch.renderers.console import render_query
from TaskSearch.services.search import TaskSearchService
from TaskSearch.utils.log import log


@dataclass(slots=True)
class SearchCommand:
    """Run one or more search strings against the snapshot.

    Each string is evaluated independently and handed to the output writer.
    """

    search_service: TaskSearchService
    output_writer: OutputWriter
    now: datetime | None = None

    def execute(self, texts: Sequence[str]) -> int:
        """Execute every search string.

        Args:
            texts: Raw search strings.

        Returns:
            Total number of matches across all searches.
        """
        total = 0
        multiple = len(texts) > 1
        sections = self.search_service.snapshot.sections
        for idx, text in enumerate(texts, start=1):
            if multiple:
                log.info("=== Search %d/%d ===", idx, len(texts))
            query = self.search_service.parse(text)
            tasks = self.search_service.search(text, now=self.now)
            total += len(tasks)
            self.output_writer.write_search_result(text, query, tasks, sections)
        return total


@dataclass(slots=True)
class ExplainCommand:
    """Log the parsed structure of search strings without loading tasks."""

    def execute(self, texts: Sequence[str]) -> None:
        for text in texts:
            log.info("query=%r", text)
            for line in render_query(parse_query(text)).splitlines():
                log.info("  %s", line)
