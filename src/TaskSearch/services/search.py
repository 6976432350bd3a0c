"""Search service that filters a task snapshot with the query language."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Sequence

from TaskSearch.core.evaluator import matches
from TaskSearch.core.models import Task, find_section
from TaskSearch.core.parser import parse_query
from TaskSearch.core.query import Query
from TaskSearch.storage.snapshot import TaskSnapshot
from TaskSearch.utils.log import log


@dataclass(slots=True)
class TaskSearchService:
    """Application service that filters tasks for a raw search string.

    The last parse is cached keyed by the raw text, so repeated calls with an
    unchanged search box do not re-parse. The cache never affects results.
    """

    snapshot: TaskSnapshot
    include_completed: bool = True
    limit: int = -1
    _cached: tuple[str, Query] | None = field(default=None, init=False, repr=False)

    def parse(self, text: str) -> Query:
        """Parse search text, reusing the previous result for identical input."""
        cached = self._cached
        if cached is not None and cached[0] == text:
            return cached[1]
        query = parse_query(text)
        self._cached = (text, query)
        log.debug("Parsed %r into terms=%s filters=%s", text, query.terms, query.field_filters)
        return query

    def search(self, text: str, *, now: datetime | None = None) -> Sequence[Task]:
        """Return snapshot tasks matching the search text, in snapshot order.

        Args:
            text: Raw search string.
            now: Reference time for relative date filters.

        Returns:
            Matching tasks, trimmed to the configured limit.
        """
        query = self.parse(text)
        sections = self.snapshot.sections

        results: list[Task] = []
        for task in self.snapshot.tasks:
            if not self.include_completed and task.is_completed:
                continue
            if not matches(task, query, sections, now=now):
                continue
            results.append(task)
            if self.limit != -1 and len(results) >= self.limit:
                break

        log.debug("Search %r matched %d of %d tasks", text, len(results), len(self.snapshot.tasks))
        return results

    def section_title(self, task: Task) -> str | None:
        """Return the display title of the task's section, if it resolves."""
        section = find_section(self.snapshot.sections, task.section_id)
        return section.title if section is not None else None
