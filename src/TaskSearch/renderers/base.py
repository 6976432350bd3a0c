"""Base classes for output writers.

Provides abstraction for writing search results to console or files.
Separates control flow from output logic for better testability.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Sequence

from TaskSearch.core.models import Section, Task
from TaskSearch.core.query import Query


class OutputWriter(ABC):
    """Abstract base class for command output writers."""

    @abstractmethod
    def write_search_result(
        self,
        text: str,
        query: Query,
        tasks: Sequence[Task],
        sections: Sequence[Section],
    ) -> None:
        """Write results from a single search.

        Args:
            text: Raw search string as typed.
            query: The parsed query.
            tasks: Matching tasks.
            sections: Known sections, for resolving section names.
        """

    @abstractmethod
    def finalize(self, action: str) -> None:
        """Finalize output (e.g., write accumulated results to file).

        Args:
            action: The CLI command name (e.g., 'search').
        """


@dataclass(slots=True)
class MultiOutputWriter(OutputWriter):
    """Delegate output to multiple writers."""

    writers: Sequence[OutputWriter]

    def write_search_result(
        self,
        text: str,
        query: Query,
        tasks: Sequence[Task],
        sections: Sequence[Section],
    ) -> None:
        for writer in self.writers:
            writer.write_search_result(text, query, tasks, sections)

    def finalize(self, action: str) -> None:
        for writer in self.writers:
            writer.finalize(action)
