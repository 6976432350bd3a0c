"""Console text output renderers.

Renders a list of `Task` into human-friendly text.
Provides ConsoleOutputWriter implementation for command output.
"""

from __future__ import annotations

from datetime import datetime
from typing import Iterable, Sequence

from TaskSearch.core.models import Priority, Section, Task, find_section
from TaskSearch.core.query import Query
from TaskSearch.renderers.base import OutputWriter
from TaskSearch.utils.log import log


def _fmt_dt(dt: datetime | None) -> str:
    """Format a due date as YYYY-mm-dd, or "-" when absent."""
    if not dt:
        return "-"
    return dt.strftime("%Y-%m-%d")


def render_text(tasks: Iterable[Task], sections: Sequence[Section] = ()) -> str:
    """Render tasks into a human-readable text block.

    Args:
        tasks: Iterable of tasks.
        sections: Known sections, for resolving section names.

    Returns:
        A formatted string ready to be printed.
    """
    lines: list[str] = []
    for idx, task in enumerate(tasks, start=1):
        mark = "x" if task.is_completed else " "
        lines.append(f"{idx}. [{mark}] {task.title}")
        section = find_section(sections, task.section_id)
        if section is not None:
            lines.append(f"   Section: {section.title}")
        if task.priority is not Priority.NONE:
            lines.append(f"   Priority: {task.priority.display_name}")
        if task.amount is not None:
            lines.append(f"   Amount: ${task.amount:.2f}")
        lines.append(f"   Due: {_fmt_dt(task.due_date)}")
        if task.email_subject:
            lines.append(f"   Email: {task.email_subject} ({task.email_sender or '-'})")
        if task.description:
            lines.append(f"   Notes: {task.description}")
        lines.append("")
    if not lines:
        return "No matching tasks.\n"
    return "\n".join(lines).rstrip() + "\n"


def render_query(query: Query) -> str:
    """Render the parsed structure of a query, one clause per line."""
    if query.is_empty:
        return "(empty query: matches every task)\n"
    lines: list[str] = []
    for term in query.terms:
        flags = []
        if term.is_exact_phrase:
            flags.append("phrase")
        if term.is_wildcard:
            flags.append("prefix")
        suffix = f" [{', '.join(flags)}]" if flags else ""
        lines.append(f"{term.operator.value:<3} {term.text!r}{suffix}")
    for flt in query.field_filters:
        lines.append(f"FILTER {flt.field.value} {flt.comparison.value} {flt.value!r}")
    return "\n".join(lines) + "\n"


class ConsoleOutputWriter(OutputWriter):
    """Write results to console via logging."""

    def write_search_result(
        self,
        text: str,
        query: Query,
        tasks: Sequence[Task],
        sections: Sequence[Section],
    ) -> None:
        log.info("query=%r matches=%d", text, len(tasks))
        for line in render_text(tasks, sections).splitlines():
            log.info(line)

    def finalize(self, action: str) -> None:
        """No-op for console output."""
