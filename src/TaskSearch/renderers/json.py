"""JSON output renderers.

Renders a list of `Task` into JSON-serializable objects.
Provides JsonFileWriter implementation for command output.
"""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import Iterable, Sequence

from TaskSearch.core.models import Section, Task, find_section
from TaskSearch.core.query import Query
from TaskSearch.renderers.base import OutputWriter
from TaskSearch.utils.log import log


def render_json(tasks: Iterable[Task], sections: Sequence[Section] = ()) -> list[dict]:
    """Render tasks into JSON-serializable Python objects.

    Args:
        tasks: Iterable of tasks.
        sections: Known sections, for resolving section names.

    Returns:
        A list of dicts, one per task.
    """
    out: list[dict] = []
    for task in tasks:
        section = find_section(sections, task.section_id)
        out.append(
            {
                "id": task.id,
                "title": task.title,
                "description": task.description,
                "email_subject": task.email_subject,
                "email_sender": task.email_sender,
                "amount": task.amount,
                "priority": task.priority.display_name,
                "completed": task.is_completed,
                "due_date": task.due_date.isoformat() if task.due_date else None,
                "section_id": task.section_id,
                "section": section.title if section is not None else None,
            }
        )
    return out


class JsonFileWriter(OutputWriter):
    """Accumulate results and write to JSON file on finalize."""

    def __init__(self, base_dir: str) -> None:
        """Initialize JSON writer.

        Args:
            base_dir: Base output directory; files go to `<base_dir>/json`.
        """
        self.output_dir = Path(base_dir) / "json"
        self.all_results: list[dict] = []

    def write_search_result(
        self,
        text: str,
        query: Query,
        tasks: Sequence[Task],
        sections: Sequence[Section],
    ) -> None:
        """Accumulate search result for later writing."""
        self.all_results.append(
            {
                "query": text,
                "parsed": query.describe(),
                "tasks": render_json(tasks, sections),
            }
        )

    def finalize(self, action: str) -> Path:
        """Write accumulated results to a JSON file.

        Args:
            action: The CLI command name (used in filename).

        Returns:
            Path of the written file.
        """
        payload = json.dumps(self.all_results, ensure_ascii=False, indent=2)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        output_path = self.output_dir / f"{action}_{timestamp}.json"
        output_path.write_text(payload, encoding="utf-8")
        log.info("JSON saved to %s", output_path)
        return output_path
