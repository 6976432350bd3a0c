"""Read-only task snapshots loaded from JSON or YAML files.

The snapshot is the collection searches run against. It is loaded once and
never mutated; reloading produces a new snapshot object.

File layout::

    sections:
      - {id: fin, title: Finance}
    tasks:
      - id: t1
        title: Pay rent
        amount: 1200
        priority: high
        completed: false
        due_date: 2026-01-31T09:00:00
        section_id: fin
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import date, datetime
from pathlib import Path
from typing import Any, Mapping, Sequence

import yaml
from dateutil import parser as dt_parser

from TaskSearch.config.common import expect_bool, expect_float, expect_int, expect_str
from TaskSearch.core.models import Priority, Section, Task
from TaskSearch.utils.log import log

_YAML_SUFFIXES = {".yml", ".yaml"}


@dataclass(frozen=True, slots=True)
class TaskSnapshot:
    """Tasks and sections captured at one point in time."""

    tasks: tuple[Task, ...]
    sections: tuple[Section, ...]


def load_snapshot(path: Path) -> TaskSnapshot:
    """Load a snapshot file.

    Args:
        path: JSON file, or YAML file when the suffix is `.yml`/`.yaml`.

    Returns:
        Parsed snapshot.

    Raises:
        FileNotFoundError: If the file does not exist.
        TypeError: If records have the wrong shape.
        ValueError: If records have invalid values.
    """
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() in _YAML_SUFFIXES:
        raw = yaml.safe_load(text) or {}
    else:
        raw = json.loads(text)
    snapshot = parse_snapshot(raw)
    log.debug("Loaded snapshot %s: %d tasks, %d sections", path, len(snapshot.tasks), len(snapshot.sections))
    return snapshot


def parse_snapshot(raw: Any) -> TaskSnapshot:
    """Build a snapshot from a decoded mapping.

    Args:
        raw: Mapping with optional `tasks` and `sections` lists.

    Returns:
        Parsed snapshot.

    Raises:
        TypeError: If the root or a record has the wrong shape.
        ValueError: If a record holds an invalid value.
    """
    if not isinstance(raw, Mapping):
        raise TypeError("Snapshot root must be a mapping/object")

    sections = tuple(
        _parse_section(item, f"sections[{idx}]") for idx, item in enumerate(_as_list(raw, "sections"))
    )
    tasks = tuple(_parse_task(item, f"tasks[{idx}]") for idx, item in enumerate(_as_list(raw, "tasks")))

    seen: set[str] = set()
    for idx, section in enumerate(sections):
        if section.id in seen:
            raise ValueError(f"sections[{idx}].id is duplicated: {section.id}")
        seen.add(section.id)

    known = {section.id for section in sections}
    dangling = sorted({task.section_id for task in tasks if task.section_id and task.section_id not in known})
    if dangling:
        log.warning("Tasks reference unknown sections: %s", ", ".join(dangling))

    return TaskSnapshot(tasks=tasks, sections=sections)


def _as_list(raw: Mapping[str, Any], key: str) -> Sequence[Any]:
    value = raw.get(key)
    if value is None:
        return ()
    if not isinstance(value, list):
        raise TypeError(f"{key} must be a list")
    return value


def _parse_section(item: Any, key: str) -> Section:
    if not isinstance(item, Mapping):
        raise TypeError(f"{key} must be an object")
    return Section(
        id=_required_id(item, key),
        title=expect_str(item.get("title", ""), f"{key}.title"),
        sort_order=expect_int(item.get("sort_order", 0), f"{key}.sort_order"),
    )


def _parse_task(item: Any, key: str) -> Task:
    if not isinstance(item, Mapping):
        raise TypeError(f"{key} must be an object")

    amount = item.get("amount")
    section_id = item.get("section_id")
    try:
        priority = Priority.from_raw(item.get("priority"))
    except ValueError as e:
        raise ValueError(f"{key}.priority: {e}") from e

    return Task(
        id=_required_id(item, key),
        title=expect_str(item.get("title", ""), f"{key}.title"),
        description=expect_str(item.get("description") or "", f"{key}.description"),
        email_subject=_optional_str(item, "email_subject", key),
        email_sender=_optional_str(item, "email_sender", key),
        amount=expect_float(amount, f"{key}.amount") if amount is not None else None,
        priority=priority,
        is_completed=expect_bool(item.get("completed", False), f"{key}.completed"),
        due_date=_parse_due_date(item.get("due_date"), f"{key}.due_date"),
        section_id=str(section_id) if section_id is not None else None,
    )


def _required_id(item: Mapping[str, Any], key: str) -> str:
    value = item.get("id")
    if value is None or isinstance(value, bool) or str(value).strip() == "":
        raise ValueError(f"Missing required field: {key}.id")
    return str(value)


def _optional_str(item: Mapping[str, Any], field: str, key: str) -> str | None:
    value = item.get(field)
    if value is None:
        return None
    return expect_str(value, f"{key}.{field}")


def _parse_due_date(value: Any, key: str) -> datetime | None:
    """Normalize ISO strings and YAML date scalars to datetimes."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if not isinstance(value, str):
        raise TypeError(f"{key} must be an ISO-8601 string")
    try:
        return dt_parser.isoparse(value.strip())
    except ValueError as e:
        raise ValueError(f"{key} is not a valid ISO-8601 date: {value}") from e
