from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import IntEnum
from typing import Optional, Sequence


class Priority(IntEnum):
    """Priority level of a task.

    Values order the levels, so `Priority.HIGH > Priority.LOW` holds.
    """

    NONE = 0
    LOW = 1
    MEDIUM = 2
    HIGH = 3

    @property
    def display_name(self) -> str:
        """Human-readable name used for searching and display."""
        return self.name.capitalize()

    @classmethod
    def from_raw(cls, raw: object) -> Priority:
        """Resolve a priority from its display name or integer level.

        Args:
            raw: Name (case-insensitive), integer level, or None.

        Returns:
            The matching priority; None maps to `Priority.NONE`.

        Raises:
            ValueError: If raw does not name a known priority.
        """
        if raw is None:
            return cls.NONE
        if isinstance(raw, bool):
            raise ValueError(f"Unknown priority: {raw!r}")
        if isinstance(raw, int):
            return cls(raw)
        if isinstance(raw, str):
            key = raw.strip().upper()
            if key in cls.__members__:
                return cls[key]
        raise ValueError(f"Unknown priority: {raw!r}")


@dataclass(frozen=True, slots=True)
class Section:
    """A named group of tasks.

    Attributes:
        id: Stable section identifier referenced by `Task.section_id`.
        title: Display title, matched by searches.
        sort_order: Position of the section in the task list.
    """

    id: str
    title: str
    sort_order: int = 0


@dataclass(frozen=True, slots=True)
class Task:
    """Read-only task record as supplied by the task store.

    Attributes:
        id: Task identifier.
        title: Task title.
        description: Free-form notes; empty when absent.
        email_subject: Subject of the email the task was created from.
        email_sender: Sender of the email the task was created from.
        amount: Monetary amount attached to the task.
        priority: Priority level.
        is_completed: Completion flag.
        due_date: Due date; naive values are local time.
        section_id: Identifier of the owning section, if any.
    """

    id: str
    title: str
    description: str = ""
    email_subject: Optional[str] = None
    email_sender: Optional[str] = None
    amount: Optional[float] = None
    priority: Priority = Priority.NONE
    is_completed: bool = False
    due_date: Optional[datetime] = None
    section_id: Optional[str] = None


def find_section(sections: Sequence[Section], section_id: str | None) -> Section | None:
    """Return the section with the given id, or None when it does not resolve."""
    if section_id is None:
        return None
    for section in sections:
        if section.id == section_id:
            return section
    return None
