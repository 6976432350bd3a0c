"""Match parsed queries against task records.

Free-text terms are folded left to right. An OR term opens a group seeded with
the result accumulated so far, so `A B OR C D` evaluates as
`(A AND B) OR (C AND D)`. AND and NOT terms close an open group before applying
themselves. Field filters are evaluated independently and all must pass.

Filters whose value cannot be interpreted (a non-numeric amount, an unknown
date) fail closed for every task.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Final, Sequence

from TaskSearch.core.models import Section, Task, find_section
from TaskSearch.core.query import Comparison, Field, FieldFilter, Operator, Query, Term

_AMOUNT_EPSILON: Final = 0.01
_DATE_FORMAT: Final = "%Y-%m-%d"
_RELATIVE_DAYS: Final[dict[str, int]] = {"today": 0, "tomorrow": 1, "yesterday": -1}
_UNSECTIONED: Final = frozenset({"none", "null"})


def matches(
    task: Task,
    query: Query,
    sections: Sequence[Section] = (),
    *,
    now: datetime | None = None,
) -> bool:
    """Return whether a task satisfies a parsed query.

    Args:
        task: Task to test.
        query: Parsed query.
        sections: Known sections, used to resolve `task.section_id`.
        now: Reference time for relative dates; defaults to the current time.

    Returns:
        True when both the free-text terms and every field filter match.
    """
    if query.is_empty:
        return True
    if query.terms and not _evaluate_terms(task, query.terms, sections):
        return False
    return all(_evaluate_filter(task, flt, sections, now) for flt in query.field_filters)


def searchable_text(task: Task, sections: Sequence[Section] = ()) -> list[str]:
    """Build the casefolded strings free-text terms are matched against."""
    bag = [task.title.casefold(), task.description.casefold()]
    if task.email_subject is not None:
        bag.append(task.email_subject.casefold())
    if task.email_sender is not None:
        bag.append(task.email_sender.casefold())

    section = find_section(sections, task.section_id)
    if section is not None:
        bag.append(section.title.casefold())

    if task.amount is not None:
        formatted = f"{task.amount:.2f}"
        bag.append(formatted)
        bag.append(f"${formatted}")

    bag.append(task.priority.display_name.casefold())
    bag.extend(_status_words(task))
    return bag


def _evaluate_terms(task: Task, terms: Sequence[Term], sections: Sequence[Section]) -> bool:
    bag = searchable_text(task, sections)
    result = True
    group: bool | None = None

    for term in terms:
        hit = _term_matches(term, bag)
        if term.operator is Operator.OR:
            if group is None:
                group = result
                result = True
            group = group or hit
            continue

        if group is not None:
            result = result and group
            group = None
        if term.operator is Operator.NOT:
            result = result and not hit
        else:
            result = result and hit

    if group is not None:
        result = result and group
    return result


def _term_matches(term: Term, bag: Sequence[str]) -> bool:
    needle = term.text.casefold()
    if term.is_wildcard and not term.is_exact_phrase:
        return any(word.startswith(needle) for entry in bag for word in entry.split())
    return any(needle in entry for entry in bag)


def _status_words(task: Task) -> tuple[str, str]:
    return ("completed", "complete") if task.is_completed else ("incomplete", "todo")


def _evaluate_filter(
    task: Task,
    flt: FieldFilter,
    sections: Sequence[Section],
    now: datetime | None,
) -> bool:
    target = flt.value.casefold()
    field = flt.field

    if field is Field.TITLE:
        return _compare_text(task.title.casefold(), flt.comparison, target)
    if field is Field.DESCRIPTION:
        return _compare_text(task.description.casefold(), flt.comparison, target)
    if field is Field.AMOUNT:
        if task.amount is None:
            return False
        return _compare_amount(task.amount, flt.comparison, target)
    if field is Field.SECTION:
        section = find_section(sections, task.section_id)
        if section is None:
            return target in _UNSECTIONED
        return _compare_text(section.title.casefold(), flt.comparison, target)
    if field is Field.PRIORITY:
        return _compare_text(task.priority.display_name.casefold(), flt.comparison, target)
    if field is Field.STATUS:
        return target in _status_words(task)
    if field is Field.DUE_DATE:
        if task.due_date is None:
            return False
        return _compare_due_date(task.due_date, flt.comparison, target, now)
    raise AssertionError(f"Unhandled field: {field}")


def _compare_text(value: str, comparison: Comparison, target: str) -> bool:
    if comparison is Comparison.EQUALS:
        return value == target
    return target in value


def _compare_amount(value: float, comparison: Comparison, raw_target: str) -> bool:
    try:
        target = float(raw_target)
    except ValueError:
        return False

    if comparison is Comparison.EQUALS:
        return abs(value - target) < _AMOUNT_EPSILON
    if comparison is Comparison.GREATER_THAN:
        return value > target
    if comparison is Comparison.LESS_THAN:
        return value < target
    if comparison is Comparison.GREATER_OR_EQUAL:
        return value >= target
    if comparison is Comparison.LESS_OR_EQUAL:
        return value <= target
    return False


def _compare_due_date(
    due: datetime,
    comparison: Comparison,
    raw_target: str,
    now: datetime | None,
) -> bool:
    target = _resolve_date(raw_target, due, now)
    if target is None:
        return False

    same_day = due.date() == target.date()
    if comparison in (Comparison.EQUALS, Comparison.CONTAINS):
        return same_day
    if comparison is Comparison.GREATER_THAN:
        return due > target
    if comparison is Comparison.LESS_THAN:
        return due < target
    if comparison is Comparison.GREATER_OR_EQUAL:
        return due >= target or same_day
    if comparison is Comparison.LESS_OR_EQUAL:
        return due <= target or same_day
    return False


def _resolve_date(raw_target: str, due: datetime, now: datetime | None) -> datetime | None:
    """Resolve a filter value to a start-of-day instant in the due date's timezone."""
    if raw_target in _RELATIVE_DAYS:
        reference = _reference_now(due, now)
        midnight = reference.replace(hour=0, minute=0, second=0, microsecond=0)
        return midnight + timedelta(days=_RELATIVE_DAYS[raw_target])

    try:
        parsed = datetime.strptime(raw_target, _DATE_FORMAT)
    except ValueError:
        return None
    return parsed.replace(tzinfo=due.tzinfo)


def _reference_now(due: datetime, now: datetime | None) -> datetime:
    if now is None:
        return datetime.now(due.tzinfo)
    if due.tzinfo is None:
        return now.astimezone().replace(tzinfo=None) if now.tzinfo is not None else now
    if now.tzinfo is None:
        return now.replace(tzinfo=due.tzinfo)
    return now.astimezone(due.tzinfo)
