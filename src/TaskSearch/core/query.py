from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence


class Operator(Enum):
    """How a term combines with the result accumulated so far."""

    AND = "AND"
    OR = "OR"
    NOT = "NOT"


class Field(Enum):
    """Task attribute targeted by a field filter."""

    TITLE = "title"
    DESCRIPTION = "description"
    AMOUNT = "amount"
    SECTION = "section"
    PRIORITY = "priority"
    STATUS = "status"
    DUE_DATE = "dueDate"


class Comparison(Enum):
    """Comparison applied by a field filter."""

    EQUALS = "equals"
    CONTAINS = "contains"
    GREATER_THAN = "greaterThan"
    LESS_THAN = "lessThan"
    GREATER_OR_EQUAL = "greaterOrEqual"
    LESS_OR_EQUAL = "lessOrEqual"


@dataclass(frozen=True, slots=True)
class Term:
    """One free-text term.

    Attributes:
        text: Term text with quote, dash and star markers removed.
        is_exact_phrase: Whether the term came from a quoted phrase.
        is_wildcard: Whether the term ended in `*` (prefix match).
        operator: Combination with the terms before it.
    """

    text: str
    is_exact_phrase: bool = False
    is_wildcard: bool = False
    operator: Operator = Operator.AND


@dataclass(frozen=True, slots=True)
class FieldFilter:
    """A `field:value` constraint.

    The value is kept as raw text; numbers and dates are interpreted when the
    filter is evaluated against a task.
    """

    field: Field
    comparison: Comparison
    value: str


@dataclass(frozen=True, slots=True)
class Query:
    """Parsed search input.

    An empty query (no terms, no field filters) matches every task.
    """

    terms: Sequence[Term] = ()
    field_filters: Sequence[FieldFilter] = ()

    @property
    def is_empty(self) -> bool:
        return not self.terms and not self.field_filters

    def describe(self) -> dict[str, list[dict[str, object]]]:
        """Return a JSON-serializable view of the parsed structure."""
        return {
            "terms": [
                {
                    "text": term.text,
                    "operator": term.operator.value,
                    "exact_phrase": term.is_exact_phrase,
                    "wildcard": term.is_wildcard,
                }
                for term in self.terms
            ],
            "field_filters": [
                {
                    "field": flt.field.value,
                    "comparison": flt.comparison.value,
                    "value": flt.value,
                }
                for flt in self.field_filters
            ],
        }
