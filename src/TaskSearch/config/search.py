"""Search domain configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from TaskSearch.config.common import expect_bool, expect_int, get_optional_value, get_section


@dataclass(frozen=True, slots=True)
class SearchConfig:
    """Store validated search behavior.

    Attributes:
        include_completed: Whether completed tasks appear in results.
        limit: Maximum number of results; -1 means unlimited.
    """

    include_completed: bool
    limit: int


def load_search(raw: Mapping[str, Any]) -> SearchConfig:
    """Load search domain config from raw mapping.

    The section is optional; missing keys fall back to showing every match.
    """
    section = get_section(raw, "search", required=False)
    return SearchConfig(
        include_completed=expect_bool(
            get_optional_value(section, "include_completed", True),
            "search.include_completed",
        ),
        limit=expect_int(get_optional_value(section, "limit", -1), "search.limit"),
    )


def check_search(config: SearchConfig) -> None:
    """Validate search constraints.

    Raises:
        ValueError: If the limit is neither -1 nor positive.
    """
    if config.limit == 0 or config.limit < -1:
        raise ValueError("search.limit must be -1 or positive")
