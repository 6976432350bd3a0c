"""Task store configuration: where the task snapshot is read from."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Mapping

from TaskSearch.config.common import (
    expect_str,
    get_optional_value,
    get_required_value,
    get_section,
)


@dataclass(frozen=True, slots=True)
class StoreConfig:
    """Store configuration.

    Attributes:
        path: Snapshot file path (JSON, or YAML by suffix).
        path_env: Environment variable that overrides `path` when set.
    """

    path: str
    path_env: str

    @property
    def resolved_path(self) -> str:
        """Return the snapshot path after applying the environment override."""
        if self.path_env:
            override = os.environ.get(self.path_env, "").strip()
            if override:
                return override
        return self.path


def load_store(raw: Mapping[str, Any]) -> StoreConfig:
    """Load store domain config from raw mapping."""
    section = get_section(raw, "store", required=True)
    return StoreConfig(
        path=expect_str(get_required_value(section, "path", "store.path"), "store.path"),
        path_env=expect_str(get_optional_value(section, "path_env", ""), "store.path_env").strip(),
    )


def check_store(config: StoreConfig) -> None:
    """Validate store constraints."""
    if not config.resolved_path.strip():
        raise ValueError("store.path must not be empty")
