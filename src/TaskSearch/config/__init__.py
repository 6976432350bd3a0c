from __future__ import annotations

"""Public configuration API for TaskSearch."""

from TaskSearch.config.app import (
    DEFAULT_CONFIG_PATH,
    AppConfig,
    load_config,
    load_config_with_defaults,
    merge_config_dicts,
    parse_config_dict,
)
from TaskSearch.config.output import OutputConfig
from TaskSearch.config.runtime import RuntimeConfig
from TaskSearch.config.search import SearchConfig
from TaskSearch.config.store import StoreConfig

__all__ = [
    "RuntimeConfig",
    "StoreConfig",
    "SearchConfig",
    "OutputConfig",
    "AppConfig",
    "DEFAULT_CONFIG_PATH",
    "load_config",
    "load_config_with_defaults",
    "merge_config_dicts",
    "parse_config_dict",
]
