"""Output renderers for search results.

Provides abstraction and implementations for writing search results to
various output formats (console, JSON), plus a factory function to
instantiate writers based on configuration.
"""

from __future__ import annotations

from TaskSearch.config import AppConfig
from TaskSearch.renderers.base import MultiOutputWriter, OutputWriter
from TaskSearch.renderers.console import ConsoleOutputWriter, render_query, render_text
from TaskSearch.renderers.json import JsonFileWriter, render_json


def create_output_writer(config: AppConfig) -> OutputWriter:
    """Create output writer based on config.

    Args:
        config: Application configuration.

    Returns:
        A MultiOutputWriter over every configured format.
    """
    writers: list[OutputWriter] = []
    if "console" in config.output.formats:
        writers.append(ConsoleOutputWriter())
    if "json" in config.output.formats:
        writers.append(JsonFileWriter(config.output.base_dir))

    if not writers:
        raise ValueError("No output writers configured")
    return MultiOutputWriter(writers)


__all__ = [
    "OutputWriter",
    "ConsoleOutputWriter",
    "JsonFileWriter",
    "MultiOutputWriter",
    "render_json",
    "render_query",
    "render_text",
    "create_output_writer",
]
