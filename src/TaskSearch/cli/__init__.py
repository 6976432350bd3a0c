"""CLI package for TaskSearch command orchestration."""

from __future__ import annotations

__all__ = ["CommandRunner", "cli", "main"]

from TaskSearch.cli.runner import CommandRunner
from TaskSearch.cli.ui import cli


def main() -> None:
    """Run the TaskSearch CLI.

    Entry point referenced by console script in pyproject.toml.
    """
    cli()
