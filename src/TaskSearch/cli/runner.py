"""Command runner for coordinating CLI execution.

Manages component creation, logging configuration, and error handling for
command execution.
"""

from __future__ import annotations

from typing import Sequence

import click

from TaskSearch.cli.commands import ExplainCommand, SearchCommand
from TaskSearch.config import AppConfig
from TaskSearch.renderers import create_output_writer
from TaskSearch.services import create_search_service
from TaskSearch.storage import create_snapshot
from TaskSearch.utils.log import configure_logging, log


class CommandRunner:
    """Orchestrates command execution.

    Handles logging configuration, component creation, and error handling
    for CLI commands.
    """

    def __init__(self, config: AppConfig) -> None:
        self.config = config

    def _configure_logging(self, action: str) -> None:
        configure_logging(
            level=self.config.runtime.level,
            action=action,
            log_to_file=self.config.runtime.to_file,
            log_dir=self.config.runtime.dir,
        )

    def run_search(self, action: str, texts: Sequence[str]) -> int:
        """Execute the search command.

        Args:
            action: The CLI command name (e.g., 'search').
            texts: Raw search strings.

        Returns:
            Total number of matches.

        Raises:
            click.Abort: When the search fails.
        """
        self._configure_logging(action)
        try:
            snapshot = create_snapshot(self.config)
            search_service = create_search_service(self.config, snapshot)
            output_writer = create_output_writer(self.config)

            command = SearchCommand(search_service=search_service, output_writer=output_writer)
            total = command.execute(texts)
            output_writer.finalize(action)
            return total
        except Exception as e:  # noqa: BLE001 - cli boundary
            log.error("Search failed: %s", e)
            raise click.Abort from e

    def run_explain(self, action: str, texts: Sequence[str]) -> None:
        """Execute the explain command."""
        self._configure_logging(action)
        ExplainCommand().execute(texts)
