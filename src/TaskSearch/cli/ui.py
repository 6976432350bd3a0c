"""Click CLI interface definitions.

Defines the command-line interface structure and routes commands
to their respective runners.
"""

from __future__ import annotations

from pathlib import Path

import click
from dotenv import load_dotenv

from TaskSearch.cli.runner import CommandRunner
from TaskSearch.config import DEFAULT_CONFIG_PATH, load_config_with_defaults


@click.group(help="TaskSearch: filter tasks with the search query language.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=DEFAULT_CONFIG_PATH,
    show_default=True,
    help="Path to YAML config file, merged onto the defaults.",
)
@click.option(
    "--defaults",
    "default_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=DEFAULT_CONFIG_PATH,
    show_default=True,
    help="Path to the default YAML config.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path, default_path: Path) -> None:
    """CLI entry group.

    Loads environment variables from a .env file before reading config, so
    `store.path_env` overrides can live there.
    """
    load_dotenv()
    ctx.obj = load_config_with_defaults(config_path, default_path=default_path)


@cli.command("search")
@click.argument("queries", nargs=-1, required=True)
@click.pass_context
def search_cmd(ctx: click.Context, queries: tuple[str, ...]) -> None:
    """Filter the task snapshot with each QUERY and write the results."""
    runner = CommandRunner(ctx.obj)
    runner.run_search(action=ctx.command.name, texts=queries)


@cli.command("explain")
@click.argument("queries", nargs=-1, required=True)
@click.pass_context
def explain_cmd(ctx: click.Context, queries: tuple[str, ...]) -> None:
    """Show how each QUERY is parsed into terms and field filters."""
    runner = CommandRunner(ctx.obj)
    runner.run_explain(action=ctx.command.name, texts=queries)
