"""CLI commands implementation."""

from pathlib import Path

import click

from app import __version__
from app.interfaces.cli.runner import (
    run_first_run_check,
    setup_quiet_logging,
    setup_verbose_logging,
)
from config import get_config


@click.command()
@click.version_option(version=__version__, prog_name="hop")
@click.argument(
    "folder",
    required=False,
    default=".",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
)
@click.option(
    "--history-file",
    default=None,
    help="History file to use. Pass an empty value to disable history.",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
def cli(folder: Path, history_file: str | None, verbose: bool):
    """hop - Jump to a folder and print its path for the shell to cd into."""
    config = get_config()

    if verbose:
        setup_verbose_logging(config.runtime.debug)
    else:
        setup_quiet_logging(config.runtime.log_level)

    run_first_run_check(config.app_settings(history_file))

    click.echo(folder.expanduser().resolve())
