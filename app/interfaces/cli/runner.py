"""CLI runner for hop: logging setup and the startup check."""

from __future__ import annotations

import logging
import sys

import click
from rich.logging import RichHandler

from config.settings import AppSettings
from installer import ui
from installer.constants import CONFIG
from installer.core import Prompt, check_first_run_with_prompt
from installer.errors import MarkerWriteError, UserDeclinedError
from installer.services.marker_service import MarkerStore

logger = logging.getLogger(__name__)


class SuppressConsoleHandler(logging.StreamHandler):
    """Custom handler that suppresses console output during CLI operations."""

    def emit(self: SuppressConsoleHandler, record: logging.LogRecord) -> None:
        # User-facing problems are shown through installer.ui instead
        pass


def setup_quiet_logging(level: str = "WARNING") -> None:
    """Set up logging to suppress console output."""
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    suppress_handler = SuppressConsoleHandler()
    root_logger.addHandler(suppress_handler)
    root_logger.setLevel(level.upper())


def setup_verbose_logging(debug: bool = False) -> None:
    """Set up logging for verbose mode using rich for pretty, conflict-free output."""
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    level = logging.DEBUG if debug else logging.INFO

    # Share the stderr console so log lines never end up on stdout
    rich_handler = RichHandler(
        console=ui.get_console(),
        show_path=False,
        rich_tracebacks=True,
        log_time_format="[%X]",
    )
    rich_handler.setLevel(level)

    root_logger.addHandler(rich_handler)
    root_logger.setLevel(level)


def run_first_run_check(
    settings: AppSettings,
    store: MarkerStore | None = None,
    prompt: Prompt | None = None,
) -> None:
    """Run the first-run check, exiting the process if the user declines."""
    try:
        result = check_first_run_with_prompt(settings, store, prompt)
        logger.debug("First run check finished: %s", result.state.value)
    except UserDeclinedError as e:
        click.echo(e.message, err=True)
        sys.exit(1)
    except MarkerWriteError as e:
        # Not fatal: the worst outcome is being asked again next time
        logger.warning("%s", e)
        ui.warning(f"{CONFIG.marker_write_warning}: {e.reason}")
