"""Command line interface."""

from app.interfaces.cli.commands import cli
from app.interfaces.cli.runner import run_first_run_check

__all__ = ["cli", "run_first_run_check"]
