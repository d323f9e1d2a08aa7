"""Yes/no prompt used by the first-run check."""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable

import click

from installer.errors import InputStreamError, NonInteractiveError

logger = logging.getLogger(__name__)

AFFIRMATIVE_ANSWERS = frozenset({"y", "yes"})
NEGATIVE_ANSWERS = frozenset({"n", "no"})


def is_interactive_terminal() -> bool:
    """Check if a user can answer a prompt.

    Stdout is usually captured by the shell wrapper, so the prompt is shown on
    stderr and only stdin and stderr need to be terminals.
    """
    # Both are None when launched without a console
    if sys.stdin is None or sys.stderr is None:
        return False
    return sys.stdin.isatty() and sys.stderr.isatty()


def parse_answer(answer: str) -> bool:
    """Interpret an answer, treating anything unrecognized as a decline."""
    normalized = answer.strip().lower()
    if normalized in AFFIRMATIVE_ANSWERS:
        return True
    if normalized not in NEGATIVE_ANSWERS:
        logger.debug("Unrecognized answer %r, assuming no", answer)
    return False


class ClickPrompt:
    """Ask yes/no questions on the terminal with click."""

    def __init__(self, is_interactive: Callable[[], bool] | None = None):
        self.is_interactive = is_interactive or is_interactive_terminal

    def ask(self, question: str) -> bool:
        """Show the question and return True only for an affirmative answer."""
        if not self.is_interactive():
            raise NonInteractiveError()

        click.echo(question, err=True)
        try:
            answer = click.prompt(
                "[y/N]", default="", show_default=False, prompt_suffix=" ", err=True
            )
        except (click.exceptions.Abort, EOFError, KeyboardInterrupt) as e:
            raise InputStreamError("Could not read an answer") from e

        return parse_answer(answer)
