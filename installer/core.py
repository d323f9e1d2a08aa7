"""Core first-run installation check - handles business logic only."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Protocol

from config.settings import AppSettings
from installer.cli.display.shell import first_run_message
from installer.cli.prompt import ClickPrompt
from installer.errors import PromptError, UserDeclinedError
from installer.first_run import is_first_run
from installer.services.marker_service import MarkerStore

logger = logging.getLogger(__name__)


class Prompt(Protocol):
    """Anything that can ask the user a yes/no question."""

    def ask(self, question: str) -> bool: ...


class CheckState(str, Enum):
    """States of the installation check."""

    UNCHECKED = "unchecked"
    SKIPPED = "skipped"
    PROMPTING = "prompting"
    CONFIRMED = "confirmed"
    DECLINED = "declined"


@dataclass
class CheckResult:
    """Result of a successful installation check."""

    state: CheckState
    marker_path: Path | None = None


class InstallationChecker:
    """Decide whether to prompt on first run, prompt, and record the answer."""

    def __init__(
        self,
        settings: AppSettings,
        store: MarkerStore | None = None,
        prompt: Prompt | None = None,
    ) -> None:
        self.settings = settings
        self.store = store or MarkerStore()
        self.prompt = prompt or ClickPrompt()
        self.state = CheckState.UNCHECKED

    def check(self) -> CheckResult:
        """Run the check.

        Returns the result when startup may continue. Raises
        UserDeclinedError when the user declines, and MarkerWriteError when the
        answer was yes but could not be recorded.
        """
        if not is_first_run(self.settings, self.store):
            self.state = CheckState.SKIPPED
            return CheckResult(self.state)

        self.state = CheckState.PROMPTING
        try:
            confirmed = self.prompt.ask(first_run_message())
        except PromptError as e:
            logger.info("First run prompt unavailable, treating as decline: %s", e)
            confirmed = False

        if not confirmed:
            self.state = CheckState.DECLINED
            raise UserDeclinedError()

        self.state = CheckState.CONFIRMED
        marker_path = self.store.write()
        return CheckResult(self.state, marker_path)


def check_first_run_with_prompt(
    settings: AppSettings,
    store: MarkerStore | None = None,
    prompt: Prompt | None = None,
) -> CheckResult:
    """Run the first-run check once with the given collaborators."""
    return InstallationChecker(settings, store, prompt).check()
