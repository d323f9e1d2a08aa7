"""Exception classes for the first-run check."""

from __future__ import annotations

from pathlib import Path

from installer.constants import CONFIG


class HopError(Exception):
    """Base exception for all hop errors."""


class MarkerWriteError(HopError):
    """Raised when the version marker cannot be persisted."""

    def __init__(self: MarkerWriteError, path: Path | None, reason: str) -> None:
        """Initialize MarkerWriteError."""
        self.path = path
        self.reason = reason
        location = str(path) if path else "<no cache directory>"
        super().__init__(f"Failed to write marker file {location}: {reason}")


class PromptError(HopError):
    """Base exception for prompt failures."""


class NonInteractiveError(PromptError):
    """Raised when no interactive terminal is attached."""

    def __init__(self: NonInteractiveError) -> None:
        """Initialize NonInteractiveError."""
        super().__init__("Not running in an interactive terminal")


class InputStreamError(PromptError):
    """Raised when the answer could not be read from the input stream."""


class UserDeclinedError(HopError):
    """Raised when the user declines the first-run prompt."""

    def __init__(self: UserDeclinedError, message: str = CONFIG.cancelled_message) -> None:
        """Initialize UserDeclinedError."""
        self.message = message
        super().__init__(message)
