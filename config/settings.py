"""
User-facing settings consumed by the first-run check.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict

from config.paths import get_default_history_file


class HistoryMode(str, Enum):
    """How the history file reference was supplied."""

    DEFAULT = "default"  # not supplied
    DISABLED = "disabled"  # supplied as an empty string
    PATH = "path"  # supplied as a non-empty path


class HistoryFile(BaseModel):
    """History file reference with absent / empty / path semantics.

    An absent value and an empty string mean different things: the former
    falls back to the default location, the latter is the user opting out of
    history altogether.
    """

    model_config = ConfigDict(frozen=True)

    mode: HistoryMode = HistoryMode.DEFAULT
    path: Path | None = None

    @classmethod
    def from_value(cls, value: str | Path | None) -> HistoryFile:
        """Build a reference from a raw flag or environment value."""
        if value is None:
            return cls()
        if str(value) == "":
            return cls(mode=HistoryMode.DISABLED)
        return cls(mode=HistoryMode.PATH, path=Path(value).expanduser())

    @property
    def is_disabled(self) -> bool:
        return self.mode is HistoryMode.DISABLED

    def resolve(self, cache_dir: Path | None) -> Path | None:
        """Return the concrete file this reference points to, if any."""
        if self.mode is HistoryMode.PATH:
            return self.path
        if self.mode is HistoryMode.DEFAULT:
            return get_default_history_file(cache_dir)
        return None


class AppSettings(BaseModel):
    """Settings for a single invocation of the application."""

    model_config = ConfigDict(frozen=True)

    history_file: HistoryFile = HistoryFile()

    @classmethod
    def from_options(cls, history_file: str | Path | None = None) -> AppSettings:
        """Create settings from raw CLI or environment values."""
        return cls(history_file=HistoryFile.from_value(history_file))
