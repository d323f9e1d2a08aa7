"""
Centralized path management for the application and the first-run check.
"""

import os
import platform
from pathlib import Path

from config.project import get_project

APP_NAME = get_project().name

HISTORY_FILENAME = "history.json"


def get_cache_dir() -> Path | None:
    """Get the platform user cache directory.

    Returns None if no standard cache location can be resolved.
    """
    system = platform.system()

    if system == "Windows":
        localappdata = os.environ.get("LOCALAPPDATA")
        if localappdata:
            return Path(localappdata)
        home = _home_dir()
        return home / "AppData" / "Local" if home else None

    if system == "Darwin":  # macOS
        home = _home_dir()
        return home / "Library" / "Caches" if home else None

    # Linux and others
    # Follow XDG Base Directory Specification
    xdg_cache = os.environ.get("XDG_CACHE_HOME")
    if xdg_cache and Path(xdg_cache).is_absolute():
        return Path(xdg_cache)
    home = _home_dir()
    return home / ".cache" if home else None


def get_app_cache_dir(cache_dir: Path | None) -> Path | None:
    """Get the application folder inside the given cache directory.

    None means there is no cache directory, so there is no app folder either.
    """
    if cache_dir is None:
        return None
    return cache_dir / APP_NAME


def get_default_history_file(cache_dir: Path | None) -> Path | None:
    """Get the default history file location, if a cache directory exists."""
    app_cache_dir = get_app_cache_dir(cache_dir)
    if app_cache_dir is None:
        return None
    return app_cache_dir / HISTORY_FILENAME


def get_project_root() -> Path:
    """Get the project root directory."""
    return Path(__file__).parent.parent


def _home_dir() -> Path | None:
    try:
        home = Path.home()
    except RuntimeError:
        return None
    # expanduser leaves "~" untouched when no home can be found
    return home if home.is_absolute() else None


__all__ = [
    "APP_NAME",
    "get_cache_dir",
    "get_app_cache_dir",
    "get_default_history_file",
    "get_project_root",
]
