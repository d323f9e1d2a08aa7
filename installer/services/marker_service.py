"""Version marker persistence service."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from config.paths import get_app_cache_dir, get_cache_dir
from config.project import get_project
from installer.constants import CONFIG
from installer.errors import MarkerWriteError

logger = logging.getLogger(__name__)

CacheDirProvider = Callable[[], Path | None]


class MarkerStore:
    """Owns the location and I/O of the version marker file.

    The marker lives at ``<cache-dir>/<app-name>/version``. Only its
    existence matters; the content is never read back.
    """

    def __init__(self, cache_dir_provider: CacheDirProvider = get_cache_dir) -> None:
        self.cache_dir_provider = cache_dir_provider

    def cache_dir(self) -> Path | None:
        """Get the cache directory from the provider."""
        return self.cache_dir_provider()

    def cache_dir_available(self) -> bool:
        """Check if there is anywhere to record the marker."""
        return self.cache_dir() is not None

    def resolve_marker_path(self) -> Path | None:
        """Get the marker file path, or None if the cache dir is unavailable."""
        app_cache_dir = get_app_cache_dir(self.cache_dir())
        if app_cache_dir is None:
            return None
        return app_cache_dir / CONFIG.marker_filename

    def exists(self) -> bool:
        """Check if the marker file exists.

        Errors during the check count as the file not existing.
        """
        path = self.resolve_marker_path()
        if path is None:
            return False
        try:
            return path.exists()
        except OSError as e:
            logger.debug("Could not check marker file %s: %s", path, e)
            return False

    def write(self) -> Path:
        """Create or overwrite the marker file."""
        path = self.resolve_marker_path()
        if path is None:
            raise MarkerWriteError(None, "cache directory is unavailable")

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with path.open("w", encoding="utf-8") as f:
                f.write(f"{get_project().version}\n")
        except OSError as e:
            logger.warning("Failed to write marker file %s: %s", path, e)
            raise MarkerWriteError(path, str(e)) from e

        logger.debug("Wrote marker file %s", path)
        return path
