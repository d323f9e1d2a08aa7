"""First run detection."""

from __future__ import annotations

import logging
from pathlib import Path

from config.settings import AppSettings
from installer.services.marker_service import MarkerStore

logger = logging.getLogger(__name__)


def should_prompt(
    settings: AppSettings,
    marker_exists: bool,
    cache_dir_available: bool,
    cache_dir: Path | None = None,
) -> bool:
    """Decide whether the first-run prompt should be shown.

    Rules are checked in order and the first match wins:

    1. History explicitly disabled (empty history file): no prompt.
    2. History file exists: no prompt, this is not a first run.
    3. No cache directory: no prompt, there is nowhere to remember the answer.
    4. Marker file exists: no prompt.
    5. Otherwise prompt.

    ``cache_dir`` is only used to locate the default history file when the
    user did not supply one.
    """
    history_file = settings.history_file

    if history_file.is_disabled:
        logger.debug("History file disabled, skipping first run prompt")
        return False

    history_path = history_file.resolve(cache_dir)
    if history_path is not None and _path_exists(history_path):
        logger.debug("History file %s exists, skipping first run prompt", history_path)
        return False

    if not cache_dir_available:
        logger.debug("No cache directory available, skipping first run prompt")
        return False

    if marker_exists:
        logger.debug("Marker file exists, skipping first run prompt")
        return False

    return True


def is_first_run(settings: AppSettings, store: MarkerStore) -> bool:
    """Check if this is the first run, using the marker store for state."""
    return should_prompt(
        settings,
        marker_exists=store.exists(),
        cache_dir_available=store.cache_dir_available(),
        cache_dir=store.cache_dir(),
    )


def _path_exists(path: Path) -> bool:
    try:
        return path.exists()
    except OSError:
        return False
