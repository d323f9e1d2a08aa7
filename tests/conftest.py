"""Pytest configuration for the test suite."""

from __future__ import annotations

from pathlib import Path

import pytest

from config import clear_config_cache
from installer.services.marker_service import MarkerStore


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Keep tests away from the real home, cache and configuration."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("SHELL", "/bin/bash")
    for var in ("HOP_HISTORY_FILE", "HOP_LOG_LEVEL", "HOP_DEBUG", "XDG_CACHE_HOME"):
        monkeypatch.delenv(var, raising=False)

    clear_config_cache()
    yield
    clear_config_cache()


@pytest.fixture(scope="function")
def cache_dir(tmp_path: Path) -> Path:
    """Return an empty cache directory."""
    path = tmp_path / "cache"
    path.mkdir()
    return path


@pytest.fixture(scope="function")
def marker_store(cache_dir: Path) -> MarkerStore:
    """Return a MarkerStore rooted at the temporary cache directory."""
    return MarkerStore(lambda: cache_dir)


@pytest.fixture(scope="function")
def unavailable_store() -> MarkerStore:
    """Return a MarkerStore with no cache directory."""
    return MarkerStore(lambda: None)
