"""
Provides access to project metadata from pyproject.toml.
"""

import tomllib
from dataclasses import dataclass
from functools import cache
from importlib import metadata
from pathlib import Path

DISTRIBUTION_NAME = "hop"


@dataclass
class Project:
    """Container for project metadata."""

    name: str
    version: str


@cache
def get_project() -> Project:
    """
    Get project metadata by parsing pyproject.toml.
    Falls back to the installed distribution metadata when the source tree
    is not available. The result is cached for performance.
    """
    pyproject_path = Path(__file__).parent.parent / "pyproject.toml"
    try:
        with pyproject_path.open("rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError:
        try:
            version = metadata.version(DISTRIBUTION_NAME)
        except metadata.PackageNotFoundError:
            version = "0.0.0"
        return Project(name=DISTRIBUTION_NAME, version=version)

    project_data = data.get("project", {})
    project_name = project_data.get("name", DISTRIBUTION_NAME)
    version = project_data.get("version", "0.0.0")

    return Project(name=project_name, version=version)
