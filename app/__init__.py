"""hop - jump between folders from the terminal."""

from config.project import get_project

__version__ = get_project().version
__author__ = "hop Contributors"

# No package-level imports - use absolute imports instead
