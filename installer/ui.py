"""
Provides a centralized console object for consistent UI output.

Everything user-facing goes to stderr: stdout carries the folder that the
shell wrapper changes into.
"""

from rich.console import Console
from rich.markup import escape

_console: Console | None = None


def get_console() -> Console:
    """Gets a singleton Console instance."""
    global _console
    if _console is None:
        _console = Console(stderr=True)
    return _console


def warning(message: str) -> None:
    """Display a warning message."""
    get_console().print(f"[yellow]⚠[/yellow] {escape(message)}", style="yellow")
