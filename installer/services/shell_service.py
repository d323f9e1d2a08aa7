"""Shell integration helpers."""

import logging
import os
from pathlib import Path

from installer.constants import CONFIG

logger = logging.getLogger(__name__)

SUPPORTED_SHELLS = ("bash", "zsh", "fish")


def detect_shell() -> str:
    """Detect the user's shell from the SHELL environment variable."""
    shell = Path(os.environ.get("SHELL", "/bin/sh")).name
    for name in SUPPORTED_SHELLS:
        if name in shell:
            return name
    return "sh"


def get_shell_profile_path(shell: str | None = None) -> Path:
    """Return the profile file where the integration should go."""
    shell = shell or detect_shell()
    if shell == "zsh":
        return Path.home() / ".zshrc"
    if shell == "bash":
        return Path.home() / ".bashrc"
    if shell == "fish":
        return Path.home() / ".config" / "fish" / "config.fish"
    return Path.home() / ".profile"


def integration_snippet(shell: str | None = None) -> str:
    """Return the wrapper function that lets hop change the shell's folder."""
    shell = shell or detect_shell()
    name = CONFIG.wrapper_function_name
    if shell == "fish":
        return (
            f"function {name}\n"
            f"    set -l dest (command {name} $argv)\n"
            '    and test -n "$dest"\n'
            '    and cd "$dest"\n'
            "end"
        )
    # plain sh has no `local`
    declare = "    local dest\n" if shell in ("bash", "zsh") else ""
    return (
        f"{name}() {{\n"
        f"{declare}"
        f'    dest="$(command {name} "$@")" && [ -n "$dest" ] && cd -- "$dest"\n'
        "}"
    )


def is_integration_configured(shell: str | None = None) -> bool:
    """Check if the profile already contains the wrapper function."""
    profile_file = get_shell_profile_path(shell)
    try:
        if not profile_file.exists():
            return False
        content = profile_file.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        logger.debug("Could not read shell profile %s: %s", profile_file, e)
        return False
    return f"command {CONFIG.wrapper_function_name}" in content
