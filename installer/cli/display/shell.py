"""Shell configuration display functions."""

from installer.constants import CONFIG
from installer.services import shell_service


def first_run_message(shell: str | None = None) -> str:
    """Build the first-run explanation shown before asking to continue."""
    shell = shell or shell_service.detect_shell()
    profile_file = shell_service.get_shell_profile_path(shell)
    name = CONFIG.wrapper_function_name

    lines = [
        f"It seems like you are running {name} for the first time.",
        "",
        f"{name} prints the folder you pick. To let it change the folder of your",
        "shell, it has to be wrapped in a small shell function.",
    ]
    if shell_service.is_integration_configured(shell):
        lines += ["", f"A wrapper already appears to be set up in {profile_file}."]
    else:
        lines += [
            f"Add this to {profile_file}:",
            "",
            shell_service.integration_snippet(shell),
        ]
    lines += [
        "",
        f"See {CONFIG.setup_docs_url} for details.",
        "If you have already done this, you can ignore this message.",
        CONFIG.first_run_question,
    ]
    return "\n".join(lines)
