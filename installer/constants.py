"""Installer constants and configuration."""

from pydantic import BaseModel, HttpUrl


class InstallerConfig(BaseModel):
    """Installer configuration constants."""

    # URLs
    setup_docs_url: HttpUrl = "https://github.com/hop-cli/hop#shell-setup"

    # Marker
    marker_filename: str = "version"

    # Messages
    first_run_question: str = "Do you want to continue?"
    cancelled_message: str = "Cancelled."
    marker_write_warning: str = "Could not record that hop has been set up"

    # Shell configuration
    wrapper_function_name: str = "hop"


# Global instance
CONFIG = InstallerConfig()
