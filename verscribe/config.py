"""Runtime settings — env-driven via pydantic-settings.

Reads from a .env file and VERSCRIBE_* environment variables.  These settings
govern the calculator's collaborators (where the configuration document
lives, which git executable to drive) rather than the version itself, which
always comes from the repository's own configuration document.
"""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class VerscribeSettings(BaseSettings):
    """Runtime settings with environment variable overrides.

    Examples
    --------
    Override via environment::

        export VERSCRIBE_LOG_LEVEL=DEBUG
        export VERSCRIBE_GIT_EXECUTABLE=/usr/local/bin/git
        export VERSCRIBE_BUILD_SERVERS_ENABLED=false
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="VERSCRIBE_",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "INFO"

    # Name of the configuration document at the repository root
    config_filename: str = ".verscribe.json"

    git_executable: str = "git"

    # Disable to ignore CI environment signals (e.g. local reproduction of a CI build)
    build_servers_enabled: bool = True


# Module-level singleton — import as `from verscribe.config import settings`
settings = VerscribeSettings()
