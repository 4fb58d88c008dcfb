"""Configuration loading — reads ``.verscribe.json`` from the working tree."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError

from verscribe.errors import ConfigurationInvalid, ConfigurationNotFound
from verscribe.models.configuration import VersionConfiguration

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILENAME = ".verscribe.json"


def _summarize(exc: ValidationError) -> str:
    """One line per validation error: ``location: message``."""
    lines = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"]) or "<document>"
        lines.append(f"{location}: {error['msg']}")
    return "; ".join(lines)


class JsonConfigurationLoader:
    """Loads and validates the JSON configuration at the repository root.

    The first branch override matching *canonical_branch_name* is merged into
    the returned document.
    """

    def __init__(self, filename: str = DEFAULT_CONFIG_FILENAME) -> None:
        self.filename = filename

    def load(
        self, repository_root: Path, canonical_branch_name: str | None
    ) -> VersionConfiguration:
        path = Path(repository_root) / self.filename
        if not path.is_file():
            raise ConfigurationNotFound(str(path))

        try:
            raw = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise ConfigurationInvalid(str(path), f"not UTF-8 text ({exc})") from exc

        try:
            configuration = VersionConfiguration.model_validate_json(raw)
        except ValidationError as exc:
            raise ConfigurationInvalid(str(path), _summarize(exc)) from exc

        logger.info("loaded configuration %s (version %s)", path, configuration.version)
        return configuration.for_branch(canonical_branch_name)
