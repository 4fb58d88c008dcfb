"""Collaborator protocols consumed by the pipeline.

The pipeline depends only on these narrow read interfaces:

1. **RepositoryHandle** — head commit, branch, tags, commit height.
2. **ConfigurationLoader** — structured configuration for a repository root.
3. **BuildServer** — branch/build-number overrides from a CI environment.

Default implementations live beside this module (``git``, ``config_loader``,
``build_servers``); tests substitute lightweight fakes.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict

from verscribe.models.configuration import VersionConfiguration


@runtime_checkable
class RepositoryHandle(Protocol):
    """Read-only view of a repository for the duration of one run."""

    @property
    def root(self) -> Path:
        """Working tree root."""
        ...

    def head_sha(self) -> str | None:
        """Full id of the head commit, or ``None`` for an unborn branch."""
        ...

    def canonical_branch_name(self) -> str | None:
        """``refs/heads/<name>`` of the checked-out branch, ``None`` if detached."""
        ...

    def tags(self) -> list[str]:
        """Tags reachable from the head commit, nearest first."""
        ...

    def height_since(self, relative_path: str) -> int:
        """Commit height since *relative_path* last changed (1 on that commit)."""
        ...

    def close(self) -> None:
        ...


@runtime_checkable
class ConfigurationLoader(Protocol):
    """Loads the structured configuration for a repository.

    Implementations raise ``ConfigurationNotFound`` or
    ``ConfigurationInvalid``; they never return a default document.
    ``filename`` is the document path relative to the repository root, used
    to measure commit height.
    """

    filename: str

    def load(
        self, repository_root: Path, canonical_branch_name: str | None
    ) -> VersionConfiguration:
        ...


class BuildServerOverrides(BaseModel):
    """Values a build server supplies; absent fields leave the result untouched."""

    model_config = ConfigDict(frozen=True)

    build_server_name: str
    canonical_branch_name: str | None = None
    build_number: str | None = None


@runtime_checkable
class BuildServer(Protocol):
    """Detects a CI environment and reports its overrides."""

    name: str

    def detect_overrides(self, environ: Mapping[str, str]) -> BuildServerOverrides | None:
        """Return overrides when *environ* belongs to this server, else ``None``."""
        ...


def short_branch_name(canonical_branch_name: str) -> str:
    """``refs/heads/feature/x`` -> ``feature/x``; other refs lose ``refs/<kind>/``."""
    for prefix in ("refs/heads/", "refs/tags/", "refs/remotes/", "refs/pull/"):
        if canonical_branch_name.startswith(prefix):
            return canonical_branch_name[len(prefix):]
    return canonical_branch_name
