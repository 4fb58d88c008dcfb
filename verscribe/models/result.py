"""Version result model — the accumulating output of one calculation run."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ResultFieldOverwriteError(RuntimeError):
    """Raised when a processor assigns a result field that is already set."""


class VersionResult(BaseModel):
    """Output record populated stage by stage.

    Every field is set at most once per run.  A later stage may read what an
    earlier stage wrote but assigning it again raises
    ``ResultFieldOverwriteError``.
    """

    repository_path: str | None = None

    # Branch and build server
    canonical_branch_name: str | None = None
    branch_name: str | None = None
    build_server_name: str | None = None
    build_number: str | None = None

    # Repository facts
    sha: str | None = None
    sha7: str | None = None

    # Resolved version components
    major: int | None = None
    minor: int | None = None
    patch: int | None = None
    revision: int | None = None
    height: int | None = None
    is_release: bool | None = None
    label: list[str] = Field(default_factory=list)
    metadata: list[str] = Field(default_factory=list)

    # Formatted output
    version: str | None = None
    semver1: str | None = None
    semver2: str | None = None

    def __setattr__(self, name: str, value: Any) -> None:
        if name in type(self).model_fields and name in self.model_fields_set:
            raise ResultFieldOverwriteError(
                f"Result field {name!r} is already set to {getattr(self, name)!r}"
            )
        super().__setattr__(name, value)

    def is_set(self, name: str) -> bool:
        """Whether *name* has been assigned during this run."""
        return name in self.model_fields_set

    @property
    def formats(self) -> dict[str, str | None]:
        return {
            "version": self.version,
            "semver1": self.semver1,
            "semver2": self.semver2,
        }
