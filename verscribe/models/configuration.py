"""Version configuration models — the committed ``.verscribe.json`` document."""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator

_VERSION_RE = re.compile(r"^\d+(\.\d+){1,3}$")

DEFAULT_RELEASE_PATTERNS: list[str] = [
    r"^refs/heads/master$",
    r"^refs/heads/main$",
    r"^refs/heads/release/.+$",
    r"^refs/tags/.+$",
]


def _check_pattern(pattern: str) -> str:
    try:
        re.compile(pattern)
    except re.error as exc:
        raise ValueError(f"invalid regular expression {pattern!r}: {exc}") from exc
    return pattern


class BranchOverride(BaseModel):
    """Replaces label and/or metadata on branches matching ``match``.

    Fields left as ``None`` keep the base configuration's value.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    match: str
    label: list[str] | None = None
    metadata: list[str] | None = None

    @field_validator("match")
    @classmethod
    def _valid_match(cls, value: str) -> str:
        return _check_pattern(value)

    def matches(self, canonical_branch_name: str) -> bool:
        return re.search(self.match, canonical_branch_name) is not None


class BranchConfiguration(BaseModel):
    """Release detection and per-branch overrides."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    release: list[str] = Field(default_factory=lambda: list(DEFAULT_RELEASE_PATTERNS))
    overrides: list[BranchOverride] = Field(default_factory=list)

    @field_validator("release")
    @classmethod
    def _valid_release(cls, value: list[str]) -> list[str]:
        return [_check_pattern(p) for p in value]

    def is_release(self, canonical_branch_name: str) -> bool:
        return any(re.search(p, canonical_branch_name) for p in self.release)

    def find_override(self, canonical_branch_name: str) -> BranchOverride | None:
        """Return the first override matching the branch, if any."""
        for override in self.overrides:
            if override.matches(canonical_branch_name):
                return override
        return None


class VersionConfiguration(BaseModel):
    """Structured configuration for a repository.

    ``label`` and ``metadata`` are ordered fragments joined by the label and
    metadata tokens.  ``format`` is the primary template; the two semver
    templates are optional and fall back to the processors' defaults.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    version: str = "0.1.0"
    label: list[str] = Field(default_factory=list)
    metadata: list[str] = Field(default_factory=list)
    offset: int = Field(default=0, ge=0)
    format: str = "{version}"
    semver1_format: str | None = None
    semver2_format: str | None = None
    branches: BranchConfiguration = Field(default_factory=BranchConfiguration)

    @field_validator("version")
    @classmethod
    def _valid_version(cls, value: str) -> str:
        value = value.strip()
        if not _VERSION_RE.match(value):
            raise ValueError(
                f"version {value!r} must be 2 to 4 dot-separated non-negative integers"
            )
        return value

    @property
    def version_parts(self) -> tuple[int, int, int, int | None]:
        """``(major, minor, patch, revision)``; patch defaults to 0."""
        parts = [int(p) for p in self.version.split(".")]
        while len(parts) < 3:
            parts.append(0)
        revision = parts[3] if len(parts) > 3 else None
        return parts[0], parts[1], parts[2], revision

    def for_branch(self, canonical_branch_name: str | None) -> VersionConfiguration:
        """Return a copy with the first matching branch override applied."""
        if not canonical_branch_name:
            return self
        override = self.branches.find_override(canonical_branch_name)
        if override is None:
            return self
        update: dict[str, list[str]] = {}
        if override.label is not None:
            update["label"] = list(override.label)
        if override.metadata is not None:
            update["metadata"] = list(override.metadata)
        return self.model_copy(update=update)
