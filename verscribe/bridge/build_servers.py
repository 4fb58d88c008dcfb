"""Build-server detection from environment variables.

Priority chain (first match wins):
1. **AzureDevOpsBuildServer** — ``TF_BUILD=True``.
2. **GitHubActionsBuildServer** — ``GITHUB_ACTIONS=true``.

CI agents usually check out a detached HEAD, so the branch the build is for
is only available from the environment.
"""

from __future__ import annotations

from collections.abc import Mapping

from verscribe.bridge.base import BuildServer, BuildServerOverrides


def _flag(environ: Mapping[str, str], name: str) -> bool:
    return environ.get(name, "").strip().lower() == "true"


def _value(environ: Mapping[str, str], name: str) -> str | None:
    value = environ.get(name, "").strip()
    return value or None


def _as_ref(branch: str | None) -> str | None:
    if branch is None or branch.startswith("refs/"):
        return branch
    return f"refs/heads/{branch}"


class AzureDevOpsBuildServer:
    """Azure Pipelines agent."""

    name = "AzureDevOps"

    def detect_overrides(self, environ: Mapping[str, str]) -> BuildServerOverrides | None:
        if not _flag(environ, "TF_BUILD"):
            return None
        # Pull request builds check out a merge ref; the source branch is the real one.
        branch = _value(environ, "SYSTEM_PULLREQUEST_SOURCEBRANCH") or _value(
            environ, "BUILD_SOURCEBRANCH"
        )
        return BuildServerOverrides(
            build_server_name=self.name,
            canonical_branch_name=_as_ref(branch),
            build_number=_value(environ, "BUILD_BUILDID"),
        )


class GitHubActionsBuildServer:
    """GitHub Actions runner."""

    name = "GitHubActions"

    def detect_overrides(self, environ: Mapping[str, str]) -> BuildServerOverrides | None:
        if not _flag(environ, "GITHUB_ACTIONS"):
            return None
        branch = _as_ref(_value(environ, "GITHUB_HEAD_REF")) or _value(environ, "GITHUB_REF")
        return BuildServerOverrides(
            build_server_name=self.name,
            canonical_branch_name=branch,
            build_number=_value(environ, "GITHUB_RUN_NUMBER"),
        )


def default_build_servers() -> list[BuildServer]:
    return [AzureDevOpsBuildServer(), GitHubActionsBuildServer()]


def detect(
    environ: Mapping[str, str], servers: list[BuildServer] | None = None
) -> BuildServerOverrides | None:
    """Return the overrides of the first server recognising *environ*."""
    for server in servers if servers is not None else default_build_servers():
        overrides = server.detect_overrides(environ)
        if overrides is not None:
            return overrides
    return None
