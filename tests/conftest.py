"""Shared test fixtures for verscribe."""

from __future__ import annotations

import json
import shutil
import subprocess
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from verscribe.models.configuration import VersionConfiguration
from verscribe.pipeline.context import VersionContext
from verscribe.tokens.evaluator import TokenEvaluator
from verscribe.tokens.registry import DEFAULT_REGISTRY

HEAD_SHA = "1a2b3c4d5e6f708192a3b4c5d6e7f8091a2b3c4d"


class FakeRepository:
    """In-memory RepositoryHandle with fixed facts."""

    def __init__(
        self,
        root: Path = Path("/repo"),
        *,
        sha: str | None = HEAD_SHA,
        branch: str | None = "refs/heads/main",
        tags: list[str] | None = None,
        height: int = 3,
    ) -> None:
        self.root = root
        self._sha = sha
        self._branch = branch
        self._tags = tags or []
        self._height = height
        self.closed = False
        self.height_paths: list[str] = []

    def head_sha(self) -> str | None:
        return self._sha

    def canonical_branch_name(self) -> str | None:
        return self._branch

    def tags(self) -> list[str]:
        return list(self._tags)

    def height_since(self, relative_path: str) -> int:
        self.height_paths.append(relative_path)
        return self._height

    def close(self) -> None:
        self.closed = True


class StaticLoader:
    """ConfigurationLoader returning a fixed document (with branch overrides applied)."""

    filename = ".verscribe.json"

    def __init__(self, configuration: VersionConfiguration) -> None:
        self.configuration = configuration
        self.calls: list[tuple[Path, str | None]] = []

    def load(self, repository_root: Path, canonical_branch_name: str | None) -> VersionConfiguration:
        self.calls.append((repository_root, canonical_branch_name))
        return self.configuration.for_branch(canonical_branch_name)


@pytest.fixture
def fake_repository() -> FakeRepository:
    """Provide a repository on refs/heads/main at height 3."""
    return FakeRepository()


@pytest.fixture
def context(fake_repository: FakeRepository) -> VersionContext:
    """Provide a fresh context with an empty environment."""
    return VersionContext(fake_repository, environ={})


@pytest.fixture
def evaluator() -> TokenEvaluator:
    """Provide an evaluator over the built-in tokens."""
    return TokenEvaluator(DEFAULT_REGISTRY)


@pytest.fixture
def configured_context(context: VersionContext) -> Callable[..., VersionContext]:
    """Factory fixture: attach a configuration and version components to the context."""

    def _factory(**overrides: Any) -> VersionContext:
        defaults: dict[str, Any] = {"version": "1.2.3"}
        defaults.update(overrides)
        configuration = VersionConfiguration(**defaults)
        context.configuration = configuration
        major, minor, patch, revision = configuration.version_parts
        context.result.major = major
        context.result.minor = minor
        context.result.patch = patch
        if revision is not None:
            context.result.revision = revision
        return context

    return _factory


# ---------------------------------------------------------------------------
# Real git repositories
# ---------------------------------------------------------------------------


def _git(cwd: Path, *args: str) -> str:
    """Run git in *cwd* with a fixed identity; return stdout."""
    result = subprocess.run(
        [
            "git",
            "-c", "user.name=Test",
            "-c", "user.email=test@example.com",
            "-c", "commit.gpgsign=false",
            "-c", "tag.gpgsign=false",
            *args,
        ],
        cwd=cwd,
        capture_output=True,
        text=True,
        check=True,
    )
    return result.stdout.strip()


@pytest.fixture
def run_git() -> Callable[..., str]:
    """Provide the git runner used to build test repositories."""
    if shutil.which("git") is None:
        pytest.skip("git not installed")
    return _git


@pytest.fixture
def git_repo(tmp_path: Path, run_git: Callable[..., str]) -> Callable[..., Path]:
    """Factory fixture: an initialised repository on ``main`` with a committed config."""

    def _factory(config: dict[str, Any] | None = None, extra_commits: int = 0) -> Path:
        repo = tmp_path / "repo"
        repo.mkdir()
        run_git(repo, "init", "--quiet")
        run_git(repo, "symbolic-ref", "HEAD", "refs/heads/main")
        if config is not None:
            (repo / ".verscribe.json").write_text(json.dumps(config), encoding="utf-8")
            run_git(repo, "add", ".verscribe.json")
            run_git(repo, "commit", "--quiet", "-m", "configure version")
        for i in range(extra_commits):
            (repo / f"file{i}.txt").write_text(str(i), encoding="utf-8")
            run_git(repo, "add", f"file{i}.txt")
            run_git(repo, "commit", "--quiet", "-m", f"change {i}")
        return repo

    return _factory


@pytest.fixture
def make_repository() -> Callable[..., FakeRepository]:
    """Factory fixture: build a FakeRepository with overridable facts."""
    return FakeRepository


@pytest.fixture
def make_loader() -> Callable[..., StaticLoader]:
    """Factory fixture: a loader that always returns the given configuration."""

    def _factory(**fields: Any) -> StaticLoader:
        return StaticLoader(VersionConfiguration(**fields))

    return _factory


@pytest.fixture
def head_sha() -> str:
    """The head commit id reported by FakeRepository."""
    return HEAD_SHA
