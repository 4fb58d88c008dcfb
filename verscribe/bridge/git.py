"""Git access — drives the ``git`` executable for read-only repository queries.

Only read commands are ever issued.  ``GitRepository`` is a scoped handle:
open it with ``with`` so it is closed on every exit path, after which any
further query raises.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from verscribe.errors import GitCommandError

logger = logging.getLogger(__name__)

GIT_TIMEOUT_SECONDS = 30


def _run(
    git_executable: str, cwd: Path, args: list[str]
) -> subprocess.CompletedProcess[str]:
    logger.debug("git -C %s %s", cwd, " ".join(args))
    return subprocess.run(
        [git_executable, "-C", str(cwd), *args],
        capture_output=True,
        text=True,
        timeout=GIT_TIMEOUT_SECONDS,
    )


def discover_repository(path: str | Path, git_executable: str = "git") -> Path | None:
    """Return the working tree root containing *path*, or ``None``.

    Searches *path* and every ancestor directory.  A missing path, a path
    outside any repository, or an unavailable ``git`` all yield ``None``.
    """
    candidate = Path(path).expanduser()
    if not candidate.exists():
        return None
    start = candidate if candidate.is_dir() else candidate.parent
    try:
        result = _run(git_executable, start, ["rev-parse", "--show-toplevel"])
    except (subprocess.SubprocessError, OSError) as exc:
        logger.warning("git discovery failed for %s: %s", start, exc)
        return None
    if result.returncode != 0:
        return None
    top = result.stdout.strip()
    return Path(top).resolve() if top else None


class GitRepository:
    """Read-only repository handle backed by the ``git`` executable."""

    def __init__(self, root: str | Path, git_executable: str = "git") -> None:
        self._root = Path(root)
        self._git_executable = git_executable
        self._closed = False

    @property
    def root(self) -> Path:
        return self._root

    @property
    def closed(self) -> bool:
        return self._closed

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def head_sha(self) -> str | None:
        result = self._query(["rev-parse", "--verify", "--quiet", "HEAD"], allow_failure=True)
        sha = result.stdout.strip()
        return sha if result.returncode == 0 and sha else None

    def canonical_branch_name(self) -> str | None:
        result = self._query(["symbolic-ref", "--quiet", "HEAD"], allow_failure=True)
        name = result.stdout.strip()
        return name if result.returncode == 0 and name else None

    def tags(self) -> list[str]:
        if self.head_sha() is None:
            return []
        result = self._query(["tag", "--merged", "HEAD", "--sort=-creatordate"])
        return [line.strip() for line in result.stdout.splitlines() if line.strip()]

    def height_since(self, relative_path: str) -> int:
        """Commits from the last change to *relative_path* up to HEAD, inclusive.

        When the path has never been committed every commit counts.
        """
        if self.head_sha() is None:
            return 0
        last = self._query(["log", "-1", "--format=%H", "--", relative_path]).stdout.strip()
        if not last:
            return int(self._query(["rev-list", "--count", "HEAD"]).stdout.strip())
        count = self._query(["rev-list", "--count", f"{last}..HEAD"]).stdout.strip()
        return int(count) + 1

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def close(self) -> None:
        if not self._closed:
            logger.debug("closing repository handle %s", self._root)
        self._closed = True

    def __enter__(self) -> GitRepository:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _query(
        self, args: list[str], *, allow_failure: bool = False
    ) -> subprocess.CompletedProcess[str]:
        if self._closed:
            raise RuntimeError(f"Repository handle for {self._root} is closed")
        result = _run(self._git_executable, self._root, args)
        if result.returncode != 0 and not allow_failure:
            raise GitCommandError(args, result.returncode, result.stderr)
        return result

    def __repr__(self) -> str:
        state = "closed" if self._closed else "open"
        return f"<GitRepository root={str(self._root)!r} {state}>"
