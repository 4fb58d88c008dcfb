"""Version calculator — entry point for a calculation run.

Resolves the repository, opens a scoped handle and runs the processor
pipeline in its fixed order:

    build_server -> configuration -> format_version
        -> format_semver1 -> format_semver2

Any processor failure aborts the run and propagates; no partial result is
returned.  The repository handle is closed on every exit path.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from contextlib import closing
from pathlib import Path

from verscribe.bridge.base import BuildServer, ConfigurationLoader, RepositoryHandle
from verscribe.bridge.config_loader import JsonConfigurationLoader
from verscribe.bridge.git import GitRepository, discover_repository
from verscribe.config import VerscribeSettings
from verscribe.errors import InvalidArgument, RepositoryNotFound
from verscribe.models.result import VersionResult
from verscribe.pipeline import default_processors
from verscribe.pipeline.context import VersionContext
from verscribe.tokens.registry import TokenRegistry

logger = logging.getLogger(__name__)


class VersionCalculator:
    """Computes version results for repositories.

    Parameters
    ----------
    loader:
        Configuration collaborator.  Defaults to ``JsonConfigurationLoader``.
    build_servers:
        Build servers to consult, in priority order.  ``None`` uses the
        built-in list; an empty list disables detection.
    registry:
        Token registry.  Defaults to the shared ``DEFAULT_REGISTRY``.
    git_executable:
        ``git`` binary used for discovery and the default repository handle.
    environ:
        Environment for build-server detection.  Defaults to ``os.environ``
        at the time of each run.
    open_repository / discover:
        Seams for substituting the git collaborator.
    """

    def __init__(
        self,
        *,
        loader: ConfigurationLoader | None = None,
        build_servers: list[BuildServer] | None = None,
        registry: TokenRegistry | None = None,
        git_executable: str = "git",
        environ: Mapping[str, str] | None = None,
        open_repository: Callable[[Path], RepositoryHandle] | None = None,
        discover: Callable[[str], Path | None] | None = None,
    ) -> None:
        self._loader = loader or JsonConfigurationLoader()
        self._build_servers = build_servers
        self._registry = registry
        self._environ = environ
        self._open_repository = open_repository or (
            lambda root: GitRepository(root, git_executable)
        )
        self._discover = discover or (
            lambda path: discover_repository(path, git_executable)
        )

    @classmethod
    def default(cls, settings: VerscribeSettings | None = None) -> VersionCalculator:
        """Calculator wired from runtime settings."""
        settings = settings or VerscribeSettings()
        return cls(
            loader=JsonConfigurationLoader(settings.config_filename),
            build_servers=None if settings.build_servers_enabled else [],
            git_executable=settings.git_executable,
        )

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def get_result(self, path: str | Path | None) -> VersionResult:
        """Calculate the version result for the repository containing *path*."""
        return self.calculate(path).result

    def calculate(self, path: str | Path | None) -> VersionContext:
        """Run the full pipeline and return the completed context.

        The returned context's repository handle is already closed; its
        ``result``, ``configuration`` and ``render()`` remain usable.
        """
        root = self._resolve_root(path)

        with closing(self._open_repository(root)) as repository:
            context = VersionContext(
                repository, environ=self._environ, registry=self._registry
            )
            context.result.repository_path = str(root)

            for processor in default_processors(
                loader=self._loader, build_servers=self._build_servers
            ):
                processor.apply(context)

        logger.info("%s -> %s", root, context.result.version)
        return context

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _resolve_root(self, path: str | Path | None) -> Path:
        if path is None or not str(path).strip():
            raise InvalidArgument("path", "Path must be provided.")
        root = self._discover(str(path))
        if root is None:
            raise RepositoryNotFound(str(path))
        return root
