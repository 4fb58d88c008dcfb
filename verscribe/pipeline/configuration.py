"""Stage 2 — Configuration resolution.

Loads the repository's configuration (merged with the override for the
current branch) and resolves everything the format stages read.

Writes:
    canonical_branch_name, branch_name   (only if no build server supplied them)
    major, minor, patch, revision, label, metadata
    sha, sha7, height, is_release
"""

from __future__ import annotations

import logging

from verscribe.bridge.base import ConfigurationLoader, short_branch_name
from verscribe.bridge.config_loader import JsonConfigurationLoader
from verscribe.pipeline.base import BaseContextProcessor
from verscribe.pipeline.context import VersionContext

logger = logging.getLogger(__name__)


class ConfigurationContextProcessor(BaseContextProcessor):
    """Assigns ``context.configuration`` and the version components it implies."""

    def __init__(self, loader: ConfigurationLoader | None = None) -> None:
        self._loader = loader or JsonConfigurationLoader()

    @property
    def processor_id(self) -> str:
        return "configuration"

    def process(self, context: VersionContext) -> None:
        repository = context.repository
        result = context.result

        # --- Branch (build server takes precedence) ----------------------
        if not result.is_set("canonical_branch_name"):
            canonical = repository.canonical_branch_name()
            if canonical is not None:
                result.canonical_branch_name = canonical
                result.branch_name = short_branch_name(canonical)

        # --- Configuration -----------------------------------------------
        configuration = self._loader.load(repository.root, result.canonical_branch_name)
        context.configuration = configuration

        # --- Version components ------------------------------------------
        major, minor, patch, revision = configuration.version_parts
        result.major = major
        result.minor = minor
        result.patch = patch
        if revision is not None:
            result.revision = revision
        result.label = list(configuration.label)
        result.metadata = list(configuration.metadata)

        # --- Repository facts --------------------------------------------
        sha = repository.head_sha()
        if sha is not None:
            result.sha = sha
            result.sha7 = sha[:7]
        result.height = repository.height_since(self._loader.filename) + configuration.offset
        result.is_release = configuration.branches.is_release(
            result.canonical_branch_name or ""
        )

        logger.info(
            "resolved %s on %s: height=%d release=%s",
            configuration.version,
            result.canonical_branch_name or "<detached>",
            result.height,
            result.is_release,
        )
