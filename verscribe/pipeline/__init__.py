"""Context-processor pipeline — explicit, ordered stage list.

Usage::

    from verscribe.pipeline import VersionContext, default_processors

    context = VersionContext(repository)
    for processor in default_processors():
        processor.apply(context)

The order is fixed: each stage may read only what earlier stages wrote.
"""

from __future__ import annotations

from verscribe.bridge.base import BuildServer, ConfigurationLoader
from verscribe.pipeline.base import BaseContextProcessor
from verscribe.pipeline.build_server import BuildServerContextProcessor
from verscribe.pipeline.configuration import ConfigurationContextProcessor
from verscribe.pipeline.context import VersionContext
from verscribe.pipeline.formats import (
    SEMVER1_PATTERN,
    SEMVER2_PATTERN,
    Semver1FormatProcessor,
    Semver2FormatProcessor,
    VersionFormatProcessor,
)

def default_processors(
    *,
    loader: ConfigurationLoader | None = None,
    build_servers: list[BuildServer] | None = None,
) -> list[BaseContextProcessor]:
    """Instantiate the pipeline stages in execution order."""
    return [
        BuildServerContextProcessor(build_servers),
        ConfigurationContextProcessor(loader),
        VersionFormatProcessor(),
        Semver1FormatProcessor(),
        Semver2FormatProcessor(),
    ]


__all__ = [
    # Base
    "BaseContextProcessor",
    "VersionContext",
    # Ordering
    "default_processors",
    # Concrete processors
    "BuildServerContextProcessor",
    "ConfigurationContextProcessor",
    "VersionFormatProcessor",
    "Semver1FormatProcessor",
    "Semver2FormatProcessor",
    # Dialects
    "SEMVER1_PATTERN",
    "SEMVER2_PATTERN",
]
