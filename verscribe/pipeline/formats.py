"""Stages 3-5 — Format rendering.

Each stage expands one template through the token evaluator and writes the
output into its own result field:

    VersionFormatProcessor   configuration.format          -> result.version
    Semver1FormatProcessor   configuration.semver1_format  -> result.semver1
    Semver2FormatProcessor   configuration.semver2_format  -> result.semver2

The two semver stages build a default template when none is configured and
reject output that is not legal in their dialect with ``FormatViolation``.
Output is never rewritten to make it conform.
"""

from __future__ import annotations

import abc
import logging
import re
from typing import ClassVar

from verscribe.errors import FormatViolation, InvalidArgument
from verscribe.models.configuration import VersionConfiguration
from verscribe.pipeline.base import BaseContextProcessor
from verscribe.pipeline.context import VersionContext

logger = logging.getLogger(__name__)

_NUMBER = r"(?:0|[1-9][0-9]*)"
_CORE = rf"{_NUMBER}\.{_NUMBER}\.{_NUMBER}"
_IDENTIFIER = r"[0-9A-Za-z-]+"
# Numeric prerelease identifiers carry no leading zeros in SemVer 2.0.
_PRERELEASE = rf"(?:{_NUMBER}|[0-9]*[A-Za-z-][0-9A-Za-z-]*)"

# Patterns are applied with fullmatch.
SEMVER1_PATTERN = re.compile(rf"{_CORE}(?:-{_IDENTIFIER})?")
SEMVER2_PATTERN = re.compile(
    rf"{_CORE}"
    rf"(?:-{_PRERELEASE}(?:\.{_PRERELEASE})*)?"
    rf"(?:\+{_IDENTIFIER}(?:\.{_IDENTIFIER})*)?"
)

CORE_TEMPLATE = "{major}.{minor}.{patch}"


class _FormatProcessor(BaseContextProcessor):
    """Renders a template into ``result_field`` and checks it against ``pattern``."""

    result_field: ClassVar[str]
    dialect: ClassVar[str]
    pattern: ClassVar[re.Pattern[str] | None] = None

    @property
    def processor_id(self) -> str:
        return f"format_{self.result_field}"

    @abc.abstractmethod
    def template(self, configuration: VersionConfiguration, context: VersionContext) -> str:
        """Template to render for this stage."""
        ...

    def process(self, context: VersionContext) -> None:
        if context.configuration is None:
            raise InvalidArgument(
                "configuration",
                f"{self.processor_id} requires configuration resolution to run first.",
            )
        template = self.template(context.configuration, context)
        value = context.render(template)
        if self.pattern is not None and not self.pattern.fullmatch(value):
            raise FormatViolation(self.dialect, value)
        setattr(context.result, self.result_field, value)
        logger.info("%s: %s", self.dialect, value)


class VersionFormatProcessor(_FormatProcessor):
    """Primary version string from ``configuration.format``."""

    result_field: ClassVar[str] = "version"
    dialect: ClassVar[str] = "version"

    def template(self, configuration, context) -> str:
        return configuration.format


class Semver1FormatProcessor(_FormatProcessor):
    """SemVer 1.0: a single ``[0-9A-Za-z-]`` prerelease identifier, no build metadata.

    Default shape::

        1.2.3                       release, no label
        1.2.3-beta                  release, label ["beta"]
        1.2.3-beta-c1a2b3c4-0007    non-release
    """

    result_field: ClassVar[str] = "semver1"
    dialect: ClassVar[str] = "SemVer 1.0"
    pattern = SEMVER1_PATTERN

    def template(self, configuration, context) -> str:
        if configuration.semver1_format is not None:
            return configuration.semver1_format
        result = context.result
        prerelease = []
        if configuration.label:
            prerelease.append("{label:-}")
        if not result.is_release:
            if result.sha is not None:
                prerelease.append("c{sha:7}")
            prerelease.append("{height:4}")
        if not prerelease:
            return CORE_TEMPLATE
        return CORE_TEMPLATE + "-" + "-".join(prerelease)


class Semver2FormatProcessor(_FormatProcessor):
    """SemVer 2.0: dot-separated prerelease identifiers and ``+`` build metadata.

    Default shape::

        1.2.3+build.5               release, metadata ["build", "5"]
        1.2.3-beta.c1a2b3c.7        non-release, label ["beta"]
    """

    result_field: ClassVar[str] = "semver2"
    dialect: ClassVar[str] = "SemVer 2.0"
    pattern = SEMVER2_PATTERN

    def template(self, configuration, context) -> str:
        if configuration.semver2_format is not None:
            return configuration.semver2_format
        result = context.result
        prerelease = []
        if configuration.label:
            prerelease.append("{label:.}")
        if not result.is_release:
            if result.sha is not None:
                prerelease.append("c{sha:7}")
            prerelease.append("{height}")
        template = CORE_TEMPLATE
        if prerelease:
            template += "-" + ".".join(prerelease)
        if configuration.metadata:
            template += "+{metadata:.}"
        return template
