"""Numeric tokens — version components and commit height.

Each numeric token accepts an optional zero-padding width::

    {height}      -> "7"
    {height:4}    -> "0007"
"""

from __future__ import annotations

import re
from typing import ClassVar

from verscribe.errors import InvalidArgument
from verscribe.tokens.base import BaseToken, require

_WIDTH = re.compile(r"[0-9]+")


def pad(value: int, option_value: str) -> str:
    """Zero-pad *value* to the width given by *option_value* (empty = no padding)."""
    width = option_value.strip()
    if not width:
        return str(value)
    if not _WIDTH.fullmatch(width):
        raise InvalidArgument(
            "option_value",
            f"Padding option must be a non-negative integer, got {option_value!r}.",
        )
    return str(value).zfill(int(width))


class _NumberToken(BaseToken):
    """Renders a single integer field of ``context.result``."""

    field: ClassVar[str]

    def value(self, context) -> int:
        return require(getattr(context.result, self.field), self.field)

    def render(self, option_value, context, evaluator) -> str:
        return pad(self.value(context), option_value)


class MajorToken(_NumberToken):
    key: ClassVar[str] = "major"
    field: ClassVar[str] = "major"
    description: ClassVar[str] = "Major version component; option pads to width."


class MinorToken(_NumberToken):
    key: ClassVar[str] = "minor"
    field: ClassVar[str] = "minor"
    description: ClassVar[str] = "Minor version component; option pads to width."


class PatchToken(_NumberToken):
    key: ClassVar[str] = "patch"
    field: ClassVar[str] = "patch"
    description: ClassVar[str] = "Patch version component; option pads to width."


class RevisionToken(_NumberToken):
    """Revision component; renders ``0`` when the configuration has none."""

    key: ClassVar[str] = "revision"
    field: ClassVar[str] = "revision"
    description: ClassVar[str] = "Revision component (0 when unset); option pads to width."

    def value(self, context) -> int:
        revision = context.result.revision
        return 0 if revision is None else revision


class HeightToken(_NumberToken):
    key: ClassVar[str] = "height"
    field: ClassVar[str] = "height"
    description: ClassVar[str] = "Commits since the configuration last changed; option pads to width."


class VersionToken(BaseToken):
    """``major.minor.patch`` plus ``.revision`` when one is configured.

    The option replaces the ``.`` separator.
    """

    key: ClassVar[str] = "version"
    default_option: ClassVar[str] = "."
    description: ClassVar[str] = "Core version joined by the option (default '.')."

    def render(self, option_value, context, evaluator) -> str:
        result = context.result
        parts = [
            require(result.major, "major"),
            require(result.minor, "minor"),
            require(result.patch, "patch"),
        ]
        if result.revision is not None:
            parts.append(result.revision)
        return option_value.join(str(p) for p in parts)
