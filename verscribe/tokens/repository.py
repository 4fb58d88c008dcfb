"""Repository-derived tokens: commit id and branch name."""

from __future__ import annotations

import re
from typing import ClassVar

from verscribe.errors import InvalidArgument
from verscribe.tokens.base import BaseToken, require

_SUFFIX_INVALID = re.compile(r"[^0-9A-Za-z-]")
_LENGTH = re.compile(r"[0-9]+")


class ShaToken(BaseToken):
    """Head commit id.  ``full`` (default) or a number of leading characters."""

    key: ClassVar[str] = "sha"
    default_option: ClassVar[str] = "full"
    description: ClassVar[str] = "Head commit id; 'full' or a character count (e.g. 7)."

    def render(self, option_value, context, evaluator) -> str:
        sha = require(context.result.sha, "sha")
        option = option_value.strip().lower()
        if option in ("", "full"):
            return sha
        if not _LENGTH.fullmatch(option) or int(option) == 0:
            raise InvalidArgument(
                "option_value",
                f"sha option must be 'full' or a positive integer, got {option_value!r}.",
            )
        return sha[: int(option)]


class BranchNameToken(BaseToken):
    """Branch name in one of three shapes.

    ``short``
        ``feature/login`` for ``refs/heads/feature/login`` (default).
    ``canonical``
        The full ref name.
    ``suffix``
        The short name reduced to characters legal in a version label
        (``featurelogin``).
    """

    key: ClassVar[str] = "branchname"
    default_option: ClassVar[str] = "short"
    description: ClassVar[str] = "Branch name: 'short', 'canonical' or 'suffix'."

    def render(self, option_value, context, evaluator) -> str:
        result = context.result
        option = option_value.strip().lower()
        if option in ("", "short"):
            return require(result.branch_name, "branch_name")
        if option == "canonical":
            return require(result.canonical_branch_name, "canonical_branch_name")
        if option == "suffix":
            return _SUFFIX_INVALID.sub("", require(result.branch_name, "branch_name"))
        raise InvalidArgument(
            "option_value",
            f"branchname option must be 'short', 'canonical' or 'suffix', got {option_value!r}.",
        )
