"""``{metadata}`` — the configured metadata fragments joined by a separator."""

from __future__ import annotations

from typing import ClassVar

from verscribe.tokens.base import BaseToken, require


class MetadataToken(BaseToken):
    """Joins ``configuration.metadata`` using the option as separator.

    The separator is used verbatim: an empty option concatenates the
    fragments and whitespace is never trimmed.  Each fragment is expanded
    through the evaluator first, so fragments may reference other tokens.
    """

    key: ClassVar[str] = "metadata"
    default_option: ClassVar[str] = "."
    description: ClassVar[str] = "Metadata fragments joined by the option (default '.')."

    def render(self, option_value, context, evaluator) -> str:
        configuration = require(context.configuration, "configuration")
        return option_value.join(
            evaluator.process(fragment, context) for fragment in configuration.metadata
        )
