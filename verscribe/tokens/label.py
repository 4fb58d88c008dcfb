"""``{label}`` — the configured label fragments joined by a separator."""

from __future__ import annotations

from typing import ClassVar

from verscribe.tokens.base import BaseToken, require

HEIGHT_PLACEHOLDER = "*"


class LabelToken(BaseToken):
    """Joins ``configuration.label`` using the option as separator.

    A ``*`` inside a fragment is replaced with the commit height before the
    fragment is expanded through the evaluator.
    """

    key: ClassVar[str] = "label"
    default_option: ClassVar[str] = "."
    description: ClassVar[str] = "Label fragments joined by the option (default '.'); '*' becomes the height."

    def render(self, option_value, context, evaluator) -> str:
        configuration = require(context.configuration, "configuration")
        parts = []
        for fragment in configuration.label:
            if HEIGHT_PLACEHOLDER in fragment:
                height = require(context.result.height, "height")
                fragment = fragment.replace(HEIGHT_PLACEHOLDER, str(height))
            parts.append(evaluator.process(fragment, context))
        return option_value.join(parts)
