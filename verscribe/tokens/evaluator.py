"""Token evaluator — expands ``{key}`` / ``{key:option}`` references in a template.

The scan is a single left-to-right pass:

    literal text -> "{" -> matching "}" (brace depth) -> split key/option
        -> evaluate option recursively -> invoke token -> substitute

Option text is the only place recursion happens.  A token's output is
substituted literally and never re-scanned, so generated text containing
braces cannot expand further.

A backslash escapes ``{``, ``}``, ``:`` and ``\\`` wherever it appears.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from verscribe.errors import InvalidArgument, MalformedTemplate

if TYPE_CHECKING:
    from verscribe.pipeline.context import VersionContext
    from verscribe.tokens.registry import TokenRegistry

logger = logging.getLogger(__name__)

_ESCAPE = "\\"
_ESCAPABLE = frozenset("{}:\\")


class TokenEvaluator:
    """Recursive-descent evaluator bound to a token registry.

    The evaluator passes itself to every token it invokes, so a token that
    synthesises a template fragment can expand it through ``process()``
    without any shared recursion state.
    """

    def __init__(self, registry: TokenRegistry) -> None:
        self._registry = registry

    @property
    def registry(self) -> TokenRegistry:
        return self._registry

    def process(self, template: str | None, context: VersionContext | None) -> str:
        """Expand every token reference in *template*.

        Raises ``MalformedTemplate`` on unbalanced braces or an empty key and
        ``UnknownToken`` for an unregistered key.
        """
        if template is None:
            raise InvalidArgument("template")
        if context is None:
            raise InvalidArgument("context")

        output: list[str] = []
        i = 0
        length = len(template)
        while i < length:
            char = template[i]
            if char == _ESCAPE and i + 1 < length and template[i + 1] in _ESCAPABLE:
                output.append(template[i + 1])
                i += 2
            elif char == "{":
                end = self._find_closing(template, i)
                output.append(self._expand(template, i, end, context))
                i = end + 1
            elif char == "}":
                raise MalformedTemplate(template, i, "unmatched '}'")
            else:
                output.append(char)
                i += 1
        return "".join(output)

    # ------------------------------------------------------------------
    # Parsing helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _find_closing(template: str, start: int) -> int:
        """Index of the ``}`` that closes the ``{`` at *start*."""
        depth = 0
        i = start
        length = len(template)
        while i < length:
            char = template[i]
            if char == _ESCAPE and i + 1 < length and template[i + 1] in _ESCAPABLE:
                i += 2
                continue
            if char == "{":
                depth += 1
            elif char == "}":
                depth -= 1
                if depth == 0:
                    return i
            i += 1
        raise MalformedTemplate(template, start, "unmatched '{'")

    @staticmethod
    def _split_reference(body: str) -> tuple[str, str | None]:
        """Split on the first unescaped ``:`` outside nested references."""
        depth = 0
        i = 0
        length = len(body)
        while i < length:
            char = body[i]
            if char == _ESCAPE and i + 1 < length and body[i + 1] in _ESCAPABLE:
                i += 2
                continue
            if char == "{":
                depth += 1
            elif char == "}":
                depth -= 1
            elif char == ":" and depth == 0:
                return body[:i], body[i + 1:]
            i += 1
        return body, None

    def _expand(
        self,
        template: str,
        start: int,
        end: int,
        context: VersionContext,
    ) -> str:
        raw_key, raw_option = self._split_reference(template[start + 1:end])
        key = raw_key.strip()
        if not key:
            raise MalformedTemplate(template, start, "empty token key")
        if "{" in key or _ESCAPE in key:
            raise MalformedTemplate(template, start, f"invalid token key {key!r}")

        token = self._registry.get(key)

        # Bare {key} takes the token default; {key:} passes the empty string.
        if raw_option is None:
            option = token.default_option
        else:
            option = self.process(raw_option, context)

        value = token.evaluate_with_option(option, context, self)
        logger.debug("token %s option=%r -> %r", token.key, option, value)
        return value
