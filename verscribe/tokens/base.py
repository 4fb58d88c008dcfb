"""Abstract base token with enforced argument checks.

Every concrete token inherits from BaseToken and implements only
``render()``.  The ``evaluate_with_option()`` wrapper is **not overridable** —
it rejects absent inputs before any token logic runs:

    context -> evaluator -> option_value -> render

Tokens hold no state; the same inputs always produce the same output.
"""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING, ClassVar, final

from verscribe.errors import InvalidArgument

if TYPE_CHECKING:
    from verscribe.pipeline.context import VersionContext
    from verscribe.tokens.evaluator import TokenEvaluator


class BaseToken(abc.ABC):
    """Abstract base for all template tokens.

    Subclasses **must** set:
        * ``key`` — unique lowercase identifier used in templates.
        * ``default_option`` — option used for a bare ``{key}`` reference.

    and implement ``render(option_value, context, evaluator)``.
    """

    key: ClassVar[str]
    default_option: ClassVar[str] = ""
    description: ClassVar[str] = ""

    @abc.abstractmethod
    def render(
        self,
        option_value: str,
        context: VersionContext,
        evaluator: TokenEvaluator,
    ) -> str:
        """Produce the token's value for a validated option."""
        ...

    @final
    def evaluate_with_option(
        self,
        option_value: str | None,
        context: VersionContext | None,
        evaluator: TokenEvaluator | None,
    ) -> str:
        """Validate inputs and render.  **Do not override.**

        ``option_value`` may be the empty string, which is a distinct input
        from ``None``.
        """
        if context is None:
            raise InvalidArgument("context")
        if evaluator is None:
            raise InvalidArgument("evaluator")
        if option_value is None:
            raise InvalidArgument("option_value")
        return self.render(option_value, context, evaluator)

    @final
    def evaluate(
        self,
        context: VersionContext | None,
        evaluator: TokenEvaluator | None,
    ) -> str:
        """Render using ``default_option``."""
        return self.evaluate_with_option(self.default_option, context, evaluator)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} key={self.key!r} default={self.default_option!r}>"


def require(value, name: str):
    """Return *value*, or raise ``InvalidArgument`` naming the missing context field."""
    if value is None:
        raise InvalidArgument(name, f"{name} is not available in the version context.")
    return value
