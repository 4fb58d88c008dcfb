"""Token registry — case-insensitive key to token mapping.

Usage::

    from verscribe.tokens.registry import DEFAULT_REGISTRY

    token = DEFAULT_REGISTRY.get("Metadata")   # keys are case-insensitive
    token.evaluate(context, evaluator)

``DEFAULT_REGISTRY`` is built once at import and is read-only afterward;
it is safe to share between concurrent calculator runs.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from verscribe.errors import UnknownToken
from verscribe.tokens.base import BaseToken
from verscribe.tokens.label import LabelToken
from verscribe.tokens.metadata import MetadataToken
from verscribe.tokens.numeric import (
    HeightToken,
    MajorToken,
    MinorToken,
    PatchToken,
    RevisionToken,
    VersionToken,
)
from verscribe.tokens.repository import BranchNameToken, ShaToken


class TokenRegistry:
    """Immutable collection of tokens keyed by lowercase ``key``."""

    def __init__(self, tokens: Iterable[BaseToken]) -> None:
        registered: dict[str, BaseToken] = {}
        for token in tokens:
            normalized = token.key.lower()
            if normalized in registered:
                raise ValueError(f"Duplicate token key {token.key!r}")
            registered[normalized] = token
        self._tokens = registered

    def get(self, key: str) -> BaseToken:
        """Return the token for *key*; raises ``UnknownToken`` if unregistered."""
        try:
            return self._tokens[key.lower()]
        except KeyError:
            raise UnknownToken(key) from None

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key.lower() in self._tokens

    def __iter__(self) -> Iterator[BaseToken]:
        return iter(self._tokens.values())

    def __len__(self) -> int:
        return len(self._tokens)

    def keys(self) -> list[str]:
        return sorted(self._tokens)

    def with_tokens(self, *tokens: BaseToken) -> TokenRegistry:
        """Return a new registry extended with *tokens*."""
        return TokenRegistry([*self._tokens.values(), *tokens])


def default_registry() -> TokenRegistry:
    """Build a registry holding every built-in token."""
    return TokenRegistry(
        [
            MetadataToken(),
            LabelToken(),
            MajorToken(),
            MinorToken(),
            PatchToken(),
            RevisionToken(),
            HeightToken(),
            VersionToken(),
            ShaToken(),
            BranchNameToken(),
        ]
    )


DEFAULT_REGISTRY: TokenRegistry = default_registry()
