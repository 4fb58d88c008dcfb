"""Version context — mutable state shared by the processors of one run."""

from __future__ import annotations

import os
from collections.abc import Mapping

from verscribe.bridge.base import RepositoryHandle
from verscribe.models.configuration import VersionConfiguration
from verscribe.models.result import VersionResult
from verscribe.tokens.evaluator import TokenEvaluator
from verscribe.tokens.registry import DEFAULT_REGISTRY, TokenRegistry


class VersionContext:
    """Request-scoped state for a single calculation.

    Parameters
    ----------
    repository:
        Read-only repository handle borrowed for the run.
    environ:
        Environment consulted for build-server signals.  Defaults to a
        snapshot of ``os.environ``.
    registry:
        Token registry for template evaluation.  Defaults to the shared,
        read-only ``DEFAULT_REGISTRY``.
    """

    def __init__(
        self,
        repository: RepositoryHandle,
        *,
        environ: Mapping[str, str] | None = None,
        registry: TokenRegistry | None = None,
    ) -> None:
        self.repository = repository
        self.configuration: VersionConfiguration | None = None
        self.result = VersionResult()
        self.environ: Mapping[str, str] = dict(os.environ if environ is None else environ)
        self.evaluator = TokenEvaluator(registry or DEFAULT_REGISTRY)

    def render(self, template: str) -> str:
        """Expand *template* against this context."""
        return self.evaluator.process(template, self)

    def __repr__(self) -> str:
        return (
            f"<VersionContext repository={self.repository!r} "
            f"configured={self.configuration is not None}>"
        )
