"""Template tokens and the evaluator that expands them.

Usage::

    from verscribe.tokens import DEFAULT_REGISTRY, TokenEvaluator

    evaluator = TokenEvaluator(DEFAULT_REGISTRY)
    evaluator.process("{major}.{minor}.{patch}+{metadata}", context)
"""

from __future__ import annotations

from verscribe.tokens.base import BaseToken
from verscribe.tokens.evaluator import TokenEvaluator
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
from verscribe.tokens.registry import DEFAULT_REGISTRY, TokenRegistry, default_registry
from verscribe.tokens.repository import BranchNameToken, ShaToken

__all__ = [
    # Engine
    "BaseToken",
    "TokenEvaluator",
    "TokenRegistry",
    "DEFAULT_REGISTRY",
    "default_registry",
    # Built-in tokens
    "MetadataToken",
    "LabelToken",
    "MajorToken",
    "MinorToken",
    "PatchToken",
    "RevisionToken",
    "HeightToken",
    "VersionToken",
    "ShaToken",
    "BranchNameToken",
]
