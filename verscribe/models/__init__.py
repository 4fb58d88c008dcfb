"""verscribe data models — all Pydantic v2."""

from verscribe.models.configuration import (
    DEFAULT_RELEASE_PATTERNS,
    BranchConfiguration,
    BranchOverride,
    VersionConfiguration,
)
from verscribe.models.result import ResultFieldOverwriteError, VersionResult

__all__ = [
    # configuration
    "DEFAULT_RELEASE_PATTERNS",
    "BranchConfiguration",
    "BranchOverride",
    "VersionConfiguration",
    # result
    "ResultFieldOverwriteError",
    "VersionResult",
]
