"""verscribe: deterministic version strings for git repositories.

Combines repository facts (branch, head commit, commit height), build-server
signals and a committed ``.verscribe.json`` configuration, rendered through
token templates:

  - Recursive token templates: ``{key}`` / ``{key:option}`` with nested options
  - Fixed processor pipeline: build server -> configuration -> formats
  - SemVer 1.0 and 2.0 compatibility formats with dialect validation
"""

__version__ = "0.1.0"
__description__ = "Deterministic version strings from git metadata and token templates"

from verscribe.calculator import VersionCalculator
from verscribe.models.result import VersionResult
from verscribe.tokens.evaluator import TokenEvaluator
from verscribe.tokens.registry import DEFAULT_REGISTRY

__all__ = [
    "VersionCalculator",
    "VersionResult",
    "TokenEvaluator",
    "DEFAULT_REGISTRY",
    "__version__",
]
