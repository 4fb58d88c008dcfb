"""Error taxonomy for version calculation.

Every failure raised by the calculator, the pipeline or the token engine
derives from ``VerscribeError`` so callers can catch the whole family in one
place.  The concrete classes identify exactly which cause aborted a run.
"""

from __future__ import annotations


class VerscribeError(Exception):
    """Base class for all verscribe failures."""


class InvalidArgument(VerscribeError, ValueError):
    """Raised when a required input is absent or blank.

    ``param_name`` names the offending parameter (e.g. ``"context"``).
    """

    def __init__(self, param_name: str, message: str | None = None) -> None:
        self.param_name = param_name
        super().__init__(message or f"Argument {param_name!r} must be provided.")


class RepositoryNotFound(VerscribeError, FileNotFoundError):
    """Raised when no git repository is discoverable from a path."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(
            f"Could not find git repository at {path!r} or any parent directory."
        )


class GitCommandError(VerscribeError, RuntimeError):
    """Raised when a ``git`` invocation exits non-zero."""

    def __init__(self, args: list[str], returncode: int, stderr: str) -> None:
        self.args_list = args
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(
            f"git {' '.join(args)} failed with exit code {returncode}: {stderr.strip()}"
        )


class ConfigurationNotFound(VerscribeError):
    """Raised when no configuration document can be located."""

    def __init__(self, location: str) -> None:
        self.location = location
        super().__init__(f"No version configuration found at {location!r}.")


class ConfigurationInvalid(VerscribeError):
    """Raised when a configuration document exists but is malformed."""

    def __init__(self, location: str, reason: str) -> None:
        self.location = location
        self.reason = reason
        super().__init__(f"Invalid version configuration at {location!r}: {reason}")


class UnknownToken(VerscribeError, KeyError):
    """Raised when a template references a token key that is not registered."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(key)

    def __str__(self) -> str:
        return f"Unknown token {self.key!r}."


class MalformedTemplate(VerscribeError):
    """Raised when a template has unbalanced braces or an empty token key."""

    def __init__(self, template: str, position: int, reason: str) -> None:
        self.template = template
        self.position = position
        self.reason = reason
        super().__init__(
            f"Malformed template {template!r} at position {position}: {reason}"
        )


class FormatViolation(VerscribeError):
    """Raised when rendered output is not valid in its target version dialect."""

    def __init__(self, dialect: str, value: str) -> None:
        self.dialect = dialect
        self.value = value
        super().__init__(f"{value!r} is not a valid {dialect} version string.")


__all__ = [
    "VerscribeError",
    "InvalidArgument",
    "RepositoryNotFound",
    "GitCommandError",
    "ConfigurationNotFound",
    "ConfigurationInvalid",
    "UnknownToken",
    "MalformedTemplate",
    "FormatViolation",
]
