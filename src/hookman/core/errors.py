"""
Typed exceptions for hookman.

Every fatal condition of an install run maps to one exception class. Errors
pick up the operation they occurred during via ``add_context`` as they
propagate, so the top level can print a message such as::

    generating hook for stage pre-push: file .git/hooks/pre-push exists

No error is retried or recovered locally.
"""

from __future__ import annotations

from pathlib import Path


class HookmanError(Exception):
    """Base exception for hookman errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
        self.context: list[str] = []

    def add_context(self, operation: str) -> HookmanError:
        """Record an enclosing operation and return self for re-raising."""
        self.context.append(operation)
        return self

    def __str__(self) -> str:
        return ": ".join([*reversed(self.context), self.message])


# ============================================================================
# Configuration errors
# ============================================================================


class ConfigError(HookmanError):
    """Configuration could not be loaded."""

    def __init__(self, message: str, path: Path) -> None:
        super().__init__(message)
        self.path = path


class ConfigNotFoundError(ConfigError):
    """Configuration file does not exist."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"configuration file {path} not found", path)


class ConfigUnreadableError(ConfigError):
    """Configuration file exists but could not be read."""


class ConfigMalformedError(ConfigError):
    """Configuration file does not match the expected schema."""

    def __init__(self, path: Path, problems: list[str]) -> None:
        self.problems = problems
        details = "; ".join(problems)
        super().__init__(f"invalid configuration in {path}: {details}", path)


# ============================================================================
# Installation errors
# ============================================================================


class RootNotFoundError(HookmanError):
    """The git hook directory could not be determined."""

    def __init__(self, message: str, stderr: str = "") -> None:
        super().__init__(message)
        self.stderr = stderr


class ClearFailureError(HookmanError):
    """An existing hook could not be removed."""

    def __init__(self, path: Path, reason: str, operation: str = "removing file") -> None:
        super().__init__(f"{operation} {path}: {reason}")
        self.path = path


class DestinationExistsError(HookmanError):
    """A hook script already exists and overwriting was not requested."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"file {path} exists and -f/--force not given")
        self.path = path


class WriteFailureError(HookmanError):
    """A hook script could not be created or written."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"writing file {path}: {reason}")
        self.path = path
