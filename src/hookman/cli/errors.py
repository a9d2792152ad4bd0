"""
Standardized error handling and exit codes for hookman CLI.

This module provides consistent error messaging with actionable guidance
and standardized exit codes across all CLI commands.
"""

from enum import IntEnum

from rich.console import Console
from rich.text import Text

from hookman.core.errors import (
    ConfigError,
    ConfigMalformedError,
    ConfigNotFoundError,
    DestinationExistsError,
    HookmanError,
    RootNotFoundError,
)

console = Console()


class ExitCode(IntEnum):
    """Standard exit codes for hookman CLI operations."""

    SUCCESS = 0
    """Operation completed successfully."""

    GENERAL_ERROR = 1
    """Generic error (git, filesystem)."""

    USER_ERROR = 2
    """User configuration or input error (actionable by user)."""


def print_error(
    problem: str,
    *,
    reason: str | None = None,
    solution: str | None = None,
) -> None:
    """
    Print a standardized error message with actionable guidance.

    Args:
        problem: Brief description of what went wrong
        reason: Optional explanation of why it happened
        solution: Optional command or action to fix it

    Example:
        >>> print_error(
        ...     "Hook script already exists",
        ...     reason=".git/hooks/pre-commit was not written by this run",
        ...     solution="hookman install --force",
        ... )
    """
    console.print(f"[red]Error:[/red] {problem}", highlight=False)

    if reason:
        console.print(Text(reason, style="dim"), highlight=False)

    if solution:
        console.print(f"[cyan]→ Try:[/cyan] {solution}", highlight=False)


def print_hookman_error(error: HookmanError) -> ExitCode:
    """
    Print a hookman error with a hint matching its type.

    Returns:
        Exit code the command should terminate with
    """
    reason = str(error)

    if isinstance(error, ConfigNotFoundError):
        print_error(
            "No hookman configuration found",
            reason=reason,
            solution="hookman example > .hookman.toml",
        )
        return ExitCode.USER_ERROR

    if isinstance(error, ConfigMalformedError):
        print_error("Invalid hookman configuration", reason=reason)
        return ExitCode.USER_ERROR

    if isinstance(error, ConfigError):
        print_error("Could not read hookman configuration", reason=reason)
        return ExitCode.USER_ERROR

    if isinstance(error, RootNotFoundError):
        print_error(
            "Not a git repository",
            reason=reason,
            solution="git init  # or cd to your project root",
        )
        return ExitCode.GENERAL_ERROR

    if isinstance(error, DestinationExistsError):
        print_error(
            "Hook script already exists",
            reason=reason,
            solution="hookman install --force",
        )
        return ExitCode.GENERAL_ERROR

    print_error("Failed to install hooks", reason=reason)
    return ExitCode.GENERAL_ERROR
