"""Utility modules for hookman."""

from .git import find_hooks_dir, get_git_dir
from .logging import setup_logging

__all__ = [
    "find_hooks_dir",
    "get_git_dir",
    "setup_logging",
]
