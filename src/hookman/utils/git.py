"""
Git utilities for hookman.

hookman only asks git where its directory is; it never reads or writes
history.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from hookman.core.errors import RootNotFoundError

logger = logging.getLogger(__name__)


def get_git_dir() -> Path:
    """Get the git directory of the repository containing the cwd.

    Returns:
        Path printed by ``git rev-parse --git-dir`` (often relative, e.g. ``.git``)

    Raises:
        RootNotFoundError: If git is not installed, the cwd is not inside a
            repository, or git prints nothing
    """
    cmd = ["git", "rev-parse", "--git-dir"]
    logger.debug("Running git command: %s", " ".join(cmd))

    try:
        result = subprocess.run(cmd, capture_output=True, text=True)
    except FileNotFoundError as e:
        raise RootNotFoundError("git not found in PATH") from e

    if result.returncode != 0:
        stderr = result.stderr.strip() if result.stderr else ""
        raise RootNotFoundError(f"error running git: {stderr}", stderr=stderr)

    git_dir = result.stdout.strip()
    if not git_dir:
        raise RootNotFoundError("no git directory found")

    return Path(git_dir)


def find_hooks_dir() -> Path:
    """Get the directory git looks in for hook scripts.

    Example:
        >>> find_hooks_dir()
        PosixPath('.git/hooks')
    """
    return get_git_dir() / "hooks"
