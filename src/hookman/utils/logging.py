"""
Logging setup for the hookman CLI.

Library modules only create loggers; the CLI configures output once at
startup. Logs go to stderr so that stdout stays clean for ``hookman example``
and dry-run scripts.
"""

import logging
import os
import sys

LOG_LEVEL_ENV_VAR = "HOOKMAN_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def resolve_log_level(debug: bool = False, verbose: bool = False) -> int:
    """
    Pick the log level from CLI flags, falling back to HOOKMAN_LOG_LEVEL.

    Flags win over the environment. Unknown level names fall back to WARNING.
    """
    if debug:
        return logging.DEBUG
    if verbose:
        return logging.INFO

    if level_name := os.environ.get(LOG_LEVEL_ENV_VAR):
        level = logging.getLevelName(level_name.strip().upper())
        if isinstance(level, int):
            return level

    return logging.WARNING


def setup_logging(debug: bool = False, verbose: bool = False) -> None:
    """
    Configure logging for hookman commands.

    Args:
        debug: If True, enable DEBUG level logging
        verbose: If True, enable INFO level logging
    """
    logging.basicConfig(
        level=resolve_log_level(debug=debug, verbose=verbose),
        format=LOG_FORMAT,
        stream=sys.stderr,
        force=True,
    )
