"""
Configuration loading with global/project merging.

Hooks are read from the project file (.hookman.toml by default) and, when
present, from the user-global file at ~/.config/hookman/hookman.toml (or the
XDG equivalent). Global hooks are appended after the project's hooks.
"""

import logging
import os
import sys
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from hookman.core.errors import (
    ConfigMalformedError,
    ConfigNotFoundError,
    ConfigUnreadableError,
)

from .models import ConfigLocation, HookConfig

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILENAME = ".hookman.toml"


def get_xdg_config_home() -> Path:
    """
    Get XDG config home directory.

    Returns:
        Path to config directory (defaults to ~/.config)
    """
    if xdg_home := os.environ.get("XDG_CONFIG_HOME"):
        return Path(xdg_home)
    return Path.home() / ".config"


def get_global_config_path() -> Path:
    """
    Get path to the user-global configuration file.

    Returns:
        Path to ~/.config/hookman/hookman.toml (or XDG equivalent)
    """
    return get_xdg_config_home() / "hookman" / "hookman.toml"


def get_project_config_path(cwd: Path | None = None) -> Path:
    """
    Get path to the project configuration file.

    Args:
        cwd: Working directory to look in (defaults to current directory)

    Returns:
        Path to .hookman.toml in that directory
    """
    if cwd is None:
        cwd = Path.cwd()
    return cwd / DEFAULT_CONFIG_FILENAME


def _format_validation_error(error: ValidationError) -> list[str]:
    problems = []
    for detail in error.errors():
        location = ".".join(str(part) for part in detail["loc"]) or "<document>"
        problems.append(f"{location}: {detail['msg']}")
    return problems


def parse_config(text: str, path: Path) -> HookConfig:
    """
    Parse a TOML document into a HookConfig.

    Args:
        text: TOML source
        path: File the text came from (used in error messages)

    Returns:
        Validated HookConfig

    Raises:
        ConfigMalformedError: If the text is not valid TOML or does not
            match the hook schema
    """
    try:
        data: dict[str, Any] = tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        raise ConfigMalformedError(path, [str(e)]) from e

    try:
        return HookConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigMalformedError(path, _format_validation_error(e)) from e


def load_config(path: Path | str) -> ConfigLocation:
    """
    Load and validate a configuration file.

    Args:
        path: Path to a hookman TOML file

    Returns:
        ConfigLocation pairing the parsed config with its path

    Raises:
        ConfigNotFoundError: If the file does not exist
        ConfigUnreadableError: If the file cannot be read
        ConfigMalformedError: If the contents do not match the schema

    Example:
        >>> location = load_config(".hookman.toml")
        >>> [hook.command for hook in location.hooks]
        ['pytest', 'pylint']
    """
    path = Path(path)
    logger.info("reading configuration from %s", path)

    if not path.exists():
        raise ConfigNotFoundError(path)

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigUnreadableError(f"reading config file {path}: {e}", path) from e

    logger.debug("config: %s", text)
    return ConfigLocation(config=parse_config(text, path), path=path)


def resolve_config(
    path: Path | str | None = None,
    include_global: bool = True,
) -> ConfigLocation:
    """
    Load the project configuration, merged with the global one if present.

    A missing global file is skipped. A global file that exists but cannot
    be loaded is an error, same as for the project file.

    Args:
        path: Project config path (defaults to .hookman.toml in the cwd)
        include_global: If False, ignore the user-global configuration

    Returns:
        ConfigLocation whose hooks are the project hooks followed by the
        global hooks, identified by the project path
    """
    local = load_config(path if path is not None else get_project_config_path())

    if not include_global:
        logger.debug("global configuration disabled")
        return local

    global_path = get_global_config_path()
    if not global_path.exists():
        logger.debug("no global configuration found at %s", global_path)
        return local

    logger.debug("found global configuration at %s", global_path)
    return local.merge(load_config(global_path))
