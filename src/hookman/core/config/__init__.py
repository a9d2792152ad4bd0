"""
Configuration models and loading.

This module provides Pydantic models for hookman configuration
with project/global merging: project hooks first, then global hooks.
"""

from .loader import (
    DEFAULT_CONFIG_FILENAME,
    get_global_config_path,
    get_project_config_path,
    get_xdg_config_home,
    load_config,
    parse_config,
    resolve_config,
)
from .models import STAGE_FILE_NAMES, ConfigLocation, Hook, HookConfig, Stage

__all__ = [
    # Models
    "ConfigLocation",
    "Hook",
    "HookConfig",
    "STAGE_FILE_NAMES",
    "Stage",
    # Loader functions
    "DEFAULT_CONFIG_FILENAME",
    "get_global_config_path",
    "get_project_config_path",
    "get_xdg_config_home",
    "load_config",
    "parse_config",
    "resolve_config",
]
