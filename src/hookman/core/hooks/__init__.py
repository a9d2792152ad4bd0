"""
Git hook generation.

This package turns a hook configuration into executable scripts:
- names: identifiers for named and anonymous hooks
- grouping: per-stage hook lists
- renderer: bash script text for one stage
- installer: writes the scripts into the git hook directory
"""

from .grouping import group_by_stage
from .installer import HookInstaller
from .models import HookContext, InstallOptions, InstallResult
from .names import NameGenerator, resolve_name, sanitise_name
from .renderer import render_script

__all__ = [
    "HookContext",
    "HookInstaller",
    "InstallOptions",
    "InstallResult",
    "NameGenerator",
    "group_by_stage",
    "render_script",
    "resolve_name",
    "sanitise_name",
]
