"""
hookman - Git hooks from a config file

A CLI tool that installs git hook scripts declared in .hookman.toml.
"""

__version__ = "0.3.0"

# Re-export core models for convenience
from hookman.core.config.models import ConfigLocation, Hook, HookConfig, Stage

__all__ = ["ConfigLocation", "Hook", "HookConfig", "Stage", "__version__"]
