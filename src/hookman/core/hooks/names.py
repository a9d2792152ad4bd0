"""
Name resolution for hooks.

Every hook becomes a shell function in the generated script, so it needs an
identifier. Named hooks use their sanitised display name; anonymous hooks get
``hook_0``, ``hook_1``, ... from a counter shared by the whole install run.
"""

from hookman.core.config.models import Hook


class NameGenerator:
    """
    Hands out sequential names for anonymous hooks.

    One generator belongs to one install run and is shared by all stages,
    so the same config always yields the same names.

    Example:
        >>> names = NameGenerator()
        >>> names.generate(), names.generate()
        ('hook_0', 'hook_1')
    """

    def __init__(self) -> None:
        self._next = 0

    def generate(self) -> str:
        name = f"hook_{self._next}"
        self._next += 1
        return name


def sanitise_name(name: str) -> str:
    """Lower-case a display name and join its words with underscores."""
    return "_".join(name.lower().split())


def resolve_name(hook: Hook, names: NameGenerator) -> str:
    """
    Resolve the identifier for a hook.

    Named hooks never advance the generator. Duplicate names are not
    detected here.
    """
    if hook.name is not None:
        return sanitise_name(hook.name)
    return names.generate()
