"""Partition a configuration into per-stage hook lists."""

from hookman.core.config.models import Hook, HookConfig, Stage


def group_by_stage(config: HookConfig) -> dict[Stage, list[Hook]]:
    """
    Group hooks by the stage they run at.

    Stages without hooks are absent from the result. Hooks keep their
    declaration order within a stage, and stages appear in the order they
    are first used in the config.

    Example:
        >>> grouped = group_by_stage(config)
        >>> list(grouped)
        [<Stage.PRE_PUSH: 'pre-push'>, <Stage.PRE_COMMIT: 'pre-commit'>]
    """
    grouped: dict[Stage, list[Hook]] = {}
    for hook in config.hooks:
        grouped.setdefault(hook.stage, []).append(hook)
    return grouped
