"""
Hook data models for hookman.

HookContext is the rendering-only view of a hook: it carries the resolved
function name and the final command line. Contexts are built fresh for every
install run and thrown away once the script text exists.

InstallOptions and InstallResult describe one install run.
"""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from hookman.core.config.models import Hook, Stage
from hookman.core.hooks.names import NameGenerator, resolve_name

GIT_FILES_EXPRESSION = "$(git ls-files)"


class HookContext(BaseModel):
    """A hook resolved for rendering into a script."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Resolved identifier of the hook")
    command: str = Field(description="Final command line, file list already appended")
    background: bool = Field(default=False, description="Run without waiting")
    original_name: str | None = Field(
        default=None, description="Display name from the config, for comments only"
    )

    @classmethod
    def from_hook(cls, hook: Hook, names: NameGenerator) -> "HookContext":
        """
        Build the context for a hook.

        The file-list expression is appended to ``hook.command`` here and
        nowhere else, so it is applied exactly once per context.
        """
        command = hook.command
        if hook.pass_git_files:
            command = f"{command} {GIT_FILES_EXPRESSION}"

        return cls(
            name=resolve_name(hook, names),
            command=command,
            background=hook.background,
            original_name=hook.name,
        )


class InstallOptions(BaseModel):
    """Flags controlling an install run."""

    model_config = ConfigDict(frozen=True)

    dry_run: bool = Field(default=False, description="Print scripts instead of writing them")
    force: bool = Field(default=False, description="Overwrite existing hook scripts")
    no_remove: bool = Field(
        default=False, description="Keep existing files in the hook directory"
    )


class InstallResult(BaseModel):
    """Result of an install run."""

    hooks_dir: Path = Field(description="Git hook directory that was targeted")
    dry_run: bool = Field(default=False, description="Whether the run was a dry run")
    removed: list[Path] = Field(
        default_factory=list,
        description="Files cleared from the hook directory (or that would be, in a dry run)",
    )
    written: list[Path] = Field(default_factory=list, description="Hook scripts written")
    scripts: dict[Stage, str] = Field(
        default_factory=dict, description="Rendered script per stage, in install order"
    )
