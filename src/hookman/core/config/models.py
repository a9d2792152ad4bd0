"""
Configuration data models for hookman.

These models define the structure of .hookman.toml and
~/.config/hookman/hookman.toml, with validation and type safety via Pydantic.

Example document:

    [[hooks]]
    name = "Lint"
    command = "pylint"
    stage = "pre-commit"
"""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr


class Stage(str, Enum):
    """Git lifecycle stage a hook runs at."""

    PRE_COMMIT = "pre-commit"
    PRE_PUSH = "pre-push"
    POST_COMMIT = "post-commit"

    @property
    def file_name(self) -> str:
        """Name of the script git runs for this stage."""
        return STAGE_FILE_NAMES[self]

    def __str__(self) -> str:
        return self.value


# Every Stage member must appear here (checked in tests)
STAGE_FILE_NAMES: dict[Stage, str] = {
    Stage.PRE_COMMIT: "pre-commit",
    Stage.PRE_PUSH: "pre-push",
    Stage.POST_COMMIT: "post-commit",
}


class Hook(BaseModel):
    """
    A single declared hook command.

    The command is passed through to the shell untouched; a broken command
    only surfaces when git runs the generated script.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: StrictStr | None = Field(
        default=None,
        description="Human-readable label, also used to name the shell function",
    )
    command: StrictStr = Field(description="Shell command line to run")
    stage: Stage = Field(default=Stage.PRE_COMMIT, description="Stage the hook runs at")
    background: StrictBool = Field(
        default=False,
        description="Start the command without waiting for it to finish",
    )
    pass_git_files: StrictBool = Field(
        default=False,
        description="Append the list of files tracked by git to the command",
    )


class HookConfig(BaseModel):
    """Ordered collection of hooks, as declared in a config file."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    hooks: list[Hook] = Field(description="Hooks in declaration order")


class ConfigLocation(BaseModel):
    """A loaded configuration together with the file it came from."""

    model_config = ConfigDict(frozen=True)

    config: HookConfig
    path: Path

    @property
    def hooks(self) -> list[Hook]:
        return self.config.hooks

    def merge(self, other: "ConfigLocation") -> "ConfigLocation":
        """
        Combine two configurations into a new one.

        The hooks of ``other`` are appended after this configuration's hooks
        and the result keeps this configuration's path. Neither input is
        modified.

        Example:
            >>> merged = local.merge(global_config)
            >>> merged.path == local.path
            True
        """
        return ConfigLocation(
            config=HookConfig(hooks=[*self.config.hooks, *other.config.hooks]),
            path=self.path,
        )
