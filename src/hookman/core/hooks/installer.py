"""
Git hook installer.

Turns a loaded configuration into one executable script per stage inside the
repository's hook directory.

An install run goes through these steps:
    1. Locate the hook directory (``git rev-parse --git-dir`` + ``hooks``)
    2. Clear the regular files already in it, unless no_remove is set
    3. Group hooks by stage
    4. For each stage, render the script and write it with mode 0755

A dry run renders every script and prints it to the console instead, without
touching the filesystem. Files written before a failing stage are left in
place.
"""

from __future__ import annotations

import logging
from pathlib import Path

from rich.console import Console

from hookman.core.config.models import ConfigLocation, Hook, Stage
from hookman.core.errors import (
    ClearFailureError,
    DestinationExistsError,
    HookmanError,
    WriteFailureError,
)
from hookman.core.hooks.grouping import group_by_stage
from hookman.core.hooks.models import HookContext, InstallOptions, InstallResult
from hookman.core.hooks.names import NameGenerator
from hookman.core.hooks.renderer import render_script
from hookman.utils.git import find_hooks_dir

logger = logging.getLogger(__name__)

HOOK_FILE_MODE = 0o755


class HookInstaller:
    """
    Installs the hooks of one configuration.

    Example:
        >>> installer = HookInstaller(resolve_config())
        >>> result = installer.install(InstallOptions(force=True))
        >>> [path.name for path in result.written]
        ['pre-push', 'post-commit', 'pre-commit']
    """

    def __init__(
        self,
        config: ConfigLocation,
        hooks_dir: Path | None = None,
        console: Console | None = None,
    ) -> None:
        """
        Initialize the installer.

        Args:
            config: Configuration to install
            hooks_dir: Hook directory to use instead of asking git
            console: Console that dry-run output is printed to
        """
        self.config = config
        self.hooks_dir = hooks_dir
        self.console = console or Console()

    def install(self, options: InstallOptions | None = None) -> InstallResult:
        """
        Run an install.

        Args:
            options: Dry-run, force and no-remove flags

        Returns:
            InstallResult describing what was (or would be) changed

        Raises:
            RootNotFoundError: If the hook directory cannot be located
            ClearFailureError: If an existing hook cannot be removed
            DestinationExistsError: If a script exists and force is not set
            WriteFailureError: If a script cannot be written
        """
        options = options or InstallOptions()
        names = NameGenerator()

        try:
            hooks_dir = self.compute_root_hook_path()
        except HookmanError as e:
            e.add_context("calculating root hook path")
            raise

        result = InstallResult(hooks_dir=hooks_dir, dry_run=options.dry_run)

        if options.no_remove:
            logger.info("not removing existing hooks because --no-remove was passed")
        else:
            try:
                result.removed = self.clear_hooks(hooks_dir, dry_run=options.dry_run)
            except HookmanError as e:
                e.add_context("clearing existing hooks")
                raise

        logger.info("installing hooks")
        hooks_per_stage = group_by_stage(self.config.config)
        logger.debug("hooks per stage: %s", hooks_per_stage)

        for stage, hooks in hooks_per_stage.items():
            try:
                self.generate_hook(stage, hooks, hooks_dir, names, options, result)
            except HookmanError as e:
                e.add_context(f"generating hook for stage {stage}")
                raise

        return result

    def compute_root_hook_path(self) -> Path:
        if self.hooks_dir is not None:
            return self.hooks_dir
        return find_hooks_dir()

    @staticmethod
    def compute_hook_path(hooks_dir: Path, stage: Stage) -> Path:
        return hooks_dir / stage.file_name

    def clear_hooks(self, hooks_dir: Path, dry_run: bool = False) -> list[Path]:
        """
        Remove the regular files directly inside the hook directory.

        Subdirectories and symlinks are left alone. A missing directory means
        there is nothing to clear; it is not created.

        Args:
            hooks_dir: Hook directory to clear
            dry_run: If True, only report what would be removed

        Returns:
            Files removed (or that would be removed)
        """
        logger.info("clearing out previous hooks")

        try:
            entries = sorted(hooks_dir.iterdir())
        except FileNotFoundError:
            logger.info("no hook directory found")
            return []
        except OSError as e:
            raise ClearFailureError(hooks_dir, str(e), operation="reading hook directory") from e

        candidates = [entry for entry in entries if entry.is_file() and not entry.is_symlink()]

        if dry_run:
            for candidate in candidates:
                logger.info("would remove %s", candidate)
            return candidates

        for candidate in candidates:
            logger.debug("removing %s", candidate)
            try:
                candidate.unlink()
            except OSError as e:
                raise ClearFailureError(candidate, str(e)) from e

        return candidates

    def generate_hook(
        self,
        stage: Stage,
        hooks: list[Hook],
        hooks_dir: Path,
        names: NameGenerator,
        options: InstallOptions,
        result: InstallResult,
    ) -> None:
        """Render one stage's script and write it (or print it in a dry run)."""
        contexts = [HookContext.from_hook(hook, names) for hook in hooks]
        contents = render_script(stage, contexts, source=self.config.path)
        logger.debug("%s hook: %s", stage, contents)
        result.scripts[stage] = contents

        if options.dry_run:
            self.console.print(f"would install {stage} script:", markup=False, highlight=False)
            self.console.out(contents, highlight=False, end="")
            return

        hook_path = self.compute_hook_path(hooks_dir, stage)
        logger.debug("writing hook to %s", hook_path)
        if (hook_path.exists() or hook_path.is_symlink()) and not options.force:
            raise DestinationExistsError(hook_path)

        self.write_file(hook_path, contents)
        result.written.append(hook_path)

    def write_file(self, path: Path, contents: str) -> None:
        """
        Write a script and make it executable.

        The hook directory is created (with parents) if it does not exist yet.
        """
        if not path.parent.is_dir():
            logger.debug("hook dir does not exist, creating")
            try:
                path.parent.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise WriteFailureError(path.parent, str(e)) from e

        try:
            with path.open("w", encoding="utf-8", newline="\n") as f:
                f.write(contents)
            path.chmod(HOOK_FILE_MODE)
        except OSError as e:
            raise WriteFailureError(path, str(e)) from e
