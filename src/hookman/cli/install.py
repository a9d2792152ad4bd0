"""
Install command: generate git hook scripts from the configuration.
"""

import logging

import typer
from rich.console import Console

from hookman.cli.errors import print_hookman_error
from hookman.core.config import DEFAULT_CONFIG_FILENAME, resolve_config
from hookman.core.errors import HookmanError
from hookman.core.hooks import HookInstaller, InstallOptions

logger = logging.getLogger(__name__)

console = Console()


def install(
    config: str = typer.Option(
        DEFAULT_CONFIG_FILENAME,
        "--config",
        "-c",
        help="Path of the configuration file",
    ),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        "-n",
        help="Print the generated scripts instead of writing them",
    ),
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help="Overwrite existing hook scripts",
    ),
    no_remove: bool = typer.Option(
        False,
        "--no-remove",
        help="Keep files already in the hook directory",
    ),
    no_global: bool = typer.Option(
        False,
        "--no-global",
        help="Ignore the user-global configuration file",
    ),
) -> None:
    """
    Install git hooks.

    Reads hooks from the configuration file (plus the global
    ~/.config/hookman/hookman.toml, if present) and writes one script per
    stage into the repository's hook directory.

    Existing files in the hook directory are removed first unless
    --no-remove is given.

    Examples:
        hookman install                  # Install from .hookman.toml
        hookman install --dry-run        # Show the scripts only
        hookman install -c hooks.toml -f # Other config, overwrite hooks
    """
    options = InstallOptions(dry_run=dry_run, force=force, no_remove=no_remove)
    logger.debug("options: %s", options)

    try:
        location = resolve_config(config, include_global=not no_global)
        result = HookInstaller(location, console=console).install(options)
    except HookmanError as e:
        logger.debug("install failed", exc_info=True)
        raise typer.Exit(print_hookman_error(e))

    if result.dry_run:
        if result.removed:
            console.print(
                f"[dim]Would remove {len(result.removed)} existing file(s) "
                f"from {result.hooks_dir}[/dim]"
            )
        raise typer.Exit(0)

    if not result.written:
        console.print("[yellow]⚠[/yellow] No hooks configured, nothing installed")
        raise typer.Exit(0)

    if result.removed:
        console.print(f"[dim]Removed {len(result.removed)} existing file(s)[/dim]")

    console.print(f"[green]✓[/green] Installed {len(result.written)} hook script(s)")
    for path in result.written:
        console.print(f"  {path}", highlight=False)
