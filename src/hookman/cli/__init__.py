"""
hookman CLI - Main application entry point.

This module sets up the Typer CLI application with all subcommands.
"""

import typer
from rich.console import Console

from hookman import __version__
from hookman.cli import example, install
from hookman.utils.logging import setup_logging

# Create the main Typer app
app = typer.Typer(
    name="hookman",
    help="Install git hooks declared in a config file",
    no_args_is_help=True,
    add_completion=False,
    context_settings={"help_option_names": ["--help", "-h"]},
)

console = Console()


@app.callback()
def main(
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Enable debug output with detailed logging",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log progress information",
    ),
) -> None:
    """
    hookman - git hooks from a config file.

    Declare commands per stage in .hookman.toml and run `hookman install`
    to turn them into pre-commit, pre-push and post-commit scripts.

    Quick Start:
        1. hookman example > .hookman.toml   # Start from the sample
        2. hookman install --dry-run         # Check the generated scripts
        3. hookman install                   # Write them to .git/hooks

    The log level can also be set with HOOKMAN_LOG_LEVEL.
    """
    setup_logging(debug=debug, verbose=verbose)


app.command(name="install")(install.install)
app.command(name="example")(example.example)


@app.command()
def version() -> None:
    """Show hookman version and exit."""
    console.print(f"hookman version {__version__}")
    raise typer.Exit(0)


def cli_main() -> None:
    """Main CLI entry point."""
    app()


__all__ = ["app", "cli_main"]
