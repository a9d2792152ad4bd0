"""
Example command: print a sample configuration file.
"""

from pathlib import Path

import typer

EXAMPLE_CONFIG_PATH = Path(__file__).parent.parent / "data" / "hookman.toml"


def example() -> None:
    """
    Print an example configuration file to the console.

    Examples:
        hookman example > .hookman.toml
    """
    typer.echo(EXAMPLE_CONFIG_PATH.read_text(encoding="utf-8"), nl=False)
