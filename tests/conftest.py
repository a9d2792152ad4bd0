"""
Pytest configuration and shared fixtures.

Provides fixtures for temp config files, hook directories and sample
configurations used across the test suite.
"""

import io
import textwrap
from collections.abc import Callable
from pathlib import Path

import pytest
from rich.console import Console

from hookman.core.config.models import ConfigLocation, Hook, HookConfig, Stage

# ==============================================================================
# Environment Fixtures
# ==============================================================================


@pytest.fixture(autouse=True)
def config_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point XDG_CONFIG_HOME at an empty temp dir so no real global config leaks in."""
    home = tmp_path / "xdg-config"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(home))
    monkeypatch.delenv("HOOKMAN_LOG_LEVEL", raising=False)
    return home


# ==============================================================================
# Directory Fixtures
# ==============================================================================


@pytest.fixture
def hooks_dir(tmp_path: Path) -> Path:
    """Hook directory inside a fake repository. Not created."""
    return tmp_path / "repo" / ".git" / "hooks"


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[..., Path]:
    """Write a TOML config into tmp_path and return its path."""

    def _write(text: str, name: str = ".hookman.toml") -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(textwrap.dedent(text), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def console_output() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def console(console_output: io.StringIO) -> Console:
    """Console writing into console_output, without colours or wrapping."""
    return Console(file=console_output, width=200, color_system=None)


# ==============================================================================
# Sample Data Fixtures
# ==============================================================================


@pytest.fixture
def example_hooks() -> list[Hook]:
    """The three hooks of the bundled example configuration."""
    return [
        Hook(name="Test", command="pytest", stage=Stage.PRE_PUSH),
        Hook(
            name="Generate hooks",
            command="ctags --tag-relative=yes -Rf .git/tags",
            stage=Stage.POST_COMMIT,
            background=True,
            pass_git_files=True,
        ),
        Hook(name="Lint", command="pylint", stage=Stage.PRE_COMMIT),
    ]


@pytest.fixture
def example_config(example_hooks: list[Hook], tmp_path: Path) -> ConfigLocation:
    return ConfigLocation(
        config=HookConfig(hooks=example_hooks),
        path=tmp_path / ".hookman.toml",
    )


@pytest.fixture
def make_location(tmp_path: Path) -> Callable[..., ConfigLocation]:
    """Build a ConfigLocation from hooks."""

    def _make(*hooks: Hook) -> ConfigLocation:
        return ConfigLocation(config=HookConfig(hooks=list(hooks)), path=tmp_path / ".hookman.toml")

    return _make
