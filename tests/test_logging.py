"""
Unit tests for CLI logging setup.

Tests level selection from the --debug/--verbose flags and the
HOOKMAN_LOG_LEVEL environment variable.
"""

import logging
import sys
from collections.abc import Iterator

import pytest

from hookman.utils.logging import LOG_LEVEL_ENV_VAR, resolve_log_level, setup_logging


@pytest.fixture
def restore_root_logger() -> Iterator[None]:
    root = logging.getLogger()
    level = root.level
    yield
    for handler in root.handlers[:]:
        if type(handler) is logging.StreamHandler:
            root.removeHandler(handler)
    root.setLevel(level)


class TestResolveLogLevel:
    """Test log level selection."""

    def test_default_is_warning(self):
        assert resolve_log_level() == logging.WARNING

    def test_debug_flag(self):
        assert resolve_log_level(debug=True) == logging.DEBUG

    def test_verbose_flag(self):
        assert resolve_log_level(verbose=True) == logging.INFO

    def test_debug_wins_over_verbose(self):
        assert resolve_log_level(debug=True, verbose=True) == logging.DEBUG

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("debug", logging.DEBUG),
            ("INFO", logging.INFO),
            (" error ", logging.ERROR),
        ],
    )
    def test_env_var(self, monkeypatch, value, expected):
        monkeypatch.setenv(LOG_LEVEL_ENV_VAR, value)
        assert resolve_log_level() == expected

    def test_unknown_env_value_falls_back(self, monkeypatch):
        monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "chatty")
        assert resolve_log_level() == logging.WARNING

    def test_flags_win_over_env(self, monkeypatch):
        monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "error")
        assert resolve_log_level(verbose=True) == logging.INFO


class TestSetupLogging:
    """Test root logger configuration."""

    @pytest.mark.usefixtures("restore_root_logger")
    def test_configures_root_logger(self):
        setup_logging(debug=True)

        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        handler = root.handlers[0]
        assert isinstance(handler, logging.StreamHandler)
        assert handler.stream is sys.stderr

    @pytest.mark.usefixtures("restore_root_logger")
    def test_reconfigures_on_second_call(self):
        setup_logging(debug=True)
        setup_logging()

        assert logging.getLogger().level == logging.WARNING
        assert len(logging.getLogger().handlers) == 1
