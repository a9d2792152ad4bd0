"""Tests for hook name resolution."""

import pytest

from hookman.core.config.models import Hook
from hookman.core.hooks.names import NameGenerator, resolve_name, sanitise_name


class TestSanitiseName:
    """Tests for sanitise_name."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("Lint", "lint"),
            ("Generate hooks", "generate_hooks"),
            ("  Run   Unit\tTests\n", "run_unit_tests"),
            ("already_clean", "already_clean"),
            ("MiXeD CaSe", "mixed_case"),
        ],
    )
    def test_sanitise(self, name: str, expected: str) -> None:
        assert sanitise_name(name) == expected

    @pytest.mark.parametrize(
        "name", ["Lint", "Generate hooks", "  a  b  ", "x\ty\nz", "", "lint:py"]
    )
    def test_idempotent(self, name: str) -> None:
        once = sanitise_name(name)
        assert sanitise_name(once) == once

    def test_non_whitespace_kept_verbatim(self) -> None:
        assert sanitise_name("Lint: Python-3") == "lint:_python-3"


class TestNameGenerator:
    """Tests for NameGenerator."""

    def test_starts_at_zero(self) -> None:
        assert NameGenerator().generate() == "hook_0"

    def test_increments_by_one(self) -> None:
        names = NameGenerator()
        for _ in range(10):
            names.generate()

        assert names.generate() == "hook_10"

    def test_generators_are_independent(self) -> None:
        first = NameGenerator()
        first.generate()
        first.generate()

        assert NameGenerator().generate() == "hook_0"


class TestResolveName:
    """Tests for resolve_name."""

    def test_named_hook_uses_sanitised_name(self) -> None:
        hook = Hook(name="Generate hooks", command="ctags")
        assert resolve_name(hook, NameGenerator()) == "generate_hooks"

    def test_anonymous_hook_uses_counter(self) -> None:
        names = NameGenerator()
        assert resolve_name(Hook(command="a"), names) == "hook_0"
        assert resolve_name(Hook(command="b"), names) == "hook_1"

    def test_named_hooks_do_not_consume_counter(self) -> None:
        hooks = [
            Hook(command="a"),
            Hook(name="Lint", command="pylint"),
            Hook(name="Test", command="pytest"),
            Hook(command="b"),
            Hook(name="Fmt", command="black"),
            Hook(command="c"),
        ]
        names = NameGenerator()

        resolved = [resolve_name(hook, names) for hook in hooks]

        assert resolved == ["hook_0", "lint", "test", "hook_1", "fmt", "hook_2"]

    def test_duplicate_names_not_deduplicated(self) -> None:
        names = NameGenerator()
        first = resolve_name(Hook(name="Lint", command="a"), names)
        second = resolve_name(Hook(name="lint", command="b"), names)
        assert first == second == "lint"

    def test_same_input_same_names(self) -> None:
        hooks = [Hook(command="a"), Hook(name="x", command="b"), Hook(command="c")]

        def resolve_all() -> list[str]:
            names = NameGenerator()
            return [resolve_name(hook, names) for hook in hooks]

        assert resolve_all() == resolve_all() == ["hook_0", "x", "hook_1"]
