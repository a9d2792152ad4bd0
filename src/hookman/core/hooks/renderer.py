"""
Shell script rendering for hook stages.

A stage's hooks become one bash script: each hook is wrapped in a shell
function and ``main`` calls the functions in declaration order. Background
hooks are started with ``&`` and never waited for.

The failure policy is spelled out in the generated header so that anyone
reading .git/hooks/<stage> can see it without consulting hookman.
"""

import re
from collections.abc import Iterable
from pathlib import Path

from hookman.core.config.models import Stage
from hookman.core.hooks.models import HookContext

_INVALID_IDENTIFIER_CHARS = re.compile(r"[^A-Za-z0-9_]")

# Keeps hook functions from shadowing commands the hooks themselves run
FUNCTION_PREFIX = "hookman_"

FAILURE_POLICY = """\
# Failure handling:
#   Hooks run in the order they are declared, under `set -euo pipefail`.
#   If a foreground hook exits non-zero, this script stops immediately and
#   exits with that status; the remaining hooks do not run.
#   Background hooks are started with `&` and never waited for. Their exit
#   status is ignored and does not affect this script's exit code."""


def shell_identifier(name: str) -> str:
    """Turn a resolved hook name into a prefixed bash function name."""
    return FUNCTION_PREFIX + (_INVALID_IDENTIFIER_CHARS.sub("_", name) or "unnamed")


def unique_identifiers(contexts: Iterable[HookContext]) -> list[str]:
    """
    Assign a distinct function name to each context.

    Later duplicates get ``_2``, ``_3``, ... appended in declaration order,
    so two hooks both called "lint" still run their own commands.
    """
    used: set[str] = set()
    identifiers = []
    for context in contexts:
        base = shell_identifier(context.name)
        candidate = base
        suffix = 2
        while candidate in used:
            candidate = f"{base}_{suffix}"
            suffix += 1
        used.add(candidate)
        identifiers.append(candidate)
    return identifiers


def _comment(text: str) -> str:
    return "# " + " ".join(text.split())


def render_script(
    stage: Stage,
    contexts: list[HookContext],
    source: Path | None = None,
) -> str:
    """
    Render the script for one stage.

    Args:
        stage: Stage the script is installed for
        contexts: Resolved hooks, in declaration order
        source: Config file the hooks came from, mentioned in the header

    Returns:
        Complete script text, ending with a newline
    """
    origin = f" from {source}" if source is not None else ""
    lines = [
        "#!/usr/bin/env bash",
        "#",
        f"# {stage} hook generated by hookman{origin}.",
        "# Do not edit: changes are lost the next time `hookman install` runs.",
        "#",
        FAILURE_POLICY,
        "",
        "set -euo pipefail",
        "",
    ]

    identifiers = unique_identifiers(contexts)

    for identifier, context in zip(identifiers, contexts):
        if context.original_name is not None:
            lines.append(_comment(context.original_name))
        lines.extend([f"{identifier}() {{", f"    {context.command}", "}", ""])

    lines.append("main() {")
    for identifier, context in zip(identifiers, contexts):
        if context.background:
            lines.append(f"    {identifier} &")
        else:
            lines.append(f"    {identifier}")
    if not contexts:
        lines.append("    :")
    lines.extend(["}", "", 'main "$@"', ""])

    return "\n".join(lines)
