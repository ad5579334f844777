from __future__ import annotations

import re
from typing import Dict, Iterable, Set

from grouped_imports.source import SourceFile
from grouped_imports.tokens import Span

_CTRL_RE = re.compile(
    r"//\s*swiftlint:(disable|enable)(?::(next|this|previous))?\s+([A-Za-z0-9_-]+(?:[ \t]+[A-Za-z0-9_-]+)*)"
)
_SCOPE_SHIFT = {"next": 1, "this": 0, "previous": -1}
ALL_RULES = "all"


def parse_controls(lines: list[str]) -> Dict[int, Set[str]]:
    """Map each 1-based line number to the rule ids disabled on it."""
    active: Set[str] = set()
    result: Dict[int, Set[str]] = {}
    scoped: list[tuple[int, str, Set[str]]] = []
    for i, line in enumerate(lines, start=1):
        for m in _CTRL_RE.finditer(line):
            action, scope, rules = m.groups()
            names = set(rules.split())
            if scope:
                scoped.append((i + _SCOPE_SHIFT[scope], action, names))
            elif action == "disable":
                active.update(names)
            else:
                active.difference_update(names)
        result[i] = set(active)
    for line_no, action, names in scoped:
        if line_no not in result:
            continue
        if action == "disable":
            result[line_no].update(names)
        else:
            result[line_no].difference_update(names)
    return result


def is_disabled(controls: Dict[int, Set[str]], rule: str, line: int) -> bool:
    disabled = controls.get(line, set())
    return rule in disabled or ALL_RULES in disabled


def rule_enabled_ranges(
    file: SourceFile,
    ranges: Iterable[Span],
    rule: str,
    controls: Dict[int, Set[str]] | None = None,
) -> list[Span]:
    """Drop ranges that start on a line where ``rule`` is suppressed."""
    if controls is None:
        controls = parse_controls([line.content for line in file.lines])
    return [
        span
        for span in ranges
        if not is_disabled(controls, rule, file.line_for_offset(span[0]).number)
    ]
