from __future__ import annotations

from grouped_imports.comment_controls import is_disabled, parse_controls, rule_enabled_ranges
from grouped_imports.source import SourceFile
from grouped_imports.tokens import find_import_ranges

RULE = "grouped_imports"


def test_disable_and_enable_regions() -> None:
    lines = [
        "import A",
        "// swiftlint:disable grouped_imports",
        "import B",
        "// swiftlint:enable grouped_imports",
        "import C",
    ]
    controls = parse_controls(lines)
    assert not is_disabled(controls, RULE, 1)
    assert is_disabled(controls, RULE, 2)
    assert is_disabled(controls, RULE, 3)
    assert not is_disabled(controls, RULE, 4)
    assert not is_disabled(controls, RULE, 5)


def test_scoped_directives() -> None:
    lines = [
        "// swiftlint:disable:next grouped_imports",
        "import A",
        "import B // swiftlint:disable:this grouped_imports",
        "import C",
        "// swiftlint:disable:previous grouped_imports other_rule",
    ]
    controls = parse_controls(lines)
    assert [is_disabled(controls, RULE, n) for n in range(1, 6)] == [
        False,
        True,
        True,
        True,
        False,
    ]
    assert is_disabled(controls, "other_rule", 4)


def test_all_disables_every_rule() -> None:
    controls = parse_controls(["// swiftlint:disable all", "import A"])
    assert is_disabled(controls, RULE, 2)
    assert is_disabled(controls, "anything", 2)


def test_other_rules_do_not_affect_grouped_imports() -> None:
    controls = parse_controls(["// swiftlint:disable sorted_imports", "import A"])
    assert not is_disabled(controls, RULE, 2)


def test_rule_enabled_ranges() -> None:
    text = "import A\n// swiftlint:disable:next grouped_imports\nimport B\nimport C\n"
    file = SourceFile(text)
    ranges = find_import_ranges(text)
    kept = rule_enabled_ranges(file, ranges, RULE)
    assert [file.line_for_offset(start).number for start, _ in kept] == [1, 4]
