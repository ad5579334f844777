from __future__ import annotations

import dataclasses
from pathlib import Path

import pytest

from grouped_imports.config import (
    OTHER_SYSTEM_GROUP_NAME,
    SYSTEM_GROUP_NAME,
    GroupedImportsConfiguration,
    load_config,
)
from grouped_imports.errors import ConfigurationError
from grouped_imports.models import Severity
from grouped_imports.system_modules import SYSTEM_MODULES


def _names(cfg: GroupedImportsConfiguration) -> list[str]:
    return [group.name for group in cfg.module_groups]


def test_defaults() -> None:
    cfg = GroupedImportsConfiguration()
    assert _names(cfg) == [SYSTEM_GROUP_NAME]
    assert cfg.module_groups[0].modules == SYSTEM_MODULES
    assert cfg.minimum_group_size == 2
    assert cfg.severity is Severity.WARNING


def test_empty_mapping_keeps_defaults() -> None:
    assert GroupedImportsConfiguration.from_mapping({}) == GroupedImportsConfiguration()
    assert GroupedImportsConfiguration.from_mapping({"groups": []}) == GroupedImportsConfiguration()


def test_user_groups_get_other_system_modules_first() -> None:
    cfg = GroupedImportsConfiguration.from_mapping(
        {"groups": [{"ui": ["UIKit", "SwiftUI"]}, {"vendor": ["Alamofire"]}]}
    )
    assert _names(cfg) == [OTHER_SYSTEM_GROUP_NAME, "ui", "vendor"]
    other = cfg.module_groups[0].modules
    assert "Foundation" in other
    assert "UIKit" not in other
    assert other == SYSTEM_MODULES - {"UIKit", "SwiftUI"}


def test_no_other_group_when_user_covers_every_system_module() -> None:
    cfg = GroupedImportsConfiguration.from_mapping(
        {"groups": [{"apple": sorted(SYSTEM_MODULES)}, {"vendor": ["Alamofire"]}]}
    )
    assert _names(cfg) == ["apple", "vendor"]


def test_malformed_group_entries_are_skipped() -> None:
    cfg = GroupedImportsConfiguration.from_mapping(
        {"groups": [{"ok": ["AAA"]}, {"bad": "AAA"}, "text", {"mixed": ["AAA", 1]}, {}]}
    )
    assert _names(cfg) == [OTHER_SYSTEM_GROUP_NAME, "ok"]


def test_groups_not_a_list_is_ignored() -> None:
    cfg = GroupedImportsConfiguration.from_mapping({"groups": {"ui": ["UIKit"]}})
    assert _names(cfg) == [SYSTEM_GROUP_NAME]


def test_threshold_keys() -> None:
    cfg = GroupedImportsConfiguration.from_mapping(
        {"grouping_conditions": {"all_groups_larger_than": 3}}
    )
    assert cfg.minimum_group_size == 3
    cfg = GroupedImportsConfiguration.from_mapping(
        {"grouping_conditions": {"minimum_group_size": 4}}
    )
    assert cfg.minimum_group_size == 4
    cfg = GroupedImportsConfiguration.from_mapping({"minimum_group_size": 5})
    assert cfg.minimum_group_size == 5


def test_bad_threshold_falls_back() -> None:
    for value in ("3", True, 2.5, None):
        cfg = GroupedImportsConfiguration.from_mapping(
            {"grouping_conditions": {"all_groups_larger_than": value}}
        )
        assert cfg.minimum_group_size == 2


def test_severity() -> None:
    assert GroupedImportsConfiguration.from_mapping({"severity": "Error"}).severity is Severity.ERROR
    assert GroupedImportsConfiguration.from_mapping({"severity": "loud"}).severity is Severity.WARNING


def test_non_mapping_is_configuration_error() -> None:
    with pytest.raises(ConfigurationError):
        GroupedImportsConfiguration.from_mapping(["groups"])
    with pytest.raises(ConfigurationError):
        GroupedImportsConfiguration.from_mapping("warning")


def test_configuration_is_frozen() -> None:
    cfg = GroupedImportsConfiguration()
    with pytest.raises(dataclasses.FrozenInstanceError):
        cfg.minimum_group_size = 10  # type: ignore[misc]


def test_console_description() -> None:
    cfg = GroupedImportsConfiguration.from_mapping({"groups": [{"vendor": ["Alamofire"]}]})
    assert cfg.console_description == (
        "severity: warning, imports groups: [other system modules, vendor], "
        "minimum group size: 2"
    )


TOML_CFG = """\
[lint]
cache = false
exclude = ["Vendor"]

[grouped_imports]
severity = "error"

[grouped_imports.grouping_conditions]
all_groups_larger_than = 4

[[grouped_imports.groups]]
vendor = ["Alamofire", "GoogleMaps"]
"""


def test_load_toml(tmp_path: Path) -> None:
    (tmp_path / "grouped_imports.toml").write_text(TOML_CFG, encoding="utf-8")
    cfg = load_config(tmp_path)
    assert cfg.cache is False
    assert cfg.exclude == ("Vendor",)
    assert cfg.rule.severity is Severity.ERROR
    assert cfg.rule.minimum_group_size == 4
    assert _names(cfg.rule) == [OTHER_SYSTEM_GROUP_NAME, "vendor"]
    assert cfg.source == tmp_path.resolve() / "grouped_imports.toml"


YAML_CFG = """\
grouped_imports:
  groups:
    - ui: [UIKit]
    - vendor: [Alamofire]
  grouping_conditions:
    all_groups_larger_than: 1
"""


def test_load_yaml_from_parent_directory(tmp_path: Path) -> None:
    (tmp_path / "grouped_imports.yaml").write_text(YAML_CFG, encoding="utf-8")
    sub = tmp_path / "Sources" / "App"
    sub.mkdir(parents=True)
    cfg = load_config(sub)
    assert cfg.cache is True
    assert cfg.rule.minimum_group_size == 1
    assert _names(cfg.rule) == [OTHER_SYSTEM_GROUP_NAME, "ui", "vendor"]


def test_load_yaml_rule_section_not_mapping(tmp_path: Path) -> None:
    (tmp_path / "grouped_imports.yml").write_text("grouped_imports: [1, 2]\n", encoding="utf-8")
    with pytest.raises(ConfigurationError):
        load_config(tmp_path)


def test_load_invalid_toml(tmp_path: Path) -> None:
    path = tmp_path / "custom.toml"
    path.write_text("[lint\n", encoding="utf-8")
    with pytest.raises(ConfigurationError):
        load_config(tmp_path, path)
