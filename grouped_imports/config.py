from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

import yaml

from grouped_imports.errors import ConfigurationError
from grouped_imports.models import Severity
from grouped_imports.system_modules import SYSTEM_MODULES

logger = logging.getLogger(__name__)

SYSTEM_GROUP_NAME = "system modules"
OTHER_SYSTEM_GROUP_NAME = "other system modules"
DEFAULT_MINIMUM_GROUP_SIZE = 2
CONFIG_NAMES = ("grouped_imports.toml", "grouped_imports.yaml", "grouped_imports.yml")
_THRESHOLD_KEYS = ("all_groups_larger_than", "minimum_group_size")


@dataclass(frozen=True)
class ModuleGroup:
    name: str
    modules: frozenset[str]

    def claims(self, module: str) -> bool:
        return module in self.modules


_DEFAULT_GROUPS = (ModuleGroup(SYSTEM_GROUP_NAME, SYSTEM_MODULES),)


def _threshold(value: object) -> int | None:
    # bool is an int subclass; `true` is not a size.
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return None


def _parse_groups(raw: object) -> list[ModuleGroup]:
    if not isinstance(raw, list):
        if raw is not None:
            logger.debug("ignoring non-list 'groups' value: %r", raw)
        return []
    groups: list[ModuleGroup] = []
    for entry in raw:
        if not isinstance(entry, Mapping) or not entry:
            logger.debug("ignoring malformed group entry: %r", entry)
            continue
        name = next(iter(entry))
        modules = entry[name]
        if not isinstance(modules, list) or not all(isinstance(m, str) for m in modules):
            logger.debug("ignoring group %r: modules must be a list of strings", name)
            continue
        groups.append(ModuleGroup(str(name), frozenset(modules)))
    return groups


@dataclass(frozen=True)
class GroupedImportsConfiguration:
    """Immutable settings for the grouped imports rule.

    Built once per rule activation and shared read-only between files.
    """

    severity: Severity = Severity.WARNING
    module_groups: tuple[ModuleGroup, ...] = _DEFAULT_GROUPS
    minimum_group_size: int = DEFAULT_MINIMUM_GROUP_SIZE

    @classmethod
    def from_mapping(cls, data: object) -> "GroupedImportsConfiguration":
        if not isinstance(data, Mapping):
            raise ConfigurationError(
                f"grouped_imports configuration must be a mapping, got {type(data).__name__}"
            )
        severity = Severity.WARNING
        if "severity" in data:
            parsed = Severity.parse(data["severity"])
            if parsed is None:
                logger.debug("unknown severity %r; keeping %s", data["severity"], severity.value)
            else:
                severity = parsed

        minimum = DEFAULT_MINIMUM_GROUP_SIZE
        conditions = data.get("grouping_conditions")
        sources = [conditions] if isinstance(conditions, Mapping) else []
        sources.append(data)
        for source in sources:
            found = [_threshold(source.get(key)) for key in _THRESHOLD_KEYS if key in source]
            valid = [value for value in found if value is not None]
            if valid:
                minimum = valid[0]
                break
            if found:
                logger.debug("ignoring non-integer group size threshold in %r", source)

        groups = _parse_groups(data.get("groups"))
        if not groups:
            return cls(severity=severity, minimum_group_size=minimum)

        claimed: set[str] = set()
        for group in groups:
            claimed.update(group.modules)
        remaining = SYSTEM_MODULES - claimed
        if remaining:
            groups.insert(0, ModuleGroup(OTHER_SYSTEM_GROUP_NAME, frozenset(remaining)))
        return cls(
            severity=severity,
            module_groups=tuple(groups),
            minimum_group_size=minimum,
        )

    @property
    def console_description(self) -> str:
        names = ", ".join(group.name for group in self.module_groups)
        return (
            f"severity: {self.severity.value}, imports groups: [{names}], "
            f"minimum group size: {self.minimum_group_size}"
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "severity": self.severity.value,
            "groups": [{g.name: sorted(g.modules)} for g in self.module_groups],
            "minimum_group_size": self.minimum_group_size,
        }


@dataclass(frozen=True)
class LintConfig:
    cache: bool = True
    fix_overwrite: bool = True
    strict: bool = False
    report_format: str = "text"
    exclude: tuple[str, ...] = (".build", "Pods", "Carthage", "DerivedData", ".git")
    rule: GroupedImportsConfiguration = field(default_factory=GroupedImportsConfiguration)
    source: Path | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "cache": self.cache,
            "fix_overwrite": self.fix_overwrite,
            "strict": self.strict,
            "report_format": self.report_format,
            "exclude": list(self.exclude),
            "rule": self.rule.to_dict(),
        }


_DEFAULT = LintConfig()


def _load_file(path: Path) -> object:
    text = path.read_text(encoding="utf-8")
    if path.suffix == ".toml":
        return tomllib.loads(text)
    return yaml.safe_load(text) or {}


def config_from_mapping(data: object, source: Path | None = None) -> LintConfig:
    if not isinstance(data, Mapping):
        raise ConfigurationError(f"{source or 'configuration'}: top level must be a mapping")
    lint = data.get("lint", {})
    if not isinstance(lint, Mapping):
        logger.debug("ignoring non-mapping 'lint' section in %s", source)
        lint = {}
    rule = (
        GroupedImportsConfiguration.from_mapping(data["grouped_imports"])
        if "grouped_imports" in data
        else GroupedImportsConfiguration()
    )
    exclude = lint.get("exclude", _DEFAULT.exclude)
    if not isinstance(exclude, (list, tuple)):
        exclude = _DEFAULT.exclude
    return LintConfig(
        cache=bool(lint.get("cache", _DEFAULT.cache)),
        fix_overwrite=bool(lint.get("fix_overwrite", _DEFAULT.fix_overwrite)),
        strict=bool(lint.get("strict", _DEFAULT.strict)),
        report_format=str(lint.get("report_format", _DEFAULT.report_format)),
        exclude=tuple(str(name) for name in exclude),
        rule=rule,
        source=source,
    )


def find_config(start: Path) -> Path | None:
    for folder in [start, *start.parents]:
        for name in CONFIG_NAMES:
            cfg_path = folder / name
            if cfg_path.exists():
                return cfg_path
    return None


def load_config(start: Path | None = None, path: Path | None = None) -> LintConfig:
    """Load ``path`` or the nearest config file above ``start``."""
    if path is None:
        path = find_config((start or Path.cwd()).resolve())
    if path is None:
        return _DEFAULT
    try:
        data = _load_file(path)
    except (tomllib.TOMLDecodeError, yaml.YAMLError) as exc:
        raise ConfigurationError(f"{path}: {exc}") from exc
    logger.debug("loaded configuration from %s", path)
    return config_from_mapping(data, source=path)
