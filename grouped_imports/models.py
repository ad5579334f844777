from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Severity(str, Enum):
    WARNING = "warning"
    ERROR = "error"

    @classmethod
    def parse(cls, value: object) -> "Severity | None":
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                return None
        return None


@dataclass(frozen=True)
class RuleDescription:
    identifier: str
    name: str
    description: str
    kind: str = "style"
    non_triggering_examples: tuple[str, ...] = field(default=(), repr=False)
    triggering_examples: tuple[str, ...] = field(default=(), repr=False)
    corrections: dict[str, str] = field(default_factory=dict, repr=False, hash=False)


@dataclass(frozen=True)
class Location:
    """A position in a file. ``line`` and ``character`` are 1-based."""

    file: str | None
    line: int
    character: int
    offset: int

    def __str__(self) -> str:
        return f"{self.file or '<nopath>'}:{self.line}:{self.character}"


@dataclass(frozen=True)
class StyleViolation:
    rule_description: RuleDescription
    severity: Severity
    location: Location

    @property
    def rule_id(self) -> str:
        return self.rule_description.identifier

    def describe(self) -> str:
        return (
            f"{self.location}: {self.severity.value}: "
            f"{self.rule_description.name} Violation: "
            f"{self.rule_description.description} ({self.rule_id})"
        )


@dataclass(frozen=True)
class Correction:
    rule_description: RuleDescription
    location: Location

    def describe(self) -> str:
        return f"{self.location} Corrected {self.rule_description.name}"
