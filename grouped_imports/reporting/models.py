from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import List

from grouped_imports.metrics import MetricsCollector
from grouped_imports.models import Correction, Severity, StyleViolation


@dataclass
class LintReport:
    """Normalized lint result for downstream consumers."""

    status: str
    timestamp: datetime
    issues: List[str]
    metrics: dict[str, object]
    checked_files: List[str]
    errors: int = 0
    warnings: int = 0

    @property
    def passed(self) -> bool:
        return self.status == "clean"

    @property
    def issue_count(self) -> int:
        return len(self.issues)

    def summary(self) -> str:
        if self.passed:
            return "Grouped imports: no violations"
        suffix = "violation" if self.issue_count == 1 else "violations"
        return (
            f"Grouped imports: {self.issue_count} {suffix} "
            f"({self.errors} serious) in {len(self.checked_files)} files"
        )


@dataclass
class LintExecution:
    """Raw details of one lint or fix run."""

    metrics: MetricsCollector
    violations: List[StyleViolation]
    timestamp: datetime
    checked_files: List[Path]
    project_root: Path
    config_hash: str
    corrections: List[Correction] = field(default_factory=list)

    @property
    def fixed_count(self) -> int:
        return len({c.location.file for c in self.corrections})

    def has_errors(self, strict: bool = False) -> bool:
        if strict:
            return bool(self.violations)
        return any(v.severity is Severity.ERROR for v in self.violations)

    def to_report(self) -> LintReport:
        timestamp = self.timestamp
        if timestamp.tzinfo is None:
            timestamp = timestamp.replace(tzinfo=timezone.utc)
        checked: List[str] = []
        for path in self.checked_files:
            try:
                checked.append(str(path.relative_to(self.project_root)))
            except ValueError:
                checked.append(str(path))
        errors = sum(1 for v in self.violations if v.severity is Severity.ERROR)
        return LintReport(
            status="clean" if not self.violations else "violation",
            timestamp=timestamp,
            issues=sorted(v.describe() for v in self.violations),
            metrics=self.metrics.to_dict(),
            checked_files=sorted(checked),
            errors=errors,
            warnings=len(self.violations) - errors,
        )
