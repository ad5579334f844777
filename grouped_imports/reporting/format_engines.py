from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Mapping, Protocol

import yaml
from colorama import Fore, Style

from .models import LintReport

logger = logging.getLogger(__name__)


class FormatEngine(Protocol):
    format_name: str
    extension: str

    def render(self, report: LintReport) -> str:
        ...


def _payload(report: LintReport) -> dict[str, object]:
    return {
        "status": report.status,
        "summary": report.summary(),
        "timestamp": report.timestamp.isoformat(),
        "issues": report.issues,
        "metrics": report.metrics,
        "checked_files": report.checked_files,
    }


@dataclass
class TextFormatEngine:
    format_name: str = "text"
    extension: str = "txt"
    color: bool = False

    def _paint(self, line: str) -> str:
        if not self.color:
            return line
        for severity, colour in ((": error:", Fore.RED), (": warning:", Fore.YELLOW)):
            if severity in line:
                return line.replace(severity, f"{colour}{severity}{Style.RESET_ALL}", 1)
        return line

    def render(self, report: LintReport) -> str:
        lines = [self._paint(issue) for issue in report.issues]
        lines.append(report.summary())
        return "\n".join(lines)


@dataclass
class JSONFormatEngine:
    format_name: str = "json"
    extension: str = "json"

    def render(self, report: LintReport) -> str:
        return json.dumps(_payload(report), indent=2, sort_keys=True)


@dataclass
class YAMLFormatEngine:
    format_name: str = "yaml"
    extension: str = "yaml"

    def render(self, report: LintReport) -> str:
        return yaml.safe_dump(_payload(report), sort_keys=True)


@dataclass
class MarkdownFormatEngine:
    format_name: str = "markdown"
    extension: str = "md"

    def render(self, report: LintReport) -> str:
        status_icon = "✅" if report.passed else "❌"
        lines = [
            f"# Grouped Imports Report ({report.timestamp.isoformat()})",
            "",
            f"* **Status:** {status_icon} {'Clean' if report.passed else 'Violations found'}",
            f"* **Summary:** {report.summary()}",
            f"* **Files Checked:** {len(report.checked_files)}",
            f"* **Issues:** {report.issue_count}",
            f"* **Runtime:** {report.metrics.get('runtime', 0)}s",
            "",
        ]
        if report.issues:
            lines.append("## Findings")
            for entry in report.issues:
                lines.append(f"- `{entry}`")
        else:
            lines.append("Every import section is grouped.")
        return "\n".join(lines)


def default_engines(color: bool = False) -> dict[str, FormatEngine]:
    engines: list[FormatEngine] = [
        TextFormatEngine(color=color),
        JSONFormatEngine(),
        YAMLFormatEngine(),
        MarkdownFormatEngine(),
    ]
    return {engine.format_name: engine for engine in engines}


def resolve_format(
    requested: str | None,
    engines: Mapping[str, FormatEngine],
    default: str = "text",
) -> str:
    """Return the engine name to use, falling back to ``default``."""
    fmt = (requested or default).lower()
    if fmt in engines:
        return fmt
    logger.warning("Unsupported report format '%s'; defaulting to '%s'.", requested, default)
    return default
