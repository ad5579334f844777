"""Library-friendly exports for :mod:`grouped_imports`."""
from __future__ import annotations

from grouped_imports.config import (
    GroupedImportsConfiguration,
    LintConfig,
    ModuleGroup,
    load_config,
)
from grouped_imports.errors import ConfigurationError, ImportExtractionError
from grouped_imports.models import Correction, Location, Severity, StyleViolation
from grouped_imports.rule import GroupedImportsRule
from grouped_imports.source import Line, SourceFile

__all__ = [
    "ConfigurationError",
    "Correction",
    "GroupedImportsConfiguration",
    "GroupedImportsRule",
    "ImportExtractionError",
    "Line",
    "LintConfig",
    "Location",
    "ModuleGroup",
    "Severity",
    "SourceFile",
    "StyleViolation",
    "load_config",
]
