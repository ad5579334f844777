from .models import LintExecution, LintReport
from .format_engines import (
    JSONFormatEngine,
    MarkdownFormatEngine,
    TextFormatEngine,
    YAMLFormatEngine,
    default_engines,
    resolve_format,
)

__all__ = [
    "LintExecution",
    "LintReport",
    "JSONFormatEngine",
    "MarkdownFormatEngine",
    "TextFormatEngine",
    "YAMLFormatEngine",
    "default_engines",
    "resolve_format",
]
