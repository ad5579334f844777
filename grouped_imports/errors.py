from __future__ import annotations


class ConfigurationError(ValueError):
    """Raised when rule or lint configuration has the wrong shape."""


class ImportExtractionError(RuntimeError):
    """Raised when a line classified as an import has no ``import`` token."""
