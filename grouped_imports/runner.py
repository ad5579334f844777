from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from multiprocessing import cpu_count
from pathlib import Path
from typing import TYPE_CHECKING, Sequence

from grouped_imports.errors import ImportExtractionError
from grouped_imports.models import StyleViolation

if TYPE_CHECKING:
    from grouped_imports_cli import GroupedImportsLinter

logger = logging.getLogger(__name__)

DEFAULT_WORKERS = max(cpu_count() - 1, 1)

FileErrors = (ImportExtractionError, OSError, UnicodeDecodeError)


def parallel_validate(
    linter: "GroupedImportsLinter",
    files: Sequence[Path],
    max_workers: int | None = None,
) -> dict[Path, list[StyleViolation]]:
    """Validate files in parallel using threads.

    A file whose analysis fails is logged and left out of the result.
    """
    workers = max_workers if max_workers is not None else DEFAULT_WORKERS
    results: dict[Path, list[StyleViolation]] = {}
    with ThreadPoolExecutor(max_workers=workers) as exe:
        futures = {exe.submit(linter.validate, f): f for f in files}
        for fut in as_completed(futures):
            path = futures[fut]
            try:
                results[path] = fut.result()
            except FileErrors:
                logger.exception("failed to analyse %s", path)
                linter.metrics.file_failed()
    return results
