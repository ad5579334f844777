from __future__ import annotations

import argparse
import logging
import os
import sys
from datetime import datetime, timezone
from pathlib import Path

from colorama import just_fix_windows_console

from grouped_imports.cache import LintCache
from grouped_imports.comment_controls import is_disabled, parse_controls
from grouped_imports.config import LintConfig, load_config
from grouped_imports.errors import ConfigurationError
from grouped_imports.metrics import MetricsCollector
from grouped_imports.models import Correction, StyleViolation
from grouped_imports.reporting import LintExecution, default_engines, resolve_format
from grouped_imports.rule import GroupedImportsRule
from grouped_imports.runner import FileErrors, parallel_validate
from grouped_imports.source import SourceFile

logger = logging.getLogger("grouped_imports.cli")

SWIFT_SUFFIX = ".swift"


class GroupedImportsLinter:
    def __init__(
        self,
        config: LintConfig | None = None,
        project_root: Path | None = None,
        metrics: MetricsCollector | None = None,
    ) -> None:
        self.project_root = project_root or Path.cwd()
        self.config = config or load_config(self.project_root)
        self.metrics = metrics or MetricsCollector()
        self.rule = GroupedImportsRule(self.config.rule)
        self.cache = LintCache(self.project_root, self.config, enabled=self.config.cache)
        logger.debug("%s: %s", self.rule.identifier, self.config.rule.console_description)

    def validate(self, file_path: Path) -> list[StyleViolation]:
        source = SourceFile.from_path(file_path)
        controls = parse_controls([line.content for line in source.lines])
        violations = [
            v
            for v in self.rule.validate(source)
            if not is_disabled(controls, v.rule_id, v.location.line)
        ]
        self.metrics.record(self.rule.identifier, len(violations))
        self.metrics.file_scanned()
        return violations

    def apply_fix(self, file_path: Path) -> list[Correction]:
        source = SourceFile.from_path(file_path)
        controls = parse_controls([line.content for line in source.lines])
        out_path = (
            None
            if self.config.fix_overwrite
            else file_path.with_name(file_path.name + ".fixed")
        )
        corrections = self.rule.correct(source, controls=controls, output=out_path)
        self.metrics.corrected(len(corrections))
        if corrections:
            logger.info("%s: corrected %d imports", file_path, len(corrections))
        return corrections


def iter_swift_files(paths: list[str], exclude: tuple[str, ...] = ()) -> list[Path]:
    result: list[Path] = []
    skip = set(exclude)
    for p in paths:
        path = Path(p)
        if path.is_dir():
            for root, dirs, files in os.walk(path):
                dirs[:] = [d for d in dirs if d not in skip]
                for f in files:
                    if f.endswith(SWIFT_SUFFIX):
                        result.append(Path(root) / f)
        elif path.is_file() and path.suffix == SWIFT_SUFFIX:
            result.append(path)
        elif not path.exists():
            logger.warning("no such file or directory: %s", path)
    return sorted(set(result))


def run_lint(
    paths: list[str],
    *,
    fix: bool = False,
    max_workers: int | None = None,
    no_cache: bool = False,
    config: LintConfig | None = None,
    project_root: Path | None = None,
) -> LintExecution:
    metrics = MetricsCollector()
    linter = GroupedImportsLinter(config, project_root=project_root, metrics=metrics)
    if no_cache:
        linter.cache.enabled = False
    files = iter_swift_files(paths, linter.config.exclude)
    check_files: list[Path] = []
    for f in files:
        if linter.cache.is_valid(f):
            metrics.cache_hit()
        else:
            check_files.append(f)

    corrections: list[Correction] = []
    if fix:
        for fp in check_files:
            try:
                corrections.extend(linter.apply_fix(fp))
            except FileErrors:
                logger.exception("failed to correct %s; file left unchanged", fp)
                metrics.file_failed()

    results = parallel_validate(linter, check_files, max_workers)
    violations: list[StyleViolation] = []
    for fp in check_files:
        found = results.get(fp)
        if found is None:
            continue
        violations.extend(found)
        if found:
            linter.cache.discard(fp)
        else:
            linter.cache.update(fp)
    linter.cache.save()
    metrics.finish()
    return LintExecution(
        metrics=metrics,
        violations=violations,
        timestamp=datetime.now(timezone.utc),
        checked_files=check_files,
        project_root=linter.project_root,
        config_hash=linter.cache.cfg_hash,
        corrections=corrections,
    )


def _configure_logging(verbose: bool, quiet: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING if quiet else logging.INFO
    logging.basicConfig(level=level, format="[%(asctime)s] %(levelname)s - %(message)s")


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Check that Swift imports are grouped")
    ap.add_argument("paths", nargs="*", default=["."])
    ap.add_argument("--fix", action="store_true", help="Rewrite files in place")
    ap.add_argument("--quiet", action="store_true", help="Only print violations")
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    ap.add_argument("--strict", action="store_true", help="Fail on warnings too")
    ap.add_argument(
        "--max-workers", type=int, default=None, help="Worker count for parallel scan"
    )
    ap.add_argument("--no-cache", action="store_true", help="Disable cache")
    ap.add_argument("--config", type=Path, default=None, help="Configuration file")
    ap.add_argument(
        "--format", default=None, help="Output format (text|json|yaml|markdown)"
    )
    ap.add_argument(
        "--report-json", type=str, default=None, help="Write metrics JSON report"
    )
    args = ap.parse_args(argv)
    _configure_logging(args.verbose, args.quiet)

    try:
        config = load_config(Path.cwd(), args.config)
    except (ConfigurationError, OSError) as exc:
        print(f"configuration error: {exc}", file=sys.stderr)
        return 2

    execution = run_lint(
        args.paths,
        fix=args.fix,
        max_workers=args.max_workers,
        no_cache=args.no_cache,
        config=config,
    )
    report = execution.to_report()
    color = sys.stdout.isatty()
    if color:
        just_fix_windows_console()
    engines = default_engines(color=color)
    fmt = resolve_format(args.format or config.report_format, engines)
    if args.fix and not args.quiet:
        print(f"Fixed {execution.fixed_count} files")
    if not (args.quiet and report.passed):
        print(engines[fmt].render(report))
    if args.report_json:
        execution.metrics.write_json(Path(args.report_json))
    return 1 if execution.has_errors(strict=args.strict or config.strict) else 0


if __name__ == "__main__":
    sys.exit(main())
