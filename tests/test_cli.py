from __future__ import annotations

import json
from pathlib import Path

import pytest

import grouped_imports_cli as cli
from grouped_imports.config import LintConfig
from grouped_imports.errors import ImportExtractionError

BAD = "import UIKit\nimport GoogleMaps\nimport Foundation\n\nclass App {}\n"
GOOD = "import UIKit\nimport Foundation\n\nimport GoogleMaps\n\nclass App {}\n"


def _project(tmp_path: Path, name: str = "App.swift", content: str = BAD) -> Path:
    src = tmp_path / "Sources"
    src.mkdir(exist_ok=True)
    path = src / name
    path.write_text(content, encoding="utf-8")
    return path


def test_warnings_do_not_fail(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    _project(tmp_path)
    monkeypatch.chdir(tmp_path)
    assert cli.main([str(tmp_path), "--quiet", "--no-cache"]) == 0
    assert cli.main([str(tmp_path), "--quiet", "--no-cache", "--strict"]) == 1


def test_error_severity_fails(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    _project(tmp_path)
    (tmp_path / "grouped_imports.toml").write_text(
        '[grouped_imports]\nseverity = "error"\n', encoding="utf-8"
    )
    monkeypatch.chdir(tmp_path)
    assert cli.main([str(tmp_path), "--quiet", "--no-cache"]) == 1


def test_fix_rewrites_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = _project(tmp_path)
    monkeypatch.chdir(tmp_path)
    assert cli.main([str(tmp_path), "--fix", "--quiet", "--no-cache", "--strict"]) == 0
    assert path.read_text(encoding="utf-8") == GOOD


def test_fix_without_overwrite(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = _project(tmp_path)
    (tmp_path / "grouped_imports.toml").write_text(
        "[lint]\nfix_overwrite = false\n", encoding="utf-8"
    )
    monkeypatch.chdir(tmp_path)
    cli.main([str(tmp_path), "--fix", "--quiet", "--no-cache"])
    assert path.read_text(encoding="utf-8") == BAD
    assert path.with_name("App.swift.fixed").read_text(encoding="utf-8") == GOOD


def test_configuration_error_exit_code(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    _project(tmp_path)
    (tmp_path / "grouped_imports.yaml").write_text("grouped_imports: 5\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    assert cli.main([str(tmp_path), "--quiet"]) == 2


def test_json_output(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    path = _project(tmp_path)
    monkeypatch.chdir(tmp_path)
    cli.main([str(tmp_path), "--no-cache", "--format", "json"])
    payload = json.loads(capsys.readouterr().out)
    assert payload["status"] == "violation"
    suffix = ": warning: Grouped Imports Violation: Imports should be separated into groups. (grouped_imports)"
    assert payload["issues"] == [f"{path}:2:1{suffix}", f"{path}:3:1{suffix}"]


def test_metrics_report(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    _project(tmp_path)
    monkeypatch.chdir(tmp_path)
    report = tmp_path / "metrics.json"
    cli.main([str(tmp_path), "--quiet", "--no-cache", "--report-json", str(report)])
    data = json.loads(report.read_text())
    assert data["files"] == 1
    assert data["rules"] == {"grouped_imports": 2}


def test_iter_swift_files_skips_excluded(tmp_path: Path) -> None:
    keep = _project(tmp_path)
    pods = tmp_path / "Pods" / "Lib"
    pods.mkdir(parents=True)
    (pods / "Lib.swift").write_text(BAD, encoding="utf-8")
    (tmp_path / "notes.txt").write_text("import UIKit", encoding="utf-8")
    assert cli.iter_swift_files([str(tmp_path)], ("Pods",)) == [keep]
    assert cli.iter_swift_files([str(keep), str(keep)]) == [keep]


def test_clean_files_are_cached(tmp_path: Path) -> None:
    _project(tmp_path, content=GOOD)
    _project(tmp_path, name="Bad.swift")
    first = cli.run_lint([str(tmp_path)], config=LintConfig(), project_root=tmp_path)
    assert first.metrics.cache_hits == 0
    assert len(first.violations) == 2
    second = cli.run_lint([str(tmp_path)], config=LintConfig(), project_root=tmp_path)
    assert second.metrics.cache_hits == 1
    assert len(second.violations) == 2


def test_failure_in_one_file_does_not_stop_others(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    broken = _project(tmp_path, name="Broken.swift")
    _project(tmp_path, name="Bad.swift")
    original = cli.GroupedImportsLinter.validate

    def validate(self: cli.GroupedImportsLinter, file_path: Path):
        if file_path == broken:
            raise ImportExtractionError("boom")
        return original(self, file_path)

    monkeypatch.setattr(cli.GroupedImportsLinter, "validate", validate)
    execution = cli.run_lint(
        [str(tmp_path)], config=LintConfig(cache=False), project_root=tmp_path
    )
    assert len(execution.violations) == 2
    assert execution.metrics.failures == 1


def test_linter_honours_suppression(tmp_path: Path) -> None:
    path = _project(
        tmp_path,
        content="import UIKit\nimport GoogleMaps\n"
        "import Foundation // swiftlint:disable:this grouped_imports\n",
    )
    linter = cli.GroupedImportsLinter(LintConfig(cache=False), project_root=tmp_path)
    assert linter.validate(path) == []


def test_linter_logs_rule_configuration(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    with caplog.at_level("DEBUG", logger="grouped_imports.cli"):
        cli.GroupedImportsLinter(LintConfig(cache=False), project_root=tmp_path)
    assert any(
        "grouped_imports: severity: warning, imports groups: [system modules]"
        in record.getMessage()
        for record in caplog.records
    )
