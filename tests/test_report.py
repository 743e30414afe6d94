"""Tests for speclint.report."""

from __future__ import annotations

import json

import pytest

from speclint.models import Finding, ValidationResult
from speclint.output import OutputFormat, OutputManager, set_output
from speclint.report import render_report, summarize


@pytest.fixture
def result() -> ValidationResult:
    return ValidationResult(
        errors=[Finding(path="paths./pets.put.consumes", message="needs consumes")],
        warnings=[Finding(path="paths./pets.get.summary", message="needs summary")],
    )


def _install(fmt: OutputFormat) -> None:
    # Created inside the test so the consoles bind to capsys' streams
    set_output(OutputManager(format=fmt, no_color=True))


class TestRenderReport:
    def test_json(self, capsys: pytest.CaptureFixture[str], result: ValidationResult) -> None:
        _install(OutputFormat.JSON)
        render_report(result)
        captured = capsys.readouterr()
        assert json.loads(captured.out) == {
            "errors": [{"path": "paths./pets.put.consumes", "message": "needs consumes"}],
            "warnings": [{"path": "paths./pets.get.summary", "message": "needs summary"}],
        }
        assert "1 error(s), 1 warning(s)" in captured.err

    def test_json_errors_only(self, capsys: pytest.CaptureFixture[str], result: ValidationResult) -> None:
        _install(OutputFormat.JSON)
        render_report(result, errors_only=True)
        captured = capsys.readouterr()
        assert json.loads(captured.out)["warnings"] == []
        assert "1 error(s), 0 warning(s)" in captured.err

    def test_plain_rows(self, capsys: pytest.CaptureFixture[str], result: ValidationResult) -> None:
        _install(OutputFormat.PLAIN)
        render_report(result)
        lines = capsys.readouterr().out.splitlines()
        assert lines == [
            "Severity\tPath\tMessage",
            "error\tpaths./pets.put.consumes\tneeds consumes",
            "warning\tpaths./pets.get.summary\tneeds summary",
        ]

    def test_plain_without_findings(self, capsys: pytest.CaptureFixture[str]) -> None:
        _install(OutputFormat.PLAIN)
        render_report(ValidationResult())
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "No problems found." in captured.err

    def test_warnings_only_summary_is_a_warning(self, capsys: pytest.CaptureFixture[str]) -> None:
        _install(OutputFormat.PLAIN)
        render_report(
            ValidationResult(warnings=[Finding(path="paths./a.get.summary", message="m")])
        )
        assert "Warning: 0 error(s), 1 warning(s)" in capsys.readouterr().err


class TestSummarize:
    def test_counts(self) -> None:
        assert summarize(2, 3) == "2 error(s), 3 warning(s)"

    def test_clean(self) -> None:
        assert summarize(0, 0) == "No problems found."
