"""Render a :class:`~speclint.models.ValidationResult` for humans or machines.

The findings go to stdout through the global
:class:`~speclint.output.OutputManager`:

* **JSON** -- ``{"errors": [...], "warnings": [...]}``, each finding a
  ``{"path", "message"}`` object.
* **Plain / Rich** -- one row per finding with severity, locator path, and
  message; errors first, then warnings.

A one-line summary is written to stderr.
"""

from __future__ import annotations

from speclint.models import Finding, Severity, ValidationResult
from speclint.output import OutputFormat, get_output


def render_report(result: ValidationResult, errors_only: bool = False) -> None:
    """Write *result* to stdout in the active output format.

    Args:
        result: Findings to report.
        errors_only: Leave warnings out of the report and the summary.
    """
    output = get_output()
    warnings = [] if errors_only else result.warnings

    if output.format == OutputFormat.JSON:
        output.print_json(ValidationResult(errors=result.errors, warnings=warnings).as_dict())
    elif result.errors or warnings:
        rows = _rows(Severity.ERROR, result.errors) + _rows(Severity.WARNING, warnings)
        output.print_table(["Severity", "Path", "Message"], rows, title="Findings")

    summary = summarize(len(result.errors), len(warnings))
    if result.errors:
        output.error(summary)
    elif warnings:
        output.warning(summary)
    else:
        output.success(summary)


def summarize(error_count: int, warning_count: int) -> str:
    if not error_count and not warning_count:
        return "No problems found."
    return f"{error_count} error(s), {warning_count} warning(s)"


def _rows(severity: Severity, findings: list[Finding]) -> list[list[str]]:
    return [[severity.value, finding.path, finding.message] for finding in findings]
