"""Lint command -- validate an API description and report findings.

Implements the ``speclint lint`` top-level command: it resolves the effective
configuration, loads the document (URL, local file, or stdin), runs every
registered validator, and renders the report. The exit status tells CI
whether any error-severity finding was reported.
"""

from __future__ import annotations

from typing import Optional

import typer

from speclint.exceptions import SpeclintError
from speclint.exit_codes import EXIT_LINT_ERRORS
from speclint.output import debug, error


def lint_command(
    source: str = typer.Argument(
        ..., help="API description URL or file path (use '-' for stdin)."
    ),
    config: Optional[str] = typer.Option(
        None, "--config", "-c", help="Config file (overrides .speclintrc)."
    ),
    errors_only: bool = typer.Option(
        False, "--errors-only", "-e", help="Only report error-severity findings."
    ),
) -> None:
    """Validate an API description against the configured rules.

    Args:
        source: URL, local file path, or ``-`` for stdin.
        config: Explicit config file path. When omitted the precedence chain
            in :func:`~speclint.config.resolve_config` applies.
        errors_only: Drop warnings from the report.

    Raises:
        typer.Exit: With the error's exit code when the config or document
            cannot be loaded, or :data:`~speclint.exit_codes.EXIT_LINT_ERRORS`
            when error-severity findings were reported.

    Example::

        speclint lint swagger.yaml
        speclint --json lint https://api.example.com/swagger.json
        cat swagger.json | speclint lint - --errors-only
    """
    from speclint.config import resolve_config
    from speclint.parser import detect_spec_version, load_spec
    from speclint.report import render_report
    from speclint.validation import lint

    try:
        lint_config = resolve_config(config)
        raw = load_spec(source)
        version = detect_spec_version(raw)
    except SpeclintError as exc:
        error(str(exc))
        raise typer.Exit(code=exc.exit_code) from None

    debug(f"Validating {source} ({version})")
    result = lint(raw, lint_config)
    render_report(result, errors_only=errors_only)

    if result.has_errors:
        raise typer.Exit(code=EXIT_LINT_ERRORS)
