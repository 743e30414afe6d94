"""Rules command -- list every rule with its effective severity."""

from __future__ import annotations

from typing import Optional

import typer

from speclint.exceptions import SpeclintError
from speclint.output import error, get_output


def rules_command(
    config: Optional[str] = typer.Option(
        None, "--config", "-c", help="Config file (overrides .speclintrc)."
    ),
) -> None:
    """Show each rule's config key, description, and effective severity.

    Example::

        speclint rules
        speclint --json rules --config ci.speclintrc
    """
    from speclint.config import resolve_config
    from speclint.validation.rules import RULES

    try:
        lint_config = resolve_config(config)
    except SpeclintError as exc:
        error(str(exc))
        raise typer.Exit(code=exc.exit_code) from None

    rows = [
        [
            "operations",
            rule.key,
            getattr(lint_config.operations, rule.key).value,
            rule.description,
        ]
        for rule in RULES
    ]
    get_output().print_table(
        ["Module", "Rule", "Severity", "Description"], rows, title="Rules"
    )
