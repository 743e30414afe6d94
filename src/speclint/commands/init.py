"""Init command -- write the default configuration file.

Implements the ``speclint init`` top-level command, which writes the shipped
default severities to ``./.speclintrc`` so a project can start tuning them.
"""

from __future__ import annotations

import typer

from speclint.exceptions import ConfigError
from speclint.output import error, success, suggest


def init_command(
    force: bool = typer.Option(
        False, "--force", "-f", help="Overwrite an existing .speclintrc."
    ),
) -> None:
    """Write the default ``.speclintrc`` to the current directory.

    Raises:
        typer.Exit: With the config error's exit code when the file already
            exists and ``--force`` was not given.
    """
    from speclint.config import write_default_config

    try:
        path = write_default_config(force=force)
    except ConfigError as exc:
        error(str(exc))
        raise typer.Exit(code=exc.exit_code) from None

    success(f"Wrote default configuration to {path}")
    suggest("Set a rule to \"off\" to disable it, then run: speclint lint <spec>")
