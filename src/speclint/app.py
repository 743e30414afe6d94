"""The ``speclint`` command line.

Commands:

* ``speclint lint SOURCE`` -- validate an API description; exits with
  :data:`~speclint.exit_codes.EXIT_LINT_ERRORS` when any error-severity
  finding is reported.
* ``speclint init`` -- write the default ``.speclintrc``.
* ``speclint rules`` -- list rules with their effective severity.

Global flags (``--json``, ``--plain``, ``--no-color``, ``--quiet``,
``--verbose``) go before the command name and are applied by
:func:`main_callback`.
"""

from __future__ import annotations

import logging
import sys
import traceback
from datetime import datetime

import typer

from speclint import __version__
from speclint.commands.init import init_command
from speclint.commands.lint import lint_command
from speclint.commands.rules import rules_command
from speclint.exit_codes import EXIT_GENERIC_FAILURE
from speclint.output import OutputFormat, OutputManager, error, set_output

app = typer.Typer(
    name="speclint",
    help="Check Swagger/OpenAPI operations against API design conventions.",
    no_args_is_help=True,
    add_completion=False,
    rich_markup_mode="rich",
)

app.command("lint")(lint_command)
app.command("init")(init_command)
app.command("rules")(rules_command)

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"speclint {__version__}")
        raise typer.Exit()


def _select_format(json_output: bool, plain_output: bool) -> OutputFormat:
    if json_output:
        return OutputFormat.JSON
    if plain_output:
        return OutputFormat.PLAIN
    return OutputFormat.AUTO


def _configure_logging(verbose: bool) -> None:
    """Send DEBUG records to stderr under ``--verbose``.

    Without it no handler is installed and Python's last-resort handler
    prints WARNING records and above.
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, stream=sys.stderr, format=LOG_FORMAT, force=True
        )


@app.callback()
def main_callback(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    json_output: bool = typer.Option(False, "--json", help="Report findings as JSON."),
    plain_output: bool = typer.Option(
        False, "--plain", help="Report findings as tab-separated rows."
    ),
    no_color: bool = typer.Option(False, "--no-color", help="Disable color output."),
    quiet: bool = typer.Option(
        False, "--quiet", "-q", help="Only print the report, warnings and errors."
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Log which config and operations are used."
    ),
) -> None:
    """Check Swagger/OpenAPI operations against API design conventions."""
    set_output(
        OutputManager(
            format=_select_format(json_output, plain_output),
            no_color=no_color,
            quiet=quiet,
            verbose=verbose,
        )
    )
    _configure_logging(verbose)


def _write_crash_log() -> str:
    """Save the active traceback under the data directory and return its path."""
    from speclint.config import get_data_dir

    logs_dir = get_data_dir() / "logs"
    logs_dir.mkdir(parents=True, exist_ok=True)
    log_path = logs_dir / f"crash-{datetime.now():%Y%m%d-%H%M%S}.log"
    log_path.write_text(traceback.format_exc(), encoding="utf-8")
    return str(log_path)


def main() -> None:
    """Console-script entry point.

    Commands report their own :class:`~speclint.exceptions.SpeclintError`
    failures; anything that escapes is an internal error, saved to a crash
    log so it can be attached to a bug report.
    """
    try:
        app()
    except KeyboardInterrupt:
        sys.stderr.write("\nCancelled.\n")
        sys.exit(130)
    except Exception:
        error(f"Internal error. Traceback saved to {_write_crash_log()}")
        sys.exit(EXIT_GENERIC_FAILURE)
