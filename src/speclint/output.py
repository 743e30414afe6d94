"""Terminal output for speclint reports and diagnostics.

Reports (the findings table, the rule listing, JSON documents) are the only
thing written to stdout, so ``speclint lint spec.yaml > findings.txt`` and
``speclint --json lint ... | jq`` see nothing else. The summary line and
every other diagnostic goes to stderr.

The format is chosen once per process by :func:`~speclint.app.main_callback`:
Rich tables when stdout is a terminal, tab-separated rows when it is piped,
JSON when ``--json`` is given. ``NO_COLOR``, ``TERM=dumb`` and ``--no-color``
all turn colour off.

Commands use the module-level helpers (:func:`error`, :func:`success`, ...)
which delegate to the installed :class:`OutputManager`.
"""

from __future__ import annotations

import json
import os
import sys
from enum import Enum
from typing import Any, Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table


class OutputFormat(str, Enum):
    """Report format. ``AUTO`` picks ``RICH`` on a colour terminal, else ``PLAIN``."""

    AUTO = "auto"
    JSON = "json"
    PLAIN = "plain"
    RICH = "rich"


# Rich styles for table cells that hold a severity name
SEVERITY_STYLES: dict[str, str] = {
    "error": "bold red",
    "warning": "yellow",
    "off": "dim",
}


class OutputManager:
    """Writes reports to stdout and diagnostics to stderr.

    Args:
        format: Report format; ``AUTO`` is resolved against the terminal.
        no_color: Disable colour and Rich markup.
        quiet: Drop success and suggestion messages. Warnings, errors
            and the report itself are always written.
        verbose: Show :meth:`debug` messages.
    """

    def __init__(
        self,
        format: OutputFormat = OutputFormat.AUTO,
        no_color: bool = False,
        quiet: bool = False,
        verbose: bool = False,
    ) -> None:
        self._no_color = no_color or _should_disable_color()
        self._quiet = quiet
        self._verbose = verbose

        if format == OutputFormat.AUTO:
            use_rich = _is_tty() and not self._no_color
            format = OutputFormat.RICH if use_rich else OutputFormat.PLAIN
        self._format = format

        self._stdout = Console(
            file=sys.stdout,
            no_color=self._no_color,
            force_terminal=(format == OutputFormat.RICH),
        )
        self._stderr = Console(file=sys.stderr, no_color=self._no_color, stderr=True)

    @property
    def format(self) -> OutputFormat:
        return self._format

    # --- reports (stdout) ---

    def print_data(self, text: str) -> None:
        print(text, file=sys.stdout, flush=True)

    def print_json(self, data: Any) -> None:
        """Write *data* as indented JSON regardless of the active format."""
        self.print_data(json.dumps(data, indent=2, ensure_ascii=False, default=str))

    def print_table(
        self,
        headers: list[str],
        rows: list[list[str]],
        title: Optional[str] = None,
    ) -> None:
        """Write rows as a table in the active format.

        Plain output is a header line followed by one tab-separated line per
        row; JSON output is a list of objects keyed by header. In Rich mode
        a column named ``Severity`` is coloured by value.
        """
        if self._format == OutputFormat.JSON:
            self.print_json([dict(zip(headers, row)) for row in rows])
            return

        if self._format == OutputFormat.PLAIN:
            for line in [headers, *rows]:
                self.print_data("\t".join(line))
            return

        severity_col = headers.index("Severity") if "Severity" in headers else None
        table = Table(title=title, header_style="bold cyan")
        for header in headers:
            table.add_column(header, overflow="fold")
        for row in rows:
            cells = [escape(cell) for cell in row]
            if severity_col is not None and row[severity_col] in SEVERITY_STYLES:
                style = SEVERITY_STYLES[row[severity_col]]
                cells[severity_col] = f"[{style}]{cells[severity_col]}[/]"
            table.add_row(*cells)
        self._stdout.print(table)

    # --- diagnostics (stderr) ---

    def _diagnostic(self, message: str, prefix: str = "", style: str = "") -> None:
        if self._no_color:
            print(f"{prefix}{message}", file=sys.stderr, flush=True)
            return
        if prefix:
            self._stderr.print(f"[{style}]{escape(prefix)}[/]{escape(message)}")
        else:
            self._stderr.print(f"[{style}]{escape(message)}[/]")

    def success(self, message: str) -> None:
        if not self._quiet:
            self._diagnostic(message, style="green")

    def suggest(self, message: str) -> None:
        """Hint at a follow-up command, e.g. after ``speclint init``."""
        if not self._quiet:
            self._diagnostic(message, prefix="→ ", style="dim")

    def warning(self, message: str) -> None:
        self._diagnostic(message, prefix="Warning: ", style="yellow")

    def error(self, message: str) -> None:
        self._diagnostic(message, prefix="Error: ", style="bold red")

    def debug(self, message: str) -> None:
        if self._verbose:
            self._diagnostic(message, prefix="[debug] ", style="dim")


def _is_tty() -> bool:
    return hasattr(sys.stdout, "isatty") and sys.stdout.isatty()


def _should_disable_color() -> bool:
    """True when ``NO_COLOR`` is set to anything or ``TERM`` is ``dumb``."""
    return "NO_COLOR" in os.environ or os.environ.get("TERM") == "dumb"


# --- global instance, installed by the root CLI callback ---

_output: Optional[OutputManager] = None


def get_output() -> OutputManager:
    """Return the installed :class:`OutputManager`, creating a default one."""
    global _output
    if _output is None:
        _output = OutputManager()
    return _output


def set_output(output: OutputManager) -> None:
    global _output
    _output = output


def reset_output() -> None:
    """Forget the installed manager; tests call this between runs."""
    global _output
    _output = None


def error(message: str) -> None:
    get_output().error(message)


def success(message: str) -> None:
    get_output().success(message)


def warning(message: str) -> None:
    get_output().warning(message)


def suggest(message: str) -> None:
    get_output().suggest(message)


def debug(message: str) -> None:
    get_output().debug(message)
