"""Shared test fixtures for speclint.

Provides reusable fixtures for loading the spec fixture, creating isolated
config environments, managing output state, and running CLI commands.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from speclint.output import OutputFormat, OutputManager, reset_output, set_output


FIXTURES_DIR = Path(__file__).parent / "fixtures"


# ---------------------------------------------------------------------------
# Auto-reset global output state between tests
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _reset_output_between_tests() -> None:
    """Reset the global OutputManager after every test.

    The OutputManager caches references to sys.stdout/sys.stderr at
    creation time.  When Typer's CliRunner redirects those streams the
    cached references go stale once the test finishes.
    """
    yield
    reset_output()


# ---------------------------------------------------------------------------
# Spec fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def petstore_path() -> Path:
    return FIXTURES_DIR / "petstore_swagger.json"


@pytest.fixture
def petstore_raw(petstore_path: Path) -> dict[str, Any]:
    """Load the raw Swagger 2.0 petstore document."""
    with open(petstore_path) as f:
        return json.load(f)


# ---------------------------------------------------------------------------
# Config isolation fixture
# ---------------------------------------------------------------------------


@pytest.fixture
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Isolate configuration to a temporary directory.

    Points XDG_CONFIG_HOME and XDG_DATA_HOME at subdirectories of tmp_path,
    clears SPECLINT_CONFIG, and changes the working directory to a fresh
    ``project`` directory under tmp_path.

    Returns:
        The project directory (the new cwd).
    """
    monkeypatch.setattr("speclint.config._is_xdg_platform", lambda: True)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))
    monkeypatch.delenv("SPECLINT_CONFIG", raising=False)

    project = tmp_path / "project"
    project.mkdir()
    monkeypatch.chdir(project)
    return project


# ---------------------------------------------------------------------------
# Output fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def plain_output() -> OutputManager:
    """Install a colourless PLAIN-format OutputManager as the global output."""
    output = OutputManager(format=OutputFormat.PLAIN, no_color=True)
    set_output(output)
    yield output
    reset_output()


# ---------------------------------------------------------------------------
# CLI runner fixture
# ---------------------------------------------------------------------------


@pytest.fixture
def cli_runner():
    """Typer CLI test runner."""
    from typer.testing import CliRunner

    return CliRunner()
