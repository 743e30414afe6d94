"""Where speclint's severities come from.

A config file is a JSON object shaped ``{"operations": {<rule key>: <severity>}}``
and is validated into a :class:`~speclint.models.LintConfig`. Rules a file
leaves out keep their shipped default, so a project only lists what it changes.

:func:`resolve_config` picks one file along the precedence chain documented in
:func:`resolve_config_path`; files are never merged with each other.
:func:`write_default_config` backs ``speclint init``.

User-level files follow the XDG Base Directory layout on Linux and BSD and
live under ``~/.speclint/`` elsewhere.
"""

from __future__ import annotations

import json
import logging
import os
import platform
import tempfile
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from speclint.exceptions import ConfigError
from speclint.models import LintConfig

logger = logging.getLogger(__name__)

_APP_NAME = "speclint"
_CONFIG_FILENAME = "config.json"
PROJECT_CONFIG_FILENAME = ".speclintrc"
CONFIG_ENV_VAR = "SPECLINT_CONFIG"

# XDG variable -> default location relative to $HOME
_XDG_DEFAULTS = {
    "XDG_CONFIG_HOME": Path(".config"),
    "XDG_DATA_HOME": Path(".local", "share"),
}


def _is_xdg_platform() -> bool:
    system = platform.system()
    return system == "Linux" or system.endswith("BSD")


def _user_dir(xdg_var: str) -> Path:
    if not _is_xdg_platform():
        return Path.home() / f".{_APP_NAME}"
    base = os.environ.get(xdg_var) or Path.home() / _XDG_DEFAULTS[xdg_var]
    return Path(base) / _APP_NAME


def get_config_dir() -> Path:
    """Directory holding the user-wide ``config.json``; not created here."""
    return _user_dir("XDG_CONFIG_HOME")


def get_data_dir() -> Path:
    """Directory for crash logs, created on first use.

    ``$XDG_DATA_HOME/speclint/`` on Linux/BSD, ``~/.speclint/`` elsewhere.
    """
    path = _user_dir("XDG_DATA_HOME")
    path.mkdir(parents=True, exist_ok=True)
    return path


def user_config_path() -> Path:
    return get_config_dir() / _CONFIG_FILENAME


def _atomic_write(path: Path, data: str) -> None:
    """Replace *path* with *data* so readers never see a half-written file.

    The temp file lives next to *path* so ``os.replace`` stays on one
    filesystem; it is removed if anything fails.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as tmp:
            tmp.write(data)
            tmp.flush()
            os.fsync(tmp.fileno())
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise


def load_config_file(path: Path) -> LintConfig:
    """Load and validate a config file.

    Args:
        path: Path to a JSON config file.

    Returns:
        The deserialised :class:`~speclint.models.LintConfig`; rules the file
        does not mention keep their default severity.

    Raises:
        ConfigError: If the file is missing, is not valid JSON, or holds a
            severity other than ``error``, ``warning`` or ``off``.
    """
    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise ConfigError(f"Invalid config at {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Invalid config at {path}: expected a JSON object")
    try:
        return LintConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid config at {path}: {exc}") from exc


def find_project_config(start: Optional[Path] = None) -> Optional[Path]:
    """Find the nearest ``.speclintrc`` in *start* or any parent directory.

    Args:
        start: Directory to begin the search from. Defaults to the cwd.

    Returns:
        The config file path, or ``None`` if no ancestor has one.
    """
    directory = (start or Path.cwd()).resolve()
    for candidate_dir in (directory, *directory.parents):
        candidate = candidate_dir / PROJECT_CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def resolve_config_path(cli_config: Optional[str] = None) -> Optional[Path]:
    """Return the config file that applies, or ``None`` for built-in defaults.

    Precedence (high to low):
        1. CLI flag (``--config PATH``)
        2. Environment variable (``SPECLINT_CONFIG``)
        3. Project config (nearest ``.speclintrc``)
        4. User config (``~/.config/speclint/config.json``)
        5. Defaults
    """
    if cli_config is not None:
        return Path(cli_config)

    env_config = os.environ.get(CONFIG_ENV_VAR)
    if env_config:
        return Path(env_config)

    project = find_project_config()
    if project is not None:
        return project

    user = user_config_path()
    if user.is_file():
        return user

    return None


def resolve_config(cli_config: Optional[str] = None) -> LintConfig:
    """Resolve the effective configuration along the precedence chain.

    Explicitly named files (CLI flag, environment variable) must exist.

    Raises:
        ConfigError: If the selected file cannot be loaded.
    """
    path = resolve_config_path(cli_config)
    if path is None:
        logger.debug("No config file found; using defaults")
        return LintConfig()
    logger.debug("Using config file %s", path)
    return load_config_file(path)


def write_default_config(path: Optional[Path] = None, force: bool = False) -> Path:
    """Write the shipped default configuration to *path*.

    Args:
        path: Destination. Defaults to ``./.speclintrc``.
        force: Overwrite an existing file.

    Returns:
        The path written.

    Raises:
        ConfigError: If the file exists and *force* is not set.
    """
    if path is None:
        path = Path.cwd() / PROJECT_CONFIG_FILENAME
    if path.exists() and not force:
        raise ConfigError(f"{path} already exists (use --force to overwrite)")
    data = LintConfig().model_dump(mode="json")
    _atomic_write(path, json.dumps(data, indent=2) + "\n")
    return path
