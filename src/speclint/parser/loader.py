"""Read an API description from a URL, a local file, or stdin.

:func:`load_spec` returns the document as a plain ``dict`` exactly as parsed;
the validators treat it as read-only. JSON is tried first since it is the
stricter grammar, then YAML. A file extension or HTTP ``Content-Type`` that
names one format skips the guess.

:func:`detect_spec_version` rejects documents that are not Swagger 2.x or
OpenAPI 3.x before any rule runs.
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any

import httpx
import yaml

from speclint.exceptions import SpecParseError

logger = logging.getLogger(__name__)

STDIN_SOURCE = "-"
FETCH_TIMEOUT = 30.0

_SUFFIX_HINTS = {".json": "json", ".yaml": "yaml", ".yml": "yaml"}


def load_spec(source: str) -> dict[str, Any]:
    """Load and parse the API description named by *source*.

    Args:
        source: An ``http(s)://`` URL, a file path, or ``-`` for stdin.

    Returns:
        The top-level mapping of the document.

    Raises:
        SpecParseError: If the source cannot be read, does not parse as
            JSON or YAML, or its top level is not a mapping.

    Example::

        raw = load_spec("petstore.yaml")
        raw["paths"]["/pets"]["get"]["operationId"]
    """
    if source == STDIN_SOURCE:
        content, hint = _read_stdin()
    elif source.startswith(("http://", "https://")):
        content, hint = _fetch(source)
    else:
        content, hint = _read_file(Path(source))
    logger.debug(
        "Read %d characters from %s (format hint: %s)", len(content), source, hint or "none"
    )
    return _parse_content(content, hint=hint)


def _read_stdin() -> tuple[str, str]:
    try:
        content = sys.stdin.read()
    except OSError as exc:
        raise SpecParseError(f"Failed to read from stdin: {exc}") from exc
    if not content.strip():
        raise SpecParseError("No input received from stdin")
    return content, ""


def _fetch(url: str) -> tuple[str, str]:
    try:
        response = httpx.get(url, timeout=FETCH_TIMEOUT, follow_redirects=True)
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        raise SpecParseError(
            f"HTTP {exc.response.status_code} fetching spec from {url}"
        ) from exc
    except httpx.RequestError as exc:
        raise SpecParseError(f"Failed to fetch spec from {url}: {exc}") from exc

    content_type = response.headers.get("content-type", "")
    if "json" in content_type:
        return response.text, "json"
    if "yaml" in content_type or "yml" in content_type:
        return response.text, "yaml"
    return response.text, ""


def _read_file(path: Path) -> tuple[str, str]:
    if not path.is_file():
        raise SpecParseError(f"Spec file not found: {path}")
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise SpecParseError(f"Failed to read spec file {path}: {exc}") from exc
    if not content.strip():
        raise SpecParseError(f"Spec file is empty: {path}")
    return content, _SUFFIX_HINTS.get(path.suffix.lower(), "")


def _parse_content(content: str, hint: str = "") -> dict[str, Any]:
    """Parse *content* as JSON, falling back to YAML.

    With ``hint="json"`` a JSON syntax error is final; with ``hint="yaml"``
    JSON is not attempted.

    Raises:
        SpecParseError: If neither parser accepts the content or the
            top level is not a mapping.
    """
    json_error = None
    if hint != "yaml":
        try:
            return _require_mapping(json.loads(content))
        except json.JSONDecodeError as exc:
            if hint == "json":
                raise SpecParseError(f"Invalid JSON: {exc}") from exc
            json_error = exc

    try:
        parsed = yaml.safe_load(content)
    except yaml.YAMLError as exc:
        lines = ["Failed to parse spec as JSON or YAML"]
        if json_error is not None:
            lines.append(f"  JSON error: {json_error}")
        lines.append(f"  YAML error: {exc}")
        raise SpecParseError("\n".join(lines)) from exc
    return _require_mapping(parsed)


def _require_mapping(parsed: Any) -> dict[str, Any]:
    if isinstance(parsed, dict):
        return parsed
    kind = "empty document" if parsed is None else type(parsed).__name__
    raise SpecParseError(f"Spec must be a JSON/YAML object (got {kind})")


def detect_spec_version(spec: dict[str, Any]) -> str:
    """Return ``"swagger <version>"`` or ``"openapi <version>"``.

    The ``operations`` rules are written against Swagger 2.0, where
    ``consumes`` and ``produces`` live, but OpenAPI 3.x documents are
    accepted so the format-independent rules still apply.

    Raises:
        SpecParseError: If neither field is present, or the declared
            version is not 2.x (Swagger) or 3.x (OpenAPI).
    """
    for field, major, label in (("swagger", "2.", "Swagger"), ("openapi", "3.", "OpenAPI")):
        if field in spec:
            version = str(spec[field])
            if not version.startswith(major):
                raise SpecParseError(f"Unsupported {label} version: {version}")
            return f"{field} {version}"
    raise SpecParseError("Missing 'swagger' or 'openapi' field. Is this an API description?")
