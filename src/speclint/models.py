"""Canonical Pydantic models shared across all speclint modules.

This is the single source of truth for data shapes in the project. Every other
module imports from here rather than defining its own models. The models fall
into two groups:

**Configuration models** -- serialised as JSON in ``.speclintrc`` or the
user's config directory:
    :class:`Severity`, :class:`OperationsConfig`, and :class:`LintConfig`.

**Validation output models** -- produced by the rule engine and consumed by
the report formatter:
    :class:`HTTPMethod`, :class:`Finding`, and :class:`ValidationResult`.

All models use Pydantic v2. :class:`LintConfig` uses ``extra="allow"`` so that
sections belonging to other validator modules are preserved in
``model_extra`` instead of being rejected.
"""

from __future__ import annotations

import enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# --- Configuration ---


class Severity(str, enum.Enum):
    """Disposition assigned to a rule's findings by configuration.

    ``OFF`` suppresses the rule entirely: it is not evaluated at all.
    """

    ERROR = "error"
    WARNING = "warning"
    OFF = "off"


class OperationsConfig(BaseModel):
    """Severity for each rule of the ``operations`` validator.

    Defaults mirror the shipped ``.speclintrc`` so that a config file only
    needs to list the rules it wants to change. Unrecognised keys are ignored.

    Example::

        OperationsConfig(no_summary="off", parameter_order="error")
    """

    no_consumes_for_put_or_post: Severity = Field(
        default=Severity.ERROR,
        description="PUT and POST operations must declare a non-empty consumes",
    )
    get_op_has_consumes: Severity = Field(
        default=Severity.WARNING,
        description="GET operations should not declare consumes",
    )
    no_produces: Severity = Field(
        default=Severity.ERROR,
        description="Operations other than HEAD must declare a non-empty produces",
    )
    no_operation_id: Severity = Field(
        default=Severity.WARNING,
        description="Operations must have a non-empty operationId",
    )
    no_summary: Severity = Field(
        default=Severity.WARNING,
        description="Operations must have a non-empty summary",
    )
    no_array_responses: Severity = Field(
        default=Severity.ERROR,
        description="GET responses must not return a top-level array",
    )
    parameter_order: Severity = Field(
        default=Severity.WARNING,
        description="Required parameters must precede optional ones",
    )


class LintConfig(BaseModel):
    """Top-level configuration, one section per validator module.

    Loaded by :func:`~speclint.config.resolve_config`. Sections for validator
    modules that speclint does not ship are kept in ``model_extra``.
    """

    model_config = ConfigDict(extra="allow")

    operations: OperationsConfig = Field(default_factory=OperationsConfig)


# --- Validation Output ---


class HTTPMethod(str, enum.Enum):
    """HTTP methods whose Path Item keys are treated as operations.

    Any other key under a path (``parameters``, ``x-*`` extensions,
    ``trace``) is ignored by the operation extractor.
    """

    GET = "get"
    HEAD = "head"
    POST = "post"
    PUT = "put"
    PATCH = "patch"
    DELETE = "delete"
    OPTIONS = "options"


class Finding(BaseModel):
    """A single reported rule violation.

    ``path`` is a dotted/bracketed locator rooted at the document, e.g.
    ``paths./pets.get.responses.200.schema`` or
    ``paths./pets.post.parameters[2]``, so reporters can map the finding
    back to a source location.
    """

    model_config = ConfigDict(frozen=True)

    path: str
    message: str


class ValidationResult(BaseModel):
    """Findings of one validation run, bucketed by severity."""

    errors: list[Finding] = Field(default_factory=list)
    warnings: list[Finding] = Field(default_factory=list)

    def extend(self, other: ValidationResult) -> None:
        """Append *other*'s findings after this result's, preserving order."""
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    def as_dict(self) -> dict[str, Any]:
        """Return the plain ``{"errors": [...], "warnings": [...]}`` form."""
        return self.model_dump(mode="json")
