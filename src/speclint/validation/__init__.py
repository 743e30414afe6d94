"""Semantic validators for API descriptions.

Every validator module shares one contract: it takes the parsed document and
its own section of :class:`~speclint.models.LintConfig` and returns a
:class:`~speclint.models.ValidationResult`.  :func:`lint` runs every
registered module and concatenates their findings in registration order.

Typical usage::

    from speclint.models import LintConfig
    from speclint.validation import lint

    result = lint(raw, LintConfig())
    if result.has_errors:
        ...

Sub-modules:

* :mod:`~speclint.validation.engine` -- the ``operations`` result aggregator.
* :mod:`~speclint.validation.rules` -- the seven ``operations`` rules.
* :mod:`~speclint.validation.presence` -- tri-state field presence helper.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, Optional

from speclint.models import LintConfig, ValidationResult
from speclint.validation.engine import validate

Validator = Callable[[Mapping[str, Any], Any], ValidationResult]

# Config section name -> validator; new rule modules register here
VALIDATORS: dict[str, Validator] = {
    "operations": validate,
}


def lint(
    document: Mapping[str, Any], config: Optional[LintConfig] = None
) -> ValidationResult:
    """Run every registered validator over *document*.

    Args:
        document: The parsed API description.  Treated as read-only.
        config: Severity configuration.  Defaults to the shipped defaults.

    Returns:
        The merged findings of all validators.
    """
    if config is None:
        config = LintConfig()

    result = ValidationResult()
    for section, validator in VALIDATORS.items():
        result.extend(validator(document, getattr(config, section)))
    return result


__all__ = ["VALIDATORS", "lint", "validate"]
