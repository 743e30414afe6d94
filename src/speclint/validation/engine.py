"""Run the ``operations`` rule set over a whole document.

:func:`validate` is the result aggregator: it drives one pass of
:func:`~speclint.parser.extractor.for_each_operation` over the document, runs
every enabled rule from :data:`~speclint.validation.rules.RULES` against each
operation in fixed order, and routes each finding into the bucket named by
that rule's configured :class:`~speclint.models.Severity`.

The function is pure: it reads the document, never mutates it, and keeps no
state between calls, so concurrent calls on different documents are safe.

Invalid severities
------------------
A :class:`~speclint.models.OperationsConfig` can only hold valid severities
(the config loader rejects anything else with
:class:`~speclint.exceptions.ConfigError`).  When a bare mapping is passed
instead, missing keys are treated as ``off`` and unknown values are coerced
to ``off`` with a logged warning; validation always completes.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from speclint.models import Finding, OperationsConfig, Severity, ValidationResult
from speclint.parser.extractor import for_each_operation
from speclint.validation.rules import RULES, Rule

logger = logging.getLogger(__name__)


def validate(
    document: Mapping[str, Any],
    config: OperationsConfig | Mapping[str, Any],
) -> ValidationResult:
    """Validate every operation in *document* against the ``operations`` rules.

    Args:
        document: The parsed API description.  Treated as read-only.
        config: Per-rule severities, either as a validated
            :class:`~speclint.models.OperationsConfig` or a plain mapping of
            rule key to ``"error"``/``"warning"``/``"off"``.

    Returns:
        A :class:`~speclint.models.ValidationResult` whose ``errors`` and
        ``warnings`` hold findings in traversal order (path, then method,
        then rule R1..R7).

    Example::

        result = validate(raw, OperationsConfig(no_summary="off"))
        for finding in result.errors:
            print(finding.path, finding.message)
    """
    severities = _severities(config)
    active: list[tuple[Rule, Severity]] = [
        (rule, severities[rule.key])
        for rule in RULES
        if severities[rule.key] is not Severity.OFF
    ]

    buckets: dict[Severity, list[Finding]] = {
        Severity.ERROR: [],
        Severity.WARNING: [],
    }

    def _visit(operation: Mapping[str, Any], path_key: str, method: str) -> None:
        for rule, severity in active:
            buckets[severity].extend(rule.check(operation, path_key, method, document))

    for_each_operation(document, _visit)

    logger.debug(
        "operations: %d error(s), %d warning(s)",
        len(buckets[Severity.ERROR]),
        len(buckets[Severity.WARNING]),
    )
    return ValidationResult(
        errors=buckets[Severity.ERROR],
        warnings=buckets[Severity.WARNING],
    )


def _severities(config: OperationsConfig | Mapping[str, Any]) -> dict[str, Severity]:
    """Return the severity of every rule key, coercing bare mappings."""
    if isinstance(config, OperationsConfig):
        return {rule.key: getattr(config, rule.key) for rule in RULES}

    severities: dict[str, Severity] = {}
    for rule in RULES:
        raw = config.get(rule.key, Severity.OFF)
        try:
            severities[rule.key] = Severity(raw)
        except ValueError:
            logger.warning(
                "Invalid severity %r for rule '%s'; treating as 'off'", raw, rule.key
            )
            severities[rule.key] = Severity.OFF
    return severities
