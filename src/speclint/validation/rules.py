"""The ``operations`` rule set.

Each rule is a pure function of ``(operation, path_key, method, document)``
returning the findings for one operation.  Rules never see severities: the
engine in :mod:`speclint.validation.engine` skips rules configured ``off`` and
routes findings into the bucket of the configured severity.

================================  ==========================================
Config key                        Convention
================================  ==========================================
``no_consumes_for_put_or_post``   PUT and POST declare a non-empty consumes
``get_op_has_consumes``           GET does not declare consumes
``no_produces``                   every operation but HEAD declares produces
``no_operation_id``               every operation has an operationId
``no_summary``                    every operation has a summary
``no_array_responses``            GET responses are not top-level arrays
``parameter_order``               required parameters come first
================================  ==========================================

Finding locators are rooted at ``paths.<path_key>.<method>`` and use the
keys exactly as they appear in the document.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from speclint.models import Finding, HTTPMethod
from speclint.parser.resolver import resolve_ref
from speclint.validation.presence import Presence, presence

RuleCheck = Callable[[Mapping[str, Any], str, str, Mapping[str, Any]], list[Finding]]


@dataclass(frozen=True)
class Rule:
    """A named check plus the config key that sets its severity."""

    key: str
    description: str
    check: RuleCheck


def _locator(path_key: str, method: str, *fields: str) -> str:
    return ".".join(("paths", path_key, method, *fields))


def _declares(document: Mapping[str, Any], field: str) -> bool:
    """Whether the document root supplies a default for *field*.

    Any list or mapping counts, even an empty one; a scalar counts only
    when truthy, so ``consumes: ""`` or ``consumes: false`` is no default.
    """
    value = document.get(field)
    if isinstance(value, (Mapping, Sequence)) and not isinstance(value, (str, bytes)):
        return True
    return bool(value)


def check_consumes_for_put_or_post(
    operation: Mapping[str, Any],
    path_key: str,
    method: str,
    document: Mapping[str, Any],
) -> list[Finding]:
    if method not in (HTTPMethod.PUT.value, HTTPMethod.POST.value):
        return []
    if presence(operation.get("consumes")) is Presence.NON_EMPTY:
        return []
    if _declares(document, "consumes"):
        return []
    return [
        Finding(
            path=_locator(path_key, method, "consumes"),
            message="PUT and POST operations must have a non-empty `consumes` field.",
        )
    ]


def check_get_has_consumes(
    operation: Mapping[str, Any],
    path_key: str,
    method: str,
    document: Mapping[str, Any],
) -> list[Finding]:
    # Any declaration counts, including an empty list
    if method != HTTPMethod.GET.value or operation.get("consumes") is None:
        return []
    return [
        Finding(
            path=_locator(path_key, method, "consumes"),
            message="GET operations should not specify a consumes field.",
        )
    ]


def check_produces(
    operation: Mapping[str, Any],
    path_key: str,
    method: str,
    document: Mapping[str, Any],
) -> list[Finding]:
    if method == HTTPMethod.HEAD.value:
        return []
    if presence(operation.get("produces")) is Presence.NON_EMPTY:
        return []
    if _declares(document, "produces"):
        return []
    return [
        Finding(
            path=_locator(path_key, method, "produces"),
            message="Operations must have a non-empty `produces` field.",
        )
    ]


def check_operation_id(
    operation: Mapping[str, Any],
    path_key: str,
    method: str,
    document: Mapping[str, Any],
) -> list[Finding]:
    if presence(operation.get("operationId")) is Presence.NON_EMPTY:
        return []
    return [
        Finding(
            path=_locator(path_key, method, "operationId"),
            message="Operations must have a non-empty `operationId`.",
        )
    ]


def check_summary(
    operation: Mapping[str, Any],
    path_key: str,
    method: str,
    document: Mapping[str, Any],
) -> list[Finding]:
    if presence(operation.get("summary")) is Presence.NON_EMPTY:
        return []
    return [
        Finding(
            path=_locator(path_key, method, "summary"),
            message="Operations must have a non-empty `summary` field.",
        )
    ]


def check_array_responses(
    operation: Mapping[str, Any],
    path_key: str,
    method: str,
    document: Mapping[str, Any],
) -> list[Finding]:
    """Flag GET responses whose schema is a top-level array.

    The schema is followed through at most one ``$ref`` hop.  Schemas that
    are missing, external, or unresolvable are not findings.
    """
    if method != HTTPMethod.GET.value:
        return []

    responses = operation.get("responses")
    if not isinstance(responses, Mapping):
        return []

    findings: list[Finding] = []
    for name, response in responses.items():
        if not isinstance(response, Mapping) or response.get("schema") is None:
            continue
        schema = resolve_ref(response["schema"], document)
        if isinstance(schema, Mapping) and schema.get("type") == "array":
            findings.append(
                Finding(
                    path=_locator(path_key, method, "responses", str(name), "schema"),
                    message=(
                        "Arrays MUST NOT be returned as the top-level structure "
                        "in a response body."
                    ),
                )
            )
    return findings


def check_parameter_order(
    operation: Mapping[str, Any],
    path_key: str,
    method: str,
    document: Mapping[str, Any],
) -> list[Finding]:
    """Flag every required parameter listed after the first optional one.

    A parameter is required only when its (resolved) ``required`` is exactly
    ``True``.  An external ``$ref`` resolves to ``{}`` and counts as optional;
    a local ``$ref`` to a missing location is skipped altogether.
    """
    parameters = operation.get("parameters")
    if not isinstance(parameters, Sequence) or isinstance(parameters, str):
        return []

    findings: list[Finding] = []
    first_optional = -1
    for index, raw in enumerate(parameters):
        param = resolve_ref(raw, document)
        if param is None:
            continue
        required = isinstance(param, Mapping) and param.get("required") is True
        if first_optional < 0:
            if not required:
                first_optional = index
        elif required:
            findings.append(
                Finding(
                    path=f"{_locator(path_key, method, 'parameters')}[{index}]",
                    message="Required parameters should appear before optional parameters.",
                )
            )
    return findings


# Evaluation order is part of the output contract
RULES: tuple[Rule, ...] = (
    Rule(
        "no_consumes_for_put_or_post",
        "PUT and POST operations must have a non-empty consumes field",
        check_consumes_for_put_or_post,
    ),
    Rule(
        "get_op_has_consumes",
        "GET operations should not specify a consumes field",
        check_get_has_consumes,
    ),
    Rule(
        "no_produces",
        "Operations other than HEAD must have a non-empty produces field",
        check_produces,
    ),
    Rule(
        "no_operation_id",
        "Operations must have a non-empty operationId",
        check_operation_id,
    ),
    Rule(
        "no_summary",
        "Operations must have a non-empty summary",
        check_summary,
    ),
    Rule(
        "no_array_responses",
        "GET responses must not return an array as the top-level structure",
        check_array_responses,
    ),
    Rule(
        "parameter_order",
        "Required parameters must be listed before optional parameters",
        check_parameter_order,
    ),
)
