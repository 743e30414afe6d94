"""Walk the ``paths`` object and yield the operations to validate.

This module is the iteration driver of the validation engine.  It visits every
Path Item under ``paths`` in document order and, within each, every
recognised HTTP-method key in document order.

Skipping rules:

* ``paths`` entries whose key starts with ``x-`` are vendor extensions and are
  skipped entirely -- their contents are never inspected for method keys.
* Path Item keys other than the seven methods in
  :class:`~speclint.models.HTTPMethod` (``parameters``, ``x-*``, ``trace``)
  are ignored.
* Operations carrying ``x-sdk-exclude: true`` are opted out of all
  validation, including rules that read document-level defaults.
* Non-mapping ``paths``, Path Items, and Operations are skipped rather than
  raised on.

The public entry points are :func:`iter_operations` and
:func:`for_each_operation`.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Mapping
from typing import Any

from speclint.models import HTTPMethod

logger = logging.getLogger(__name__)

EXTENSION_PREFIX = "x-"
EXCLUDE_MARKER = "x-sdk-exclude"

# HTTP methods recognised as operations
_HTTP_METHODS = frozenset(m.value for m in HTTPMethod)

OperationVisitor = Callable[[Mapping[str, Any], str, str], None]


def iter_operations(
    document: Mapping[str, Any],
) -> Iterator[tuple[Mapping[str, Any], str, str]]:
    """Yield ``(operation, path_key, method_key)`` for every operation to validate.

    Method keys are matched exactly; OpenAPI requires them in lower case.

    Args:
        document: The parsed API description.

    Yields:
        One tuple per non-excluded operation, in encounter order.
    """
    paths = document.get("paths")
    if not isinstance(paths, Mapping):
        return

    for path_key, path_item in paths.items():
        path_key = str(path_key)
        if path_key.startswith(EXTENSION_PREFIX):
            logger.debug("Skipping extension path entry '%s'", path_key)
            continue
        if not isinstance(path_item, Mapping):
            continue

        for method_key, operation in path_item.items():
            method_key = str(method_key)
            if method_key not in _HTTP_METHODS:
                continue
            if not isinstance(operation, Mapping):
                continue
            if operation.get(EXCLUDE_MARKER) is True:
                logger.debug(
                    "Skipping excluded operation %s %s", method_key.upper(), path_key
                )
                continue
            yield operation, path_key, method_key


def for_each_operation(document: Mapping[str, Any], visit: OperationVisitor) -> None:
    """Call ``visit(operation, path_key, method_key)`` for every operation to validate.

    Visits happen synchronously, once per operation, in the order produced by
    :func:`iter_operations`.

    Args:
        document: The parsed API description.
        visit: Callback receiving the operation mapping, its path key, and its
            method key.
    """
    for operation, path_key, method_key in iter_operations(document):
        visit(operation, path_key, method_key)
