"""Resolve single ``$ref`` JSON Reference pointers in API descriptions.

Swagger and OpenAPI documents commonly use ``$ref`` pointers (e.g.,
``{"$ref": "#/definitions/Pet"}``) to define a schema or parameter once and
reference it elsewhere.  The validators only ever need to look *one hop*
through such a pointer, so this module performs a single bounded lookup
instead of inlining the whole document.

Only **internal** references (those starting with ``#/``) are followed.
External file or URL references resolve to an empty mapping and are never
fetched.  A pointer that names a location missing from the document resolves
to ``None``.

Because every call performs exactly one lookup whose depth equals the number
of pointer segments, cyclic references cannot cause non-termination here.
The input document is never copied or mutated.

The public functions are :func:`resolve_ref` and :func:`lookup`.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Optional

_LOCAL_PREFIX = "#/"


def resolve_ref(node: Any, document: Mapping[str, Any]) -> Any:
    """Return the node a ``$ref`` pointer names, or *node* itself.

    Args:
        node: Any value from the document.  Only mappings with a ``$ref``
            key are treated as pointers.
        document: The root document the pointer is resolved against.

    Returns:
        * *node* unchanged when it is not a reference pointer.
        * ``{}`` when the pointer is external (does not start with ``#/``).
        * The referenced value, or ``None`` when the location does not exist.

    Example::

        doc = {"definitions": {"Pets": {"type": "array"}}}
        resolve_ref({"$ref": "#/definitions/Pets"}, doc)
        # {"type": "array"}
    """
    if not isinstance(node, Mapping) or "$ref" not in node:
        return node

    ref = node["$ref"]
    if not isinstance(ref, str) or not ref.startswith(_LOCAL_PREFIX):
        return {}

    return lookup(document, split_pointer(ref))


def split_pointer(ref: str) -> list[str]:
    """Split a local pointer into literal key segments.

    Handles RFC 6901 JSON Pointer escaping (``~1`` for ``/``, ``~0`` for
    ``~``) so that keys such as ``/pets/{id}`` survive as a single segment.

    Args:
        ref: A pointer string starting with ``#/``.

    Returns:
        The unescaped segments after the root marker.
    """
    return [
        segment.replace("~1", "/").replace("~0", "~")
        for segment in ref[len(_LOCAL_PREFIX):].split("/")
    ]


def lookup(root: Any, segments: Sequence[str]) -> Any:
    """Walk *root* by *segments* and return the value found, or ``None``.

    Mapping segments are matched as string keys first; a segment spelled as
    a number also matches an integer key, since YAML loads unquoted response
    codes such as ``200`` as ints.  Sequence segments must be non-negative
    ASCII integers.  Any miss along the way yields ``None``.
    """
    current = root
    for segment in segments:
        index = _array_index(segment)
        if isinstance(current, Mapping):
            if segment in current:
                current = current[segment]
            elif index is not None and index in current:
                current = current[index]
            else:
                return None
        elif isinstance(current, Sequence) and not isinstance(current, str):
            if index is None or index >= len(current):
                return None
            current = current[index]
        else:
            return None
    return current


def _array_index(segment: str) -> Optional[int]:
    # isdigit() alone accepts characters such as "²" that int() rejects
    if segment.isascii() and segment.isdigit():
        return int(segment)
    return None
