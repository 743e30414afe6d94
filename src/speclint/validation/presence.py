"""Tri-state presence check for optional string and list fields.

Several rules need to know whether a field is "meaningfully present": a
``consumes`` list of blank strings counts as missing just like an absent key,
while a GET operation with ``consumes: []`` still *declares* the field.
:func:`presence` answers both questions uniformly.
"""

from __future__ import annotations

import enum
from collections.abc import Sequence
from typing import Any


class Presence(enum.Enum):
    ABSENT = "absent"
    EMPTY = "empty"
    NON_EMPTY = "non_empty"


def presence(value: Any) -> Presence:
    """Classify *value* as absent, present-but-empty, or present with content.

    * ``None`` (including a missing key read with ``.get``) is ``ABSENT``.
    * Sequences are joined item by item (``None`` items as ``""``) and the
      result stripped; an empty sequence is ``EMPTY``.
    * Strings and other scalars are stringified and stripped, so
      ``operationId: 42`` is ``NON_EMPTY`` and ``"   "`` is ``EMPTY``.
    """
    if value is None:
        return Presence.ABSENT

    if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        text = "".join("" if item is None else str(item) for item in value)
    else:
        text = str(value)

    return Presence.NON_EMPTY if text.strip() else Presence.EMPTY
