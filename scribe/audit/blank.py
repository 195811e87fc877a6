"""Blank-value rules for audit snapshots.

A snapshot whose every value is blank is not worth an entry, so the recorder
drops it before touching the store.
"""

from collections.abc import Mapping
from typing import Any


def is_blank(value: Any) -> bool:
    """Return True if a serialized value carries no information.

    Rules per value kind:
    - ``None`` is blank.
    - A string is blank when empty or whitespace only.
    - A mapping is blank when empty or when every value in it is blank.
    - A list, tuple, set or frozenset is blank when empty.
    - Anything else (numbers, booleans, dates) is never blank; ``0`` and
      ``False`` are real values.
    """
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, Mapping):
        return all(is_blank(item) for item in value.values())
    if isinstance(value, (list, tuple, set, frozenset)):
        return len(value) == 0
    return False
