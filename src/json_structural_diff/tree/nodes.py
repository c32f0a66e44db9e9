"""JsonKind StrEnum and kind dispatch for parsed JSON values.

Parsed documents are kept as the plain Python values produced by ``json.loads``
(dict, list, str, int, float, bool, None).  ``kind_of`` classifies a value into
the three shapes the differ dispatches on.
"""

from __future__ import annotations

from enum import StrEnum, auto
from typing import Any


class JsonKind(StrEnum):
    """Enumeration of the structural shapes of a JSON value.

    - OBJECT -> "object" : JSON object {}
    - ARRAY  -> "array"  : JSON array []
    - SCALAR -> "scalar" : A leaf value (string, number, bool, null)
    """

    OBJECT = auto()
    ARRAY = auto()
    SCALAR = auto()


def kind_of(value: Any) -> JsonKind:
    """Classify a JSON value.

    Args:
        value: Any valid JSON value (dict, list, str, int, float, bool, None).

    Returns:
        The JsonKind of ``value``.

    Raises:
        TypeError: If value is not a valid JSON type.
    """
    if isinstance(value, dict):
        return JsonKind.OBJECT
    if isinstance(value, list):
        return JsonKind.ARRAY
    if value is None or isinstance(value, (bool, str, int, float)):
        return JsonKind.SCALAR
    raise TypeError(f"Unsupported JSON value type: {type(value)!r}")
