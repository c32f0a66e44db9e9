"""LineFormatter: renders JSON values as the lines of their canonical form.

A value (or a key/value pair) at a given depth renders to exactly the lines it
would occupy in pretty-printed JSON, minus the separating commas:

    "name": "foo"            <- scalar member, one line
    "tags": [                <- container member: opening line
      "a"                    <- children at depth + 1
    ]                        <- closing line at the original depth

Object members are always emitted in sorted key order.  Containers always
render with separate opening and closing lines, empty ones included.
"""

from __future__ import annotations

import json
import math
from decimal import Decimal
from typing import Any

from json_structural_diff.tree.nodes import JsonKind, kind_of

__all__ = [
    "LineFormatter",
    "format_member_lines",
    "format_value_lines",
    "number_literal",
    "scalar_literal",
]

# Plain decimal notation covers decimal exponents in (-6, 21]; outside that
# window numbers switch to exponent notation ("1e-7", "1e+21").
_FIXED_MIN_EXPONENT = -6
_FIXED_MAX_EXPONENT = 21

_DELIMITERS = {
    JsonKind.OBJECT: ("{", "}"),
    JsonKind.ARRAY: ("[", "]"),
}


def number_literal(value: int | float) -> str:
    """Return the JSON text of a finite number.

    Integers print exactly.  Floats use the shortest round-tripping digits,
    laid out the way ECMAScript's ``Number.prototype.toString`` lays them out:
    integral floats lose their fractional part (``1.0`` -> ``1``), small and
    large magnitudes switch to exponent notation (``1e-7``, ``1.5e+300``), and
    negative zero prints as ``0``.

    Raises:
        ValueError: If ``value`` is NaN or infinite.
    """
    if isinstance(value, int):
        return str(value)
    if not math.isfinite(value):
        raise ValueError(f"Non-finite number has no JSON form: {value!r}")
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    _, digit_tuple, exponent = Decimal(repr(abs(value))).normalize().as_tuple()
    digits = "".join(map(str, digit_tuple))
    # value == 0.<digits> * 10**point
    point = int(exponent) + len(digits)

    if len(digits) <= point <= _FIXED_MAX_EXPONENT:
        return sign + digits + "0" * (point - len(digits))
    if 0 < point <= _FIXED_MAX_EXPONENT:
        return f"{sign}{digits[:point]}.{digits[point:]}"
    if _FIXED_MIN_EXPONENT < point <= 0:
        return f"{sign}0.{'0' * -point}{digits}"

    mantissa = digits if len(digits) == 1 else f"{digits[0]}.{digits[1:]}"
    power = point - 1
    return f"{sign}{mantissa}e{'+' if power >= 0 else '-'}{abs(power)}"


def scalar_literal(value: Any) -> str:
    """Return the canonical JSON encoding of a scalar.

    Strings are quoted with non-ASCII characters kept as-is; booleans and null
    render as ``true``/``false``/``null``; numbers go through
    ``number_literal``, so ``1.0`` and ``1`` share the literal ``1``.

    Raises:
        TypeError: If value is not a JSON scalar.
    """
    if kind_of(value) is not JsonKind.SCALAR:
        raise TypeError(f"Not a JSON scalar: {type(value)!r}")
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return number_literal(value)
    return json.dumps(value, ensure_ascii=False)


class LineFormatter:
    """Renders JSON values and key/value pairs into canonical text lines.

    Depth is the nesting level of the line being produced; each level indents
    by ``indent_width`` spaces.

    Example::

        fmt = LineFormatter()
        fmt.member_lines("a", [1, 2], depth=1)
        # ['  "a": [', '    1', '    2', '  ]']
    """

    def __init__(self, indent_width: int = 2) -> None:
        self._unit = " " * indent_width

    def pad(self, depth: int) -> str:
        return self._unit * depth

    def _prefix(self, depth: int, key: str | None) -> str:
        if key is None:
            return self.pad(depth)
        return f"{self.pad(depth)}{json.dumps(key, ensure_ascii=False)}: "

    def scalar_line(self, value: Any, depth: int, key: str | None = None) -> str:
        """Single line for a scalar element (``key`` None) or member."""
        return self._prefix(depth, key) + scalar_literal(value)

    def opening_line(self, value: Any, depth: int, key: str | None = None) -> str:
        """Opening delimiter line of a container, ``"key": {`` or bare ``[``."""
        return self._prefix(depth, key) + _DELIMITERS[kind_of(value)][0]

    def closing_line(self, value: Any, depth: int) -> str:
        return self.pad(depth) + _DELIMITERS[kind_of(value)][1]

    def value_lines(self, value: Any, depth: int, key: str | None = None) -> list[str]:
        """All lines of a value rendered wholesale.

        Args:
            value: Any JSON value.
            depth: Nesting level of the value's first line.
            key:   Object key when rendering a member; None for array
                   elements and the document root.

        Returns:
            The value's lines in canonical order.
        """
        kind = kind_of(value)
        if kind is JsonKind.SCALAR:
            return [self.scalar_line(value, depth, key)]

        lines = [self.opening_line(value, depth, key)]
        if kind is JsonKind.OBJECT:
            for child_key in sorted(value):
                lines.extend(self.value_lines(value[child_key], depth + 1, child_key))
        else:
            for item in value:
                lines.extend(self.value_lines(item, depth + 1))
        lines.append(self.closing_line(value, depth))
        return lines

    def member_lines(self, key: str, value: Any, depth: int) -> list[str]:
        """All lines of an object member ``"key": value``."""
        return self.value_lines(value, depth, key)


_default = LineFormatter()


def format_value_lines(value: Any, depth: int = 0) -> list[str]:
    """Render ``value`` with the default 2-space formatter."""
    return _default.value_lines(value, depth)


def format_member_lines(key: str, value: Any, depth: int = 1) -> list[str]:
    """Render the member ``"key": value`` with the default 2-space formatter."""
    return _default.member_lines(key, value, depth)
