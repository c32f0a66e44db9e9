"""Canonicalizer: raw JSON text to a normalized, pretty-printed string.

``normalize`` trims the input, parses it with the standard ``json`` module and
re-serializes it with 2-space indentation.  Key insertion order is preserved in
the normalized text; the differ sorts keys independently when it walks the
parsed tree.  Numbers are written with ``number_literal``, the same encoding
the diff rows use, so ``1.0`` normalizes to ``1``.

Failures are returned as values, never raised:

- empty (or whitespace-only) input -> ``NormalizeError("Enter JSON")``
- invalid JSON -> ``NormalizeError(<parser message>)``, the message passed
  through unmodified from ``json.JSONDecodeError``
- nesting deeper than ``MAX_NESTING_DEPTH`` -> ``NormalizeError``

Number literals too large for a float (``1e400``) are valid JSON; they parse
to ``None`` and normalize to ``null``.
"""

from __future__ import annotations

import json
import logging
import math
from typing import Any

from json_structural_diff.result import NormalizeError, Normalized, NormalizeResult
from json_structural_diff.tree.formatter import number_literal

__all__ = [
    "EMPTY_INPUT_MESSAGE",
    "MAX_NESTING_DEPTH",
    "dumps",
    "nesting_depth",
    "normalize",
    "parse",
]

logger = logging.getLogger(__name__)

EMPTY_INPUT_MESSAGE = "Enter JSON"

# The differ recurses a few frames per level; this keeps it well inside the
# interpreter's default recursion limit.
MAX_NESTING_DEPTH = 200

_INDENT = "  "


def _reject_constant(name: str) -> Any:
    # json.loads accepts NaN/Infinity by default; they are not JSON.
    raise ValueError(f"Unexpected token '{name}', not valid JSON")


def _parse_float(text: str) -> float | None:
    value = float(text)
    return value if math.isfinite(value) else None


def _parse_int(text: str) -> int | float | None:
    try:
        return int(text)
    except ValueError:
        # past sys.get_int_max_str_digits(); read it the way a float would be
        return _parse_float(text)


def parse(text: str) -> Any:
    """Parse JSON text into Python values.

    Args:
        text: JSON text.

    Returns:
        The parsed value (dict, list, str, int, float, bool, None).  Numbers
        beyond the float range become ``None``.

    Raises:
        ValueError: If ``text`` is not valid JSON (``json.JSONDecodeError`` is
            a ValueError subclass).
    """
    return json.loads(
        text,
        parse_constant=_reject_constant,
        parse_float=_parse_float,
        parse_int=_parse_int,
    )


def nesting_depth(value: Any) -> int:
    """Number of container levels in ``value``; 0 for a scalar."""
    deepest = 0
    stack = [(value, 1)]
    while stack:
        node, depth = stack.pop()
        if isinstance(node, dict):
            children = list(node.values())
        elif isinstance(node, list):
            children = node
        else:
            continue
        deepest = max(deepest, depth)
        stack.extend((child, depth + 1) for child in children)
    return deepest


def _encode(value: Any, depth: int) -> str:
    if isinstance(value, dict):
        if not value:
            return "{}"
        inner = _INDENT * (depth + 1)
        members = [
            f"{inner}{json.dumps(key, ensure_ascii=False)}: "
            + _encode(child, depth + 1)
            for key, child in value.items()
        ]
        return "{\n" + ",\n".join(members) + "\n" + _INDENT * depth + "}"
    if isinstance(value, list):
        if not value:
            return "[]"
        inner = _INDENT * (depth + 1)
        items = [f"{inner}{_encode(child, depth + 1)}" for child in value]
        return "[\n" + ",\n".join(items) + "\n" + _INDENT * depth + "]"
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return number_literal(value)
    return json.dumps(value, ensure_ascii=False)


def dumps(value: Any) -> str:
    """Serialize a parsed value as 2-space indented JSON in insertion order.

    Matches ``json.dumps(value, indent=2, ensure_ascii=False)`` except that
    numbers are written with ``number_literal``.
    """
    return _encode(value, 0)


def normalize(text: str) -> NormalizeResult:
    """Parse ``text`` and return its canonical pretty-printed form.

    Args:
        text: Raw user input.

    Returns:
        ``Normalized`` with the 2-space indented re-serialization, or
        ``NormalizeError`` carrying ``"Enter JSON"``, the parser's message, or
        the nesting limit that was exceeded.
    """
    trimmed = text.strip()
    if not trimmed:
        return NormalizeError(EMPTY_INPUT_MESSAGE)

    try:
        value = parse(trimmed)
    except (ValueError, RecursionError) as exc:
        # RecursionError: nesting deeper than the C parser's recursion limit
        logger.debug("JSON parse failed: %s", exc)
        return NormalizeError(str(exc))

    depth = nesting_depth(value)
    if depth > MAX_NESTING_DEPTH:
        logger.debug("JSON nesting depth %d over limit", depth)
        return NormalizeError(
            f"Nesting depth {depth} exceeds the maximum of {MAX_NESTING_DEPTH}"
        )

    return Normalized(dumps(value))
