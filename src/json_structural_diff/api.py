"""Public API functions for json-structural-diff.

This module provides the user-facing functions: normalize, diff_json_strings,
diff_values and has_differences.  Each diffing call creates a fresh JsonDiffer
to guarantee zero global state mutation between calls.
"""

from __future__ import annotations

from typing import Any

from json_structural_diff.algorithm.config import DiffConfig
from json_structural_diff.comparator import JsonDiffer
from json_structural_diff.result import DiffOk, DiffResult, NormalizeResult, ParseError
from json_structural_diff.tree.canonicalizer import normalize as _normalize

__all__ = ["diff_json_strings", "diff_values", "has_differences", "normalize"]


def normalize(text: str) -> NormalizeResult:
    """Parse JSON text and return its canonical 2-space indented form.

    Args:
        text: Raw input.  Surrounding whitespace is ignored.

    Returns:
        ``Normalized`` (original key order preserved) or ``NormalizeError``
        carrying ``"Enter JSON"`` for empty input or the parser's message.
    """
    return _normalize(text)


def diff_json_strings(
    left: str,
    right: str,
    config: DiffConfig | None = None,
) -> DiffResult:
    """Compare two JSON texts structurally.

    Args:
        left:   Raw text of document A (left column).
        right:  Raw text of document B (right column).
        config: Rendering parameters.  Defaults to ``DiffConfig()`` when None.

    Returns:
        ``DiffOk`` with one ``DiffLine`` per canonical output row, or
        ``ParseError`` naming the first side (left, then right) that failed.
    """
    return JsonDiffer(config=config).diff_json_strings(left, right)


def diff_values(
    left: Any,
    right: Any,
    config: DiffConfig | None = None,
) -> DiffOk:
    """Compare two already-parsed JSON values structurally.

    Args:
        left:   First JSON value (dict, list, str, int, float, bool, None).
        right:  Second JSON value.
        config: Rendering parameters.  Defaults to ``DiffConfig()`` when None.

    Returns:
        ``DiffOk`` with the ordered diff rows.
    """
    return JsonDiffer(config=config).diff_values(left, right)


def has_differences(
    left: str,
    right: str,
    config: DiffConfig | None = None,
) -> bool:
    """Return True unless both texts parse and every row is unchanged.

    A parse error on either side counts as a difference.
    """
    result = diff_json_strings(left, right, config=config)
    if isinstance(result, ParseError):
        return True
    return result.summary().has_changes
