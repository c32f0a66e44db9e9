"""json-structural-diff - key-aware, line-oriented diffs of JSON documents."""

from __future__ import annotations

from json_structural_diff.algorithm.config import DiffConfig
from json_structural_diff.api import (
    diff_json_strings,
    diff_values,
    has_differences,
    normalize,
)
from json_structural_diff.comparator import JsonDiffer
from json_structural_diff.result import (
    DiffLine,
    DiffLineType,
    DiffOk,
    DiffResult,
    DiffSummary,
    NormalizeError,
    Normalized,
    ParseError,
    Side,
    render_side_by_side,
)

__version__: str = "0.1.0"
__all__: list[str] = [
    "DiffConfig",
    "DiffLine",
    "DiffLineType",
    "DiffOk",
    "DiffResult",
    "DiffSummary",
    "JsonDiffer",
    "NormalizeError",
    "Normalized",
    "ParseError",
    "Side",
    "diff_json_strings",
    "diff_values",
    "has_differences",
    "normalize",
    "render_side_by_side",
]
