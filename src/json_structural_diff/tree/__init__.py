"""Tree subpackage: JSON value primitives.

Re-exports the public API for the tree module:
- JsonKind: StrEnum of the three value shapes (OBJECT, ARRAY, SCALAR)
- normalize / parse: text to canonical text, text to value
- LineFormatter: renders values into canonical pretty-printed lines
"""

from json_structural_diff.tree.canonicalizer import normalize, parse
from json_structural_diff.tree.formatter import LineFormatter, scalar_literal
from json_structural_diff.tree.nodes import JsonKind, kind_of

__all__ = [
    "JsonKind",
    "LineFormatter",
    "kind_of",
    "normalize",
    "parse",
    "scalar_literal",
]
