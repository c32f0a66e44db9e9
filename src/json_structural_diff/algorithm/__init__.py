"""algorithm subpackage: public API for the structural diff algorithm.

Import from this module (not from sub-modules directly) to stay on the stable
public interface.

Example::

    from json_structural_diff.algorithm import StructuralDiffer

    differ = StructuralDiffer()
    lines = differ.diff_array([1, 2, 3], [3, 1, 2], indent=0)
    # three CHANGED rows: positional alignment, no move detection
"""

from __future__ import annotations

from json_structural_diff.algorithm.config import DiffConfig
from json_structural_diff.algorithm.differ import StructuralDiffer

__all__ = ["DiffConfig", "StructuralDiffer"]
