"""DiffConfig: rendering parameters for the structural differ.

DiffConfig is a frozen (immutable) dataclass.  The defaults reproduce the
canonical 2-space pretty-printed form exactly.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class DiffConfig:
    """Immutable configuration for structural diffing.

    Attributes:
        indent_width: Spaces per nesting level in rendered lines (>= 0).
            Default 2.
    """

    indent_width: int = 2

    def __post_init__(self) -> None:
        if isinstance(self.indent_width, bool) or not isinstance(
            self.indent_width, int
        ):
            msg = f"indent_width must be an int, got {self.indent_width!r}"
            raise TypeError(msg)
        if self.indent_width < 0:
            msg = f"indent_width must be >= 0, got {self.indent_width}"
            raise ValueError(msg)
