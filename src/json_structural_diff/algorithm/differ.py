"""StructuralDiffer: recursive, key-aware comparison of two JSON value trees.

Walks both trees simultaneously and emits one ``DiffLine`` per line of
canonical output.  Dispatch is on ``JsonKind``:

- SCALAR/SCALAR:  compared by canonical literal.  Equal -> no line at this
                  level (the caller owns the row); unequal -> one CHANGED row.
- OBJECT/OBJECT:  sorted union of keys; members present on one side only are
                  emitted wholesale as REMOVE/ADD blocks.
- ARRAY/ARRAY:    strict positional alignment, no move detection.  Reordered
                  elements show up as per-index changes.
- anything else:  no partial reconciliation.  The left rendering is emitted as
                  REMOVE rows followed by the right rendering as ADD rows.

When both sides hold a container of the same kind, its opening and closing
rows are always UNCHANGED; only interior rows carry the difference.

``indent`` arguments follow one convention throughout: it is the depth of the
container whose children are being compared, so children render at
``indent + 1``.  ``diff_value`` is the exception: its ``indent`` is the depth of
the value itself.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from json_structural_diff.algorithm.config import DiffConfig
from json_structural_diff.result import DiffLine
from json_structural_diff.tree.formatter import LineFormatter, scalar_literal
from json_structural_diff.tree.nodes import JsonKind, kind_of

__all__ = ["StructuralDiffer"]


class StructuralDiffer:
    """Produces ordered ``DiffLine`` rows for two parsed JSON values.

    Stateless apart from its formatter; one instance may be reused for any
    number of comparisons.

    Example::

        differ = StructuralDiffer()
        differ.diff_object({"a": 1, "b": 2}, {"a": 1, "b": 3}, indent=0)
        # [DiffLine(UNCHANGED, '  "a": 1', '  "a": 1'),
        #  DiffLine(CHANGED,   '  "b": 2', '  "b": 3')]
    """

    def __init__(self, config: DiffConfig | None = None) -> None:
        self._config = config if config is not None else DiffConfig()
        self._fmt = LineFormatter(indent_width=self._config.indent_width)

    @property
    def formatter(self) -> LineFormatter:
        return self._fmt

    # ------------------------------------------------------------------
    # Value dispatch
    # ------------------------------------------------------------------

    def diff_value(self, a: Any, b: Any, indent: int) -> list[DiffLine]:
        """Diff two values that occupy the same position.

        Args:
            a:      Left value.
            b:      Right value.
            indent: Depth of the values' own lines.

        Returns:
            ``[]`` for equal scalars, one CHANGED row for unequal scalars, a
            framed block for same-kind containers, otherwise REMOVE rows for
            ``a`` followed by ADD rows for ``b``.
        """
        kind_a = kind_of(a)
        kind_b = kind_of(b)

        if kind_a is JsonKind.SCALAR and kind_b is JsonKind.SCALAR:
            if scalar_literal(a) == scalar_literal(b):
                return []
            return [
                DiffLine.changed(
                    self._fmt.scalar_line(a, indent), self._fmt.scalar_line(b, indent)
                )
            ]

        if kind_a is kind_b:
            return self._diff_container(a, b, indent)

        return self._replace(a, b, indent)

    # ------------------------------------------------------------------
    # Containers
    # ------------------------------------------------------------------

    def diff_object(
        self, a: dict[str, Any], b: dict[str, Any], indent: int
    ) -> list[DiffLine]:
        """Diff the members of two objects, in sorted key order.

        Args:
            a, b:   Objects at the same position.
            indent: Depth of the objects; members render at ``indent + 1``.

        Returns:
            Interior rows only; the caller emits the delimiters.
        """
        depth = indent + 1
        lines: list[DiffLine] = []

        for key in sorted(a.keys() | b.keys()):
            if key not in b:
                lines.extend(self._block(DiffLine.remove, a[key], depth, key))
                continue
            if key not in a:
                lines.extend(self._block(DiffLine.add, b[key], depth, key))
                continue

            a_val = a[key]
            b_val = b[key]
            kind_a = kind_of(a_val)
            kind_b = kind_of(b_val)

            if kind_a is JsonKind.SCALAR and kind_b is JsonKind.SCALAR:
                left = self._fmt.scalar_line(a_val, depth, key)
                right = self._fmt.scalar_line(b_val, depth, key)
                if scalar_literal(a_val) == scalar_literal(b_val):
                    lines.append(DiffLine.unchanged(left, right))
                else:
                    lines.append(DiffLine.changed(left, right))
            elif kind_a is kind_b:
                lines.extend(self._diff_container(a_val, b_val, depth, key))
            else:
                lines.extend(self._replace(a_val, b_val, depth, key))

        return lines

    def diff_array(self, a: list[Any], b: list[Any], indent: int) -> list[DiffLine]:
        """Diff two arrays element by element, by index.

        Args:
            a, b:   Arrays at the same position.
            indent: Depth of the arrays; elements render at ``indent + 1``.

        Returns:
            Interior rows only; the caller emits the delimiters.
        """
        depth = indent + 1
        lines: list[DiffLine] = []

        for i in range(max(len(a), len(b))):
            if i < len(a) and i < len(b):
                inner = self.diff_value(a[i], b[i], depth)
                if not inner:
                    lines.append(
                        DiffLine.unchanged(
                            self._fmt.scalar_line(a[i], depth),
                            self._fmt.scalar_line(b[i], depth),
                        )
                    )
                else:
                    # a lone CHANGED row or a framed/replaced block, already
                    # rendered at element depth
                    lines.extend(inner)
            elif i < len(a):
                lines.extend(self._block(DiffLine.remove, a[i], depth))
            else:
                lines.extend(self._block(DiffLine.add, b[i], depth))

        return lines

    def _diff_container(
        self, a: Any, b: Any, depth: int, key: str | None = None
    ) -> list[DiffLine]:
        """Framed diff of two same-kind containers whose opening line is at depth."""
        fmt = self._fmt
        lines = [
            DiffLine.unchanged(
                fmt.opening_line(a, depth, key), fmt.opening_line(b, depth, key)
            )
        ]
        if kind_of(a) is JsonKind.OBJECT:
            lines.extend(self.diff_object(a, b, depth))
        else:
            lines.extend(self.diff_array(a, b, depth))
        lines.append(
            DiffLine.unchanged(fmt.closing_line(a, depth), fmt.closing_line(b, depth))
        )
        return lines

    # ------------------------------------------------------------------
    # Wholesale blocks
    # ------------------------------------------------------------------

    def _block(
        self,
        make: Callable[[str], DiffLine],
        value: Any,
        depth: int,
        key: str | None = None,
    ) -> list[DiffLine]:
        return [make(line) for line in self._fmt.value_lines(value, depth, key)]

    def _replace(
        self, a: Any, b: Any, depth: int, key: str | None = None
    ) -> list[DiffLine]:
        return self._block(DiffLine.remove, a, depth, key) + self._block(
            DiffLine.add, b, depth, key
        )
