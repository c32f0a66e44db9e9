"""Result types for structural JSON comparison.

- ``DiffLine``: one classified, renderable row of diff output.
- ``DiffOk`` / ``ParseError``: the two outcomes of ``diff_json_strings``.
- ``Normalized`` / ``NormalizeError``: the two outcomes of ``normalize``.

All types are frozen dataclasses.  Failures are values; nothing here is an
exception type.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Any

__all__ = [
    "DiffLine",
    "DiffLineType",
    "DiffOk",
    "DiffResult",
    "DiffSummary",
    "NormalizeError",
    "NormalizeResult",
    "Normalized",
    "ParseError",
    "ResultKind",
    "Side",
    "render_side_by_side",
]


class DiffLineType(StrEnum):
    """Classification of a diff row.

    - UNCHANGED -> "unchanged" : both columns, identical content
    - CHANGED   -> "changed"   : both columns, same position, different content
    - ADD       -> "add"       : right column only
    - REMOVE    -> "remove"    : left column only
    """

    UNCHANGED = auto()
    CHANGED = auto()
    ADD = auto()
    REMOVE = auto()


class Side(StrEnum):
    """Which input a parse error belongs to."""

    LEFT = auto()
    RIGHT = auto()


class ResultKind(StrEnum):
    OK = "ok"
    PARSE_ERROR = "parseError"


@dataclass(frozen=True, slots=True)
class DiffLine:
    """One row of a two-column structural diff.

    Attributes:
        type:  Row classification (see DiffLineType).
        left:  Text for the left (A) column; None for ADD rows.
        right: Text for the right (B) column; None for REMOVE rows.
    """

    type: DiffLineType
    left: str | None = None
    right: str | None = None

    def __post_init__(self) -> None:
        needs_left = self.type is not DiffLineType.ADD
        needs_right = self.type is not DiffLineType.REMOVE
        if needs_left != (self.left is not None):
            expected = "a string" if needs_left else "None"
            msg = f"{self.type} line: left must be {expected}, got {self.left!r}"
            raise ValueError(msg)
        if needs_right != (self.right is not None):
            expected = "a string" if needs_right else "None"
            msg = f"{self.type} line: right must be {expected}, got {self.right!r}"
            raise ValueError(msg)

    @classmethod
    def unchanged(cls, left: str, right: str | None = None) -> DiffLine:
        return cls(DiffLineType.UNCHANGED, left, left if right is None else right)

    @classmethod
    def changed(cls, left: str, right: str) -> DiffLine:
        return cls(DiffLineType.CHANGED, left, right)

    @classmethod
    def add(cls, right: str) -> DiffLine:
        return cls(DiffLineType.ADD, None, right)

    @classmethod
    def remove(cls, left: str) -> DiffLine:
        return cls(DiffLineType.REMOVE, left, None)

    def to_dict(self) -> dict[str, str]:
        """Return the interop shape, omitting the absent column."""
        out = {"type": str(self.type)}
        if self.left is not None:
            out["left"] = self.left
        if self.right is not None:
            out["right"] = self.right
        return out


@dataclass(frozen=True, slots=True)
class DiffSummary:
    """Per-type line counts of a successful diff."""

    unchanged: int
    changed: int
    added: int
    removed: int

    @property
    def has_changes(self) -> bool:
        return bool(self.changed or self.added or self.removed)


@dataclass(frozen=True, slots=True)
class DiffOk:
    """Successful comparison: the ordered diff rows."""

    lines: list[DiffLine]

    @property
    def kind(self) -> ResultKind:
        return ResultKind.OK

    def summary(self) -> DiffSummary:
        counts = dict.fromkeys(DiffLineType, 0)
        for line in self.lines:
            counts[line.type] += 1
        return DiffSummary(
            unchanged=counts[DiffLineType.UNCHANGED],
            changed=counts[DiffLineType.CHANGED],
            added=counts[DiffLineType.ADD],
            removed=counts[DiffLineType.REMOVE],
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": str(self.kind),
            "lines": [line.to_dict() for line in self.lines],
        }


@dataclass(frozen=True, slots=True)
class ParseError:
    """One side failed to parse; no comparison was performed.

    Attributes:
        message: ``"Enter JSON"`` for empty input, otherwise the JSON parser's
            own error message, unmodified.
        side:    The first failing side, checked left then right.
    """

    message: str
    side: Side

    @property
    def kind(self) -> ResultKind:
        return ResultKind.PARSE_ERROR

    def to_dict(self) -> dict[str, Any]:
        return {"kind": str(self.kind), "message": self.message, "side": str(self.side)}


DiffResult = DiffOk | ParseError


@dataclass(frozen=True, slots=True)
class Normalized:
    """Canonical 2-space indented text of a successfully parsed document."""

    normalized: str


@dataclass(frozen=True, slots=True)
class NormalizeError:
    """Why a document could not be normalized."""

    error: str


NormalizeResult = Normalized | NormalizeError


_MARKERS = {
    DiffLineType.UNCHANGED: " ",
    DiffLineType.CHANGED: "~",
    DiffLineType.ADD: "+",
    DiffLineType.REMOVE: "-",
}


def render_side_by_side(result: DiffResult, width: int = 40) -> str:
    """Render a diff result as plain two-column text.

    Each row is ``<marker> <left padded to width> | <right>``, where marker is
    blank, ``~``, ``+`` or ``-``.  The column missing from ADD/REMOVE rows is
    left empty.

    Args:
        result: Output of ``diff_json_strings`` or ``diff_values``.
        width:  Minimum width of the left column.

    Returns:
        Newline-joined rows (no trailing newline).
    """
    if isinstance(result, ParseError):
        return f"parse error ({result.side}): {result.message}"

    rows = []
    for line in result.lines:
        left = line.left or ""
        right = line.right or ""
        rows.append(f"{_MARKERS[line.type]} {left.ljust(width)} | {right}".rstrip())
    return "\n".join(rows)
