"""Tests for the result types.

Covers:
- DiffLine column validation per type and the convenience constructors
- Frozen (immutable) enforcement
- to_dict interop shapes for DiffLine, DiffOk and ParseError
- DiffOk.summary counts and has_changes
- render_side_by_side output
"""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from json_structural_diff.result import (
    DiffLine,
    DiffLineType,
    DiffOk,
    DiffSummary,
    ParseError,
    ResultKind,
    Side,
    render_side_by_side,
)

# ---------------------------------------------------------------------------
# DiffLine
# ---------------------------------------------------------------------------


class TestDiffLineConstruction:
    def test_unchanged_mirrors_left(self) -> None:
        line = DiffLine.unchanged("x")
        assert (line.type, line.left, line.right) == (DiffLineType.UNCHANGED, "x", "x")

    def test_changed(self) -> None:
        line = DiffLine.changed("a", "b")
        assert (line.left, line.right) == ("a", "b")

    def test_add_has_no_left(self) -> None:
        line = DiffLine.add("r")
        assert line.left is None
        assert line.right == "r"

    def test_remove_has_no_right(self) -> None:
        line = DiffLine.remove("l")
        assert line.left == "l"
        assert line.right is None

    def test_add_with_left_rejected(self) -> None:
        with pytest.raises(ValueError, match="left must be None"):
            DiffLine(DiffLineType.ADD, "l", "r")

    def test_remove_without_left_rejected(self) -> None:
        with pytest.raises(ValueError, match="left must be a string"):
            DiffLine(DiffLineType.REMOVE, None, None)

    def test_changed_without_right_rejected(self) -> None:
        with pytest.raises(ValueError, match="right must be a string"):
            DiffLine(DiffLineType.CHANGED, "l")

    def test_frozen(self) -> None:
        line = DiffLine.unchanged("x")
        with pytest.raises(FrozenInstanceError):
            line.left = "y"  # type: ignore[misc]

    def test_equality(self) -> None:
        assert DiffLine.unchanged("x") == DiffLine(DiffLineType.UNCHANGED, "x", "x")


class TestDiffLineType:
    def test_values(self) -> None:
        assert [str(t) for t in DiffLineType] == [
            "unchanged",
            "changed",
            "add",
            "remove",
        ]


class TestToDict:
    def test_line_omits_missing_column(self) -> None:
        assert DiffLine.add("  1").to_dict() == {"type": "add", "right": "  1"}
        assert DiffLine.remove("  1").to_dict() == {"type": "remove", "left": "  1"}

    def test_ok(self) -> None:
        result = DiffOk([DiffLine.changed("1", "2")])
        assert result.kind is ResultKind.OK
        assert result.to_dict() == {
            "kind": "ok",
            "lines": [{"type": "changed", "left": "1", "right": "2"}],
        }

    def test_parse_error(self) -> None:
        result = ParseError("Enter JSON", Side.RIGHT)
        assert result.kind == "parseError"
        assert result.to_dict() == {
            "kind": "parseError",
            "message": "Enter JSON",
            "side": "right",
        }


# ---------------------------------------------------------------------------
# Summary
# ---------------------------------------------------------------------------


class TestSummary:
    def test_counts(self) -> None:
        result = DiffOk(
            [
                DiffLine.unchanged("{"),
                DiffLine.changed("a", "b"),
                DiffLine.add("c"),
                DiffLine.add("d"),
                DiffLine.remove("e"),
                DiffLine.unchanged("}"),
            ]
        )
        assert result.summary() == DiffSummary(
            unchanged=2, changed=1, added=2, removed=1
        )
        assert result.summary().has_changes is True

    def test_all_unchanged_has_no_changes(self) -> None:
        assert DiffOk([DiffLine.unchanged("1")]).summary().has_changes is False

    def test_empty(self) -> None:
        assert DiffOk([]).summary() == DiffSummary(0, 0, 0, 0)


# ---------------------------------------------------------------------------
# render_side_by_side
# ---------------------------------------------------------------------------


class TestRenderSideBySide:
    def test_markers_and_columns(self) -> None:
        result = DiffOk(
            [
                DiffLine.unchanged("{"),
                DiffLine.changed("a", "b"),
                DiffLine.remove("ab"),
                DiffLine.add("x"),
            ]
        )
        assert render_side_by_side(result, width=3).splitlines() == [
            "  {   | {",
            "~ a   | b",
            "- ab  |",
            "+     | x",
        ]

    def test_parse_error(self) -> None:
        rendered = render_side_by_side(ParseError("boom", Side.LEFT))
        assert rendered == "parse error (left): boom"

    def test_empty_result(self) -> None:
        assert render_side_by_side(DiffOk([])) == ""
