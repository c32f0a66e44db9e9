"""pytest plugin: the ``assert_json_unchanged`` fixture.

Installing json-structural-diff registers this module under the ``pytest11``
entry point, so any test can request the fixture and compare two JSON documents
with a side-by-side structural diff in the failure message.
"""

from __future__ import annotations

from typing import Any

import pytest

from json_structural_diff import (
    DiffConfig,
    ParseError,
    diff_json_strings,
    diff_values,
    render_side_by_side,
)


@pytest.fixture(scope="session")
def assert_json_unchanged() -> Any:
    """Fixture that returns a callable structural JSON equality asserter.

    Session-scoped; the returned callable holds no state and every call
    builds a fresh JsonDiffer.

    Usage in tests::

        def test_roundtrip(assert_json_unchanged):
            assert_json_unchanged('{"b": 2, "a": 1}', '{"a": 1, "b": 2}')

        def test_drift(assert_json_unchanged):
            with pytest.raises(AssertionError, match=r"changed=1"):
                assert_json_unchanged({"a": 1}, {"a": 2})

    Returns:
        A callable ``_assert(actual, expected, config=None) -> None``.  When
        both arguments are ``str`` they are parsed as JSON text; otherwise both
        are treated as already-parsed values.
    """

    def _assert(
        actual: Any,
        expected: Any,
        config: DiffConfig | None = None,
    ) -> None:
        """Assert that two JSON documents have no structural differences.

        Args:
            actual:   JSON text or value produced by the code under test.
            expected: The expected JSON text or value.
            config:   Optional DiffConfig for rendering.

        Raises:
            AssertionError: When either text fails to parse, or any diff row
                is not unchanged.  The message carries a per-type summary and
                the side-by-side rendering.
        """
        if isinstance(actual, str) and isinstance(expected, str):
            result = diff_json_strings(actual, expected, config=config)
        else:
            result = diff_values(actual, expected, config=config)

        if isinstance(result, ParseError):
            raise AssertionError(render_side_by_side(result))

        summary = result.summary()
        if summary.has_changes:
            raise AssertionError(
                f"JSON documents differ: "
                f"changed={summary.changed} added={summary.added} "
                f"removed={summary.removed}\n"
                f"{render_side_by_side(result)}"
            )

    return _assert
