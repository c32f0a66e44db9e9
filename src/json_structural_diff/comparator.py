"""JsonDiffer: composes Canonicalizer + StructuralDiffer into a DiffResult.

This is the wiring layer between the raw algorithm and the public API.

Architecture:
- diff_json_strings() normalizes the left text, then the right text.  The
  first failure short-circuits into a ParseError for that side; the right text
  is not even normalized when the left one fails.
- The normalized strings are parsed again to obtain the value trees.  The
  normalized text, not the raw input, is the parse source of the diff.
- diff_values() frames the document root: equal scalars become one UNCHANGED
  row (StructuralDiffer leaves that row to its caller), same-kind containers
  get UNCHANGED delimiter rows, anything else is replaced wholesale.
- normalize() results are cached per instance via NormalizationCache (LRU).
"""

from __future__ import annotations

import logging
from typing import Any

from json_structural_diff.algorithm.config import DiffConfig
from json_structural_diff.algorithm.differ import StructuralDiffer
from json_structural_diff.cache import NormalizationCache
from json_structural_diff.result import (
    DiffLine,
    DiffOk,
    DiffResult,
    NormalizeError,
    ParseError,
    Side,
)
from json_structural_diff.tree.canonicalizer import parse
from json_structural_diff.tree.formatter import scalar_literal

__all__ = ["JsonDiffer"]

logger = logging.getLogger(__name__)


class JsonDiffer:
    """Orchestrator for structural JSON comparison.

    Two separate ``JsonDiffer`` instances never share cache state; each
    instance maintains its own ``NormalizationCache``.  An instance is not
    thread-safe.

    Example::

        from json_structural_diff.comparator import JsonDiffer

        differ = JsonDiffer()
        result = differ.diff_json_strings('{"name": "foo"}', '{"name": "bar"}')
        [str(line.type) for line in result.lines]
        # ['unchanged', 'changed', 'unchanged']
    """

    def __init__(
        self,
        config: DiffConfig | None = None,
        max_cache_size: int = 128,
    ) -> None:
        """Initialise the differ.

        Args:
            config: Rendering parameters.  Defaults to ``DiffConfig()``.
            max_cache_size: Maximum number of raw texts whose ``normalize``
                result is kept in the per-instance LRU cache.  Defaults to 128.
                This is an infrastructure parameter, not part of
                ``DiffConfig``.
        """
        self._config: DiffConfig = config if config is not None else DiffConfig()
        self._cache = NormalizationCache(max_size=max_cache_size)
        self._differ = StructuralDiffer(config=self._config)

    @property
    def config(self) -> DiffConfig:
        return self._config

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def diff_json_strings(self, left: str, right: str) -> DiffResult:
        """Compare two JSON texts.

        Args:
            left:  Raw text of document A.
            right: Raw text of document B.

        Returns:
            ``ParseError`` for the first side (left, then right) that is empty
            or invalid, otherwise ``DiffOk`` with the ordered diff rows.
        """
        parsed: list[Any] = []
        for side, text in ((Side.LEFT, left), (Side.RIGHT, right)):
            outcome = self._cache.normalize(text)
            if isinstance(outcome, NormalizeError):
                logger.debug("%s input rejected: %s", side, outcome.error)
                return ParseError(message=outcome.error, side=side)
            parsed.append(parse(outcome.normalized))

        return self.diff_values(parsed[0], parsed[1])

    def diff_values(self, left: Any, right: Any) -> DiffOk:
        """Compare two already-parsed JSON values.

        Args:
            left:  Value of document A (dict, list, str, int, float, bool, None).
            right: Value of document B.

        Returns:
            ``DiffOk`` with the root framed as described in the module docstring.

        Raises:
            TypeError: If either value contains a non-JSON Python object.
        """
        lines = self._differ.diff_value(left, right, 0)
        if not lines:
            # equal root scalars: the differ leaves this row to its caller
            lines = [DiffLine.unchanged(scalar_literal(left), scalar_literal(right))]

        result = DiffOk(lines=lines)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("diff complete: %s", result.summary())
        return result
