from __future__ import annotations

from typing import Any


class IndexOrdered:
    """
    Value type whose identity is a single integer index.

    Equality, ordering and hashing are all projections onto ``_index``.
    Comparisons are only defined between instances of the same concrete
    class; anything else yields ``NotImplemented`` so that a ``Date`` never
    compares equal (or orderable) to a ``Time`` with the same index.
    """

    __slots__ = ("_index",)

    _index: int

    def _same(self, other: Any) -> bool:
        return type(other) is type(self)

    # ── equality ─────────────────────────────────────────────────────────

    def __eq__(self, other: Any) -> bool:
        if not self._same(other):
            return NotImplemented
        return self._index == other._index

    def __ne__(self, other: Any) -> bool:
        if not self._same(other):
            return NotImplemented
        return self._index != other._index

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._index))

    # ── ordering ─────────────────────────────────────────────────────────

    def __lt__(self, other: Any) -> bool:
        if not self._same(other):
            return NotImplemented
        return self._index < other._index

    def __le__(self, other: Any) -> bool:
        if not self._same(other):
            return NotImplemented
        return self._index <= other._index

    def __gt__(self, other: Any) -> bool:
        if not self._same(other):
            return NotImplemented
        return self._index > other._index

    def __ge__(self, other: Any) -> bool:
        if not self._same(other):
            return NotImplemented
        return self._index >= other._index

    def compare(self, other: Any) -> int:
        """Three-way comparison: -1, 0 or 1. ``None`` sorts first."""
        if other is None:
            return 1
        if not self._same(other):
            raise TypeError(
                f"Cannot compare {type(self).__name__} with {type(other).__name__}."
            )
        return (self._index > other._index) - (self._index < other._index)
