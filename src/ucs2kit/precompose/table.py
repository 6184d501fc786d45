"""Sorted composition table with logarithmic lookup."""
from __future__ import annotations

from bisect import bisect_left
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

from ..models import CompositionEntry
from ..utils.validation import ensure_unit
from .data import PRECOMPOSE_ENTRIES


def pack_pattern(first: int, second: int) -> int:
    """Pack two code units into the 32-bit search key (``first`` high)."""
    return (ensure_unit(first) << 16) | ensure_unit(second)


class PrecomposeTable:
    """Immutable table of ``(pattern, precomposed)`` pairs.

    Entry 0 is a dummy ``(0, 0)`` row that is kept for parity with the
    published table layout; it is never returned by :meth:`lookup`.
    """

    __slots__ = ("_patterns", "_values")

    def __init__(self, entries: Iterable[Tuple[int, int]]) -> None:
        rows = tuple(entries)
        patterns = tuple(pattern for pattern, _ in rows)
        if any(left >= right for left, right in zip(patterns, patterns[1:])):
            raise ValueError("Composition patterns must be strictly ascending")
        self._patterns: Sequence[int] = patterns
        self._values: Sequence[int] = tuple(value for _, value in rows)

    def lookup(self, first: int, second: int) -> Optional[int]:
        needle = pack_pattern(first, second)
        if needle == 0:
            return None
        index = bisect_left(self._patterns, needle)
        if index < len(self._patterns) and self._patterns[index] == needle:
            return self._values[index]
        return None

    def entries(self) -> List[CompositionEntry]:
        return list(self)

    def __iter__(self) -> Iterator[CompositionEntry]:
        for pattern, value in zip(self._patterns, self._values):
            yield CompositionEntry(pattern=pattern, precomposed=value)

    def __len__(self) -> int:
        return len(self._patterns)


DEFAULT_TABLE = PrecomposeTable(PRECOMPOSE_ENTRIES)


def precompose(first: int, second: int, *, table: PrecomposeTable | None = None) -> Optional[int]:
    """Return the canonical composite of ``first`` + ``second`` or ``None``."""
    return (DEFAULT_TABLE if table is None else table).lookup(first, second)


__all__ = ["PrecomposeTable", "DEFAULT_TABLE", "pack_pattern", "precompose"]
