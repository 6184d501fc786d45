"""Primitives for zero-terminated 16-bit strings.

Every helper accepts either a zero-terminated sequence or a plain
length-delimited one and returns a fresh list without the terminator.
"""
from __future__ import annotations

from typing import List, Optional, Sequence, TypeVar

from ..models import TERMINATOR
from .validation import ensure_byte_char

_Seq = TypeVar("_Seq", bytes, List[int])


def terminator_index(seq: Sequence[int]) -> int:
    """Index of the first terminator in ``seq``, or ``len(seq)`` when absent."""
    for index, value in enumerate(seq):
        if value == TERMINATOR:
            return index
    return len(seq)


def unit_length(units: Sequence[int]) -> int:
    return terminator_index(units)


def find_char(units: Sequence[int], ch: str | int) -> Optional[int]:
    """Return the index of the 8-bit character ``ch`` in ``units``.

    The high byte of the wanted unit is taken to be zero, so only Latin-1
    characters can be found.
    """

    wanted = ensure_byte_char(ch)
    for index in range(unit_length(units)):
        if units[index] == wanted:
            return index
    return None


def copy_units(units: Sequence[int]) -> List[int]:
    return list(units[: unit_length(units)])


def copy_units_n(units: Sequence[int], n: int) -> List[int]:
    if n < 0:
        raise ValueError(f"Count must not be negative: {n}")
    return list(units[: min(n, unit_length(units))])


def concat_units(dest: Sequence[int], src: Sequence[int]) -> List[int]:
    return copy_units(dest) + copy_units(src)


def terminate(seq: _Seq) -> _Seq:
    """Append the zero terminator expected by C-string consumers."""
    if isinstance(seq, (bytes, bytearray)):
        return bytes(seq) + b"\0"
    return list(seq) + [TERMINATOR]


__all__ = [
    "terminator_index",
    "unit_length",
    "find_char",
    "copy_units",
    "copy_units_n",
    "concat_units",
    "terminate",
]
