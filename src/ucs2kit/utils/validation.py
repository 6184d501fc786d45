"""Validation helpers for caller supplied values."""
from __future__ import annotations

from ..models import MAX_UNIT


def ensure_unit(value: int) -> int:
    """Ensure ``value`` fits in a 16-bit code unit.

    Raises
    ------
    ValueError
        If ``value`` is negative or larger than 0xFFFF.
    """

    if not 0 <= value <= MAX_UNIT:
        raise ValueError(f"Code unit out of 16-bit range: {value:#x}")
    return value


def ensure_offset(offset: int) -> int:
    if offset < 0:
        raise ValueError(f"Offset must not be negative: {offset}")
    return offset


def ensure_byte_char(ch: str | int) -> int:
    """Return the ordinal of an 8-bit character given as ``str`` or ``int``."""
    if isinstance(ch, str):
        if len(ch) != 1:
            raise ValueError(f"Expected a single character, got {ch!r}")
        ch = ord(ch)
    if not 0 <= ch <= 0xFF:
        raise ValueError(f"Character is not 8-bit: {ch:#x}")
    return ch


__all__ = ["ensure_unit", "ensure_offset", "ensure_byte_char"]
