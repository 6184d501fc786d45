"""Length helpers for UTF-8 byte sequences."""
from __future__ import annotations

from ..utils.units import terminator_index
from ..utils.validation import ensure_offset


def leading_ones(byte: int) -> int:
    """Count the leading one bits of ``byte``, scanning from 0x80 downwards."""
    mask = 0x80
    count = 0
    while byte & mask:
        count += 1
        mask >>= 1
    return count


def char_length(data: bytes, offset: int = 0) -> int:
    """Return the byte length of the UTF-8 character starting at ``offset``.

    ``0`` signals that no character starts here: the terminator (a zero byte),
    the end of ``data``, a stray continuation byte or a lead byte announcing
    more than four bytes.
    """

    ensure_offset(offset)
    if offset >= len(data):
        return 0
    byte = data[offset]
    if not byte:
        return 0
    count = leading_ones(byte)
    if count == 0:
        return 1
    if count == 1 or count > 4:
        return 0
    return count


def char_count(data: bytes) -> int:
    """Count characters up to the terminator or the first malformed lead byte.

    A multi-byte sequence cut short by the terminator counts as one character
    and ends the scan.
    """

    end = terminator_index(data)
    offset = 0
    count = 0
    while offset < end:
        length = char_length(data, offset)
        if length == 0:
            break
        count += 1
        offset += length
    return count


__all__ = ["char_length", "char_count", "leading_ones"]
