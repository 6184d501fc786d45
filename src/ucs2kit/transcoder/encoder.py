"""UCS2 to UTF-8 encoding."""
from __future__ import annotations

from typing import Iterable

from ..utils.byteorder import unpack_units
from ..utils.validation import ensure_unit


def encode_utf8(units: Iterable[int]) -> bytes:
    """Encode 16-bit code units as UTF-8, stopping at the first zero unit.

    Every unit yields one to three bytes; there is no four byte form because
    units never exceed 0xFFFF. Raises ``ValueError`` for values outside that
    range.
    """

    out = bytearray()
    for unit in units:
        value = ensure_unit(unit)
        if not value:
            break
        if value < 0x80:
            out.append(value)
        elif value < 0x800:
            out.append(0xC0 | (value >> 6))
            out.append(0x80 | (value & 0x3F))
        else:
            out.append(0xE0 | (value >> 12))
            out.append(0x80 | ((value >> 6) & 0x3F))
            out.append(0x80 | (value & 0x3F))
    return bytes(out)


def encode_utf8_be(data: bytes) -> bytes:
    """Encode a high-byte-first UCS2 buffer as UTF-8."""
    return encode_utf8(unpack_units(data))


__all__ = ["encode_utf8", "encode_utf8_be"]
