"""Big-endian (high byte first) serialisation of 16-bit code units."""
from __future__ import annotations

import struct
from typing import List, Sequence

from .validation import ensure_unit


def pack_units(units: Sequence[int]) -> bytes:
    """Serialise ``units`` high byte first, matching the X11 ``XChar2b`` layout."""
    for unit in units:
        ensure_unit(unit)
    return struct.pack(f">{len(units)}H", *units)


def unpack_units(data: bytes) -> List[int]:
    if len(data) % 2:
        raise ValueError(f"UCS2 data must have an even length, got {len(data)} bytes")
    return list(struct.unpack(f">{len(data) // 2}H", data))


__all__ = ["pack_units", "unpack_units"]
