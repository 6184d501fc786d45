"""UTF-8 to UCS2 decoding."""
from __future__ import annotations

import logging
from typing import List

import structlog

from ..models import REPLACEMENT_INVALID, REPLACEMENT_WIDE
from ..utils.byteorder import pack_units
from ..utils.units import terminator_index
from .length import char_length, leading_ones

logger = structlog.wrap_logger(logging.getLogger(__name__))


def decode_utf8(data: bytes) -> List[int]:
    """Decode ``data`` into 16-bit code units.

    Decoding stops at the first zero byte or at the end of ``data``. Malformed
    input is substituted rather than rejected: invalid 2- and 3-byte sequences
    and stray continuation bytes become ``*``, sequences for code points above
    0xFFFF become ``~``. The terminator is not part of the result.
    """

    data = bytes(data)
    end = terminator_index(data)
    units: List[int] = []
    offset = 0
    while offset < end:
        length = char_length(data, offset)
        announced = leading_ones(data[offset])
        if announced > 4:
            # 5 to 8 byte forms: replaced like any sequence beyond 16 bits.
            logger.debug("decode.substituted", offset=offset, reason="beyond_bmp", length=announced)
            units.append(REPLACEMENT_WIDE)
            offset = min(offset + announced, end)
            continue
        if length == 0:
            logger.debug("decode.substituted", offset=offset, reason="invalid_lead")
            units.append(REPLACEMENT_INVALID)
            offset += 1
            continue
        if offset + length > end:
            logger.debug("decode.substituted", offset=offset, reason="truncated", length=length)
            units.append(REPLACEMENT_WIDE if length > 3 else REPLACEMENT_INVALID)
            break
        units.append(_decode_char(data, offset, length))
        offset += length
    return units


def decode_utf8_be(data: bytes) -> bytes:
    """Decode ``data`` and serialise the units high byte first."""
    return pack_units(decode_utf8(data))


def _decode_char(data: bytes, offset: int, length: int) -> int:
    lead = data[offset]
    if length == 1:
        return lead
    if length == 2:
        trail = data[offset + 1]
        value = (trail & 0x3F) + ((lead & 0x1F) << 6)
        if value > 0x7F and _is_continuation(trail):
            return value
        logger.debug("decode.substituted", offset=offset, reason="invalid", length=2)
        return REPLACEMENT_INVALID
    if length == 3:
        second, third = data[offset + 1], data[offset + 2]
        value = (third & 0x3F) + ((second & 0x3F) << 6) + ((lead & 0x0F) << 12)
        if value > 0x7FF and _is_continuation(second) and _is_continuation(third):
            return value
        logger.debug("decode.substituted", offset=offset, reason="invalid", length=3)
        return REPLACEMENT_INVALID
    logger.debug("decode.substituted", offset=offset, reason="beyond_bmp", length=length)
    return REPLACEMENT_WIDE


def _is_continuation(byte: int) -> bool:
    return (byte & 0xC0) == 0x80


__all__ = ["decode_utf8", "decode_utf8_be"]
