"""Shared constants and small value types used across ucs2kit."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

MAX_UNIT = 0xFFFF
TERMINATOR = 0

# Invalid 2- or 3-byte sequence (bad continuation tag or below the minimum value).
REPLACEMENT_INVALID = 0x2A  # "*"
# Sequence announcing a code point beyond 16 bits.
REPLACEMENT_WIDE = 0x7E  # "~"


@dataclass(frozen=True, slots=True)
class CompositionEntry:
    pattern: int
    precomposed: int

    @property
    def first(self) -> int:
        return (self.pattern >> 16) & MAX_UNIT

    @property
    def second(self) -> int:
        return self.pattern & MAX_UNIT

    def pair(self) -> Tuple[int, int]:
        return self.first, self.second


__all__ = [
    "MAX_UNIT",
    "TERMINATOR",
    "REPLACEMENT_INVALID",
    "REPLACEMENT_WIDE",
    "CompositionEntry",
]
