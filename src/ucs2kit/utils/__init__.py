"""Utility exports."""
from .byteorder import pack_units, unpack_units
from .units import (
    concat_units,
    copy_units,
    copy_units_n,
    find_char,
    terminate,
    terminator_index,
    unit_length,
)
from .validation import ensure_byte_char, ensure_offset, ensure_unit

__all__ = [
    "pack_units",
    "unpack_units",
    "concat_units",
    "copy_units",
    "copy_units_n",
    "find_char",
    "terminate",
    "terminator_index",
    "unit_length",
    "ensure_byte_char",
    "ensure_offset",
    "ensure_unit",
]
