"""Transcoder package exports."""
from .decoder import decode_utf8, decode_utf8_be
from .encoder import encode_utf8, encode_utf8_be
from .length import char_count, char_length

__all__ = [
    "char_count",
    "char_length",
    "decode_utf8",
    "decode_utf8_be",
    "encode_utf8",
    "encode_utf8_be",
]
