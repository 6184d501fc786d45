"""UTF-8 / UCS2 transcoding with canonical pair precomposition."""
from .precompose import DEFAULT_TABLE, PrecomposeTable, compose_pairs, precompose
from .transcoder import (
    char_count,
    char_length,
    decode_utf8,
    decode_utf8_be,
    encode_utf8,
    encode_utf8_be,
)
from .version import __version__

__all__ = [
    "DEFAULT_TABLE",
    "PrecomposeTable",
    "compose_pairs",
    "precompose",
    "char_count",
    "char_length",
    "decode_utf8",
    "decode_utf8_be",
    "encode_utf8",
    "encode_utf8_be",
    "__version__",
]
