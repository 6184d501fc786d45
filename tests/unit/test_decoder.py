import pytest

from ucs2kit.models import REPLACEMENT_INVALID, REPLACEMENT_WIDE
from ucs2kit.transcoder import decode_utf8, decode_utf8_be

STAR = REPLACEMENT_INVALID
TILDE = REPLACEMENT_WIDE


def test_decode_empty_input() -> None:
    assert decode_utf8(b"") == []
    assert decode_utf8(b"\0") == []


def test_decode_stops_at_terminator() -> None:
    assert decode_utf8(b"A\0B") == [0x41]


def test_decode_bmp_text_matches_code_points() -> None:
    text = "héllo € Αβ カ"
    assert decode_utf8(text.encode("utf-8")) == [ord(char) for char in text]


def test_decode_accepts_bytearray() -> None:
    assert decode_utf8(bytearray(b"ok")) == [0x6F, 0x6B]


@pytest.mark.parametrize(
    ("data", "expected"),
    [
        (b"\xc1\x81", [STAR]),
        (b"\xc0\x80", [STAR]),
        (b"\xc3\x41", [STAR]),
        (b"\xe0\x81\x81", [STAR]),
        (b"\xe2\x41\xac", [STAR]),
        (b"\xe2\x82\x41", [STAR]),
        (b"a\x80b", [0x61, STAR, 0x62]),
        (b"\xf0\x9f\x98\x80", [TILDE]),
        (b"a\xf0\x9f\x98\x80b", [0x61, TILDE, 0x62]),
    ],
)
def test_decode_substitutes_malformed_sequences(data: bytes, expected: list[int]) -> None:
    assert decode_utf8(data) == expected


@pytest.mark.parametrize(
    ("data", "expected"),
    [
        (b"\xc3", [STAR]),
        (b"x\xc3\0", [0x78, STAR]),
        (b"\xe2\x82", [STAR]),
        (b"\xe2\x82\0\x41\x42", [STAR]),
        (b"\xf0\x9f", [TILDE]),
    ],
)
def test_decode_truncated_sequence_stops_at_terminator(data: bytes, expected: list[int]) -> None:
    assert decode_utf8(data) == expected


def test_decode_be_is_high_byte_first() -> None:
    assert decode_utf8_be("À€".encode("utf-8")) == b"\x00\xc0\x20\xac"
    assert decode_utf8_be(b"A") == b"\x00A"


@pytest.mark.parametrize(
    ("data", "expected"),
    [
        (b"\xff", [TILDE]),
        (b"\xf8\x88\x80\x80\x80", [TILDE]),
        (b"\xf8\x88\x80\x80\x80B", [TILDE, 0x42]),
        (b"\xfc\x84\x80\x80\x80\x80", [TILDE]),
        (b"a\xfc\x80\0b", [0x61, TILDE]),
    ],
)
def test_decode_five_to_eight_byte_leads_become_tilde(data: bytes, expected: list[int]) -> None:
    assert decode_utf8(data) == expected
