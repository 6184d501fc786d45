import pytest

from ucs2kit.transcoder import char_count, char_length
from ucs2kit.transcoder.length import leading_ones


@pytest.mark.parametrize(
    ("data", "expected"),
    [
        (b"A", 1),
        (b"\xc3\xa9", 2),
        (b"\xe2\x82\xac", 3),
        (b"\xf0\x9f\x98\x80", 4),
        (b"\x80", 0),
        (b"\xbf", 0),
        (b"\xf8\x88\x80\x80\x80", 0),
        (b"\xff", 0),
        (b"\0", 0),
        (b"", 0),
    ],
)
def test_char_length_from_lead_byte(data: bytes, expected: int) -> None:
    assert char_length(data) == expected


def test_char_length_honours_offset() -> None:
    data = b"a\xe2\x82\xacb"
    assert char_length(data, 1) == 3
    assert char_length(data, 2) == 0
    assert char_length(data, 4) == 1
    assert char_length(data, 5) == 0
    assert char_length(data, 99) == 0


def test_char_length_rejects_negative_offset() -> None:
    with pytest.raises(ValueError):
        char_length(b"abc", -1)


def test_leading_ones() -> None:
    assert [leading_ones(b) for b in (0x00, 0x7F, 0x80, 0xC0, 0xE0, 0xF0, 0xFF)] == [0, 0, 1, 2, 3, 4, 8]


@pytest.mark.parametrize(
    ("data", "expected"),
    [
        (b"", 0),
        (b"\0", 0),
        (b"hello", 5),
        ("héllo €".encode("utf-8"), 7),
        (b"ab\0cd", 2),
        (b"ab\x80cd", 2),
        (b"\xe2\x82\0AB", 1),
        (b"x\xf0\x9f", 2),
    ],
)
def test_char_count(data: bytes, expected: int) -> None:
    assert char_count(data) == expected


def test_char_count_ascii_length() -> None:
    text = bytes(range(1, 128))
    assert char_count(text) == len(text)
