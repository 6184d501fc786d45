import pytest

from ucs2kit.transcoder import encode_utf8, encode_utf8_be


@pytest.mark.parametrize(
    ("units", "expected"),
    [
        ([], b""),
        ([0x41], b"A"),
        ([0x7F], b"\x7f"),
        ([0x80], b"\xc2\x80"),
        ([0xE9], b"\xc3\xa9"),
        ([0x7FF], b"\xdf\xbf"),
        ([0x800], b"\xe0\xa0\x80"),
        ([0x20AC], b"\xe2\x82\xac"),
        ([0xFFFF], b"\xef\xbf\xbf"),
        ([0xD800], b"\xed\xa0\x80"),
    ],
)
def test_encode_unit_widths(units: list[int], expected: bytes) -> None:
    assert encode_utf8(units) == expected


def test_encode_stops_at_terminator() -> None:
    assert encode_utf8([0x41, 0, 0x42]) == b"A"


def test_encode_matches_python_codec() -> None:
    text = "Crème brûlée — 5€"
    assert encode_utf8([ord(char) for char in text]) == text.encode("utf-8")


@pytest.mark.parametrize("unit", [-1, 0x10000, 0x1F600])
def test_encode_rejects_units_outside_16_bits(unit: int) -> None:
    with pytest.raises(ValueError):
        encode_utf8([0x41, unit])


def test_encode_be_reads_high_byte_first() -> None:
    assert encode_utf8_be(b"\x00A\x20\xac") == "A€".encode("utf-8")
    assert encode_utf8_be(b"\x00A\x00\x00\x00B") == b"A"


def test_encode_be_rejects_odd_length() -> None:
    with pytest.raises(ValueError):
        encode_utf8_be(b"\x00A\x00")
