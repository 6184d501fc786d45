from hypothesis import given, strategies as st

from ucs2kit.transcoder import char_count, decode_utf8, encode_utf8

_bmp_text = st.text(
    alphabet=st.characters(max_codepoint=0xFFFF, exclude_categories=("Cs",), exclude_characters="\0"),
    max_size=64,
)


@given(st.integers(min_value=1, max_value=0x7F))
def test_ascii_identity(byte: int) -> None:
    assert decode_utf8(bytes([byte, 0])) == [byte]
    assert encode_utf8([byte, 0]) == bytes([byte])


@given(st.integers(min_value=0x80, max_value=0x7FF))
def test_two_byte_round_trip(value: int) -> None:
    encoded = encode_utf8([value, 0])
    assert len(encoded) == 2
    assert decode_utf8(encoded + b"\0") == [value]


@given(st.integers(min_value=0x800, max_value=0xFFFF))
def test_three_byte_round_trip(value: int) -> None:
    encoded = encode_utf8([value, 0])
    assert len(encoded) == 3
    assert decode_utf8(encoded + b"\0") == [value]


@given(_bmp_text)
def test_agrees_with_python_codec(text: str) -> None:
    encoded = text.encode("utf-8")
    assert encode_utf8([ord(char) for char in text]) == encoded
    assert decode_utf8(encoded) == [ord(char) for char in text]
    assert char_count(encoded) == len(text)
