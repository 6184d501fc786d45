import pytest

from ucs2kit import compose_pairs, decode_utf8, encode_utf8, precompose

_TEXT = ("Crème brûlée, naïve façade – 5€ カタカナ " * 200).encode("utf-8")


@pytest.mark.bench
def test_decode_throughput(benchmark):
    benchmark(lambda: decode_utf8(_TEXT))


@pytest.mark.bench
def test_encode_throughput(benchmark):
    units = decode_utf8(_TEXT)
    benchmark(lambda: encode_utf8(units))


@pytest.mark.bench
def test_precompose_lookup(benchmark):
    result = benchmark(lambda: precompose(0x0041, 0x0300))
    assert result == 0x00C0


@pytest.mark.bench
def test_compose_pairs_throughput(benchmark):
    units = [0x0041, 0x0300, 0x0065, 0x0301, 0x0020] * 500
    benchmark(lambda: compose_pairs(units))
