import json
from pathlib import Path

from ucs2kit import char_count, compose_pairs, decode_utf8


def _load():
    root = Path(__file__).resolve().parents[1] / "golden"
    data = (root / "sample.txt").read_bytes()
    expected = json.loads((root / "sample.json").read_text(encoding="utf-8"))
    return data, expected


def _hex(units):
    return [f"{unit:04X}" for unit in units]


def test_decode_matches_golden():
    data, expected = _load()
    units = decode_utf8(data)
    assert _hex(units) == expected["units"]
    assert char_count(data) == expected["char_count"]


def test_compose_matches_golden():
    data, expected = _load()
    assert _hex(compose_pairs(decode_utf8(data))) == expected["composed"]
