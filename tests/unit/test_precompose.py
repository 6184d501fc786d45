import pytest

from ucs2kit.models import CompositionEntry
from ucs2kit.precompose import DEFAULT_TABLE, PrecomposeTable, compose_pairs, pack_pattern, precompose


@pytest.mark.parametrize(
    ("first", "second", "expected"),
    [
        (0x0041, 0x0300, 0x00C0),
        (0x0043, 0x0327, 0x00C7),
        (0x0065, 0x0301, 0x00E9),
        (0x0055, 0x0308, 0x00DC),
        (0x03B1, 0x0301, 0x03AC),
        (0x30AB, 0x3099, 0x30AC),
        (0xFB49, 0x05C2, 0xFB2D),
    ],
)
def test_precompose_known_pairs(first: int, second: int, expected: int) -> None:
    assert precompose(first, second) == expected


@pytest.mark.parametrize(
    ("first", "second"),
    [(0x0041, 0x0041), (0x0000, 0x0000), (0x0300, 0x0041), (0xFFFF, 0xFFFF), (0x0041, 0x0000)],
)
def test_precompose_not_found(first: int, second: int) -> None:
    assert precompose(first, second) is None


def test_every_table_entry_finds_itself() -> None:
    entries = DEFAULT_TABLE.entries()
    assert entries[0] == CompositionEntry(pattern=0, precomposed=0)
    for entry in entries[1:]:
        assert precompose(entry.first, entry.second) == entry.precomposed, hex(entry.pattern)


def test_table_is_strictly_ascending() -> None:
    patterns = [entry.pattern for entry in DEFAULT_TABLE]
    assert len(DEFAULT_TABLE) == 998
    assert patterns == sorted(set(patterns))
    assert all(0 <= entry.precomposed <= 0xFFFF for entry in DEFAULT_TABLE)


def test_table_rejects_unsorted_entries() -> None:
    with pytest.raises(ValueError):
        PrecomposeTable([(0, 0), (0x00410301, 0x00C1), (0x00410300, 0x00C0)])


def test_custom_table_lookup() -> None:
    table = PrecomposeTable([(0, 0), (pack_pattern(0x61, 0x62), 0x63)])
    assert precompose(0x61, 0x62, table=table) == 0x63
    assert precompose(0x41, 0x300, table=table) is None


def test_pack_pattern() -> None:
    assert pack_pattern(0x0041, 0x0300) == 0x00410300
    assert pack_pattern(0xFFFF, 0xFFFF) == 0xFFFFFFFF
    with pytest.raises(ValueError):
        pack_pattern(0x10000, 0x0300)


def test_entry_splits_pattern() -> None:
    entry = CompositionEntry(pattern=0x30AB3099, precomposed=0x30AC)
    assert entry.pair() == (0x30AB, 0x3099)


@pytest.mark.parametrize(
    ("units", "expected"),
    [
        ([], []),
        ([0x41], [0x41]),
        ([0x41, 0x300, 0x42], [0xC0, 0x42]),
        ([0x41, 0x41], [0x41, 0x41]),
        ([0x78, 0x65, 0x301], [0x78, 0xE9]),
        ([0x41, 0x300, 0x301], [0xC0, 0x301]),
        ([0x41, 0x300, 0, 0x65, 0x301], [0xC0]),
    ],
)
def test_compose_pairs(units: list[int], expected: list[int]) -> None:
    assert compose_pairs(units) == expected


def test_empty_table_never_composes() -> None:
    empty = PrecomposeTable([])
    assert len(empty) == 0
    assert precompose(0x0041, 0x0300, table=empty) is None
    assert compose_pairs([0x41, 0x300], table=empty) == [0x41, 0x300]
