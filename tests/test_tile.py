import pytest

from gbcore.tile import Tile

RAW = [
    0x7C, 0x7C, 0x00, 0xC6, 0xC6, 0x00, 0x00, 0xFE,
    0xC6, 0xC6, 0x00, 0xC6, 0xC6, 0x00, 0x00, 0x00,
]

EXPECTED = [
    [0, 3, 3, 3, 3, 3, 0, 0],
    [2, 2, 0, 0, 0, 2, 2, 0],
    [1, 1, 0, 0, 0, 1, 1, 0],
    [2, 2, 2, 2, 2, 2, 2, 0],
    [3, 3, 0, 0, 0, 3, 3, 0],
    [2, 2, 0, 0, 0, 2, 2, 0],
    [1, 1, 0, 0, 0, 1, 1, 0],
    [0, 0, 0, 0, 0, 0, 0, 0],
]


def test_tile_cache():
    tile = Tile(RAW)
    assert tile.data == EXPECTED


def test_blank_tile_is_all_zero():
    tile = Tile()
    assert tile.data == [[0] * 8 for _ in range(8)]


def test_raw_bytes_are_kept():
    tile = Tile(RAW)
    assert [tile.raw_byte(i) for i in range(16)] == RAW


def test_update_raw_byte_refreshes_pixels():
    tile = Tile()
    for index, byte in enumerate(RAW):
        tile.update_raw_byte(index, byte)
    assert tile.raw_byte(7) == 0xFE
    assert tile.data == EXPECTED
    assert tile == Tile(RAW)


def test_update_single_line():
    tile = Tile()
    tile.update_raw_byte(0, 0x7C)
    tile.update_raw_byte(1, 0x7C)
    assert tile.data[0] == EXPECTED[0]
    assert tile.data[1] == [0] * 8


@pytest.mark.parametrize("size", [0, 15, 17])
def test_wrong_size_raises(size):
    with pytest.raises(ValueError):
        Tile(bytes(size))