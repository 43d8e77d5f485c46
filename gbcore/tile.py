"""8x8 pixel tiles stored in video RAM."""

from __future__ import annotations

from collections.abc import Iterable

TILE_BYTES = 16


class Tile:
    """An 8x8 tile of 2-bit color numbers.

    Each line takes two bytes: the first gives bit 0 of the color numbers,
    the second gives bit 1; bit 7 is the leftmost pixel.
    """

    __slots__ = ("_raw", "_data")

    def __init__(self, raw_data: Iterable[int] = bytes(TILE_BYTES)) -> None:
        raw = bytearray(raw_data)
        if len(raw) != TILE_BYTES:
            raise ValueError(f"a tile holds {TILE_BYTES} bytes, got {len(raw)}")
        self._raw = raw
        self._data: list[list[int]] = []
        self._cache()

    def raw_byte(self, index: int) -> int:
        """Return raw byte ``index`` of the tile."""
        return self._raw[index]

    def update_raw_byte(self, index: int, byte: int) -> None:
        """Replace raw byte ``index`` and refresh the decoded pixels."""
        self._raw[index] = byte
        self._cache()

    @property
    def data(self) -> list[list[int]]:
        """The color numbers, indexed first by y then by x."""
        return self._data

    def _cache(self) -> None:
        self._data = [
            [
                (((high >> (7 - x)) & 1) << 1) | ((low >> (7 - x)) & 1)
                for x in range(8)
            ]
            for low, high in zip(self._raw[0::2], self._raw[1::2])
        ]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tile):
            return NotImplemented
        return self._raw == other._raw

    def __repr__(self) -> str:
        return f"Tile({bytes(self._raw)!r})"