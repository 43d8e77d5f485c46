"""Monochrome and color palettes of the LCD."""

from __future__ import annotations

import enum
from dataclasses import dataclass


@dataclass(frozen=True)
class RGB:
    """A color given by its red, green and blue components (0-255)."""

    r: int
    g: int
    b: int


class PaletteGrayShade(enum.IntEnum):
    """The four gray shades of the monochrome LCD."""

    WHITE = 0
    LIGHT_GRAY = 1
    DARK_GRAY = 2
    DARK = 3

    def as_rgb(self) -> RGB:
        """Return the RGB color displayed for this shade."""
        return PALETTE_CLASSIC_RGB[self]


PALETTE_CLASSIC_RGB = (
    RGB(255, 255, 255),
    RGB(192, 192, 192),
    RGB(96, 96, 96),
    RGB(0, 0, 0),
)
"""The RGB colors of the monochrome palette shades, in shade order."""


class PaletteClassic:
    """A monochrome palette assigning a gray shade to each of 4 color numbers.

    Bits 7-6 hold the shade of color 3, bits 5-4 color 2, bits 3-2 color 1
    and bits 1-0 color 0.
    """

    __slots__ = ("_raw", "_data")

    def __init__(self) -> None:
        self._raw = 0xFF
        self._data = [PaletteGrayShade.WHITE] * 4

    def set(self, value: int) -> None:
        """Load the palette from its register byte."""
        self._raw = value & 0xFF
        self._data = [PaletteGrayShade((value >> shift) & 0b11) for shift in (0, 2, 4, 6)]

    @property
    def raw(self) -> int:
        """The palette's register byte."""
        return self._raw

    @property
    def data(self) -> tuple[PaletteGrayShade, ...]:
        """The shades of color numbers 0 to 3."""
        return tuple(self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PaletteClassic):
            return NotImplemented
        return self._raw == other._raw and self._data == other._data

    def __repr__(self) -> str:
        return f"PaletteClassic(raw={self._raw:#04x}, data={self._data!r})"


class PaletteColorValue:
    """A 15-bit color: red in bits 0-4, green in bits 5-9, blue in bits 10-14."""

    __slots__ = ("_raw", "_rgb")

    def __init__(self, raw: int = 0x0000) -> None:
        self._raw = 0
        self._rgb = RGB(0, 0, 0)
        self.set(raw)

    def set(self, raw: int) -> None:
        """Replace the 16-bit raw value."""
        self._raw = raw & 0xFFFF
        self._rgb = self._compute_rgb(self._raw)

    def set_low(self, byte: int) -> None:
        """Replace the low byte of the raw value."""
        self.set((self._raw & 0xFF00) | (byte & 0xFF))

    def set_high(self, byte: int) -> None:
        """Replace the high byte of the raw value."""
        self.set((self._raw & 0x00FF) | ((byte & 0xFF) << 8))

    def raw_low(self) -> int:
        return self._raw & 0x00FF

    def raw_high(self) -> int:
        return self._raw >> 8

    def rgb(self) -> RGB:
        """Return the color on the 0-255 RGB scale."""
        return self._rgb

    @property
    def raw(self) -> int:
        return self._raw

    @staticmethod
    def _compute_rgb(raw: int) -> RGB:
        # 5-bit intensities scaled by 8 to reach the 0-255 range
        return RGB(
            (raw & 0x1F) * 8,
            ((raw >> 5) & 0x1F) * 8,
            ((raw >> 10) & 0x1F) * 8,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PaletteColorValue):
            return NotImplemented
        return self._raw == other._raw

    def __repr__(self) -> str:
        return f"PaletteColorValue({self._raw:#06x})"


class PaletteColor:
    """A color palette made of four color values."""

    __slots__ = ("data",)

    def __init__(self) -> None:
        self.data = [PaletteColorValue(0x0000) for _ in range(4)]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PaletteColor):
            return NotImplemented
        return self.data == other.data

    def __repr__(self) -> str:
        return f"PaletteColor({self.data!r})"