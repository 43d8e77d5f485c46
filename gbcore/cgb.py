"""Game Boy Color specific video state."""

from __future__ import annotations

from .palette import PaletteColor

VRAM_BANK = 0xFF4F
"""VRAM bank selector register."""
BGP_INDEX = 0xFF68
"""Index of the background palette byte accessed through BGP_DATA."""
BGP_DATA = 0xFF69
"""Background palette data at the index set in BGP_INDEX."""
OBP_INDEX = 0xFF6A
OBP_DATA = 0xFF6B

VRAM_BANK_SIZE = 0x2000


class PaletteIndexRegister:
    """A palette index register.

    Bit 0 selects the high byte of the color, bits 1-2 the color number
    (0-3), bits 3-5 the palette (0-7) and bit 7 enables auto-increment
    after each data write.
    """

    __slots__ = ("_raw", "_index", "_color_index", "_high_byte", "_auto_increment")

    def __init__(self, raw_value: int = 0x00) -> None:
        self._raw = 0
        self._index = 0
        self._color_index = 0
        self._high_byte = False
        self._auto_increment = False
        self.update_with(raw_value)

    @property
    def raw_value(self) -> int:
        return self._raw

    @property
    def high_byte(self) -> bool:
        """True if the high byte of the color is accessed."""
        return self._high_byte

    @property
    def index(self) -> int:
        """The palette number (0-7)."""
        return self._index

    @property
    def color_index(self) -> int:
        """The color number inside the palette (0-3)."""
        return self._color_index

    @property
    def auto_increment_enabled(self) -> bool:
        return self._auto_increment

    def update_with(self, value: int) -> None:
        """Set the raw value and decode its fields."""
        value &= 0xFF
        self._raw = value
        self._high_byte = value & 0x01 == 0x01
        self._color_index = (value & 0x06) >> 1
        self._index = (value & 0x38) >> 3
        self._auto_increment = value & 0x80 == 0x80

    def auto_increment(self) -> None:
        """Advance the index if auto-increment is enabled; call after each data write."""
        if self._auto_increment:
            self.update_with(self._raw + 1)


class GpuData:
    """Palettes, palette index registers and the second VRAM bank of the CGB."""

    def __init__(self) -> None:
        self.bg_palette_index = PaletteIndexRegister(0x00)
        self.bg_palettes = [PaletteColor() for _ in range(8)]
        self.ob_palette_index = PaletteIndexRegister(0x00)
        self.ob_palettes = [PaletteColor() for _ in range(8)]
        self.vram_bank_selector = 0x00
        self.vram_bank = bytearray(VRAM_BANK_SIZE)

    def get_bg_color(self) -> int:
        """Return the background palette byte selected by the index register."""
        return self._read(self.bg_palettes, self.bg_palette_index)

    def set_bg_color(self, byte: int) -> None:
        """Write the background palette byte selected by the index register."""
        self._write(self.bg_palettes, self.bg_palette_index, byte)

    def get_ob_color(self) -> int:
        """Return the palette byte selected for object palette reads."""
        return self._read(self.bg_palettes, self.bg_palette_index)

    def set_ob_color(self, byte: int) -> None:
        """Write the object palette byte selected by the index register."""
        self._write(self.ob_palettes, self.ob_palette_index, byte)

    @staticmethod
    def _read(palettes: list[PaletteColor], index: PaletteIndexRegister) -> int:
        color = palettes[index.index].data[index.color_index]
        return color.raw_high() if index.high_byte else color.raw_low()

    @staticmethod
    def _write(palettes: list[PaletteColor], index: PaletteIndexRegister, byte: int) -> None:
        color = palettes[index.index].data[index.color_index]
        if index.high_byte:
            color.set_high(byte)
        else:
            color.set_low(byte)
        index.auto_increment()