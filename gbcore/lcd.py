"""LCD register addresses and bit fields."""

from __future__ import annotations

import enum

CONTROL = 0xFF40
"""LCD Control register."""
STAT = 0xFF41
"""LCD controller status register."""
SCY = 0xFF42
SCX = 0xFF43
LY = 0xFF44
"""Current scanline (read-only; writing resets it)."""
LYC = 0xFF45
BGP = 0xFF47
"""Background palette (ignored in CGB mode)."""
OBP_0 = 0xFF48
"""Object palette 0 (ignored in CGB mode)."""
OBP_1 = 0xFF49
"""Object palette 1 (ignored in CGB mode)."""
WY = 0xFF4A
WX = 0xFF4B


class GpuMode(enum.IntEnum):
    """The modes the GPU spends its time in."""

    H_BLANK = 0
    V_BLANK = 1
    OAM_READ = 2
    VRAM_READ = 3


class LcdControl(enum.IntEnum):
    """Bits of the LCD Control register, valued by bit position."""

    BG_DISPLAY_ENABLE = 0
    OBJ_DISPLAY_ENABLE = 1
    OBJ_SIZE = 2
    BG_TILE_MAP_DISPLAY_SELECT = 3
    BG_WINDOW_TILE_DATA_SELECT = 4
    WINDOW_DISPLAY_ENABLE = 5
    WINDOW_TILE_MAP_DISPLAY_SELECT = 6
    LCD_DISPLAY_ENABLE = 7

    def is_set(self, register: int) -> bool:
        """Return True if this bit is set in ``register``."""
        return (register >> self) & 0x01 == 0x01


class LcdControllerStatus(enum.IntEnum):
    """Interrupt-enable bits of the STAT register, valued by bit position."""

    H_BLANK_INTERRUPT = 3
    V_BLANK_INTERRUPT = 4
    OAM_INTERRUPT = 5
    LY_COINCIDENCE_INTERRUPT = 6

    def is_set(self, register: int) -> bool:
        """Return True if this bit is set in ``register``."""
        return (register >> self) & 0x01 == 0x01


def with_mode(register: int, mode: GpuMode) -> int:
    """Return the STAT value with its two mode bits replaced by ``mode``."""
    return (register & 0xFC) | int(mode)


def with_coincidence_flag(register: int, coincidence: bool) -> int:
    """Return the STAT value with bit 2 set when LYC equals LY."""
    return (register & 0xFB) | (0x04 if coincidence else 0x00)