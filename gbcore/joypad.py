"""The joypad input register."""

from __future__ import annotations

import enum

from .irq import Interrupt, IrqHandler
from .memory import Memory

JOYPAD_ADDRESS = 0xFF00
JOYPAD_KEYS = ("Up", "Down", "Left", "Right", "Select", "Start", "A", "B")
JOYPAD_SELECT_DIRECTIONAL = 1 << 4
JOYPAD_SELECT_BUTTON = 1 << 5


class JoypadKey(enum.Enum):
    """The eight keys of the joypad."""

    UP = "Up"
    DOWN = "Down"
    RIGHT = "Right"
    LEFT = "Left"
    A = "A"
    B = "B"
    SELECT = "Select"
    START = "Start"

    @classmethod
    def from_string(cls, symbol: str) -> JoypadKey | None:
        """Return the key named by ``symbol``, or None if there is none."""
        try:
            return cls(symbol)
        except ValueError:
            return None


# key -> (row, bit); row 0 holds directions, row 1 buttons.
_KEY_BITS = {
    JoypadKey.DOWN: (0, 0x08),
    JoypadKey.UP: (0, 0x04),
    JoypadKey.LEFT: (0, 0x02),
    JoypadKey.RIGHT: (0, 0x01),
    JoypadKey.START: (1, 0x08),
    JoypadKey.SELECT: (1, 0x04),
    JoypadKey.B: (1, 0x02),
    JoypadKey.A: (1, 0x01),
}


class Joypad(Memory):
    """The joypad, mapped at 0xFF00.

    Bit 5 (or 4) of a written byte selects the button (or direction) row;
    the low nibble read back holds that row, a 0 bit meaning pressed.
    """

    def __init__(self) -> None:
        self._rows = [0x0F, 0x0F]
        self._selection = 0

    def key_down(self, key: JoypadKey, irq_handler: IrqHandler) -> None:
        """Press ``key`` and request a joypad interrupt."""
        row, bit = _KEY_BITS[key]
        self._rows[row] &= 0x0F & ~bit
        irq_handler.request_interrupt(Interrupt.JOYPAD)

    def key_up(self, key: JoypadKey) -> None:
        """Release ``key``."""
        row, bit = _KEY_BITS[key]
        self._rows[row] |= bit

    @staticmethod
    def _check_address(address: int) -> None:
        if address != JOYPAD_ADDRESS:
            raise ValueError(f"joypad is not mapped at {address:#06x}")

    def read_byte(self, address: int) -> int:
        self._check_address(address)
        if self._selection == 0:
            return 0x00
        return self._rows[self._selection - 1]

    def write_byte(self, address: int, byte: int) -> None:
        self._check_address(address)
        select = byte & 0x30
        if select == JOYPAD_SELECT_DIRECTIONAL:
            self._selection = 1
        elif select == JOYPAD_SELECT_BUTTON:
            self._selection = 2
        else:
            self._selection = 0