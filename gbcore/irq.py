"""Interrupt identifiers and the interface used to request them."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod

INTERRUPT_FLAG_ADDRESS = 0xFF0F
"""Interrupt Flag Register memory address."""

INTERRUPT_ENABLE_ADDRESS = 0xFFFF
"""Interrupt Enable Register memory address."""


class Interrupt(enum.IntEnum):
    """The interrupts of the Game Boy, valued by their flag bit."""

    V_BLANK = 1 << 0
    LCD_STAT = 1 << 1
    TIMER = 1 << 2
    SERIAL = 1 << 3
    JOYPAD = 1 << 4

    @classmethod
    def from_u8(cls, byte: int) -> Interrupt | None:
        """Return the interrupt whose flag bit equals ``byte``, or None."""
        try:
            return cls(byte)
        except ValueError:
            return None

    def address(self) -> int:
        """Return the address the CPU jumps to in order to handle the interrupt."""
        return _HANDLER_ADDRESSES[self]


_HANDLER_ADDRESSES = {
    Interrupt.V_BLANK: 0x40,
    Interrupt.LCD_STAT: 0x48,
    Interrupt.TIMER: 0x50,
    Interrupt.SERIAL: 0x58,
    Interrupt.JOYPAD: 0x60,
}


class IrqHandler(ABC):
    """Receives interrupt requests from hardware components."""

    @abstractmethod
    def request_interrupt(self, interrupt: Interrupt) -> None:
        """Request the given interrupt."""


class EmptyIrqHandler(IrqHandler):
    """A handler that ignores every request."""

    def request_interrupt(self, interrupt: Interrupt) -> None:
        pass