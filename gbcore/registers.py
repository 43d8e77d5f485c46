"""CPU register file."""

from __future__ import annotations

from dataclasses import dataclass

Z_FLAG = 0b1000_0000
"""Zero flag: set when the last result was zero."""
N_FLAG = 0b0100_0000
"""Subtraction flag: set when the last operation was a subtraction."""
H_FLAG = 0b0010_0000
"""Half-carry flag: set on a carry from bit 3 into bit 4."""
C_FLAG = 0b0001_0000
"""Carry flag: set on a carry out of bit 7."""


@dataclass
class Registers:
    """The CPU's 8-bit registers, pairable as AF, BC, DE and HL."""

    a: int = 0
    f: int = 0
    b: int = 0
    c: int = 0
    d: int = 0
    e: int = 0
    h: int = 0
    l: int = 0  # noqa: E741
    pc: int = 0
    sp: int = 0

    def af(self) -> int:
        return (self.a << 8) | self.f

    def bc(self) -> int:
        return (self.b << 8) | self.c

    def de(self) -> int:
        return (self.d << 8) | self.e

    def hl(self) -> int:
        return (self.h << 8) | self.l

    def set_af(self, af: int) -> None:
        """Set AF; only the high nibble of F is kept."""
        self.a = (af >> 8) & 0xFF
        self.f = af & 0x00F0

    def set_bc(self, bc: int) -> None:
        self.b = (bc >> 8) & 0xFF
        self.c = bc & 0x00FF

    def set_de(self, de: int) -> None:
        self.d = (de >> 8) & 0xFF
        self.e = de & 0x00FF

    def set_hl(self, hl: int) -> None:
        self.h = (hl >> 8) & 0xFF
        self.l = hl & 0x00FF

    def flag(self, mask: int) -> bool:
        """Return True if any of the flags in ``mask`` is set."""
        return self.f & mask != 0

    def set_flag(self, mask: int, value: bool) -> None:
        """Set or clear every flag in ``mask``."""
        if value:
            self.f |= mask
        else:
            self.f &= ~mask & 0xFF

    def __str__(self) -> str:
        return (
            f"A:{self.a:02X} B:{self.b:02X} C:{self.c:02X} D:{self.d:02X} "
            f"E:{self.e:02X} F:{self.f:08b} H:{self.h:02X} L:{self.l:02X} "
            f"SP:{self.sp:04X} PC:{self.pc:04X}"
        )