"""Common interface for byte-addressable memory devices."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Memory(ABC):
    """A 16-bit addressed memory device reading and writing bytes."""

    @abstractmethod
    def read_byte(self, address: int) -> int:
        """Return the byte stored at ``address``."""

    @abstractmethod
    def write_byte(self, address: int, byte: int) -> None:
        """Store ``byte`` at ``address``."""

    def read_word(self, address: int) -> int:
        """Return the little-endian word stored at ``address``."""
        low = self.read_byte(address)
        high = self.read_byte((address + 1) & 0xFFFF)
        return low | (high << 8)

    def write_word(self, address: int, word: int) -> None:
        """Store ``word`` little-endian at ``address``."""
        self.write_byte(address, word & 0x00FF)
        self.write_byte((address + 1) & 0xFFFF, (word & 0xFF00) >> 8)