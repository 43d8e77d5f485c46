"""Cartridge header access and the Memory Bank Controllers."""

from __future__ import annotations

import enum
import logging
import os
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)

ROM_BANK_SIZE = 0x4000
RAM_BANK_SIZE = 0x2000


class CartridgeError(Exception):
    """Raised when a cartridge cannot be loaded or is not supported."""


class CartridgeHeader(enum.IntEnum):
    """Single-byte cartridge header fields, valued by their ROM address."""

    MBC_TYPE = 0x0147
    ROM_SIZE = 0x0148
    RAM_SIZE = 0x0149
    DESTINATION_CODE = 0x014A
    """0x00 for the Japanese market, 0x01 otherwise."""
    LICENSEE_CODE_OLD = 0x014B
    """Publisher code; 0x33 means the new format at 0x0144-0x0145 is used."""

    @property
    def address(self) -> int:
        """The ROM address of the field."""
        return int(self)


_RAM_SIZES = {
    0x01: 0x0800,  # 2 KB
    0x02: 0x2000,  # 8 KB
    0x03: 0x8000,  # 32 KB
}


def _header_byte(rom: bytes | bytearray, field: CartridgeHeader) -> int:
    if len(rom) <= field.address:
        raise CartridgeError("ROM too small to hold a cartridge header")
    return rom[field.address]


def ram_size(rom: bytes | bytearray) -> int:
    """Return the external RAM size, in bytes, declared by the ROM header."""
    return _RAM_SIZES.get(_header_byte(rom, CartridgeHeader.RAM_SIZE), 0)


class MBC(ABC):
    """Interface between the MMU and a cartridge's ROM and RAM banks."""

    @abstractmethod
    def rom_read(self, address: int) -> int:
        """Return the ROM byte visible at ``address``."""

    @abstractmethod
    def ram_read(self, address: int) -> int:
        """Return the external RAM byte visible at ``address``."""

    @abstractmethod
    def rom_control(self, address: int, value: int) -> None:
        """Handle a write to the ROM area, which drives the control registers."""

    @abstractmethod
    def ram_write(self, address: int, value: int) -> None:
        """Store ``value`` in external RAM at ``address``."""


class MBC0(MBC):
    """No controller: the ROM fits the address space, with 0 or 8 KB of RAM."""

    ROM_SIZE = 0x10000
    ERAM_SIZE = 0x2000

    def __init__(self, data: bytes | bytearray) -> None:
        if len(data) > self.ROM_SIZE:
            raise CartridgeError("ROM too big without any MBC")
        self._rom = bytearray(self.ROM_SIZE)
        self._rom[: len(data)] = data
        size = ram_size(data)
        if size == 0:
            self._eram: bytearray | None = None
        elif size == self.ERAM_SIZE:
            self._eram = bytearray(self.ERAM_SIZE)
        else:
            logger.error("MBC0 : invalid external RAM size of %d bytes", size)
            raise CartridgeError("MBC0 supports either 0 KB or 8 KB of external RAM")

    def rom_read(self, address: int) -> int:
        return self._rom[address]

    def ram_read(self, address: int) -> int:
        if self._eram is None:
            return 0x00
        return self._eram[address & 0x1FFF]

    def rom_control(self, address: int, value: int) -> None:
        pass

    def ram_write(self, address: int, value: int) -> None:
        if self._eram is not None:
            self._eram[address & 0x1FFF] = value & 0xFF


class MBC1(MBC):
    """Up to 125 ROM banks of 16 KB and 0, 2, 8 or 32 KB of RAM."""

    MAX_ROM_BANKS = 0x7D

    def __init__(self, data: bytes | bytearray) -> None:
        if len(data) > ROM_BANK_SIZE * self.MAX_ROM_BANKS:
            raise CartridgeError("MBC1 does not support more than 2MB of ROM")
        mbc_type = _header_byte(data, CartridgeHeader.MBC_TYPE)
        # 0x02: RAM, 0x03: RAM + battery
        size = ram_size(data) if mbc_type in (0x02, 0x03) else 0
        self._rom = bytes(data)
        self._ram = bytearray(size)
        self.rom_bank = 0x01
        self.ram_bank = 0x00
        self.ram_enabled = False
        self.ram_mode = False

    def rom_read(self, address: int) -> int:
        if address < ROM_BANK_SIZE:
            return self._rom[address]
        return self._rom[self.rom_bank * ROM_BANK_SIZE + (address & 0x3FFF)]

    def _ram_offset(self, address: int) -> int:
        bank = self.ram_bank if self.ram_mode else 0x00
        return bank * RAM_BANK_SIZE + (address & 0x1FFF)

    def ram_read(self, address: int) -> int:
        if not self.ram_enabled:
            return 0x00
        return self._ram[self._ram_offset(address)]

    def rom_control(self, address: int, value: int) -> None:
        if 0x0000 <= address <= 0x1FFF:
            self.ram_enabled = value == 0x0A
        elif 0x2000 <= address <= 0x3FFF:
            low = value & 0x1F
            self.rom_bank = (self.rom_bank & 0x60) + (low or 0x01)
        elif 0x4000 <= address <= 0x5FFF:
            n = value & 0x03
            if self.ram_mode:
                self.ram_bank = n
            else:
                self.rom_bank = (self.rom_bank & 0x1F) | (n << 5)
        elif 0x6000 <= address <= 0x7FFF:
            self.ram_mode = value == 0x01
        else:
            raise ValueError(f"MBC1 : cannot write to ROM at {address:04X}")

    def ram_write(self, address: int, value: int) -> None:
        if not self.ram_enabled:
            return
        self._ram[self._ram_offset(address)] = value & 0xFF


def cartridge_from_bytes(data: bytes | bytearray) -> MBC:
    """Return the MBC matching the header of ``data``, loaded with it."""
    mbc_type = _header_byte(data, CartridgeHeader.MBC_TYPE)
    if mbc_type == 0x00:
        logger.info("MBC used by the cartridge : none.")
        return MBC0(data)
    if 0x01 <= mbc_type <= 0x03:
        logger.info("MBC used by the cartridge : MBC1.")
        return MBC1(data)
    raise CartridgeError("unsupported cartridge MBC")


def load_cartridge(filepath: str | os.PathLike[str]) -> MBC:
    """Load the ROM file at ``filepath`` and return its MBC."""
    try:
        with open(filepath, "rb") as rom_file:
            data = rom_file.read()
    except OSError as exc:
        raise CartridgeError("could not load the file as a gameboy ROM") from exc
    return cartridge_from_bytes(data)