"""The memory management unit tying the components to the address space."""

from __future__ import annotations

import logging

from .gpu import Gpu
from .irq import Interrupt, IrqHandler
from .joypad import Joypad, JoypadKey
from .mbc import MBC
from .memory import Memory
from .palette import RGB
from .serial import Serial, SerialCallback
from .timers import Timers

logger = logging.getLogger(__name__)

WRAM_SIZE = 0x2000
ZRAM_SIZE = 0x0080
BIOS_END = 0x100


class MachineIrqHandler(IrqHandler):
    """Holds the Interrupt Enable and Interrupt Flag registers."""

    def __init__(self) -> None:
        self.ie_reg = 0x00
        self.if_reg = 0x00

    def request_interrupt(self, interrupt: Interrupt) -> None:
        self.if_reg |= int(interrupt)


class MMU(Memory):
    """Maps the CPU address space onto the cartridge, RAM and devices.

    When a BIOS image is given and not skipped, it is mapped over the first
    0x100 bytes until the CPU reads address 0x100.
    """

    def __init__(
        self,
        mbc: MBC,
        cgb_mode: bool = False,
        skip_bios: bool = True,
        serial_callback: SerialCallback | None = None,
        bios: bytes | None = None,
    ) -> None:
        if not skip_bios and bios is None:
            raise ValueError("a BIOS image is required unless skip_bios is set")
        self._in_bios = not skip_bios
        self._bios = bytes(bios) if bios is not None else b""
        self.timers = Timers()
        self.gpu = Gpu(cgb_mode)
        self.mbc = mbc
        self.joypad = Joypad()
        self.serial = Serial(serial_callback)
        self.irq_handler = MachineIrqHandler()
        self._wram = bytearray(WRAM_SIZE)
        self._zram = bytearray(ZRAM_SIZE)

    def key_down(self, key: JoypadKey) -> None:
        self.joypad.key_down(key, self.irq_handler)

    def key_up(self, key: JoypadKey) -> None:
        self.joypad.key_up(key)

    def frame_buffer(self) -> list[RGB] | None:
        """Return the frame if a new one is ready, clearing the dirty flag."""
        if not self.gpu.dirty:
            return None
        self.gpu.dirty = False
        return self.gpu.screen_data()

    def step(self, ticks: int) -> int:
        """Advance the timers and the GPU; return the cycles spent."""
        self.timers.cycle(ticks, self.irq_handler)
        self.gpu.step(ticks, self.irq_handler)
        return ticks

    def interrupt_enable(self) -> int:
        return self.irq_handler.ie_reg

    def interrupt_flag(self) -> int:
        return self.irq_handler.if_reg

    def set_interrupt_flag(self, flag: int) -> None:
        self.irq_handler.if_reg = flag & 0xFF

    def read_byte(self, address: int) -> int:
        if self._in_bios:
            if address < BIOS_END:
                return self._bios[address]
            if address == BIOS_END:
                logger.info("MMU : leaving the BIOS")
            else:
                logger.error("MMU : BIOS overflow, leaving the BIOS")
            self._in_bios = False
            return self.read_byte(address)

        if address <= 0x7FFF:
            return self.mbc.rom_read(address)
        if address <= 0x9FFF:
            return self.gpu.read_byte(address)
        if address <= 0xBFFF:
            return self.mbc.ram_read(address)
        if address <= 0xFDFF:
            return self._wram[address & 0x1FFF]
        if address <= 0xFE9F:
            return self.gpu.read_byte(address)
        if address <= 0xFEFF:
            return 0x00
        if address == 0xFF00:
            return self.joypad.read_byte(address)
        if address == 0xFF01:
            return self.serial.data
        if address == 0xFF02:
            return self.serial.control
        if 0xFF04 <= address <= 0xFF07:
            return self.timers.read_byte(address)
        if address == 0xFF0F:
            return self.irq_handler.if_reg
        if 0xFF40 <= address <= 0xFF4F or 0xFF68 <= address <= 0xFF6B:
            return self.gpu.read_byte(address)
        if 0xFF80 <= address <= 0xFFFE:
            return self._zram[address & 0x7F]
        if address == 0xFFFF:
            return self.irq_handler.ie_reg
        return 0

    def write_byte(self, address: int, byte: int) -> None:
        byte &= 0xFF
        if address <= 0x7FFF:
            self.mbc.rom_control(address, byte)
        elif address <= 0x9FFF:
            self.gpu.write_byte(address, byte)
        elif address <= 0xBFFF:
            self.mbc.ram_write(address, byte)
        elif address <= 0xFDFF:
            self._wram[address & 0x1FFF] = byte
        elif address <= 0xFE9F:
            self.gpu.write_byte(address, byte)
        elif address <= 0xFEFF:
            pass
        elif address == 0xFF00:
            self.joypad.write_byte(address, byte)
        elif address == 0xFF01:
            self.serial.data = byte
        elif address == 0xFF02:
            self.serial.write_control(byte)
        elif 0xFF04 <= address <= 0xFF07:
            self.timers.write_byte(address, byte)
        elif address == 0xFF0F:
            self.irq_handler.if_reg = byte
        elif 0xFF40 <= address <= 0xFF4F or 0xFF68 <= address <= 0xFF6B:
            self.gpu.write_byte(address, byte)
        elif 0xFF80 <= address <= 0xFFFE:
            self._zram[address & 0x7F] = byte
        elif address == 0xFFFF:
            self.irq_handler.ie_reg = byte