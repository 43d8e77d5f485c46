# gbcore

Hardware components for a Game Boy (Color) emulator: the memory
management unit, the GPU with its tiles, palettes and LCD registers, the
timers, the joypad, the serial port, the interrupt registers and the
cartridge memory bank controllers (no MBC and MBC1).

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Loading a cartridge

```python
from gbcore.mbc import load_cartridge, cartridge_from_bytes, CartridgeError

try:
    mbc = load_cartridge("game.gb")
except CartridgeError as exc:
    print(f"cannot load ROM: {exc}")
```

`cartridge_from_bytes(data)` does the same from ROM bytes already in
memory. The controller is chosen from the MBC type byte of the cartridge
header (`0x00` gives `MBC0`, `0x01`–`0x03` give `MBC1`); other types, a
file that cannot be read, a ROM too large for its controller, or an
`MBC0` cartridge declaring a RAM size other than 0 or 8 KB raise
`CartridgeError`.

## Wiring up the memory map

```python
from gbcore.mmu import MMU
from gbcore.joypad import JoypadKey

output = []
mmu = MMU(mbc, cgb_mode=False, skip_bios=True,
          serial_callback=lambda byte: output.append(chr(byte)))

mmu.write_byte(0xC000, 0x42)        # work RAM
assert mmu.read_byte(0xC000) == 0x42

mmu.key_down(JoypadKey.START)       # requests a joypad interrupt
mmu.step(4)                         # advance timers and GPU by 4 clock cycles

frame = mmu.frame_buffer()          # list of RGB pixels, or None if no new frame
```

`frame_buffer()` returns the 160 × 144 `RGB` values in row-major order
when the GPU has marked a frame ready, and clears that mark. Bytes written
to the serial data register (`0xFF01`) are handed to the callback when
`0x81` is written to the serial control register (`0xFF02`).

To start from a boot image, pass `skip_bios=False` together with
`bios=<bytes>`; it is mapped over addresses `0x0000`–`0x00FF` until the
first read of `0x0100`. Without a `bios`, `skip_bios=False` raises
`ValueError`.

The interrupt registers are reachable through `mmu.interrupt_enable()`,
`mmu.interrupt_flag()` and `mmu.set_interrupt_flag(flag)`, or at
addresses `0xFFFF` and `0xFF0F`.

## Components

- `gbcore.mmu.MMU` — the address space: cartridge ROM/RAM, video memory,
  work RAM and its echo, zero-page RAM and the I/O registers.
- `gbcore.gpu.Gpu` — LCD mode state machine, background and window
  rendering, tile data and tilemaps, CGB palette registers.
- `gbcore.timers.Timers` — DIV, TIMA, TMA and TAC.
- `gbcore.joypad.Joypad` and `JoypadKey` — the joypad register and key state.
- `gbcore.serial.Serial` — the serial data and control registers.
- `gbcore.irq.Interrupt` — the five interrupt sources and their handler
  addresses; `IrqHandler` is the interface components use to request them.
- `gbcore.mbc` — `CartridgeHeader`, `ram_size`, `MBC`, `MBC0`, `MBC1`.
- `gbcore.registers.Registers` — a CPU register file with paired access
  (`af`, `bc`, `de`, `hl`) and flag helpers (`Z_FLAG`, `N_FLAG`,
  `H_FLAG`, `C_FLAG`).
- `gbcore.tile.Tile`, `gbcore.palette`, `gbcore.lcd`, `gbcore.cgb` — the
  pieces the GPU is built from.

## What it does not do

- There is no CPU: no instruction decoding or execution. `Registers` is
  only the register file; something else has to drive `MMU.step`.
- Sprites are not drawn; only the background and window layers are
  rendered, with the monochrome background palette.
- No boot image is included; one must be supplied to run it.
- Only cartridges without a controller and MBC1 cartridges are supported,
  and cartridge RAM is not saved anywhere.
- There is no display window, sound or command-line program.