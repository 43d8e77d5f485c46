"""Game Boy (Color) hardware components: MMU, GPU, timers, joypad, serial port and cartridge controllers."""

__version__ = "0.1.0"