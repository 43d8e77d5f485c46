"""The LCD controller: video memory, timing and scanline rendering."""

from __future__ import annotations

from .cgb import BGP_DATA, BGP_INDEX, OBP_DATA, OBP_INDEX, VRAM_BANK, GpuData
from .irq import Interrupt, IrqHandler
from .lcd import (
    BGP,
    CONTROL,
    LY,
    LYC,
    OBP_0,
    OBP_1,
    SCX,
    SCY,
    STAT,
    WX,
    WY,
    GpuMode,
    LcdControl,
    LcdControllerStatus,
    with_coincidence_flag,
    with_mode,
)
from .memory import Memory
from .palette import RGB, PaletteClassic
from .tile import TILE_BYTES, Tile

SCREEN_W = 160
"""Width of the screen, in pixels."""
SCREEN_H = 144
"""Height of the screen, in pixels."""

BACKGROUND_WIDTH = 256
BACKGROUND_HEIGHT = 256
TILEMAP_SIZE = 0x400
TILESET_SIZE = 384

H_BLANK_CYCLES = 204
V_BLANK_CYCLES = 456
OAM_READ_CYCLES = 80
VRAM_READ_CYCLES = 172

V_BLANK_LINES = 10

TILESET_START = 0x8000
TILESET_END = 0x97FF
TILEMAP_0_START = 0x9800
TILEMAP_0_END = 0x9BFF
TILEMAP_1_START = 0x9C00
TILEMAP_1_END = 0x9FFF

WHITE = RGB(255, 255, 255)


class Gpu(Memory):
    """The video unit of the Game Boy (Color).

    Durations are counted in CPU clock cycles at 4194304 Hz. The ``dirty``
    flag is raised when a frame is complete and must be cleared by the
    consumer of the frame.
    """

    def __init__(self, cgb_mode: bool = False) -> None:
        self.cgb_mode = cgb_mode
        self.cgb_data: GpuData | None = GpuData() if cgb_mode else None
        self.mode = GpuMode.H_BLANK
        self.mode_clock = 0
        self.lcd_control = 0
        self.lcdc_status = 0
        self.ly = 0
        self.lyc = 0
        self.scroll_x = 0
        self.scroll_y = 0
        self.window_x = 0
        self.window_y = 0
        self._frame_buffer = [WHITE] * (SCREEN_W * SCREEN_H)
        self.bg_palette = PaletteClassic()
        self.ob_palettes = (PaletteClassic(), PaletteClassic())
        self.tileset = [Tile() for _ in range(TILESET_SIZE)]
        self.tilemaps = (bytearray(TILEMAP_SIZE), bytearray(TILEMAP_SIZE))
        self.dirty = True

    def step(self, ticks: int, irq_handler: IrqHandler) -> None:
        """Advance the GPU by ``ticks`` clock cycles.

        Cycles through OAM read, VRAM read and H-blank for each of the 144
        lines, then spends 10 lines in V-blank before starting over.
        """
        if not LcdControl.LCD_DISPLAY_ENABLE.is_set(self.lcd_control):
            return

        self.mode_clock += ticks
        status = self.lcdc_status

        if self.mode is GpuMode.OAM_READ and self.mode_clock >= OAM_READ_CYCLES:
            self.mode_clock -= OAM_READ_CYCLES
            self._switch_mode(GpuMode.VRAM_READ)
        elif self.mode is GpuMode.VRAM_READ and self.mode_clock >= VRAM_READ_CYCLES:
            self.mode_clock -= VRAM_READ_CYCLES
            self._render_scanline()
            self._switch_mode(GpuMode.H_BLANK)
            if LcdControllerStatus.H_BLANK_INTERRUPT.is_set(status):
                irq_handler.request_interrupt(Interrupt.LCD_STAT)
        elif self.mode is GpuMode.H_BLANK and self.mode_clock >= H_BLANK_CYCLES:
            self.mode_clock -= H_BLANK_CYCLES
            self.ly += 1
            if self.ly == SCREEN_H:
                self._switch_mode(GpuMode.V_BLANK)
                self.dirty = True
                irq_handler.request_interrupt(Interrupt.V_BLANK)
                if LcdControllerStatus.V_BLANK_INTERRUPT.is_set(status):
                    irq_handler.request_interrupt(Interrupt.LCD_STAT)
            else:
                self._switch_mode(GpuMode.OAM_READ)
                if LcdControllerStatus.OAM_INTERRUPT.is_set(status):
                    irq_handler.request_interrupt(Interrupt.LCD_STAT)
        elif self.mode is GpuMode.V_BLANK and self.mode_clock >= V_BLANK_CYCLES:
            self.mode_clock -= V_BLANK_CYCLES
            self.ly += 1
            if self.ly == SCREEN_H + V_BLANK_LINES:
                self.ly = 0
                self._switch_mode(GpuMode.OAM_READ)
                if LcdControllerStatus.OAM_INTERRUPT.is_set(status):
                    irq_handler.request_interrupt(Interrupt.LCD_STAT)

        coincidence = self.lyc == self.ly
        self.lcdc_status = with_coincidence_flag(self.lcdc_status, coincidence)
        if coincidence and LcdControllerStatus.LY_COINCIDENCE_INTERRUPT.is_set(
            self.lcdc_status
        ):
            irq_handler.request_interrupt(Interrupt.LCD_STAT)

    def screen_data(self) -> list[RGB]:
        """Return a copy of the frame buffer, row by row."""
        return list(self._frame_buffer)

    def _switch_mode(self, new_mode: GpuMode) -> None:
        self.lcdc_status = with_mode(self.lcdc_status, new_mode)
        self.mode = new_mode

    def _render_scanline(self) -> None:
        self._render_line_tiles(self.ly)
        self._render_line_sprites(self.ly)

    def _render_line_tiles(self, y: int) -> None:
        if LcdControl.BG_DISPLAY_ENABLE.is_set(self.lcd_control):
            self._render_layer(
                y, 0, LcdControl.BG_TILE_MAP_DISPLAY_SELECT.is_set(self.lcd_control)
            )
        if LcdControl.WINDOW_DISPLAY_ENABLE.is_set(self.lcd_control):
            self._render_layer(
                y,
                max(self.window_x - 7, 0),
                LcdControl.WINDOW_TILE_MAP_DISPLAY_SELECT.is_set(self.lcd_control),
            )

    def _render_layer(self, y: int, x_start: int, tilemap_2: bool) -> None:
        shades = self.bg_palette.data
        layer_y = (self.scroll_y + y) % BACKGROUND_HEIGHT
        row = y * SCREEN_W
        for x in range(x_start, SCREEN_W):
            layer_x = (self.scroll_x + x) % BACKGROUND_WIDTH
            tile = self._get_tile(layer_x, layer_y, tilemap_2)
            color_index = tile.data[layer_y % 8][layer_x % 8]
            self._frame_buffer[row + x] = shades[color_index].as_rgb()

    def _get_tile(self, x: int, y: int, tilemap_2: bool) -> Tile:
        index = (y // 8) * 32 + x // 8
        tile_index = self.tilemaps[1 if tilemap_2 else 0][index]
        if LcdControl.BG_WINDOW_TILE_DATA_SELECT.is_set(self.lcd_control):
            tileset_index = tile_index
        else:
            tileset_index = 256 + tile_index
        if tileset_index >= len(self.tileset):
            raise IndexError(
                f"tileset index {tileset_index} out of range "
                f"(x={x}, y={y}, tilemap_2={tilemap_2})"
            )
        return self.tileset[tileset_index]

    def _render_line_sprites(self, y: int) -> None:
        # Sprites are not drawn; the object layer leaves the line untouched.
        if not LcdControl.OBJ_DISPLAY_ENABLE.is_set(self.lcd_control):
            return

    def read_byte(self, address: int) -> int:
        if self.cgb_data is not None:
            data = self.cgb_data
            if address == VRAM_BANK:
                return data.vram_bank_selector
            if address == BGP_INDEX:
                return data.bg_palette_index.raw_value
            if address == BGP_DATA:
                return data.get_bg_color()
            if address == OBP_INDEX:
                return data.ob_palette_index.raw_value
            if address == OBP_DATA:
                return data.get_ob_color()

        if TILESET_START <= address <= TILESET_END:
            tile_index, data_index = divmod(address - TILESET_START, TILE_BYTES)
            return self.tileset[tile_index].raw_byte(data_index)
        if TILEMAP_0_START <= address <= TILEMAP_0_END:
            return self.tilemaps[0][address - TILEMAP_0_START]
        if TILEMAP_1_START <= address <= TILEMAP_1_END:
            return self.tilemaps[1][address - TILEMAP_1_START]

        registers = {
            CONTROL: lambda: self.lcd_control,
            STAT: lambda: self.lcdc_status,
            SCY: lambda: self.scroll_y,
            SCX: lambda: self.scroll_x,
            LY: lambda: self.ly & 0xFF,
            LYC: lambda: self.lyc & 0xFF,
            BGP: lambda: self.bg_palette.raw,
            OBP_0: lambda: self.ob_palettes[0].raw,
            OBP_1: lambda: self.ob_palettes[1].raw,
            WY: lambda: self.window_y,
            WX: lambda: self.window_x,
        }
        getter = registers.get(address)
        return getter() if getter is not None else 0

    def write_byte(self, address: int, byte: int) -> None:
        byte &= 0xFF
        if self.cgb_data is not None:
            data = self.cgb_data
            if address == VRAM_BANK:
                data.vram_bank_selector = byte
                return
            if address == BGP_INDEX:
                data.bg_palette_index.update_with(byte)
                return
            if address == BGP_DATA:
                data.set_bg_color(byte)
                return
            if address == OBP_INDEX:
                data.ob_palette_index.update_with(byte)
                return
            if address == OBP_DATA:
                data.set_ob_color(byte)
                return

        if TILESET_START <= address <= TILESET_END:
            tile_index, data_index = divmod(address - TILESET_START, TILE_BYTES)
            self.tileset[tile_index].update_raw_byte(data_index, byte)
        elif TILEMAP_0_START <= address <= TILEMAP_0_END:
            self.tilemaps[0][address - TILEMAP_0_START] = byte
        elif TILEMAP_1_START <= address <= TILEMAP_1_END:
            self.tilemaps[1][address - TILEMAP_1_START] = byte
        elif address == CONTROL:
            self.lcd_control = byte
        elif address == STAT:
            # bits 2 to 0 are read-only
            self.lcdc_status = (byte & 0xF8) | (self.lcdc_status & 0x07)
        elif address == SCY:
            self.scroll_y = byte
        elif address == SCX:
            self.scroll_x = byte
        elif address == LY:
            self.ly = 0
        elif address == LYC:
            self.lyc = byte
        elif address == BGP:
            self.bg_palette.set(byte)
        elif address == OBP_0:
            self.ob_palettes[0].set(byte)
        elif address == OBP_1:
            self.ob_palettes[1].set(byte)
        elif address == WY:
            self.window_y = byte
        elif address == WX:
            self.window_x = byte