from gbcore.cgb import GpuData, PaletteIndexRegister
from gbcore.palette import RGB


def test_palette_index_register_decoding():
    index = PaletteIndexRegister(0xAD)
    assert index.raw_value == 0xAD
    assert index.high_byte
    assert index.color_index == 2
    assert index.index == 5
    assert index.auto_increment_enabled


def test_update_with_redecodes():
    index = PaletteIndexRegister(0xAD)
    index.update_with(0x00)
    assert index.raw_value == 0x00
    assert not index.high_byte
    assert index.color_index == 0
    assert index.index == 0
    assert not index.auto_increment_enabled


def test_auto_increment_enabled():
    index = PaletteIndexRegister(0x80)
    index.auto_increment()
    assert index.raw_value == 0x81
    assert index.high_byte
    index.auto_increment()
    assert index.raw_value == 0x82
    assert index.color_index == 1
    assert not index.high_byte


def test_auto_increment_disabled():
    index = PaletteIndexRegister(0x05)
    index.auto_increment()
    assert index.raw_value == 0x05


def test_bg_color_round_trip():
    data = GpuData()
    data.bg_palette_index.update_with(0x0B)  # palette 1, color 1, high byte
    data.set_bg_color(0x7C)
    assert data.get_bg_color() == 0x7C
    assert data.bg_palettes[1].data[1].raw_high() == 0x7C
    assert data.bg_palettes[1].data[1].raw_low() == 0x00
    assert data.bg_palette_index.raw_value == 0x0B


def test_bg_color_auto_increment_writes_whole_color():
    data = GpuData()
    data.bg_palette_index.update_with(0x80)
    data.set_bg_color(0x1F)
    data.set_bg_color(0x00)
    color = data.bg_palettes[0].data[0]
    assert color.raw == 0x001F
    assert color.rgb() == RGB(248, 0, 0)
    assert data.bg_palette_index.raw_value == 0x82


def test_ob_color_write():
    data = GpuData()
    data.ob_palette_index.update_with(0x80 | (7 << 3) | (3 << 1))
    data.set_ob_color(0xE0)
    data.set_ob_color(0x03)
    color = data.ob_palettes[7].data[3]
    assert color.raw == 0x03E0
    assert color.rgb() == RGB(0, 248, 0)
    assert data.bg_palettes[7].data[3].raw == 0x0000


def test_vram_bank_defaults():
    data = GpuData()
    assert data.vram_bank_selector == 0x00
    assert len(data.vram_bank) == 0x2000
    assert not any(data.vram_bank)