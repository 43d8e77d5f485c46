import pytest

from gbcore.mbc import (
    MBC0,
    MBC1,
    CartridgeError,
    CartridgeHeader,
    cartridge_from_bytes,
    load_cartridge,
    ram_size,
)


def make_rom(size=0x8000, mbc_type=0x00, ram_code=0x00):
    rom = bytearray(size)
    rom[CartridgeHeader.MBC_TYPE] = mbc_type
    rom[CartridgeHeader.RAM_SIZE] = ram_code
    return rom


def make_banked_rom(banks, mbc_type=0x01, ram_code=0x00):
    rom = bytearray()
    for bank in range(banks):
        rom += bytes([bank]) * 0x4000
    rom[CartridgeHeader.MBC_TYPE] = mbc_type
    rom[CartridgeHeader.RAM_SIZE] = ram_code
    return rom


@pytest.mark.parametrize(
    "code, expected", [(0x00, 0), (0x01, 0x0800), (0x02, 0x2000), (0x03, 0x8000)]
)
def test_ram_size(code, expected):
    assert ram_size(make_rom(ram_code=code)) == expected


def test_ram_size_short_rom():
    with pytest.raises(CartridgeError):
        ram_size(bytes(0x100))


def test_mbc0_reads_rom():
    rom = make_rom()
    rom[0x0150] = 0xAB
    rom[0x7FFF] = 0xCD
    mbc = MBC0(rom)
    assert mbc.rom_read(0x0150) == 0xAB
    assert mbc.rom_read(0x7FFF) == 0xCD


def test_mbc0_too_big():
    with pytest.raises(CartridgeError):
        MBC0(make_rom(size=0x10001))


def test_mbc0_invalid_ram_size():
    with pytest.raises(CartridgeError):
        MBC0(make_rom(ram_code=0x01))


def test_mbc0_without_ram():
    mbc = MBC0(make_rom())
    mbc.ram_write(0xA000, 0x55)
    assert mbc.ram_read(0xA000) == 0x00


def test_mbc0_ram_round_trip():
    mbc = MBC0(make_rom(ram_code=0x02))
    mbc.ram_write(0xA123, 0x5A)
    assert mbc.ram_read(0xA123) == 0x5A


def test_mbc1_default_bank_is_one():
    mbc = MBC1(make_banked_rom(4))
    assert mbc.rom_read(0x0000) == 0
    assert mbc.rom_read(0x4000) == 1


def test_mbc1_bank_switch():
    mbc = MBC1(make_banked_rom(4))
    mbc.rom_control(0x2000, 3)
    assert mbc.rom_read(0x4000) == 3
    mbc.rom_control(0x2000, 2)
    assert mbc.rom_read(0x7FFF) == 2
    mbc.rom_control(0x2000, 0)
    assert mbc.rom_read(0x4000) == 1


def test_mbc1_ram_disabled_by_default():
    mbc = MBC1(make_banked_rom(2, mbc_type=0x03, ram_code=0x02))
    mbc.ram_write(0xA000, 0x77)
    assert mbc.ram_read(0xA000) == 0x00


def test_mbc1_ram_round_trip_and_disable():
    mbc = MBC1(make_banked_rom(2, mbc_type=0x02, ram_code=0x02))
    mbc.rom_control(0x0000, 0x0A)
    mbc.ram_write(0xA010, 0x77)
    assert mbc.ram_read(0xA010) == 0x77
    mbc.rom_control(0x0000, 0x00)
    assert mbc.ram_read(0xA010) == 0x00


def test_mbc1_ram_banks():
    mbc = MBC1(make_banked_rom(2, mbc_type=0x03, ram_code=0x03))
    mbc.rom_control(0x0000, 0x0A)
    mbc.rom_control(0x6000, 0x01)
    mbc.rom_control(0x4000, 0x01)
    mbc.ram_write(0xA000, 0x11)
    mbc.rom_control(0x4000, 0x00)
    assert mbc.ram_read(0xA000) == 0x00
    mbc.rom_control(0x4000, 0x01)
    assert mbc.ram_read(0xA000) == 0x11


def test_mbc1_invalid_control_address():
    mbc = MBC1(make_banked_rom(2))
    with pytest.raises(ValueError):
        mbc.rom_control(0x8000, 0x00)


def test_mbc1_too_big():
    with pytest.raises(CartridgeError):
        MBC1(make_rom(size=0x4000 * 0x7D + 1, mbc_type=0x01))


def test_cartridge_from_bytes_selects_mbc():
    rom0 = make_rom()
    rom0[0x0200] = 0x42
    mbc0 = cartridge_from_bytes(rom0)
    assert isinstance(mbc0, MBC0) and mbc0.rom_read(0x0200) == 0x42
    mbc1 = cartridge_from_bytes(make_banked_rom(2, mbc_type=0x01))
    assert isinstance(mbc1, MBC1) and mbc1.rom_read(0x4000) == 1


def test_cartridge_from_bytes_unsupported():
    with pytest.raises(CartridgeError):
        cartridge_from_bytes(make_rom(mbc_type=0x05))


def test_load_cartridge(tmp_path):
    rom = make_rom()
    rom[0x1234] = 0x9C
    path = tmp_path / "game.gb"
    path.write_bytes(bytes(rom))
    assert load_cartridge(path).rom_read(0x1234) == 0x9C


def test_load_cartridge_missing_file(tmp_path):
    with pytest.raises(CartridgeError):
        load_cartridge(tmp_path / "missing.gb")