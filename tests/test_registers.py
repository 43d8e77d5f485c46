import pytest

from gbcore.registers import C_FLAG, H_FLAG, N_FLAG, Z_FLAG, Registers


def test_default_registers_are_zero():
    regs = Registers()
    assert (regs.af(), regs.bc(), regs.de(), regs.hl()) == (0, 0, 0, 0)
    assert (regs.pc, regs.sp) == (0, 0)


@pytest.mark.parametrize("value", [0x0000, 0x1234, 0xABCD, 0xFFFF])
@pytest.mark.parametrize("pair", ["bc", "de", "hl"])
def test_pair_round_trip(pair, value):
    regs = Registers()
    getattr(regs, f"set_{pair}")(value)
    assert getattr(regs, pair)() == value


def test_pair_splits_into_high_and_low():
    regs = Registers()
    regs.set_hl(0xC0DE)
    assert regs.h == 0xC0
    assert regs.l == 0xDE


def test_set_af_filters_low_nibble_of_f():
    regs = Registers()
    regs.set_af(0x12FF)
    assert regs.a == 0x12
    assert regs.f == 0xF0
    assert regs.af() == 0x12F0


@pytest.mark.parametrize("mask", [Z_FLAG, N_FLAG, H_FLAG, C_FLAG])
def test_set_and_clear_flag(mask):
    regs = Registers()
    regs.set_flag(mask, True)
    assert regs.flag(mask)
    assert regs.f == mask
    regs.set_flag(mask, False)
    assert not regs.flag(mask)
    assert regs.f == 0


def test_combined_mask_clears_only_those_flags():
    regs = Registers()
    for mask in (Z_FLAG, N_FLAG, H_FLAG, C_FLAG):
        regs.set_flag(mask, True)
    regs.set_flag(N_FLAG | H_FLAG, False)
    assert regs.flag(Z_FLAG)
    assert regs.flag(C_FLAG)
    assert not regs.flag(N_FLAG)
    assert not regs.flag(H_FLAG)


def test_str_format():
    regs = Registers(a=0x01, f=Z_FLAG, b=0x02, sp=0xFFFE, pc=0x0100)
    assert str(regs) == (
        "A:01 B:02 C:00 D:00 E:00 F:10000000 H:00 L:00 SP:FFFE PC:0100"
    )