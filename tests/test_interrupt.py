import pytest

from gbcore.interrupt import Interrupt, InterruptFlags


@pytest.mark.parametrize("value", range(0x20))
def test_interrupt_round_trip(value):
    reg = Interrupt()
    reg.write(0, value)
    assert reg.read(0) == value


def test_interrupt_upper_bits_dropped():
    reg = Interrupt()
    reg.write(0, 0xFF)
    assert reg.read(0) == 0x1F


def test_interrupt_bit_assignment():
    reg = Interrupt()
    reg.write(0, 1 << 4)
    assert reg.joypad
    assert not (reg.serial or reg.timer or reg.lcd or reg.vblank)
    reg.write(0, 1 << 0)
    assert reg.vblank
    assert not (reg.joypad or reg.serial or reg.timer or reg.lcd)


def test_interrupt_fields_drive_read():
    reg = Interrupt(timer=True)
    assert reg.read(0) == 1 << 2


def test_interrupt_invalid_address():
    reg = Interrupt()
    with pytest.raises(IndexError):
        reg.read(1)
    with pytest.raises(IndexError):
        reg.write(1, 0)


@pytest.mark.parametrize("value", range(0x20))
def test_flags_round_trip_any_address(value):
    flags = InterruptFlags()
    flags.write(5, value)
    assert flags.read(9) == value


def test_flags_bit_assignment():
    flags = InterruptFlags()
    flags.write(0, 1 << 3)
    assert flags.serial
    assert not (flags.vblank or flags.lcd or flags.timer or flags.joypad)