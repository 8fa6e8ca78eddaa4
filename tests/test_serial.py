import pytest

from gbcore.interrupt import Interrupt
from gbcore.serial import SerialTransfer


class _Recorder:
    def __init__(self, reply=None):
        self.received = []
        self.reply = reply

    def transfer(self, data):
        self.received.append(data)
        return data if self.reply is None else self.reply


def test_data_register_round_trip():
    serial = SerialTransfer()
    serial.write(0, 0x42)
    assert serial.read(0) == 0x42


def test_transfer_to_connected_device():
    irq = Interrupt()
    serial = SerialTransfer(irq)
    device = _Recorder(reply=0x99)
    serial.connect(device)
    serial.write(0, ord("P"))
    serial.write(1, 0x81)
    assert device.received == [ord("P")]
    assert serial.read(0) == 0x99
    assert not serial.enable_transfer
    assert irq.serial


def test_transfer_without_device_clears_data():
    irq = Interrupt()
    serial = SerialTransfer(irq)
    serial.write(0, 0x55)
    serial.write(1, 0x81)
    assert serial.read(0) == 0x00
    assert irq.serial


def test_control_without_enable_does_not_transfer():
    irq = Interrupt()
    serial = SerialTransfer(irq)
    device = _Recorder()
    serial.connect(device)
    serial.write(1, 0x01)
    assert device.received == []
    assert not irq.serial
    assert serial.read(1) == 0x01


def test_control_read_after_transfer_clears_enable_bit():
    serial = SerialTransfer()
    serial.connect(_Recorder())
    serial.write(1, 0x81)
    assert serial.read(1) & 0x80 == 0
    assert serial.master


def test_invalid_register():
    serial = SerialTransfer()
    with pytest.raises(IndexError):
        serial.read(2)
    with pytest.raises(IndexError):
        serial.write(2, 0)