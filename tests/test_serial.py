from gbcore.serial import Serial


def test_initial_registers_are_zero():
    serial = Serial()
    assert serial.data == 0x00
    assert serial.control == 0x00


def test_transfer_calls_callback_with_data():
    received = []
    serial = Serial(received.append)
    serial.data = ord("P")
    serial.write_control(0x81)
    assert received == [ord("P")]
    assert serial.control == 0x81


def test_other_control_values_do_not_transfer():
    received = []
    serial = Serial(received.append)
    serial.data = 0x42
    serial.write_control(0x80)
    serial.write_control(0x01)
    assert received == []
    assert serial.control == 0x01


def test_each_transfer_sends_current_data():
    received = []
    serial = Serial(received.append)
    for char in "Passed":
        serial.data = ord(char)
        serial.write_control(0x81)
    assert "".join(map(chr, received)) == "Passed"


def test_transfer_without_callback_keeps_state():
    serial = Serial()
    serial.data = 0x41
    serial.write_control(0x81)
    assert serial.control == 0x81
    assert serial.data == 0x41