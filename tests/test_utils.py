import pytest

from dhcrypt.common.utils import byte_length, int_to_le_bytes, log


@pytest.mark.parametrize("bits, expected", [(1, 1), (8, 1), (9, 2), (63, 8), (64, 8), (65, 9)])
def test_byte_length(bits, expected):
    assert byte_length(bits) == expected


def test_int_to_le_bytes_orders_least_significant_first():
    value = 0x0102030405060708
    out = int_to_le_bytes(value, 8)
    assert out == bytes([0x08, 0x07, 0x06, 0x05, 0x04, 0x03, 0x02, 0x01])
    for i in range(8):
        assert out[i] == (value >> (8 * i)) & 0xFF


def test_int_to_le_bytes_pads_to_length():
    assert int_to_le_bytes(5, 4) == b"\x05\x00\x00\x00"
    assert int_to_le_bytes(0, 3) == b"\x00\x00\x00"


def test_int_to_le_bytes_rejects_overflow_and_negative():
    with pytest.raises(ValueError):
        int_to_le_bytes(1 << 64, 8)
    with pytest.raises(ValueError):
        int_to_le_bytes(-1, 8)


def test_log_respects_verbose(capsys):
    log("DH", "quiet", verbose=False)
    assert capsys.readouterr().out == ""
    log("DH", "loud", verbose=True)
    assert capsys.readouterr().out == "[DH] loud\n"
