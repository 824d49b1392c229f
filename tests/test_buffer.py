import pytest

from hexview.core.buffer import ByteBuffer
from hexview.core.errors import HexViewError, OutOfRange


def test_read_and_write_in_place():
    buf = ByteBuffer(b'\x00\x11\x22\x33')

    buf.write(2, 0xAB)

    assert buf.read(2) == 0xAB
    assert bytes(buf) == b'\x00\x11\xab\x33'
    assert len(buf) == 4


@pytest.mark.parametrize("offset", [4, 5, -1])
def test_out_of_range_offsets(offset):
    buf = ByteBuffer(b'\x00\x11\x22\x33')

    with pytest.raises(OutOfRange) as exc_info:
        buf.read(offset)
    assert exc_info.value.offset == offset
    assert exc_info.value.length == 4

    with pytest.raises(OutOfRange):
        buf.write(offset, 0)
    assert bytes(buf) == b'\x00\x11\x22\x33'


def test_out_of_range_is_an_index_error():
    with pytest.raises(IndexError):
        ByteBuffer().read(0)

    assert issubclass(OutOfRange, HexViewError)


@pytest.mark.parametrize("value", [-1, 256])
def test_write_rejects_non_byte_values(value):
    buf = ByteBuffer(b'\x00')

    with pytest.raises(ValueError):
        buf.write(0, value)


def test_write_never_resizes():
    buf = ByteBuffer(b'\x01\x02')

    with pytest.raises(OutOfRange):
        buf.write(2, 0xFF)

    assert len(buf) == 2


def test_get_row():
    buf = ByteBuffer(range(10))

    assert buf.get_row(0, 4) == bytes([0, 1, 2, 3])
    assert buf.get_row(2, 4) == bytes([8, 9])
    assert buf.get_row(3, 4) == b''


def test_resize_pads_and_truncates():
    buf = ByteBuffer(b'\x01\x02\x03')

    buf.resize(5)
    assert bytes(buf) == b'\x01\x02\x03\x00\x00'

    buf.resize(1)
    assert bytes(buf) == b'\x01'

    with pytest.raises(ValueError):
        buf.resize(-1)


def test_buffer_copies_its_input():
    source = bytearray(b'\x01\x02')
    buf = ByteBuffer(source)

    buf.write(0, 0xFF)

    assert source == bytearray(b'\x01\x02')
