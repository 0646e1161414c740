import pytest

from berrylang.buffer import MAX_SIZE, MIN_SIZE, Buffer, BytesResizeError


def test_small_buffer_gets_minimum_capacity():
    buf = Buffer(0)
    assert buf.size == MIN_SIZE
    assert buf.length == 0
    assert buf.data() == b""


def test_capacity_is_capped():
    assert Buffer(MAX_SIZE + 1000).size == MAX_SIZE


def test_fixed_buffer_is_full_of_zeros():
    buf = Buffer(2, fixed=True)
    assert buf.size == 2
    assert buf.length == 2
    assert buf.data() == bytes(2)


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        Buffer(-1)


@pytest.mark.parametrize("size", [1, -1, 2, -2])
def test_add_then_get_round_trip(size):
    buf = Buffer(16)
    buf.add_int(0x7F, size)
    assert buf.length == abs(size)
    assert buf.get_int(0, size) == 0x7F


@pytest.mark.parametrize("size", [4, -4])
def test_add_then_get_round_trip_four_bytes(size):
    buf = Buffer(16)
    buf.add_int(0x12345678, size)
    assert buf.get_int(0, size) == 0x12345678


def test_endianness_is_reflected_in_bytes():
    little = Buffer(8)
    big = Buffer(8)
    little.add_int(0x0102, 2)
    big.add_int(0x0102, -2)
    assert little.data() == big.data()[::-1]
    assert big.data() == b"\x01\x02"


def test_add_without_room_is_dropped():
    buf = Buffer(4)
    buf.add_int(1, 4)
    assert buf.add_int(5, 1) == 4
    assert buf.data() == (1).to_bytes(4, "little")


def test_invalid_size_raises():
    buf = Buffer(8)
    with pytest.raises(ValueError):
        buf.add_int(1, 3)
    with pytest.raises(ValueError):
        buf.get_int(0, 8)


def test_size_zero_read_gives_none():
    buf = Buffer(8)
    buf.add_int(9)
    assert buf.get_int(0, 0) is None
    assert buf.add_int(9, 0) == 1


def test_out_of_range_read_gives_zero():
    buf = Buffer(8)
    buf.add_int(9)
    assert buf.get_int(1) == 0
    assert buf.get_int(-1) == 0
    assert buf.get_int(0, 2) == 0


def test_signed_and_unsigned_single_byte():
    buf = Buffer(8)
    buf.add_int(0xFF)
    assert buf.get_int(0) == 0xFF
    assert buf.get_int(0, 1, signed=True) == -1


def test_four_byte_reads_are_signed():
    buf = Buffer(8)
    buf.add_int(0xFFFFFFFF, 4)
    assert buf.get_int(0, 4) == -1


def test_set_int_in_place_and_out_of_range():
    buf = Buffer(8)
    buf.add_int(0, 2)
    buf.set_int(0, 0xABCD, -2)
    assert buf.get_int(0, -2) == 0xABCD
    before = buf.data()
    buf.set_int(1, 0x1234, 2)
    buf.set_int(-1, 7)
    assert buf.data() == before


def test_set_len_zero_fills_growth():
    buf = Buffer(8)
    buf.add_int(0xAA)
    buf.set_len(0)
    buf.set_len(1)
    assert buf.data() == b"\x00"
    buf.set_len(1000)
    assert buf.length == buf.size


def test_add_hex_and_odd_digit():
    buf = Buffer(8)
    buf.add_hex("0102F")
    assert buf.data() == b"\x01\x02"


def test_add_hex_truncates_when_full():
    buf = Buffer(2, fixed=True)
    buf.set_len(0)
    buf.add_hex("AABBCC")
    assert buf.data() == b"\xaa\xbb"


def test_add_buffer_appends_only_when_fitting():
    a = Buffer(4)
    b = Buffer(4)
    a.add_hex("0102")
    b.add_hex("0304")
    assert a.add_buffer(b) == 4
    assert a.data() == b"\x01\x02\x03\x04"
    assert a.add_buffer(b) == 4


def test_resize_grows_and_keeps_data():
    buf = Buffer(4)
    buf.add_hex("01020304")
    buf.resize(10)
    assert buf.size == 10
    assert buf.data() == b"\x01\x02\x03\x04"


def test_small_buffer_does_not_shrink():
    buf = Buffer(40)
    buf.resize(5)
    assert buf.size == 40


def test_large_buffer_shrinks_only_when_much_smaller():
    buf = Buffer(200)
    buf.resize(150)
    assert buf.size == 200
    buf.resize(50)
    assert buf.size == 50


def test_fixed_buffer_cannot_resize():
    buf = Buffer(3, fixed=True)
    with pytest.raises(BytesResizeError):
        buf.resize(5)
    buf.resize(3)
    assert buf.size == 3


def test_mapped_buffer_resize_is_noop():
    buf = Buffer(3, mapped=True)
    buf.resize(10)
    assert buf.size == 3
    assert buf.fixed


def test_reserve_grows_or_raises():
    buf = Buffer(4)
    buf.add_hex("01020304")
    buf.reserve(4)
    assert buf.size >= 8
    fixed = Buffer(2, fixed=True)
    with pytest.raises(BytesResizeError):
        fixed.reserve(1)


def test_equals():
    a = Buffer(8)
    b = Buffer(16)
    a.add_hex("CAFE")
    b.add_hex("CAFE")
    assert a.equals(b)
    assert a.equals(a)
    assert not a.equals(None)
    b.add_int(1)
    assert not a.equals(b)
    assert len(b) == 3