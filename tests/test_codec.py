import pytest

from hessian2.codec import (
    pack_float64,
    pack_int8,
    pack_int16,
    pack_int32,
    pack_int64,
    pack_uint16,
    sprint_hex,
    unpack_float64,
    unpack_int16,
    unpack_int32,
    unpack_int64,
    unpack_uint16,
)
from hessian2.constants import HessianError, NotEnoughBufferError


def test_pack_uint16_round_trip():
    v = 0xFEDC
    assert unpack_uint16(pack_uint16(v)) == v


def test_pack_int16_round_trip():
    v = 0x1234
    assert unpack_int16(pack_int16(v)) == v


def test_pack_int32_round_trip():
    v = 0x12344678
    assert unpack_int32(pack_int32(v)) == v


def test_pack_int64_round_trip():
    v = 0x1234567890ABCDEF
    assert unpack_int64(pack_int64(v)) == v


def test_pack_int32_is_big_endian():
    assert pack_int32(10) == bytes([0, 0, 0, 10])


def test_pack_int64_is_big_endian():
    assert pack_int64(10) == bytes([0, 0, 0, 0, 0, 0, 0, 10])


def test_pack_float64_bytes():
    assert pack_float64(10.0) == bytes([64, 36, 0, 0, 0, 0, 0, 0])


@pytest.mark.parametrize("v", [0.0, -1.5, 3.14159, 1e300, -0.001])
def test_float64_round_trip(v):
    assert unpack_float64(pack_float64(v)) == v


def test_float64_nan_round_trip():
    nan_bits = bytes([0x7F, 0xF8, 0, 0, 0, 0, 0, 0])
    decoded = unpack_float64(nan_bits)
    assert decoded != decoded
    assert pack_float64(decoded) == nan_bits


def test_pack_int8_negative():
    assert pack_int8(-1) == b"\xff"


def test_negative_values_round_trip():
    assert unpack_int16(pack_int16(-2)) == -2
    assert unpack_int32(pack_int32(-0x80000000)) == -0x80000000
    assert unpack_int64(pack_int64(-1)) == -1


def test_unpack_ignores_trailing_bytes():
    assert unpack_int16(b"\x00\x05\xff\xff") == 5


def test_unpack_uint16_reads_unsigned():
    assert unpack_uint16(b"\xff\xff") == 0xFFFF
    assert unpack_int16(b"\xff\xff") == -1


def test_unpack_short_buffer_raises():
    with pytest.raises(NotEnoughBufferError):
        unpack_int32(b"\x00\x01")


def test_short_buffer_error_is_hessian_error():
    with pytest.raises(HessianError, match="need 8 bytes"):
        unpack_int64(b"")


def test_pack_out_of_range_raises():
    with pytest.raises(ValueError):
        pack_int16(0x10000)


def test_sprint_hex():
    assert sprint_hex(b"\x01\xab") == "[]byte{0x01,0xab,}\n"


def test_sprint_hex_empty():
    assert sprint_hex(b"") == "[]byte{}\n"