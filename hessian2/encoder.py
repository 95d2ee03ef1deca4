"""Hessian 2 serialization of scalar values, binary data and dates."""

from __future__ import annotations

import math
import struct
from datetime import datetime, timedelta, timezone
from typing import Any

from .codec import pack_float64, pack_int32, pack_int64
from .constants import (
    BC_BINARY,
    BC_BINARY_CHUNK,
    BC_BINARY_DIRECT,
    BC_BINARY_SHORT,
    BC_DATE,
    BC_DATE_MINUTE,
    BC_DOUBLE,
    BC_DOUBLE_BYTE,
    BC_DOUBLE_MILL,
    BC_DOUBLE_ONE,
    BC_DOUBLE_SHORT,
    BC_DOUBLE_ZERO,
    BC_FALSE,
    BC_INT,
    BC_INT_BYTE_ZERO,
    BC_INT_SHORT_ZERO,
    BC_INT_ZERO,
    BC_NULL,
    BC_TRUE,
    BINARY_DIRECT_MAX,
    BINARY_SHORT_MAX,
    CHUNK_SIZE,
    INT_BYTE_MAX,
    INT_BYTE_MIN,
    INT_DIRECT_MAX,
    INT_DIRECT_MIN,
    INT_SHORT_MAX,
    INT_SHORT_MIN,
    HessianError,
)

_INT32_MIN = -(1 << 31)
_INT32_MAX = (1 << 31) - 1
_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MS = timedelta(milliseconds=1)


def _u8(v: int) -> int:
    return v & 0xFF


def _wrap_int32(v: int) -> int:
    return ((v + (1 << 31)) % (1 << 32)) - (1 << 31)


def _to_float32(v: float) -> float:
    try:
        return struct.unpack(">f", struct.pack(">f", v))[0]
    except OverflowError:
        return math.copysign(math.inf, v)


def _fits_int(v: float, low: int, high: int) -> bool:
    return math.isfinite(v) and v.is_integer() and low <= v <= high


def _shortest_float32_as_double(f: float) -> float:
    """The shortest decimal that reads back as ``f`` in single precision."""
    if not math.isfinite(f):
        return f
    for digits in range(1, 10):
        candidate = float(f"{f:.{digits}g}")
        if _to_float32(candidate) == f:
            return candidate
    return f


def _small_integral_double(iv: int) -> bytes | None:
    if iv == 0:
        return bytes([BC_DOUBLE_ZERO])
    if iv == 1:
        return bytes([BC_DOUBLE_ONE])
    if -0x80 <= iv < 0x80:
        return bytes([BC_DOUBLE_BYTE, _u8(iv)])
    if -0x8000 <= iv < 0x8000:
        return bytes([BC_DOUBLE_SHORT, _u8(iv >> 8), _u8(iv)])
    return None


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _is_zero_date(value: datetime) -> bool:
    offset = value.utcoffset()
    if offset is not None and offset != timedelta(0):
        return False
    return value.replace(tzinfo=None) == datetime.min


def encode_null() -> bytes:
    """Encode a null value."""
    return bytes([BC_NULL])


def encode_bool(value: bool) -> bytes:
    """Encode a boolean as ``T`` or ``F``."""
    return bytes([BC_TRUE if value else BC_FALSE])


def encode_int32(value: int) -> bytes:
    """Encode a 32-bit signed integer in its most compact form."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an integer, got {type(value).__name__}")
    if not _INT32_MIN <= value <= _INT32_MAX:
        raise ValueError(f"{value} does not fit in a 32-bit signed integer")
    if INT_DIRECT_MIN <= value <= INT_DIRECT_MAX:
        return bytes([value + BC_INT_ZERO])
    if INT_BYTE_MIN <= value <= INT_BYTE_MAX:
        return bytes([_u8(BC_INT_BYTE_ZERO + (value >> 8)), _u8(value)])
    if INT_SHORT_MIN <= value <= INT_SHORT_MAX:
        return bytes(
            [_u8((value >> 16) + BC_INT_SHORT_ZERO), _u8(value >> 8), _u8(value)]
        )
    return bytes([BC_INT]) + pack_int32(value)


def encode_double(value: float) -> bytes:
    """Encode a 64-bit double, shortening whole numbers that fit a short."""
    value = float(value)
    if _fits_int(value, _INT64_MIN, _INT64_MAX):
        short = _small_integral_double(int(value))
        if short is not None:
            return short
    return bytes([BC_DOUBLE]) + pack_float64(value)


def encode_float32(value: float) -> bytes:
    """Encode a single-precision float, using the millis form where exact."""
    f = _to_float32(float(value))
    if _fits_int(f, _INT32_MIN, _INT32_MAX):
        short = _small_integral_double(int(f))
        if short is not None:
            return short
    mill = _to_float32(f * 1000)
    if _fits_int(mill, _INT32_MIN, _INT32_MAX):
        return bytes([BC_DOUBLE_MILL]) + pack_int32(int(mill))
    return bytes([BC_DOUBLE]) + pack_float64(_shortest_float32_as_double(f))


def encode_binary(value: bytes | bytearray | memoryview | None) -> bytes:
    """Encode binary data, split into chunks of at most 4096 bytes."""
    if value is None:
        return encode_null()
    data = bytes(value)
    out = bytearray()
    while True:
        remaining = len(data)
        if remaining > CHUNK_SIZE:
            length = CHUNK_SIZE
            out += bytes([BC_BINARY_CHUNK, _u8(length >> 8), _u8(length)])
        else:
            length = remaining
            if length <= BINARY_DIRECT_MAX:
                out.append(BC_BINARY_DIRECT + length)
            elif length <= BINARY_SHORT_MAX:
                out += bytes([BC_BINARY_SHORT + (length >> 8), _u8(length)])
            else:
                out += bytes([BC_BINARY, _u8(length >> 8), _u8(length)])
        out += data[:length]
        data = data[length:]
        if not data:
            break
    return bytes(out)


def encode_date_ms(value: datetime) -> bytes:
    """Encode a date as milliseconds since the epoch; the zero date is null.

    Naive datetimes are taken to be in UTC.
    """
    if _is_zero_date(value):
        return encode_null()
    millis = (_as_utc(value) - _EPOCH) // _ONE_MS
    return bytes([BC_DATE]) + pack_int64(millis)


def encode_date_minute(value: datetime) -> bytes:
    """Encode a date as whole minutes since the epoch.

    Naive datetimes are taken to be in UTC.
    """
    seconds = (_as_utc(value) - _EPOCH) // timedelta(seconds=1)
    minutes = abs(seconds) // 60
    if seconds < 0:
        minutes = -minutes
    return bytes([BC_DATE_MINUTE]) + pack_int32(_wrap_int32(minutes))


class Encoder:
    """Accumulates Hessian-encoded values in an internal buffer."""

    def __init__(self) -> None:
        self._buffer = bytearray()

    def encode(self, value: Any) -> None:
        """Append the encoding of ``value`` to the buffer.

        Supported are None, bool, integers in the 32-bit range, float,
        bytes-like objects and datetime.
        """
        if value is None:
            self._buffer += encode_null()
        elif isinstance(value, bool):
            self._buffer += encode_bool(value)
        elif isinstance(value, int):
            if not _INT32_MIN <= value <= _INT32_MAX:
                raise HessianError(
                    f"type not supported! integer {value} exceeds 32 bits"
                )
            self._buffer += encode_int32(value)
        elif isinstance(value, float):
            self._buffer += encode_double(value)
        elif isinstance(value, datetime):
            self._buffer += encode_date_ms(value)
        elif isinstance(value, (bytes, bytearray, memoryview)):
            self._buffer += encode_binary(value)
        else:
            raise HessianError(f"type not supported! {type(value).__name__}")

    def append(self, data: bytes) -> None:
        """Append raw bytes to the buffer."""
        self._buffer += data

    def buffer(self) -> bytes:
        """Return the bytes encoded so far."""
        return bytes(self._buffer)

    def clean(self) -> None:
        """Discard everything encoded so far."""
        self._buffer = bytearray()