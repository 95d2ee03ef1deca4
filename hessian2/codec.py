"""Big-endian packing of fixed-width numbers."""

from __future__ import annotations

import struct

from .constants import NotEnoughBufferError

_INT8 = struct.Struct(">b")
_INT16 = struct.Struct(">h")
_UINT16 = struct.Struct(">H")
_INT32 = struct.Struct(">i")
_INT64 = struct.Struct(">q")
_FLOAT64 = struct.Struct(">d")


def _pack(fmt: struct.Struct, v) -> bytes:
    try:
        return fmt.pack(v)
    except struct.error as exc:
        raise ValueError(f"{v!r} does not fit format {fmt.format}") from exc


def _unpack(fmt: struct.Struct, b: bytes):
    if len(b) < fmt.size:
        raise NotEnoughBufferError(
            f"need {fmt.size} bytes, got {len(b)}"
        )
    return fmt.unpack_from(b)[0]


def pack_int8(v: int) -> bytes:
    """Pack a signed 8-bit integer."""
    return _pack(_INT8, v)


def pack_int16(v: int) -> bytes:
    """Pack a signed 16-bit integer, big-endian."""
    return _pack(_INT16, v)


def pack_uint16(v: int) -> bytes:
    """Pack an unsigned 16-bit integer, big-endian."""
    return _pack(_UINT16, v)


def pack_int32(v: int) -> bytes:
    """Pack a signed 32-bit integer, big-endian."""
    return _pack(_INT32, v)


def pack_int64(v: int) -> bytes:
    """Pack a signed 64-bit integer, big-endian."""
    return _pack(_INT64, v)


def pack_float64(v: float) -> bytes:
    """Pack an IEEE 754 double, big-endian."""
    return _pack(_FLOAT64, v)


def unpack_int16(b: bytes) -> int:
    """Unpack a signed 16-bit integer from the first two bytes."""
    return _unpack(_INT16, b)


def unpack_uint16(b: bytes) -> int:
    """Unpack an unsigned 16-bit integer from the first two bytes."""
    return _unpack(_UINT16, b)


def unpack_int32(b: bytes) -> int:
    """Unpack a signed 32-bit integer from the first four bytes."""
    return _unpack(_INT32, b)


def unpack_int64(b: bytes) -> int:
    """Unpack a signed 64-bit integer from the first eight bytes."""
    return _unpack(_INT64, b)


def unpack_float64(b: bytes) -> float:
    """Unpack an IEEE 754 double from the first eight bytes."""
    return _unpack(_FLOAT64, b)


def sprint_hex(b: bytes) -> str:
    """Render bytes as a byte-slice literal, e.g. ``[]byte{0x01,0x02,}``."""
    body = "".join(f"0x{v:02x}," for v in b)
    return "[]byte{" + body + "}\n"