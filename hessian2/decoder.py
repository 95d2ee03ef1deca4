"""Hessian 2 deserialization of scalar values, binary data and dates."""

from __future__ import annotations

import io
import struct
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any

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
    BC_END,
    BC_FALSE,
    BC_INT,
    BC_INT_BYTE_ZERO,
    BC_INT_SHORT_ZERO,
    BC_INT_ZERO,
    BC_LONG_INT,
    BC_NULL,
    BC_TRUE,
    INT_DIRECT_MAX,
    TAG_READ,
    HessianError,
    NotEnoughBufferError,
)

ZERO_DATE = datetime.min
"""The date returned for a null date value."""

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

_INT8 = struct.Struct(">b")
_INT16 = struct.Struct(">h")
_INT32 = struct.Struct(">i")
_INT64 = struct.Struct(">q")
_FLOAT64 = struct.Struct(">d")

_DOUBLE_TAGS = frozenset(
    {
        BC_DOUBLE_ZERO,
        BC_DOUBLE_ONE,
        BC_DOUBLE_BYTE,
        BC_DOUBLE_SHORT,
        BC_DOUBLE_MILL,
        BC_DOUBLE,
    }
)


def _is_int_tag(tag: int) -> bool:
    return 0x80 <= tag <= 0xD7 or tag == BC_INT


def _is_binary_tag(tag: int) -> bool:
    return (
        BC_BINARY_DIRECT <= tag <= INT_DIRECT_MAX
        or BC_BINARY_SHORT <= tag <= 0x37
        or tag in (BC_BINARY_CHUNK, BC_BINARY)
    )


@dataclass
class TypeRefs:
    """Type names seen in a stream, referenced later by index."""

    types: list = field(default_factory=list)
    records: set = field(default_factory=set)

    def append(self, name: str, typ: Any) -> None:
        """Record ``typ`` under ``name`` unless the name is already known."""
        if name in self.records:
            return
        self.records.add(name)
        self.types.append(typ)

    def get(self, index: int) -> Any:
        """Return the type at ``index``, or None when out of range."""
        if not 0 <= index < len(self.types):
            return None
        return self.types[index]


class Decoder:
    """Reads Hessian-encoded values from a byte string."""

    def __init__(self, data: bytes, strict: bool = False, skip: bool = False) -> None:
        self._reader = io.BytesIO(bytes(data))
        self.strict = strict
        self.skip = skip
        self.type_refs = TypeRefs()
        self.refs: list = []
        self.class_info_list: list = []

    # reading primitives

    def _read_exact(self, n: int) -> bytes:
        data = self._reader.read(n)
        if len(data) != n:
            raise NotEnoughBufferError(f"need {n} bytes, got {len(data)}")
        return data

    def _unpack(self, fmt: struct.Struct) -> Any:
        return fmt.unpack(self._read_exact(fmt.size))[0]

    def _resolve_tag(self, tag: int) -> int:
        if tag != TAG_READ:
            return tag & 0xFF
        try:
            return self.read_byte()
        except EOFError as exc:
            raise NotEnoughBufferError() from exc

    def read_byte(self) -> int:
        """Read one byte; raise EOFError at the end of input."""
        data = self._reader.read(1)
        if not data:
            raise EOFError("end of hessian data")
        return data[0]

    def discard(self, n: int) -> int:
        """Skip the next ``n`` bytes and return how many were skipped."""
        data = self._reader.read(n)
        if len(data) < n:
            raise NotEnoughBufferError(f"discarded {len(data)} of {n} bytes")
        return len(data)

    def buffered(self) -> int:
        """Return the number of bytes still unread."""
        return len(self._reader.getbuffer()) - self._reader.tell()

    def clean(self) -> None:
        """Forget type and object references, keeping the read position."""
        self.type_refs = TypeRefs()
        self.refs = []
        self.class_info_list = []

    def reset(self, data: bytes) -> Decoder:
        """Start reading ``data`` from the beginning with clean references."""
        self._reader = io.BytesIO(bytes(data))
        self.clean()
        return self

    # value decoding

    def decode(self) -> Any:
        """Decode the next value from the stream.

        Raises EOFError at the end of input or on the end marker ``Z``.
        """
        tag = self.read_byte()
        if tag == BC_END:
            raise EOFError("end flag reached")
        if tag == BC_NULL:
            return None
        if tag == BC_TRUE:
            return True
        if tag == BC_FALSE:
            return False
        if _is_int_tag(tag):
            return self.decode_int32(tag)
        if tag in (BC_DATE_MINUTE, BC_DATE):
            return self.decode_date(tag)
        if tag in _DOUBLE_TAGS:
            return self.decode_double(tag)
        if _is_binary_tag(tag):
            return self.decode_binary(tag)
        rest = self._reader.getvalue()[self._reader.tell():]
        raise HessianError(f"Invalid type: {chr(tag)!r},>>{list(rest)}<<<")

    def _binary_length(self, tag: int) -> int:
        if BC_BINARY_DIRECT <= tag <= INT_DIRECT_MAX:
            return tag - BC_BINARY_DIRECT
        if BC_BINARY_SHORT <= tag <= 0x37:
            return ((tag - BC_BINARY_SHORT) << 8) + self._read_exact(1)[0]
        if tag not in (BC_BINARY_CHUNK, BC_BINARY):
            raise HessianError(f"illegal binary tag:{tag}")
        hi, lo = self._read_exact(2)
        return (hi << 8) + lo

    def decode_binary(self, tag: int = TAG_READ) -> bytes:
        """Decode binary data, joining chunks; null yields empty bytes."""
        tag = self._resolve_tag(tag)
        if tag == BC_NULL:
            return b""
        data = bytearray()
        while True:
            data += self._read_exact(self._binary_length(tag))
            if tag != BC_BINARY_CHUNK:
                break
            tag = self._resolve_tag(TAG_READ)
        return bytes(data)

    def decode_int32(self, tag: int = TAG_READ) -> int:
        """Decode a 32-bit signed integer; null yields 0."""
        tag = self._resolve_tag(tag)
        if 0x80 <= tag <= 0xBF:
            return tag - BC_INT_ZERO
        if 0xC0 <= tag <= 0xCF:
            return ((tag - BC_INT_BYTE_ZERO) << 8) + self._read_exact(1)[0]
        if 0xD0 <= tag <= 0xD7:
            b1, b0 = self._read_exact(2)
            return ((tag - BC_INT_SHORT_ZERO) << 16) + (b1 << 8) + b0
        if tag == BC_INT:
            return self._unpack(_INT32)
        if tag == BC_NULL:
            return 0
        raise HessianError(f"decInt32 integer wrong tag:{tag:#x}")

    def decode_double(self, tag: int = TAG_READ) -> float | int:
        """Decode a double in any of its compact forms."""
        tag = self._resolve_tag(tag)
        if tag == BC_LONG_INT:
            return self.decode_int32(TAG_READ)
        if tag == BC_DOUBLE_ZERO:
            return 0.0
        if tag == BC_DOUBLE_ONE:
            return 1.0
        if tag == BC_DOUBLE_BYTE:
            return float(self._unpack(_INT8))
        if tag == BC_DOUBLE_SHORT:
            return float(self._unpack(_INT16))
        if tag == BC_DOUBLE_MILL:
            return self._unpack(_INT32) / 1000
        if tag == BC_DOUBLE:
            return self._unpack(_FLOAT64)
        raise HessianError(f"decDouble parse double wrong tag:{tag}-{tag:#x}")

    def decode_date(self, tag: int = TAG_READ) -> datetime:
        """Decode a date as an aware UTC datetime; null yields ZERO_DATE."""
        tag = self._resolve_tag(tag)
        try:
            if tag == BC_NULL:
                return ZERO_DATE
            if tag == BC_DATE:
                return _EPOCH + timedelta(milliseconds=self._unpack(_INT64))
            if tag == BC_DATE_MINUTE:
                return _EPOCH + timedelta(minutes=self._unpack(_INT32))
        except OverflowError as exc:
            raise HessianError("date out of range") from exc
        raise HessianError(f"decDate Invalid type: {tag}")