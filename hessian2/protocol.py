"""Dubbo packet header handling for Hessian-serialized messages."""

from __future__ import annotations

import enum
import io
from dataclasses import dataclass, field
from datetime import timedelta
from typing import BinaryIO

from .codec import unpack_int64
from .constants import (
    FLAG_EVENT,
    FLAG_REQUEST,
    FLAG_TWOWAY,
    HEADER_LENGTH,
    MAGIC_HIGH,
    MAGIC_LOW,
    RESPONSE_OK,
    SERIAL_MASK,
    ZERO,
    BodyNotEnoughError,
    HeaderNotEnoughError,
    HessianError,
    IllegalPackageError,
)


class PackageType(enum.IntFlag):
    """Kinds of Dubbo packets; a header may combine several."""

    NONE = 0x00
    ERROR = 0x01
    REQUEST = 0x02
    RESPONSE = 0x04
    HEARTBEAT = 0x08
    REQUEST_TWOWAY = 0x10
    RESPONSE_EXCEPTION = 0x20


PACKAGE_TYPE_BIT_SIZE = 0x2F


@dataclass
class DubboHeader:
    """The fields carried by the 16-byte Dubbo packet header."""

    serial_id: int = 0
    type: PackageType = PackageType.NONE
    id: int = 0
    body_len: int = 0
    response_status: int = 0


@dataclass
class Service:
    """Describes the remote service a request is addressed to."""

    path: str = ""
    interface: str = ""
    group: str = ""
    version: str = ""
    method: str = ""
    timeout: timedelta = field(default_factory=timedelta)


def _as_stream(reader: BinaryIO | bytes | bytearray | memoryview | None) -> BinaryIO | None:
    if isinstance(reader, (bytes, bytearray, memoryview)):
        return io.BytesIO(bytes(reader))
    return reader


class HessianCodec:
    """Reads Dubbo packet headers from a binary stream."""

    def __init__(self, reader: BinaryIO | bytes | bytearray | memoryview | None) -> None:
        self.reader = _as_stream(reader)
        self.pkg_type = PackageType.NONE
        self.body_len = 0

    def _available(self, wanted: int) -> int | None:
        """Bytes readable without blocking, or None when it cannot be told."""
        reader = self.reader
        seekable = getattr(reader, "seekable", None)
        if seekable is not None and seekable():
            pos = reader.tell()
            end = reader.seek(0, io.SEEK_END)
            reader.seek(pos)
            return end - pos
        peek = getattr(reader, "peek", None)
        if peek is not None:
            return len(peek(wanted))
        return None

    def read_header(self) -> DubboHeader:
        """Read and parse the next packet header.

        Raises HeaderNotEnoughError when fewer than 16 bytes are available,
        IllegalPackageError on a bad magic number, HessianError on a zero
        serialization id and BodyNotEnoughError when the announced body is
        not yet available.
        """
        if self.reader is None:
            raise HeaderNotEnoughError()
        buf = self.reader.read(HEADER_LENGTH)
        if buf is None or len(buf) < HEADER_LENGTH:
            raise HeaderNotEnoughError()

        if buf[0] != MAGIC_HIGH and buf[1] != MAGIC_LOW:
            raise IllegalPackageError()

        header = DubboHeader()
        header.serial_id = buf[2] & SERIAL_MASK
        if header.serial_id == ZERO:
            raise HessianError(f"serialization ID:{header.serial_id}")

        flags = buf[2]
        if flags & FLAG_EVENT:
            header.type |= PackageType.HEARTBEAT
        if flags & FLAG_REQUEST:
            header.type |= PackageType.REQUEST
            if flags & FLAG_TWOWAY:
                header.type |= PackageType.REQUEST_TWOWAY
        else:
            header.type |= PackageType.RESPONSE
            header.response_status = buf[3]
            if header.response_status != RESPONSE_OK:
                header.type |= PackageType.RESPONSE_EXCEPTION

        header.id = unpack_int64(buf[4:12])
        header.body_len = int.from_bytes(buf[12:16], "big")

        self.pkg_type = header.type
        self.body_len = header.body_len

        available = self._available(self.body_len)
        if available is not None and available < self.body_len:
            raise BodyNotEnoughError()
        return header