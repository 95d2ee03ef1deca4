"""Boxed Java array wrappers (Boolean[], Integer[], ...)."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from typing import Any, ClassVar, Iterable


def _require_int(v: Any) -> int:
    if isinstance(v, bool) or not isinstance(v, int):
        raise TypeError(f"expected an integer, got {type(v).__name__}")
    return v


def _checked(v: Any, bits: int) -> int:
    v = _require_int(v)
    low, high = -(1 << (bits - 1)), (1 << (bits - 1)) - 1
    if not low <= v <= high:
        raise ValueError(f"{v} does not fit in a {bits}-bit signed integer")
    return v


def _wrap_signed(v: int, bits: int) -> int:
    v &= (1 << bits) - 1
    return v - (1 << bits) if v >> (bits - 1) else v


def _require_float(v: Any) -> float:
    if isinstance(v, bool) or not isinstance(v, (int, float)):
        raise TypeError(f"expected a number, got {type(v).__name__}")
    return float(v)


@dataclass
class JavaArray:
    """Base for boxed Java arrays; subclasses define the element conversion."""

    java_class_name: ClassVar[str] = ""

    values: list = field(default_factory=list)

    @staticmethod
    def _convert(v: Any) -> Any:
        return v

    def get(self) -> list:
        """Return the elements as a new list."""
        return list(self.values)

    def set(self, values: Iterable[Any]) -> None:
        """Replace the elements, converting each to the element type."""
        self.values = [self._convert(v) for v in values]


@dataclass
class BooleanArray(JavaArray):
    """java.lang.Boolean[]."""

    java_class_name: ClassVar[str] = "[java.lang.Boolean"

    @staticmethod
    def _convert(v: Any) -> bool:
        if not isinstance(v, bool):
            raise TypeError(f"expected a bool, got {type(v).__name__}")
        return v


@dataclass
class IntegerArray(JavaArray):
    """java.lang.Integer[]."""

    java_class_name: ClassVar[str] = "[java.lang.Integer"

    @staticmethod
    def _convert(v: Any) -> int:
        return _checked(v, 32)


@dataclass
class ByteArray(JavaArray):
    """java.lang.Byte[], held as unsigned bytes."""

    java_class_name: ClassVar[str] = "[java.lang.Byte"

    @staticmethod
    def _convert(v: Any) -> int:
        return _checked(v, 32) & 0xFF


@dataclass
class ShortArray(JavaArray):
    """java.lang.Short[]."""

    java_class_name: ClassVar[str] = "[java.lang.Short"

    @staticmethod
    def _convert(v: Any) -> int:
        return _wrap_signed(_checked(v, 32), 16)


@dataclass
class LongArray(JavaArray):
    """java.lang.Long[]."""

    java_class_name: ClassVar[str] = "[java.lang.Long"

    @staticmethod
    def _convert(v: Any) -> int:
        return _checked(v, 64)


@dataclass
class FloatArray(JavaArray):
    """java.lang.Float[], values rounded to single precision."""

    java_class_name: ClassVar[str] = "[java.lang.Float"

    @staticmethod
    def _convert(v: Any) -> float:
        return struct.unpack(">f", struct.pack(">f", _require_float(v)))[0]


@dataclass
class DoubleArray(JavaArray):
    """java.lang.Double[]."""

    java_class_name: ClassVar[str] = "[java.lang.Double"

    @staticmethod
    def _convert(v: Any) -> float:
        return _require_float(v)


@dataclass
class CharacterArray:
    """java.lang.Character[], held as a string."""

    java_class_name: ClassVar[str] = "[java.lang.Character"

    values: str = ""

    def get(self) -> list[str]:
        """Return the characters as a list of one-character strings."""
        return list(self.values)

    def set(self, values: Iterable[Any]) -> None:
        """Append each given string to the held characters."""
        parts = []
        for v in values:
            if not isinstance(v, str):
                raise TypeError(f"expected a str, got {type(v).__name__}")
            parts.append(v)
        self.values += "".join(parts)