"""Value types mirroring the java.time handle classes carried over Hessian."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any, ClassVar

_HANDLE_PREFIX = "com.alibaba.com.caucho.hessian.io.java8."


def _wire(name: str, **kwargs: Any) -> Any:
    """Declare a dataclass field together with its name on the wire."""
    return field(metadata={"hessian": name}, **kwargs)


def field_names(obj: Any) -> tuple[str, ...]:
    """Return the wire field names of a java.time value or class, in order."""
    cls = obj if isinstance(obj, type) else type(obj)
    if not dataclasses.is_dataclass(cls) or not hasattr(cls, "java_class_name"):
        raise TypeError(f"{cls.__name__} is not a java.time value type")
    return tuple(f.metadata["hessian"] for f in dataclasses.fields(cls))


@dataclass
class Duration:
    """java.time.Duration."""

    java_class_name: ClassVar[str] = _HANDLE_PREFIX + "DurationHandle"

    seconds: int = _wire("seconds", default=0)
    nanos: int = _wire("nanos", default=0)


@dataclass
class Instant:
    """java.time.Instant."""

    java_class_name: ClassVar[str] = _HANDLE_PREFIX + "InstantHandle"

    seconds: int = _wire("seconds", default=0)
    nanos: int = _wire("nanos", default=0)


@dataclass
class LocalDate:
    """java.time.LocalDate."""

    java_class_name: ClassVar[str] = _HANDLE_PREFIX + "LocalDateHandle"

    year: int = _wire("year", default=0)
    month: int = _wire("month", default=0)
    day: int = _wire("day", default=0)


@dataclass
class LocalTime:
    """java.time.LocalTime."""

    java_class_name: ClassVar[str] = _HANDLE_PREFIX + "LocalTimeHandle"

    hour: int = _wire("hour", default=0)
    minute: int = _wire("minute", default=0)
    second: int = _wire("second", default=0)
    nano: int = _wire("nano", default=0)


@dataclass
class LocalDateTime:
    """java.time.LocalDateTime."""

    java_class_name: ClassVar[str] = _HANDLE_PREFIX + "LocalDateTimeHandle"

    date: LocalDate = _wire("date", default_factory=LocalDate)
    time: LocalTime = _wire("time", default_factory=LocalTime)


@dataclass
class MonthDay:
    """java.time.MonthDay."""

    java_class_name: ClassVar[str] = _HANDLE_PREFIX + "MonthDayHandle"

    month: int = _wire("month", default=0)
    day: int = _wire("day", default=0)


@dataclass
class ZoneOffset:
    """java.time.ZoneOffset."""

    java_class_name: ClassVar[str] = _HANDLE_PREFIX + "ZoneOffsetHandle"

    seconds: int = _wire("seconds", default=0)


@dataclass
class OffsetDateTime:
    """java.time.OffsetDateTime."""

    java_class_name: ClassVar[str] = _HANDLE_PREFIX + "OffsetDateTimeHandle"

    date_time: LocalDateTime = _wire("dateTime", default_factory=LocalDateTime)
    offset: ZoneOffset = _wire("offset", default_factory=ZoneOffset)


@dataclass
class OffsetTime:
    """java.time.OffsetTime."""

    java_class_name: ClassVar[str] = _HANDLE_PREFIX + "OffsetTimeHandle"

    local_time: LocalTime = _wire("localTime", default_factory=LocalTime)
    zone_offset: ZoneOffset = _wire("zoneOffset", default_factory=ZoneOffset)


@dataclass
class Period:
    """java.time.Period."""

    java_class_name: ClassVar[str] = _HANDLE_PREFIX + "PeriodHandle"

    days: int = _wire("days", default=0)
    months: int = _wire("months", default=0)
    years: int = _wire("years", default=0)


@dataclass
class Year:
    """java.time.Year."""

    java_class_name: ClassVar[str] = _HANDLE_PREFIX + "YearHandle"

    year: int = _wire("year", default=0)


@dataclass
class YearMonth:
    """java.time.YearMonth."""

    java_class_name: ClassVar[str] = _HANDLE_PREFIX + "YearMonthHandle"

    month: int = _wire("month", default=0)
    year: int = _wire("year", default=0)


@dataclass
class ZonedDateTime:
    """java.time.ZonedDateTime."""

    java_class_name: ClassVar[str] = _HANDLE_PREFIX + "ZonedDateTimeHandle"

    date_time: LocalDateTime = _wire("dateTime", default_factory=LocalDateTime)
    offset: ZoneOffset = _wire("offset", default_factory=ZoneOffset)
    zone_id: str = _wire("zoneId", default="")


JAVA8_TIME_TYPES: tuple[type, ...] = (
    Year,
    YearMonth,
    Period,
    LocalDate,
    LocalTime,
    LocalDateTime,
    MonthDay,
    Duration,
    Instant,
    ZoneOffset,
    OffsetDateTime,
    OffsetTime,
    ZonedDateTime,
)