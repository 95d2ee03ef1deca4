import pytest

from hessian2.java8_time import (
    JAVA8_TIME_TYPES,
    Duration,
    Instant,
    LocalDate,
    LocalDateTime,
    LocalTime,
    MonthDay,
    OffsetDateTime,
    OffsetTime,
    Period,
    Year,
    YearMonth,
    ZonedDateTime,
    ZoneOffset,
    field_names,
)


def test_java_class_names_fixed_by_source():
    assert Year(year=2020).java_class_name == (
        "com.alibaba.com.caucho.hessian.io.java8.YearHandle"
    )
    assert ZoneOffset(seconds=7200).java_class_name == (
        "com.alibaba.com.caucho.hessian.io.java8.ZoneOffsetHandle"
    )
    assert ZonedDateTime(zone_id="Z").java_class_name == (
        "com.alibaba.com.caucho.hessian.io.java8.ZonedDateTimeHandle"
    )


def test_java_class_names_are_unique():
    instances = [
        Duration(),
        Instant(),
        LocalDate(),
        LocalTime(),
        LocalDateTime(),
        MonthDay(),
        ZoneOffset(),
        OffsetDateTime(),
        OffsetTime(),
        Period(),
        Year(),
        YearMonth(),
        ZonedDateTime(),
    ]
    assert {type(obj) for obj in instances} == set(JAVA8_TIME_TYPES)
    names = [obj.java_class_name for obj in instances]
    assert len(set(names)) == len(names) == 13
    assert all(
        name.startswith("com.alibaba.com.caucho.hessian.io.java8.") for name in names
    )
    assert all(field_names(obj) for obj in instances)


@pytest.mark.parametrize(
    "cls, expected",
    [
        (Duration, ("seconds", "nanos")),
        (Instant, ("seconds", "nanos")),
        (LocalDate, ("year", "month", "day")),
        (LocalTime, ("hour", "minute", "second", "nano")),
        (LocalDateTime, ("date", "time")),
        (MonthDay, ("month", "day")),
        (ZoneOffset, ("seconds",)),
        (OffsetDateTime, ("dateTime", "offset")),
        (OffsetTime, ("localTime", "zoneOffset")),
        (Period, ("days", "months", "years")),
        (Year, ("year",)),
        (YearMonth, ("month", "year")),
        (ZonedDateTime, ("dateTime", "offset", "zoneId")),
    ],
)
def test_field_names(cls, expected):
    assert field_names(cls) == expected
    assert field_names(cls()) == expected


def test_field_names_rejects_other_objects():
    with pytest.raises(TypeError):
        field_names(object())
    with pytest.raises(TypeError):
        field_names(int)


def test_values_from_source_examples():
    ldt = LocalDateTime(
        date=LocalDate(year=2020, month=6, day=16),
        time=LocalTime(hour=6, minute=5, second=4, nano=3),
    )
    odt = OffsetDateTime(date_time=ldt, offset=ZoneOffset(seconds=7200))
    assert odt.date_time.date.year == 2020
    assert odt.date_time.time.nano == 3
    assert odt.offset.seconds == 7200

    zdt = ZonedDateTime(date_time=ldt, offset=ZoneOffset(seconds=0), zone_id="Z")
    assert zdt.zone_id == "Z"
    assert zdt.date_time == ldt


def test_equality_and_defaults():
    assert Period(years=2020, months=6, days=16) == Period(16, 6, 2020)
    assert Duration(seconds=30, nanos=10) != Duration(seconds=30, nanos=11)
    assert LocalDateTime() == LocalDateTime(date=LocalDate(), time=LocalTime())
    assert ZonedDateTime().zone_id == ""


def test_nested_defaults_are_not_shared():
    a = OffsetTime()
    b = OffsetTime()
    a.local_time.hour = 6
    assert b.local_time.hour == 0
    assert a.local_time is not b.local_time