"""
Composite temporal parsers built from the primitives.

- parse_date: ``[+|-]YYYYMMDD`` -> ``date``.
- parse_time: ``hhmmss`` -> ``time``.
- parse_esa_timestamp: ``YYYYMMDD[T]hhmmss`` -> ``datetime``.
- parse_julian_date: ``[+|-]YYYYDDD`` (ordinal day of year) -> ``date``.

Field ranges follow ISO 8601 as written by ESA/USGS producers: hours up to
24 and seconds up to 60 are admitted at the field level. Values that do not
form a real calendar date are rejected with ``RangeViolation`` at the start of
the offending field.
"""

from __future__ import annotations

from datetime import MAXYEAR, MINYEAR, date, datetime, time, timedelta

from eo_identifiers.exceptions import RangeViolation
from eo_identifiers.primitives import (
    opt,
    signed_year,
    tag_no_case,
    take_digits,
    take_digits_in_range,
)


def _date_year(s: str) -> tuple[int, str]:
    return signed_year(s, MINYEAR, MAXYEAR)


def date_month(s: str) -> tuple[int, str]:
    return take_digits_in_range(s, 2, 1, 12)


def date_day(s: str) -> tuple[int, str]:
    return take_digits_in_range(s, 2, 1, 31)


def time_hour(s: str) -> tuple[int, str]:
    return take_digits_in_range(s, 2, 0, 24)


def time_minute(s: str) -> tuple[int, str]:
    return take_digits_in_range(s, 2, 0, 59)


def time_second(s: str) -> tuple[int, str]:
    return take_digits_in_range(s, 2, 0, 60)


def parse_date(s: str) -> tuple[date, str]:
    """Parse a calendar date ``[+|-]YYYYMMDD``.

    The day is range-checked against 1..=31 first and then against the
    actual month length, so ``20230230`` fails at the day field.
    """
    year, rest = _date_year(s)
    month, rest = date_month(rest)
    day_field = rest
    day, rest = date_day(rest)
    try:
        value = date(year, month, day)
    except ValueError as exc:
        raise RangeViolation(
            f"day {day} does not exist in {year:04d}-{month:02d}",
            remaining=len(day_field),
        ) from exc
    return value, rest


def _time_fields(s: str) -> tuple[tuple[int, int, int], tuple[str, str, str], str]:
    hour_field = s
    hour, rest = time_hour(s)
    minute_field = rest
    minute, rest = time_minute(rest)
    second_field = rest
    second, rest = time_second(rest)
    return (hour, minute, second), (hour_field, minute_field, second_field), rest


def parse_time(s: str) -> tuple[time, str]:
    """Parse a time of day ``hhmmss``.

    ``24`` hours and leap second ``60`` pass the field ranges but have no
    ``datetime.time`` representation on their own, so they are rejected here.
    Use ``parse_esa_timestamp`` to roll them over into the next day/minute.
    """
    (hour, minute, second), (hour_field, _, second_field), rest = _time_fields(s)
    if hour == 24:
        raise RangeViolation("hour 24 needs a date to roll over", remaining=len(hour_field))
    if second == 60:
        raise RangeViolation("leap second needs a date to roll over", remaining=len(second_field))
    return time(hour, minute, second), rest


def t_separator(s: str) -> tuple[str, str]:
    return tag_no_case(s, "T")


def parse_esa_timestamp(s: str) -> tuple[datetime, str]:
    """Parse ``YYYYMMDD[T]hhmmss`` into a naive ``datetime``.

    The ``T`` separator is optional and case-insensitive. ``24:00:00`` is
    the midnight ending the given day; second ``60`` rolls into the next
    minute.
    """
    day, rest = parse_date(s)
    _, rest = opt(rest, t_separator)
    (hour, minute, second), (hour_field, _, _), rest = _time_fields(rest)
    if hour == 24 and (minute or second):
        raise RangeViolation(
            f"24:{minute:02d}:{second:02d} is past the end of the day",
            remaining=len(hour_field),
        )
    try:
        value = datetime.combine(day, time()) + timedelta(
            hours=hour, minutes=minute, seconds=second
        )
    except OverflowError as exc:
        raise RangeViolation(
            "timestamp rolls past the last representable day",
            remaining=len(hour_field),
        ) from exc
    return value, rest


def parse_julian_date(s: str) -> tuple[date, str]:
    """Parse a Julian ordinal date ``[+|-]YYYYDDD``.

    The day of year is not range-checked: the date is computed as
    January 1st plus ``DDD - 1`` days, e.g. ``2020046`` -> 2020-02-15.
    """
    year, rest = _date_year(s)
    day_of_year, rest = take_digits(rest, 3)
    try:
        value = date(year, 1, 1) + timedelta(days=day_of_year - 1)
    except OverflowError as exc:
        raise RangeViolation(
            f"day {day_of_year} of {year:04d} is not representable",
            remaining=len(s),
        ) from exc
    return value, rest
