from __future__ import annotations
import logging
from datetime import timedelta

from .errors import OutOfRangeError
from .types import D

logger = logging.getLogger(__name__)

# Value at index i is the number of days in month i+1 of a common / leap year.
MONTH_MIN_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
MONTH_MAX_DAYS = (31, 29, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year: int) -> bool:
    """Proleptic Gregorian leap-year rule, valid for zero and negative years too."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    if not 1 <= month <= 12:
        raise ValueError(f"month must be in 1..12, got {month}")
    table = MONTH_MAX_DAYS if is_leap_year(year) else MONTH_MIN_DAYS
    return table[month - 1]


def build_date(d: D, year: int, month: int, day: int) -> D:
    """
    Construct a date of the same type as ``d`` from a (year, month, day) triple.

    Triples handed in here are always valid calendar dates, so the host type can
    only reject them for lying outside its representable range.
    """
    try:
        return d.replace(year=year, month=month, day=day)
    except (ValueError, OverflowError) as exc:
        logger.debug("cannot build %04d-%02d-%02d from %r: %s", year, month, day, d, exc)
        raise OutOfRangeError(
            f"date {year}-{month:02d}-{day:02d} is outside the supported range"
        ) from exc


def shift_days(d: D, days: int) -> D:
    """Move ``d`` by a signed number of days."""
    try:
        return d + timedelta(days=days)
    except OverflowError as exc:
        logger.debug("cannot shift %r by %+d days: %s", d, days, exc)
        raise OutOfRangeError(f"{d} shifted by {days:+d} days is outside the supported range") from exc
