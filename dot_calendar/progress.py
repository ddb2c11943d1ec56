"""
Year progress arithmetic.

Everything here works on calendar dates, never on elapsed seconds: the
day-of-year of 23:59 on Mar 15 and of 00:01 on Mar 15 must agree, including
on the days a DST transition shortens or lengthens the wall clock.
"""

from __future__ import annotations

import calendar
import math
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum, auto
from typing import Union

DateLike = Union[date, datetime]


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (0.5 -> 1, -0.5 -> 0)."""
    return int(math.floor(value + 0.5))


@dataclass(frozen=True)
class YearProgress:
    """How far through its year a given date is."""
    year: int
    day_of_year: int
    total_days: int

    @property
    def days_left(self) -> int:
        return self.total_days - self.day_of_year

    @property
    def percentage(self) -> int:
        return round_half_up(100 * self.day_of_year / self.total_days)

    def to_dict(self) -> dict:
        return {
            "year": self.year,
            "day_of_year": self.day_of_year,
            "total_days": self.total_days,
            "days_left": self.days_left,
            "percentage": self.percentage,
        }


def as_date(value: DateLike) -> date:
    """Calendar date of a date or datetime."""
    # datetime is a subclass of date, so check it first
    if isinstance(value, datetime):
        return value.date()
    return value


def days_in_year(year: int) -> int:
    return (date(year, 12, 31) - date(year, 1, 1)).days + 1


def compute_progress(now: DateLike) -> YearProgress:
    """
    Compute the year progress for the calendar date of ``now``.

    ``now`` is taken as-is: callers that care about the time zone pass an
    aware datetime already converted to the zone whose "today" they want.

    Returns:
        YearProgress where Jan 1 is day 1 and Dec 31 is day ``total_days``.
    """
    today = as_date(now)
    start = date(today.year, 1, 1)
    return YearProgress(
        year=today.year,
        day_of_year=(today - start).days + 1,
        total_days=days_in_year(today.year),
    )


# ─────────────────────────── Day State ────────────────────────

class DayState(Enum):
    """Where a day sits relative to the render date."""
    PAST = auto()
    TODAY = auto()
    FUTURE = auto()


def classify_day(day: DateLike, today: DateLike) -> DayState:
    day, today = as_date(day), as_date(today)
    if day < today:
        return DayState.PAST
    if day == today:
        return DayState.TODAY
    return DayState.FUTURE


def classify_ordinal(ordinal: int, day_of_year: int) -> DayState:
    """Same as :func:`classify_day`, for 1-based day-of-year ordinals."""
    if ordinal < day_of_year:
        return DayState.PAST
    if ordinal == day_of_year:
        return DayState.TODAY
    return DayState.FUTURE


def month_start_weekday(year: int, month: int) -> int:
    """Weekday of the 1st of ``month`` with Sunday = 0 .. Saturday = 6."""
    # calendar.monthrange counts Monday = 0
    return (calendar.monthrange(year, month)[0] + 1) % 7


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]
