# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
from __future__ import annotations

import calendar
from datetime import date, datetime, timezone


def utc_now() -> datetime:
    """Return the current time as an aware UTC datetime."""
    return datetime.now(tz=timezone.utc)


def ensure_utc(value: datetime) -> datetime:
    """Treat a naive datetime as UTC so it compares with aware ones."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def to_day(value: date | datetime) -> date:
    """
    Strip the time of day from a date or datetime.

    A datetime keeps its own wall-clock date. No timezone conversion is
    applied, so midnight is the midnight of whatever zone the value is in.
    """
    if isinstance(value, datetime):
        return value.date()
    return value


def days_in_month(year: int, month: int) -> int:
    """Number of days in the given month, leap years included."""
    return calendar.monthrange(year, month)[1]


def clamp_day(year: int, month: int, day: int) -> date:
    """Build a date in the given month, pulling ``day`` back to the last day."""
    return date(year, month, min(day, days_in_month(year, month)))


def next_month(year: int, month: int) -> tuple[int, int]:
    """Return (year, month) of the month after the given one."""
    if month == 12:
        return year + 1, 1
    return year, month + 1


def sunday_weekday(value: date) -> int:
    """Weekday number with Sunday as 0 and Saturday as 6."""
    return (value.weekday() + 1) % 7
