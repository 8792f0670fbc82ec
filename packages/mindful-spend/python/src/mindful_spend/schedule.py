# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
"""
Expansion of recurring spends into concrete dates.

All dates are handled at day granularity. ``datetime.date`` is immutable,
so every step of the loops below produces a fresh value.
"""
from __future__ import annotations

import logging
from datetime import date, datetime, timedelta

from mindful_spend.dates import clamp_day, next_month, sunday_weekday, to_day
from mindful_spend.errors import InvalidFrequencyError
from mindful_spend.types import RecurringSpend

logger = logging.getLogger("mindful_spend.schedule")

DAY_NAMES: tuple[str, ...] = (
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)

_STEP_DAYS: dict[str, int] = {"weekly": 7, "fortnightly": 14}


def first_weekday_on_or_after(start: date, day_of_week: int) -> date:
    """
    Return the first date on or after ``start`` falling on ``day_of_week``.

    Args:
        start: The earliest acceptable date.
        day_of_week: Target weekday, 0 = Sunday … 6 = Saturday.
    """
    offset = (day_of_week - sunday_weekday(start) + 7) % 7
    return start + timedelta(days=offset)


def first_month_day_on_or_after(start: date, day_of_month: int) -> date:
    """
    Return the first date on or after ``start`` matching ``day_of_month``.

    The day is clamped to the length of each candidate month, so day 31
    lands on the 30th, 29th or 28th in shorter months.
    """
    candidate = clamp_day(start.year, start.month, day_of_month)
    if candidate < start:
        year, month = next_month(start.year, start.month)
        candidate = clamp_day(year, month, day_of_month)
    return candidate


def _weekly_occurrences(first: date, step_days: int, period_end: date) -> list[date]:
    occurrences: list[date] = []
    current = first
    step = timedelta(days=step_days)
    while current <= period_end:
        occurrences.append(current)
        current = current + step
    return occurrences


def _monthly_occurrences(first: date, day_of_month: int, period_end: date) -> list[date]:
    occurrences: list[date] = []
    current = first
    while current <= period_end:
        occurrences.append(current)
        year, month = next_month(current.year, current.month)
        current = clamp_day(year, month, day_of_month)
    return occurrences


def calculate_occurrences_in_period(
    recurring_spend: RecurringSpend,
    period_start: date | datetime,
    period_end: date | datetime,
) -> list[date]:
    """
    Expand a recurring spend into the dates it falls on inside a window.

    Both bounds are inclusive at day granularity. Generation starts at the
    later of the recurrence's own start date and the window start, so no
    occurrence ever precedes either.

    The fortnightly cadence is anchored to the first matching weekday of
    this calculation, not to a stored origin. Two calls with different
    window starts can therefore pick different 14-day phases.

    Args:
        recurring_spend: The definition to expand. ``is_active`` is not
            consulted here; filtering inactive definitions is the caller's
            concern.
        period_start: First day of the window.
        period_end: Last day of the window.

    Returns:
        Occurrence dates in ascending order. Empty when the recurrence
        starts after the window or the window is inverted.

    Raises:
        InvalidFrequencyError: If the schedule frequency is not one of
            ``'weekly'``, ``'fortnightly'`` or ``'monthly'``.
    """
    start_date = to_day(recurring_spend.start_date)
    window_start = to_day(period_start)
    window_end = to_day(period_end)

    if start_date > window_end or window_start > window_end:
        return []

    calculation_start = max(start_date, window_start)
    frequency = recurring_spend.schedule_frequency

    if frequency in _STEP_DAYS:
        day_of_week = recurring_spend.day_of_week if recurring_spend.day_of_week is not None else 0
        first = first_weekday_on_or_after(calculation_start, day_of_week)
        occurrences = _weekly_occurrences(first, _STEP_DAYS[frequency], window_end)
    elif frequency == "monthly":
        day_of_month = recurring_spend.day_of_month if recurring_spend.day_of_month is not None else 1
        first = first_month_day_on_or_after(calculation_start, day_of_month)
        occurrences = _monthly_occurrences(first, day_of_month, window_end)
    else:
        raise InvalidFrequencyError(str(frequency))

    logger.debug(
        "occurrences_calculated",
        extra={
            "recurring_spend_id": recurring_spend.id,
            "frequency": frequency,
            "window_start": window_start.isoformat(),
            "window_end": window_end.isoformat(),
            "occurrence_count": len(occurrences),
        },
    )
    return occurrences


# ─── Labels ───────────────────────────────────────────────────────────────────


def day_of_week_label(day: int) -> str:
    """Return the weekday name for 0 = Sunday … 6 = Saturday, or ``''``."""
    if 0 <= day < len(DAY_NAMES):
        return DAY_NAMES[day]
    return ""


def day_of_month_label(day: int) -> str:
    """Return the ordinal label for a day of the month, e.g. ``'22nd'``."""
    if day in (1, 21, 31):
        return f"{day}st"
    if day in (2, 22):
        return f"{day}nd"
    if day in (3, 23):
        return f"{day}rd"
    return f"{day}th"


def schedule_description(recurring_spend: RecurringSpend) -> str:
    """Human-readable summary of when a recurring spend falls."""
    frequency = recurring_spend.schedule_frequency
    if frequency == "weekly":
        return f"Every week on {day_of_week_label(recurring_spend.day_of_week or 0)}"
    if frequency == "fortnightly":
        return f"Every 2 weeks on {day_of_week_label(recurring_spend.day_of_week or 0)}"
    if frequency == "monthly":
        return f"Monthly on the {day_of_month_label(recurring_spend.day_of_month or 1)}"
    return ""
