"""
Calendar resolution for roster periods.
Maps a period configuration to the concrete dates it spans.
"""

import calendar
from datetime import date, timedelta

from .types import PeriodConfig


def days_in_period(period: PeriodConfig) -> int:
    """Number of days in the period (true month length in month mode)."""
    if period.is_monthly:
        if period.year is None or period.month is None:
            raise ValueError("Monthly period requires both year and month")
        if not 1 <= period.month <= 12:
            raise ValueError(f"Month must be between 1 and 12, got {period.month}")
        return calendar.monthrange(period.year, period.month)[1]

    if period.duration_days is None or period.duration_days < 1:
        raise ValueError("Range period requires a positive duration_days")
    return period.duration_days


def date_for_day(period: PeriodConfig, day_index: int) -> date:
    """Calendar date of the zero-based day index within the period."""
    if period.is_monthly:
        return date(period.year, period.month, day_index + 1)
    return period.start_date + timedelta(days=day_index)


def resolve_period(period: PeriodConfig) -> list[date]:
    """Ordered list of every date in the period."""
    return [date_for_day(period, d) for d in range(days_in_period(period))]


def is_weekend(day: date) -> bool:
    # Saturday = 5, Sunday = 6
    return day.weekday() >= 5
