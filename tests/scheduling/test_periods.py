import pytest
from datetime import date

from staff_scheduler.services.scheduling.types import PeriodConfig
from staff_scheduler.services.scheduling.periods import (
    days_in_period,
    date_for_day,
    resolve_period,
    is_weekend,
)


class TestDaysInPeriod:

    def test_thirty_one_day_month(self):
        assert days_in_period(PeriodConfig.for_month(2025, 5)) == 31

    def test_leap_february(self):
        assert days_in_period(PeriodConfig.for_month(2024, 2)) == 29

    def test_common_february(self):
        assert days_in_period(PeriodConfig.for_month(2025, 2)) == 28

    def test_century_is_not_leap(self):
        assert days_in_period(PeriodConfig.for_month(1900, 2)) == 28

    def test_range_uses_duration(self):
        assert days_in_period(PeriodConfig.for_range(date(2025, 1, 20), 14)) == 14

    def test_invalid_month_rejected(self):
        with pytest.raises(ValueError):
            days_in_period(PeriodConfig.for_month(2025, 13))

    def test_zero_duration_rejected(self):
        with pytest.raises(ValueError):
            days_in_period(PeriodConfig.for_range(date(2025, 1, 20), 0))

    def test_missing_month_rejected(self):
        with pytest.raises(ValueError):
            days_in_period(PeriodConfig(year=2025))


class TestDateForDay:

    def test_month_mode_first_and_last(self):
        period = PeriodConfig.for_month(2024, 2)
        assert date_for_day(period, 0) == date(2024, 2, 1)
        assert date_for_day(period, 28) == date(2024, 2, 29)

    def test_range_crosses_month_end(self):
        period = PeriodConfig.for_range(date(2025, 1, 30), 5)
        assert resolve_period(period) == [
            date(2025, 1, 30),
            date(2025, 1, 31),
            date(2025, 2, 1),
            date(2025, 2, 2),
            date(2025, 2, 3),
        ]

    def test_range_crosses_dst_change(self):
        # 2025-03-30 is a DST switch in Europe; naive dates never shift
        period = PeriodConfig.for_range(date(2025, 3, 29), 3)
        assert resolve_period(period)[-1] == date(2025, 3, 31)


class TestIsWeekend:

    def test_saturday_and_sunday(self):
        assert is_weekend(date(2025, 1, 25)) is True
        assert is_weekend(date(2025, 1, 26)) is True

    def test_weekdays(self):
        for day in range(20, 25):
            assert is_weekend(date(2025, 1, day)) is False
