"""
Unit tests for pandas-backed holiday calendars.
"""

from datetime import date
import pytest
from pandas.tseries.holiday import AbstractHolidayCalendar, Holiday

from accrua.calendar import DateBounds
from accrua.conventions import BusinessDayConvention
from accrua.holidays import PandasHolidayCalendar


class FoundersDayCalendar(AbstractHolidayCalendar):
    rules = [Holiday("Founders Day", month=3, day=14)]


@pytest.fixture
def us_calendar():
    """US federal holidays for 2023-2025."""
    return PandasHolidayCalendar(start=date(2023, 1, 1), end=date(2025, 12, 31))


class TestPandasHolidayCalendar:
    """Tests for PandasHolidayCalendar."""

    def test_federal_holidays(self, us_calendar):
        """Test well-known US federal holidays are recognised."""
        assert us_calendar.is_holiday(date(2024, 7, 4))
        assert us_calendar.is_holiday(date(2024, 9, 2))  # Labor Day
        assert us_calendar.is_holiday(date(2024, 12, 25))
        assert not us_calendar.is_holiday(date(2024, 7, 5))

    def test_following_skips_holiday(self, us_calendar):
        """Test Independence Day rolls to Friday."""
        assert us_calendar.following(date(2024, 7, 4)) == date(2024, 7, 5)

    def test_following_over_long_weekend(self, us_calendar):
        """Test Saturday before Labor Day rolls to Tuesday."""
        assert us_calendar.following(date(2024, 8, 31)) == date(2024, 9, 3)

    def test_modified_following_month_end(self, us_calendar):
        """Test month-end Saturday rolls back to Friday."""
        assert us_calendar.adjust(
            date(2024, 8, 31), BusinessDayConvention.MODIFIED_FOLLOWING
        ) == date(2024, 8, 30)

    def test_preceding_over_new_year(self, us_calendar):
        """Test New Year's Day rolls back into the previous year."""
        assert us_calendar.preceding(date(2024, 1, 1)) == date(2023, 12, 29)

    def test_outside_window(self):
        """Test dates outside the generated window are not holidays."""
        cal = PandasHolidayCalendar(start=date(2024, 1, 1), end=date(2024, 12, 31))
        assert cal.is_holiday(date(2024, 7, 4))
        assert not cal.is_holiday(date(2025, 7, 4))
        assert cal.is_weekend(date(2025, 7, 5))

    def test_custom_rules(self):
        """Test a user-defined pandas holiday calendar."""
        cal = PandasHolidayCalendar(
            rules=FoundersDayCalendar(), start=date(2024, 1, 1), end=date(2024, 12, 31)
        )
        # Thursday 14 March 2024
        assert cal.is_holiday(date(2024, 3, 14))
        assert cal.following(date(2024, 3, 14)) == date(2024, 3, 15)
        assert not cal.is_holiday(date(2024, 7, 4))

    def test_bounds_passed_through(self):
        """Test rolling bounds reach the underlying calendar."""
        bounds = DateBounds(date(2024, 1, 1), date(2024, 12, 31))
        cal = PandasHolidayCalendar(start=date(2024, 1, 1), end=date(2024, 12, 31), bounds=bounds)
        assert cal.bounds == bounds
        assert cal.preceding(date(2024, 1, 1)) is None

    def test_invalid_window(self):
        """Test inverted holiday window raises error."""
        with pytest.raises(ValueError):
            PandasHolidayCalendar(start=date(2025, 1, 1), end=date(2024, 1, 1))
