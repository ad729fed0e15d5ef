"""
Unit tests for conventions module.
"""

from datetime import date
import pytest

from qlkit.conventions import (
    BusinessDayConvention,
    Calendar,
    Conventions,
    DayCount,
    Frequency,
    NullCalendar,
    TimeUnit,
    add_months,
)
from qlkit.daycounters import ActualActual, Actual360, Thirty360
from qlkit.errors import InvalidArgumentError


class TestEnums:
    """Tests for convention enumerations."""

    def test_day_count_from_string(self):
        assert DayCount.from_string("ACT/360") == DayCount.ACT_360
        assert DayCount.from_string("act/365") == DayCount.ACT_365_FIXED
        assert DayCount.from_string("30/360") == DayCount.THIRTY_360

    def test_day_count_from_string_invalid(self):
        """Test unknown day counts raise."""
        with pytest.raises(ValueError):
            DayCount.from_string("BUS/252")

    def test_frequency_from_int(self):
        assert Frequency.from_int(2) == Frequency.SEMIANNUAL
        assert Frequency.from_int(12) == Frequency.MONTHLY
        with pytest.raises(InvalidArgumentError):
            Frequency.from_int(5)


class TestAddMonths:
    """Tests for month arithmetic."""

    def test_clips_day(self):
        assert add_months(date(2024, 1, 31), 1) == date(2024, 2, 29)
        assert add_months(date(2023, 1, 31), 1) == date(2023, 2, 28)

    def test_negative(self):
        assert add_months(date(2024, 3, 15), -3) == date(2023, 12, 15)

    def test_end_of_month(self):
        assert add_months(date(2024, 2, 29), 1) == date(2024, 3, 29)
        assert add_months(date(2024, 2, 29), 1, end_of_month=True) == date(2024, 3, 31)


class TestCalendar:
    """Tests for weekend/holiday calendars."""

    def setup_method(self):
        self.calendar = Calendar(holidays=[date(2024, 1, 1)])

    def test_business_days(self):
        assert self.calendar.is_business_day(date(2024, 1, 15))  # Monday
        assert not self.calendar.is_business_day(date(2024, 1, 13))  # Saturday
        assert self.calendar.is_holiday(date(2024, 1, 1))

    def test_following(self):
        """Test Following rolls a weekend forward."""
        adjusted = self.calendar.adjust(date(2024, 1, 13), BusinessDayConvention.FOLLOWING)
        assert adjusted == date(2024, 1, 15)

    def test_preceding(self):
        adjusted = self.calendar.adjust(date(2024, 1, 13), BusinessDayConvention.PRECEDING)
        assert adjusted == date(2024, 1, 12)

    def test_modified_following_month_end(self):
        """Test Modified Following stays in the month."""
        adjusted = self.calendar.adjust(date(2024, 3, 31), BusinessDayConvention.MODIFIED_FOLLOWING)
        assert adjusted == date(2024, 3, 29)

    def test_modified_preceding_month_start(self):
        adjusted = self.calendar.adjust(date(2024, 6, 1), BusinessDayConvention.MODIFIED_PRECEDING)
        assert adjusted == date(2024, 6, 3)

    def test_unadjusted(self):
        d = date(2024, 1, 13)
        assert self.calendar.adjust(d, BusinessDayConvention.UNADJUSTED) == d

    def test_holiday_rolled(self):
        assert self.calendar.adjust(date(2024, 1, 1)) == date(2024, 1, 2)

    def test_advance_business_days(self):
        """Test day advances count business days only."""
        assert self.calendar.advance(date(2024, 1, 19), 1) == date(2024, 1, 22)
        assert self.calendar.advance(date(2024, 1, 22), -1) == date(2024, 1, 19)
        assert self.calendar.advance(date(2024, 1, 13), 0) == date(2024, 1, 15)

    def test_advance_months(self):
        result = self.calendar.advance(date(2024, 1, 15), 6, TimeUnit.MONTHS)
        assert result == date(2024, 7, 15)

    def test_advance_end_of_month(self):
        result = self.calendar.advance(date(2024, 2, 29), 1, TimeUnit.MONTHS, end_of_month=True)
        assert result == date(2024, 3, 29)  # March 31 is a Sunday

    def test_end_of_month(self):
        assert self.calendar.end_of_month(date(2024, 3, 10)) == date(2024, 3, 29)
        assert self.calendar.is_end_of_month(date(2024, 3, 29))
        assert not self.calendar.is_end_of_month(date(2024, 3, 28))

    def test_business_days_between(self):
        # Mon 15 to Mon 22: Mon..Fri counted, end excluded
        assert self.calendar.business_days_between(date(2024, 1, 15), date(2024, 1, 22)) == 5

    def test_null_calendar(self):
        null = NullCalendar()
        assert null.is_business_day(date(2024, 1, 13))
        assert null.adjust(date(2024, 1, 13)) == date(2024, 1, 13)


class TestConventions:
    """Tests for convention presets."""

    def test_usd_ois_preset(self):
        """Test USD OIS conventions."""
        conv = Conventions.usd_ois()
        assert conv.day_count == DayCount.ACT_360
        assert conv.business_day == BusinessDayConvention.MODIFIED_FOLLOWING
        assert conv.settlement_days == 2
        assert conv.day_counter == Actual360()

    def test_usd_treasury_preset(self):
        """Test USD Treasury conventions."""
        conv = Conventions.usd_treasury()
        assert conv.day_count == DayCount.ACT_ACT
        assert conv.frequency == Frequency.SEMIANNUAL
        assert conv.settlement_days == 1
        assert conv.day_counter == ActualActual()

    def test_usd_swap_preset(self):
        conv = Conventions.usd_swap()
        assert conv.day_counter == Thirty360()
