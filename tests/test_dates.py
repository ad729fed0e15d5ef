"""
Unit tests for dates module.
"""

from datetime import date
import pytest

from qlkit.conventions import BusinessDayConvention, Calendar, Frequency, TimeUnit
from qlkit.dates import DateGeneration, Period, Schedule, shift
from qlkit.errors import InvalidArgumentError


class TestPeriod:
    """Tests for Period parsing and conversions."""

    def test_parse_tenor_months(self):
        """Test parsing month tenors."""
        assert Period.from_string("3M") == Period(3, TimeUnit.MONTHS)
        assert Period.from_string("12M") == Period(12, TimeUnit.MONTHS)

    def test_parse_tenor_years_weeks_days(self):
        assert Period.from_string("10Y") == Period(10, TimeUnit.YEARS)
        assert Period.from_string("2W") == Period(2, TimeUnit.WEEKS)
        assert Period.from_string("30D") == Period(30, TimeUnit.DAYS)

    def test_parse_tenor_lowercase(self):
        """Test parsing lowercase tenors."""
        assert Period.from_string("3m") == Period(3, TimeUnit.MONTHS)
        assert Period.from_string("5y") == Period(5, TimeUnit.YEARS)

    def test_parse_tenor_invalid(self):
        """Test invalid tenor raises error."""
        with pytest.raises(ValueError):
            Period.from_string("invalid")
        with pytest.raises(ValueError):
            Period.from_string("3X")

    def test_frequency_round_trip(self):
        assert Period.from_frequency(Frequency.QUARTERLY) == Period(3, TimeUnit.MONTHS)
        assert Period.from_frequency(Frequency.ANNUAL) == Period(1, TimeUnit.YEARS)
        assert Period.from_string("6M").frequency() == Frequency.SEMIANNUAL
        assert Period.from_string("1Y").frequency() == Frequency.ANNUAL
        assert Period.from_string("5M").frequency() == Frequency.NO_FREQUENCY

    def test_arithmetic(self):
        p = Period.from_string("6M")
        assert -p == Period(-6, TimeUnit.MONTHS)
        assert 2 * p == Period(12, TimeUnit.MONTHS)
        assert str(p) == "6M"
        assert p.years() == 0.5

    def test_shift(self):
        assert shift(date(2024, 1, 31), Period(1, TimeUnit.MONTHS)) == date(2024, 2, 29)
        assert shift(date(2024, 1, 15), Period(2, TimeUnit.WEEKS)) == date(2024, 1, 29)
        assert shift(date(2024, 2, 29), Period(1, TimeUnit.YEARS)) == date(2025, 2, 28)


class TestSchedule:
    """Tests for schedule generation."""

    def test_regular_backward(self):
        """Test a regular semiannual schedule."""
        schedule = Schedule(date(2024, 1, 15), date(2026, 1, 15), Period.from_string("6M"))

        assert schedule.dates == [
            date(2024, 1, 15), date(2024, 7, 15), date(2025, 1, 15),
            date(2025, 7, 15), date(2026, 1, 15),
        ]
        assert len(schedule) == 5
        assert all(schedule.is_regular(i) for i in range(4))

    def test_short_front_stub_backward(self):
        """Test backward generation leaves the stub at the front."""
        schedule = Schedule(date(2024, 3, 1), date(2026, 1, 15), Period.from_string("6M"))

        assert schedule.start_date == date(2024, 3, 1)
        assert schedule[1] == date(2024, 7, 15)
        assert schedule.end_date == date(2026, 1, 15)
        assert not schedule.is_regular(0)
        assert schedule.is_regular(1)

    def test_short_back_stub_forward(self):
        """Test forward generation leaves the stub at the back."""
        schedule = Schedule(
            date(2024, 1, 15), date(2025, 3, 1), Period.from_string("6M"),
            rule=DateGeneration.FORWARD,
        )

        assert schedule.dates == [
            date(2024, 1, 15), date(2024, 7, 15), date(2025, 1, 15), date(2025, 3, 1),
        ]
        assert schedule.is_regular(0)
        assert not schedule.is_regular(2)

    def test_first_date(self):
        schedule = Schedule(
            date(2024, 1, 15), date(2025, 7, 15), Period.from_string("6M"),
            first_date=date(2024, 3, 15),
        )
        assert schedule[1] == date(2024, 3, 15)
        assert schedule[2] == date(2024, 7, 15)

    def test_next_to_last_date(self):
        schedule = Schedule(
            date(2024, 1, 15), date(2025, 3, 1), Period.from_string("6M"),
            next_to_last_date=date(2025, 1, 15),
        )
        assert schedule.dates == [
            date(2024, 1, 15), date(2024, 7, 15), date(2025, 1, 15), date(2025, 3, 1),
        ]

    def test_zero_rule(self):
        schedule = Schedule(
            date(2024, 1, 15), date(2026, 1, 15), Period.from_string("6M"),
            rule=DateGeneration.ZERO,
        )
        assert schedule.dates == [date(2024, 1, 15), date(2026, 1, 15)]

    def test_business_day_adjustment(self):
        """Test dates are rolled with the calendar."""
        schedule = Schedule(
            date(2023, 12, 15), date(2024, 12, 15), Period.from_string("6M"),
            Calendar(), BusinessDayConvention.FOLLOWING,
        )
        # June 15 2024 is a Saturday, December 15 2024 a Sunday
        assert schedule.dates == [date(2023, 12, 15), date(2024, 6, 17), date(2024, 12, 16)]

    def test_termination_convention(self):
        schedule = Schedule(
            date(2023, 12, 15), date(2024, 12, 15), Period.from_string("6M"),
            Calendar(), BusinessDayConvention.FOLLOWING, BusinessDayConvention.UNADJUSTED,
        )
        assert schedule.end_date == date(2024, 12, 15)

    def test_end_of_month(self):
        schedule = Schedule(
            date(2024, 2, 29), date(2025, 2, 28), Period.from_string("6M"),
            end_of_month=True,
        )
        assert schedule[1] == date(2024, 8, 31)

    def test_navigation(self):
        schedule = Schedule(date(2024, 1, 15), date(2026, 1, 15), Period.from_string("6M"))
        assert schedule.previous_date(date(2024, 8, 1)) == date(2024, 7, 15)
        assert schedule.next_date(date(2024, 8, 1)) == date(2025, 1, 15)
        assert schedule.next_date(date(2024, 7, 15)) == date(2024, 7, 15)
        assert schedule.previous_date(date(2024, 7, 15)) == date(2024, 1, 15)
        assert schedule.previous_date(date(2024, 1, 1)) is None
        assert schedule.next_date(date(2027, 1, 1)) is None

    def test_invalid_dates(self):
        """Test inconsistent dates are rejected."""
        with pytest.raises(InvalidArgumentError):
            Schedule(date(2026, 1, 15), date(2024, 1, 15), Period.from_string("6M"))
        with pytest.raises(InvalidArgumentError):
            Schedule(date(2024, 1, 15), date(2026, 1, 15), Period.from_string("6M"),
                     first_date=date(2027, 1, 15))
        with pytest.raises(InvalidArgumentError):
            Schedule(date(2024, 1, 15), date(2026, 1, 15), Period.from_string("6M"),
                     next_to_last_date=date(2023, 1, 15))

    def test_unsupported_rule(self):
        with pytest.raises(InvalidArgumentError):
            Schedule(date(2024, 1, 15), date(2026, 1, 15), Period.from_string("3M"),
                     rule=DateGeneration.THIRD_WEDNESDAY)

    def test_period_index_out_of_range(self):
        schedule = Schedule(date(2024, 1, 15), date(2025, 1, 15), Period.from_string("6M"))
        with pytest.raises(IndexError):
            schedule.is_regular(2)
