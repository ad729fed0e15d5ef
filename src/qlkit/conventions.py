"""
Market conventions and business-day calendars.

Day Counts:
- ACT/360: Actual days / 360 (money markets, OIS)
- ACT/365F: Actual days / 365
- ACT/ACT: Actual days / actual days in year (ISDA)
- 30/360: 30 days per month / 360 (bond basis)

Business Day Conventions:
- Following: Move to next business day
- Modified Following: Move to next business day, unless it falls in next month (then previous)
- Preceding: Move to previous business day
- Modified Preceding: Move to previous business day, unless it falls in previous month (then next)
- Unadjusted: Leave the date alone

Calendars only know about weekends and explicitly supplied holidays.
"""

import calendar as _calendar
from dataclasses import dataclass, field
from datetime import date, timedelta
from enum import Enum
from typing import FrozenSet, Iterable, Optional, Tuple

from .errors import InvalidArgumentError


class DayCount(Enum):
    """Day count convention enumeration."""
    ACT_360 = "ACT/360"
    ACT_365_FIXED = "ACT/365F"
    ACT_ACT = "ACT/ACT"
    THIRTY_360 = "30/360"

    @classmethod
    def from_string(cls, s: str) -> "DayCount":
        """Parse day count from string representation."""
        mapping = {
            "ACT/360": cls.ACT_360,
            "ACT360": cls.ACT_360,
            "ACT/365": cls.ACT_365_FIXED,
            "ACT365": cls.ACT_365_FIXED,
            "ACT/365F": cls.ACT_365_FIXED,
            "ACT/365(FIXED)": cls.ACT_365_FIXED,
            "ACT/ACT": cls.ACT_ACT,
            "ACTACT": cls.ACT_ACT,
            "30/360": cls.THIRTY_360,
            "30360": cls.THIRTY_360,
        }
        key = s.upper().replace(" ", "")
        if key in mapping:
            return mapping[key]
        raise InvalidArgumentError(f"Unknown day count convention: {s}")


class BusinessDayConvention(Enum):
    """Business day adjustment convention."""
    FOLLOWING = "Following"
    MODIFIED_FOLLOWING = "ModifiedFollowing"
    PRECEDING = "Preceding"
    MODIFIED_PRECEDING = "ModifiedPreceding"
    UNADJUSTED = "Unadjusted"


class Compounding(Enum):
    """Interest rate compounding rule."""
    SIMPLE = "Simple"
    COMPOUNDED = "Compounded"
    CONTINUOUS = "Continuous"
    SIMPLE_THEN_COMPOUNDED = "SimpleThenCompounded"


class Frequency(Enum):
    """Number of events per year."""
    NO_FREQUENCY = -1
    ONCE = 0
    ANNUAL = 1
    SEMIANNUAL = 2
    EVERY_FOURTH_MONTH = 3
    QUARTERLY = 4
    BIMONTHLY = 6
    MONTHLY = 12

    @classmethod
    def from_int(cls, n: int) -> "Frequency":
        for freq in cls:
            if freq.value == n:
                return freq
        raise InvalidArgumentError(f"Unsupported frequency: {n} per year")


class TimeUnit(Enum):
    """Units for periods and calendar advancement."""
    DAYS = "D"
    WEEKS = "W"
    MONTHS = "M"
    YEARS = "Y"


def days_in_month(year: int, month: int) -> int:
    """Return number of days in a month."""
    return _calendar.monthrange(year, month)[1]


def add_months(d: date, months: int, end_of_month: bool = False) -> date:
    """
    Shift a date by a number of calendar months.

    The day of month is clipped to the target month's length. With
    ``end_of_month``, a date on the last day of its month maps to the last
    day of the target month.
    """
    total = d.year * 12 + (d.month - 1) + months
    year, month = divmod(total, 12)
    month += 1
    last = days_in_month(year, month)
    if end_of_month and d.day == days_in_month(d.year, d.month):
        return date(year, month, last)
    return date(year, month, min(d.day, last))


class Calendar:
    """
    Business-day calendar.

    Non-business days are the configured weekend days (Saturday and
    Sunday by default) plus any explicitly listed holidays.

    Attributes:
        name: Calendar name, used for equality
        holidays: Extra non-business days
        weekend: Weekday numbers (0 = Monday) treated as weekend
    """

    def __init__(
        self,
        name: str = "WeekendsOnly",
        holidays: Optional[Iterable[date]] = None,
        weekend: Tuple[int, ...] = (5, 6)
    ):
        self.name = name
        self.holidays: FrozenSet[date] = frozenset(holidays or ())
        self.weekend = tuple(weekend)

    def is_weekend(self, d: date) -> bool:
        return d.weekday() in self.weekend

    def is_business_day(self, d: date) -> bool:
        """Check if a date is a business day."""
        return not self.is_weekend(d) and d not in self.holidays

    def is_holiday(self, d: date) -> bool:
        return not self.is_business_day(d)

    def is_end_of_month(self, d: date) -> bool:
        """Whether ``d`` is the last business day of its month."""
        return d.month != self.adjust(d + timedelta(days=1)).month

    def end_of_month(self, d: date) -> date:
        """Last business day of the month containing ``d``."""
        last = date(d.year, d.month, days_in_month(d.year, d.month))
        return self.adjust(last, BusinessDayConvention.PRECEDING)

    def adjust(
        self,
        d: date,
        convention: BusinessDayConvention = BusinessDayConvention.FOLLOWING
    ) -> date:
        """
        Adjust a date according to business day convention.

        Args:
            d: Date to adjust
            convention: Business day adjustment rule

        Returns:
            Adjusted date
        """
        if convention == BusinessDayConvention.UNADJUSTED:
            return d

        if convention in (BusinessDayConvention.FOLLOWING,
                          BusinessDayConvention.MODIFIED_FOLLOWING):
            adjusted = self._roll(d, 1)
            # If we crossed into next month, go preceding instead
            if (convention == BusinessDayConvention.MODIFIED_FOLLOWING
                    and adjusted.month != d.month):
                return self.adjust(d, BusinessDayConvention.PRECEDING)
            return adjusted

        if convention in (BusinessDayConvention.PRECEDING,
                          BusinessDayConvention.MODIFIED_PRECEDING):
            adjusted = self._roll(d, -1)
            if (convention == BusinessDayConvention.MODIFIED_PRECEDING
                    and adjusted.month != d.month):
                return self.adjust(d, BusinessDayConvention.FOLLOWING)
            return adjusted

        raise InvalidArgumentError(f"Unknown business day convention: {convention}")

    def _roll(self, d: date, step: int) -> date:
        if not self.weekend and not self.holidays:
            return d
        while not self.is_business_day(d):
            d += timedelta(days=step)
        return d

    def advance(
        self,
        d: date,
        n: int,
        unit: TimeUnit = TimeUnit.DAYS,
        convention: BusinessDayConvention = BusinessDayConvention.FOLLOWING,
        end_of_month: bool = False
    ) -> date:
        """
        Advance a date by a number of units.

        Days are counted as business days; weeks, months and years are
        calendar periods whose result is then adjusted with ``convention``.

        Args:
            d: Starting date
            n: Number of units (may be negative)
            unit: Time unit
            convention: Adjustment applied to week/month/year results
            end_of_month: Keep month-end dates at month end

        Returns:
            Advanced date
        """
        if n == 0:
            return self.adjust(d, convention)

        if unit == TimeUnit.DAYS:
            step = 1 if n > 0 else -1
            remaining = abs(n)
            result = d
            while remaining > 0:
                result += timedelta(days=step)
                if self.is_business_day(result):
                    remaining -= 1
            return result

        if unit == TimeUnit.WEEKS:
            return self.adjust(d + timedelta(weeks=n), convention)

        months = n if unit == TimeUnit.MONTHS else 12 * n
        result = add_months(d, months)
        if end_of_month and self.is_end_of_month(d):
            return self.end_of_month(result)
        return self.adjust(result, convention)

    def business_days_between(
        self,
        start: date,
        end: date,
        include_first: bool = True,
        include_last: bool = False
    ) -> int:
        """Number of business days in the interval between two dates."""
        if start > end:
            return -self.business_days_between(end, start, include_last, include_first)
        count = 0
        d = start
        while d <= end:
            if self.is_business_day(d):
                if (d != start or include_first) and (d != end or include_last):
                    count += 1
            d += timedelta(days=1)
        return count

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Calendar):
            return NotImplemented
        return (self.name == other.name and self.holidays == other.holidays
                and self.weekend == other.weekend)

    def __hash__(self) -> int:
        return hash((self.name, self.holidays, self.weekend))

    def __repr__(self) -> str:
        return f"Calendar({self.name!r}, holidays={len(self.holidays)})"


class NullCalendar(Calendar):
    """Calendar for which every day is a business day."""

    def __init__(self):
        super().__init__(name="Null", weekend=())


@dataclass
class Conventions:
    """
    Container for instrument conventions.

    Attributes:
        day_count: Day count convention for accrual
        business_day: Business day adjustment rule for payments
        frequency: Coupon frequency
        settlement_days: Business days to settle from trade date
        calendar: Calendar used for settlement and payments
    """
    day_count: DayCount = DayCount.ACT_360
    business_day: BusinessDayConvention = BusinessDayConvention.MODIFIED_FOLLOWING
    frequency: Frequency = Frequency.ANNUAL
    settlement_days: int = 2
    calendar: Calendar = field(default_factory=Calendar)

    @property
    def day_counter(self):
        """DayCounter instance for ``day_count``."""
        from .daycounters import DayCounter
        return DayCounter.from_convention(self.day_count)

    # Standard USD conventions
    @classmethod
    def usd_ois(cls) -> "Conventions":
        """Standard USD OIS conventions."""
        return cls(
            day_count=DayCount.ACT_360,
            business_day=BusinessDayConvention.MODIFIED_FOLLOWING,
            frequency=Frequency.ANNUAL,
            settlement_days=2
        )

    @classmethod
    def usd_treasury(cls) -> "Conventions":
        """Standard USD Treasury bond conventions."""
        return cls(
            day_count=DayCount.ACT_ACT,
            business_day=BusinessDayConvention.FOLLOWING,
            frequency=Frequency.SEMIANNUAL,
            settlement_days=1
        )

    @classmethod
    def usd_swap(cls) -> "Conventions":
        """Standard USD IRS conventions (fixed leg)."""
        return cls(
            day_count=DayCount.THIRTY_360,
            business_day=BusinessDayConvention.MODIFIED_FOLLOWING,
            frequency=Frequency.SEMIANNUAL,
            settlement_days=2
        )


__all__ = [
    "DayCount",
    "BusinessDayConvention",
    "Compounding",
    "Frequency",
    "TimeUnit",
    "Calendar",
    "NullCalendar",
    "Conventions",
    "days_in_month",
    "add_months",
]
