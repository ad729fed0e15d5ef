"""
Periods and coupon schedules.

Provides:
- Period: tenor such as "3M" or "10Y", parsed from strings or frequencies
- DateGeneration: rules for building schedule dates
- Schedule: adjusted coupon dates between an effective and termination date
"""

import bisect
import re
from dataclasses import dataclass
from datetime import date, timedelta
from enum import Enum
from typing import Iterator, List, Optional

from .conventions import (
    BusinessDayConvention,
    Calendar,
    Frequency,
    NullCalendar,
    TimeUnit,
    add_months,
)
from .errors import InvalidArgumentError


@dataclass(frozen=True)
class Period:
    """
    A length of time expressed in days, weeks, months or years.

    Attributes:
        length: Number of units (may be negative)
        units: Time unit
    """
    length: int
    units: TimeUnit

    # Tenor regex pattern: number + unit (D/W/M/Y)
    TENOR_PATTERN = re.compile(r'^(-?\d+)([DWMY])$', re.IGNORECASE)

    @classmethod
    def from_string(cls, tenor: str) -> "Period":
        """
        Parse a tenor string.

        Args:
            tenor: Tenor string like "1D", "3M", "2Y"

        Raises:
            InvalidArgumentError: If tenor format is invalid
        """
        match = cls.TENOR_PATTERN.match(tenor.upper().strip())
        if not match:
            raise InvalidArgumentError(
                f"Invalid tenor format: {tenor}. Expected format like '3M', '2Y'"
            )
        return cls(int(match.group(1)), TimeUnit(match.group(2).upper()))

    @classmethod
    def from_frequency(cls, frequency: Frequency) -> "Period":
        """Period between two events of the given frequency."""
        if frequency == Frequency.ONCE:
            return cls(0, TimeUnit.YEARS)
        if frequency == Frequency.ANNUAL:
            return cls(1, TimeUnit.YEARS)
        if frequency.value > 0 and 12 % frequency.value == 0:
            return cls(12 // frequency.value, TimeUnit.MONTHS)
        raise InvalidArgumentError(f"Unsupported frequency: {frequency}")

    def frequency(self) -> Frequency:
        """Frequency corresponding to this period."""
        length = abs(self.length)
        if length == 0:
            return Frequency.ONCE if self.units == TimeUnit.YEARS else Frequency.NO_FREQUENCY
        if self.units == TimeUnit.YEARS:
            return Frequency.ANNUAL if length == 1 else Frequency.NO_FREQUENCY
        if self.units == TimeUnit.MONTHS:
            if 12 % length == 0:
                return Frequency.from_int(12 // length)
            return Frequency.NO_FREQUENCY
        return Frequency.NO_FREQUENCY

    def years(self) -> float:
        """Approximate length in years."""
        if self.units == TimeUnit.DAYS:
            return self.length / 365.0
        if self.units == TimeUnit.WEEKS:
            return self.length * 7 / 365.0
        if self.units == TimeUnit.MONTHS:
            return self.length / 12.0
        return float(self.length)

    def __neg__(self) -> "Period":
        return Period(-self.length, self.units)

    def __mul__(self, n: int) -> "Period":
        return Period(self.length * n, self.units)

    __rmul__ = __mul__

    def __str__(self) -> str:
        return f"{self.length}{self.units.value}"


def shift(d: date, period: Period, end_of_month: bool = False) -> date:
    """Unadjusted calendar shift of a date by a period."""
    if period.units == TimeUnit.DAYS:
        return d + timedelta(days=period.length)
    if period.units == TimeUnit.WEEKS:
        return d + timedelta(weeks=period.length)
    months = period.length * (12 if period.units == TimeUnit.YEARS else 1)
    return add_months(d, months, end_of_month)


class DateGeneration(Enum):
    """Schedule date generation rule."""
    BACKWARD = "Backward"
    FORWARD = "Forward"
    ZERO = "Zero"
    THIRD_WEDNESDAY = "ThirdWednesday"
    TWENTIETH = "Twentieth"
    TWENTIETH_IMM = "TwentiethIMM"


class Schedule:
    """
    Payment schedule between an effective and a termination date.

    BACKWARD generation rolls back from the termination date and leaves any
    stub at the front; FORWARD rolls forward from the effective date and
    leaves it at the back; ZERO gives a single period.

    Attributes:
        dates: Adjusted schedule dates, including both ends
        tenor: Regular period length
        calendar: Calendar used for adjustment
        convention: Adjustment for all dates but the last
        termination_convention: Adjustment for the last date
        rule: Generation rule
        end_of_month: Whether month-end dates roll to month-end
    """

    def __init__(
        self,
        effective_date: date,
        termination_date: date,
        tenor: Period,
        calendar: Optional[Calendar] = None,
        convention: BusinessDayConvention = BusinessDayConvention.FOLLOWING,
        termination_convention: Optional[BusinessDayConvention] = None,
        rule: DateGeneration = DateGeneration.BACKWARD,
        end_of_month: bool = False,
        first_date: Optional[date] = None,
        next_to_last_date: Optional[date] = None
    ):
        if effective_date >= termination_date:
            raise InvalidArgumentError(
                f"effective date ({effective_date}) later than or equal to "
                f"termination date ({termination_date})"
            )
        if first_date is not None and not effective_date < first_date <= termination_date:
            raise InvalidArgumentError(
                f"first date ({first_date}) out of effective-termination date range "
                f"[{effective_date}, {termination_date}]"
            )
        if (next_to_last_date is not None
                and not effective_date <= next_to_last_date < termination_date):
            raise InvalidArgumentError(
                f"next to last date ({next_to_last_date}) out of effective-termination "
                f"date range [{effective_date}, {termination_date}]"
            )

        self.tenor = tenor
        self.calendar = calendar if calendar is not None else NullCalendar()
        self.convention = convention
        self.termination_convention = (
            termination_convention if termination_convention is not None else convention
        )
        self.rule = rule
        self.end_of_month = end_of_month
        self.first_date = first_date
        self.next_to_last_date = next_to_last_date

        if tenor.length == 0 or rule == DateGeneration.ZERO:
            self.tenor = Period(0, TimeUnit.YEARS)
            unadjusted = [effective_date, termination_date]
        elif rule == DateGeneration.BACKWARD:
            unadjusted = self._backward(effective_date, termination_date)
        elif rule == DateGeneration.FORWARD:
            unadjusted = self._forward(effective_date, termination_date)
        else:
            raise InvalidArgumentError(f"{rule.value} date generation rule is not supported")

        self._unadjusted = unadjusted
        self.dates: List[date] = [
            self.calendar.adjust(d, self.convention) for d in unadjusted[:-1]
        ] + [self.calendar.adjust(unadjusted[-1], self.termination_convention)]

    def _same_adjusted(self, d1: date, d2: date) -> bool:
        return (self.calendar.adjust(d1, self.convention)
                == self.calendar.adjust(d2, self.convention))

    def _backward(self, effective: date, termination: date) -> List[date]:
        dates = [termination]
        seed = termination
        if self.next_to_last_date is not None:
            dates.insert(0, self.next_to_last_date)
            seed = self.next_to_last_date
        exit_date = self.first_date if self.first_date is not None else effective

        periods = 1
        while True:
            temp = shift(seed, self.tenor * -periods, self.end_of_month)
            if temp < exit_date:
                if (self.first_date is not None
                        and not self._same_adjusted(dates[0], self.first_date)):
                    dates.insert(0, self.first_date)
                break
            if not self._same_adjusted(dates[0], temp):
                dates.insert(0, temp)
            periods += 1

        if not self._same_adjusted(dates[0], effective):
            dates.insert(0, effective)
        return dates

    def _forward(self, effective: date, termination: date) -> List[date]:
        dates = [effective]
        seed = effective
        if self.first_date is not None:
            dates.append(self.first_date)
            seed = self.first_date
        exit_date = (self.next_to_last_date if self.next_to_last_date is not None
                     else termination)

        periods = 1
        while True:
            temp = shift(seed, self.tenor * periods, self.end_of_month)
            if temp > exit_date:
                if (self.next_to_last_date is not None
                        and not self._same_adjusted(dates[-1], self.next_to_last_date)):
                    dates.append(self.next_to_last_date)
                break
            if not self._same_adjusted(dates[-1], temp):
                dates.append(temp)
            periods += 1

        if not self._same_adjusted(dates[-1], termination):
            dates.append(termination)
        return dates

    @property
    def start_date(self) -> date:
        return self.dates[0]

    @property
    def end_date(self) -> date:
        return self.dates[-1]

    def is_regular(self, i: int) -> bool:
        """
        Whether period ``i`` (0-based, between dates[i] and dates[i+1])
        has the full tenor length.
        """
        if not 0 <= i < len(self.dates) - 1:
            raise IndexError(f"Invalid period index: {i}")
        if self.tenor.length == 0:
            return True
        start, end = self._unadjusted[i], self._unadjusted[i + 1]
        return shift(start, self.tenor, self.end_of_month) == end or \
            shift(end, -self.tenor, self.end_of_month) == start

    def previous_date(self, ref_date: date) -> Optional[date]:
        """Last schedule date strictly before ``ref_date``."""
        idx = bisect.bisect_left(self.dates, ref_date)
        return self.dates[idx - 1] if idx > 0 else None

    def next_date(self, ref_date: date) -> Optional[date]:
        """First schedule date on or after ``ref_date``."""
        idx = bisect.bisect_left(self.dates, ref_date)
        return self.dates[idx] if idx < len(self.dates) else None

    def __len__(self) -> int:
        return len(self.dates)

    def __getitem__(self, i: int) -> date:
        return self.dates[i]

    def __iter__(self) -> Iterator[date]:
        return iter(self.dates)

    def __repr__(self) -> str:
        return (f"Schedule({self.start_date} -> {self.end_date}, tenor={self.tenor}, "
                f"rule={self.rule.value}, dates={len(self.dates)})")


__all__ = [
    "Period",
    "DateGeneration",
    "Schedule",
    "shift",
]
