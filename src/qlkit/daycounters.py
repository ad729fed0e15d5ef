"""
Day counters.

A day counter turns a pair of dates into a number of days and a year
fraction. Fractions are signed: swapping the dates flips the sign.

- Actual365Fixed: "Actual/365 (Fixed)", also known as "Act/365 (Fixed)",
  "A/365 (Fixed)" or "A/365F". According to ISDA, "Actual/365" without
  "Fixed" is an alias for "Actual/Actual (ISDA)".
- Actual360: "Actual/360"
- ActualActual: "Actual/Actual (ISDA)"
- Thirty360: "30/360 (Bond Basis)"
"""

import calendar
from abc import ABC, abstractmethod
from datetime import date
from typing import Optional

from .conventions import DayCount
from .errors import InvalidArgumentError


class DayCounter(ABC):
    """Abstract day counter; two counters are equal when their names are."""

    name: str = ""

    def day_count(self, d1: date, d2: date) -> int:
        """Number of days between d1 and d2."""
        return (d2 - d1).days

    @abstractmethod
    def year_fraction(
        self,
        d1: date,
        d2: date,
        ref_start: Optional[date] = None,
        ref_end: Optional[date] = None
    ) -> float:
        """
        Year fraction between two dates.

        Args:
            d1: Start date
            d2: End date
            ref_start: Start of the reference period (unused by most counters)
            ref_end: End of the reference period (unused by most counters)
        """

    @staticmethod
    def from_convention(day_count: DayCount) -> "DayCounter":
        """Build the day counter for a DayCount enumeration value."""
        mapping = {
            DayCount.ACT_360: Actual360,
            DayCount.ACT_365_FIXED: Actual365Fixed,
            DayCount.ACT_ACT: ActualActual,
            DayCount.THIRTY_360: Thirty360,
        }
        if day_count not in mapping:
            raise InvalidArgumentError(f"Unknown day count: {day_count}")
        return mapping[day_count]()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DayCounter):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class Actual365Fixed(DayCounter):
    """Actual days / 365."""

    name = "Actual/365 (Fixed)"

    def year_fraction(self, d1, d2, ref_start=None, ref_end=None) -> float:
        return self.day_count(d1, d2) / 365.0


class Actual360(DayCounter):
    """Actual days / 360."""

    name = "Actual/360"

    def year_fraction(self, d1, d2, ref_start=None, ref_end=None) -> float:
        return self.day_count(d1, d2) / 360.0


class ActualActual(DayCounter):
    """
    ISDA Actual/Actual.

    The period is split at year boundaries; each piece is divided by the
    number of days in its own year.
    """

    name = "Actual/Actual (ISDA)"

    def year_fraction(self, d1, d2, ref_start=None, ref_end=None) -> float:
        if d1 == d2:
            return 0.0
        if d1 > d2:
            return -self.year_fraction(d2, d1)

        y1, y2 = d1.year, d2.year
        days_y1 = 366.0 if calendar.isleap(y1) else 365.0
        days_y2 = 366.0 if calendar.isleap(y2) else 365.0

        total = float(y2 - y1 - 1)
        total += (date(y1 + 1, 1, 1) - d1).days / days_y1
        total += (d2 - date(y2, 1, 1)).days / days_y2
        return total


class Thirty360(DayCounter):
    """30/360 bond basis (US)."""

    name = "30/360 (Bond Basis)"

    def day_count(self, d1: date, d2: date) -> int:
        dd1, dd2 = d1.day, d2.day
        if dd1 == 31:
            dd1 = 30
        if dd2 == 31 and dd1 == 30:
            dd2 = 30
        return (360 * (d2.year - d1.year) + 30 * (d2.month - d1.month)
                + (dd2 - dd1))

    def year_fraction(self, d1, d2, ref_start=None, ref_end=None) -> float:
        return self.day_count(d1, d2) / 360.0


__all__ = [
    "DayCounter",
    "Actual365Fixed",
    "Actual360",
    "ActualActual",
    "Thirty360",
]
