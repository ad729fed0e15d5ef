"""
Interest rate with its day count and compounding conventions.

Compound factors over a time t (in years):
- Simple:                 1 + r t
- Compounded:             (1 + r / f) ^ (f t)
- Continuous:             exp(r t)
- Simple then compounded: simple up to one period, compounded afterwards
"""

import math
from datetime import date
from typing import Optional, Union

from .conventions import Compounding, Frequency
from .daycounters import DayCounter
from .errors import InvalidArgumentError


class InterestRate:
    """
    Interest rate with compounding, frequency and day count.

    Attributes:
        rate: Rate as a decimal (0.05 for 5%)
        day_counter: Day counter used to measure time
        compounding: Compounding rule
        frequency: Compounding frequency (needed unless simple/continuous)
    """

    def __init__(
        self,
        rate: float,
        day_counter: DayCounter,
        compounding: Compounding = Compounding.SIMPLE,
        frequency: Frequency = Frequency.ANNUAL
    ):
        if compounding in (Compounding.COMPOUNDED, Compounding.SIMPLE_THEN_COMPOUNDED):
            if frequency.value <= 0:
                raise InvalidArgumentError(
                    f"frequency {frequency.name} not allowed for this interest rate"
                )
        self.rate = float(rate)
        self.day_counter = day_counter
        self.compounding = compounding
        self.frequency = frequency

    @property
    def _freq(self) -> float:
        return float(self.frequency.value)

    def _time(self, t_or_d1: Union[float, date], d2: Optional[date],
              ref_start: Optional[date], ref_end: Optional[date]) -> float:
        if isinstance(t_or_d1, date):
            if d2 is None:
                raise InvalidArgumentError("end date required with a start date")
            return self.day_counter.year_fraction(t_or_d1, d2, ref_start, ref_end)
        return float(t_or_d1)

    def compound_factor(
        self,
        t_or_d1: Union[float, date],
        d2: Optional[date] = None,
        ref_start: Optional[date] = None,
        ref_end: Optional[date] = None
    ) -> float:
        """
        Compound factor over a time in years or between two dates.

        Raises:
            InvalidArgumentError: If the time is negative
        """
        t = self._time(t_or_d1, d2, ref_start, ref_end)
        if t < 0.0:
            raise InvalidArgumentError(f"negative time ({t}) not allowed")

        r = self.rate
        if self.compounding == Compounding.SIMPLE:
            return 1.0 + r * t
        if self.compounding == Compounding.COMPOUNDED:
            return (1.0 + r / self._freq) ** (self._freq * t)
        if self.compounding == Compounding.CONTINUOUS:
            return math.exp(r * t)
        if t <= 1.0 / self._freq:
            return 1.0 + r * t
        return (1.0 + r / self._freq) ** (self._freq * t)

    def discount_factor(
        self,
        t_or_d1: Union[float, date],
        d2: Optional[date] = None,
        ref_start: Optional[date] = None,
        ref_end: Optional[date] = None
    ) -> float:
        """Discount factor, i.e. the inverse of the compound factor."""
        return 1.0 / self.compound_factor(t_or_d1, d2, ref_start, ref_end)

    @classmethod
    def implied_rate(
        cls,
        compound: float,
        day_counter: DayCounter,
        compounding: Compounding,
        frequency: Frequency,
        t_or_d1: Union[float, date],
        d2: Optional[date] = None,
        ref_start: Optional[date] = None,
        ref_end: Optional[date] = None
    ) -> "InterestRate":
        """
        Rate which, under the given conventions, produces a compound factor.

        Raises:
            InvalidArgumentError: If the compound factor is not positive or
                the time is not positive when it is needed
        """
        if compound <= 0.0:
            raise InvalidArgumentError("positive compound factor required")

        if isinstance(t_or_d1, date):
            if d2 is None:
                raise InvalidArgumentError("end date required with a start date")
            t = day_counter.year_fraction(t_or_d1, d2, ref_start, ref_end)
        else:
            t = float(t_or_d1)

        if compound == 1.0:
            if t < 0.0:
                raise InvalidArgumentError(f"non negative time ({t}) required")
            return cls(0.0, day_counter, compounding, frequency)

        if t <= 0.0:
            raise InvalidArgumentError(f"positive time ({t}) required")

        f = float(frequency.value)
        if compounding == Compounding.SIMPLE:
            r = (compound - 1.0) / t
        elif compounding == Compounding.COMPOUNDED:
            r = (compound ** (1.0 / (f * t)) - 1.0) * f
        elif compounding == Compounding.CONTINUOUS:
            r = math.log(compound) / t
        elif t <= 1.0 / f:
            r = (compound - 1.0) / t
        else:
            r = (compound ** (1.0 / (f * t)) - 1.0) * f
        return cls(r, day_counter, compounding, frequency)

    def equivalent_rate(
        self,
        compounding: Compounding,
        frequency: Frequency,
        t_or_d1: Union[float, date],
        d2: Optional[date] = None,
        day_counter: Optional[DayCounter] = None
    ) -> "InterestRate":
        """Equivalent rate under other conventions over the same period."""
        if isinstance(t_or_d1, date):
            dc = day_counter if day_counter is not None else self.day_counter
            compound = self.compound_factor(t_or_d1, d2)
            return InterestRate.implied_rate(compound, dc, compounding, frequency, t_or_d1, d2)
        compound = self.compound_factor(t_or_d1)
        return InterestRate.implied_rate(
            compound, self.day_counter, compounding, frequency, t_or_d1
        )

    def __float__(self) -> float:
        return self.rate

    def __repr__(self) -> str:
        return (f"InterestRate({self.rate:.6f}, {self.day_counter.name}, "
                f"{self.compounding.value}, {self.frequency.name})")

    def __str__(self) -> str:
        text = f"{self.rate * 100:.6f} % {self.day_counter.name}"
        if self.compounding == Compounding.SIMPLE:
            return text + " simple compounding"
        if self.compounding == Compounding.CONTINUOUS:
            return text + " continuous compounding"
        return f"{text} {self.frequency.name.lower()} {self.compounding.value.lower()} compounding"


__all__ = ["InterestRate"]
