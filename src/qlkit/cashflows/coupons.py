"""
Coupons accruing interest over a period.

Provides:
- Coupon: Base class holding nominal and accrual/reference periods
- FixedRateCoupon: Coupon paying a fixed InterestRate
"""

import datetime
from abc import abstractmethod
from typing import Optional, Union

from ..conventions import Compounding, Frequency
from ..daycounters import DayCounter
from ..errors import InvalidArgumentError
from ..interest_rate import InterestRate
from .cashflow import CashFlow


class Coupon(CashFlow):
    """
    Coupon accruing over a fixed period.

    Attributes:
        accrual_start_date: Start of the accrual period
        accrual_end_date: End of the accrual period
        reference_period_start: Start of the reference period (regular
            period the accrual is measured against)
        reference_period_end: End of the reference period
    """

    def __init__(
        self,
        payment_date: datetime.date,
        nominal: float,
        accrual_start_date: datetime.date,
        accrual_end_date: datetime.date,
        reference_period_start: Optional[datetime.date] = None,
        reference_period_end: Optional[datetime.date] = None
    ):
        super().__init__()
        if accrual_start_date > accrual_end_date:
            raise InvalidArgumentError(
                f"accrual start ({accrual_start_date}) after accrual end ({accrual_end_date})"
            )
        self._payment_date = payment_date
        self._nominal = float(nominal)
        self.accrual_start_date = accrual_start_date
        self.accrual_end_date = accrual_end_date
        self.reference_period_start = (
            reference_period_start if reference_period_start is not None else accrual_start_date
        )
        self.reference_period_end = (
            reference_period_end if reference_period_end is not None else accrual_end_date
        )

    def date(self) -> datetime.date:
        return self._payment_date

    def nominal(self) -> float:
        return self._nominal

    @abstractmethod
    def rate(self) -> float:
        """Accrued rate."""

    @abstractmethod
    def day_counter(self) -> DayCounter:
        """Day counter for accrual calculation."""

    @abstractmethod
    def accrued_amount(self, d: datetime.date) -> float:
        """Accrued amount at the given date."""

    def accrual_period(self) -> float:
        """Accrual period as a fraction of year."""
        return self.day_counter().year_fraction(
            self.accrual_start_date, self.accrual_end_date,
            self.reference_period_start, self.reference_period_end
        )

    def accrual_days(self) -> int:
        """Accrual period in days."""
        return self.day_counter().day_count(self.accrual_start_date, self.accrual_end_date)

    def accrued_period(self, d: datetime.date) -> float:
        """Accrued period as a fraction of year at the given date."""
        if d <= self.accrual_start_date or d > self._payment_date:
            return 0.0
        return self.day_counter().year_fraction(
            self.accrual_start_date, min(d, self.accrual_end_date),
            self.reference_period_start, self.reference_period_end
        )


class FixedRateCoupon(Coupon):
    """
    Coupon paying a fixed interest rate.

    The amount is ``nominal * (compound_factor - 1)`` over the accrual
    period.
    """

    def __init__(
        self,
        payment_date: datetime.date,
        nominal: float,
        rate: Union[InterestRate, float],
        accrual_start_date: datetime.date,
        accrual_end_date: datetime.date,
        reference_period_start: Optional[datetime.date] = None,
        reference_period_end: Optional[datetime.date] = None,
        day_counter: Optional[DayCounter] = None
    ):
        super().__init__(payment_date, nominal, accrual_start_date, accrual_end_date,
                         reference_period_start, reference_period_end)
        if not isinstance(rate, InterestRate):
            if day_counter is None:
                raise InvalidArgumentError("day counter required for a plain coupon rate")
            rate = InterestRate(rate, day_counter, Compounding.SIMPLE, Frequency.ANNUAL)
        self._rate = rate

    def interest_rate(self) -> InterestRate:
        return self._rate

    def rate(self) -> float:
        return self._rate.rate

    def day_counter(self) -> DayCounter:
        return self._rate.day_counter

    def amount(self) -> float:
        return self._nominal * (self._rate.compound_factor(
            self.accrual_start_date, self.accrual_end_date,
            self.reference_period_start, self.reference_period_end
        ) - 1.0)

    def accrued_amount(self, d: datetime.date) -> float:
        if d <= self.accrual_start_date or d > self._payment_date:
            return 0.0
        return self._nominal * (self._rate.compound_factor(
            self.accrual_start_date, min(d, self.accrual_end_date),
            self.reference_period_start, self.reference_period_end
        ) - 1.0)


__all__ = [
    "Coupon",
    "FixedRateCoupon",
]
