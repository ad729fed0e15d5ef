"""
Leg builders.

A leg is a list of cash flows paid by one side of an instrument.
"""

from typing import List, Optional, Sequence, Union

from ..conventions import BusinessDayConvention, Calendar, Compounding, Frequency
from ..daycounters import DayCounter
from ..dates import Schedule, shift
from ..errors import InvalidArgumentError
from ..interest_rate import InterestRate
from .cashflow import CashFlow
from .coupons import FixedRateCoupon


def _as_list(values) -> list:
    if isinstance(values, (list, tuple)):
        return list(values)
    return [values]


def _get(values: list, i: int):
    """Item ``i``, or the last item when the list is shorter."""
    return values[i] if i < len(values) else values[-1]


class FixedRateLeg:
    """
    Builder for a sequence of fixed-rate coupons.

    Rates and notionals may be given per period; when fewer values than
    periods are given, the last one is repeated.

    Example:
        >>> leg = (FixedRateLeg(schedule)
        ...        .with_notionals(100.0)
        ...        .with_coupon_rates(0.05, ActualActual())
        ...        .with_payment_adjustment(BusinessDayConvention.FOLLOWING)
        ...        .build())
    """

    def __init__(self, schedule: Schedule):
        self.schedule = schedule
        self.notionals: List[float] = []
        self.coupon_rates: List[InterestRate] = []
        self.first_period_day_counter: Optional[DayCounter] = None
        self.payment_calendar: Calendar = schedule.calendar
        self.payment_adjustment = BusinessDayConvention.FOLLOWING

    def with_notionals(self, notionals: Union[float, Sequence[float]]) -> "FixedRateLeg":
        self.notionals = [float(n) for n in _as_list(notionals)]
        return self

    def with_coupon_rates(
        self,
        rates: Union[float, InterestRate, Sequence[Union[float, InterestRate]]],
        day_counter: Optional[DayCounter] = None,
        compounding: Compounding = Compounding.SIMPLE,
        frequency: Frequency = Frequency.ANNUAL
    ) -> "FixedRateLeg":
        """
        Set coupon rates.

        Plain numbers are turned into InterestRate objects with the given
        day counter, compounding and frequency.
        """
        converted = []
        for r in _as_list(rates):
            if isinstance(r, InterestRate):
                converted.append(r)
            else:
                if day_counter is None:
                    raise InvalidArgumentError("day counter required for plain coupon rates")
                converted.append(InterestRate(r, day_counter, compounding, frequency))
        self.coupon_rates = converted
        return self

    def with_first_period_day_counter(self, day_counter: DayCounter) -> "FixedRateLeg":
        self.first_period_day_counter = day_counter
        return self

    def with_payment_calendar(self, calendar: Calendar) -> "FixedRateLeg":
        self.payment_calendar = calendar
        return self

    def with_payment_adjustment(self, convention: BusinessDayConvention) -> "FixedRateLeg":
        self.payment_adjustment = convention
        return self

    def build(self) -> List[CashFlow]:
        """
        Generate the coupons.

        Raises:
            InvalidArgumentError: If no rates or notionals were given
        """
        if not self.coupon_rates:
            raise InvalidArgumentError("no coupon rates given")
        if not self.notionals:
            raise InvalidArgumentError("no notional given")

        schedule = self.schedule
        tenor = schedule.tenor
        n_periods = len(schedule) - 1
        leg: List[CashFlow] = []

        for i in range(n_periods):
            start, end = schedule[i], schedule[i + 1]
            payment_date = self.payment_calendar.adjust(end, self.payment_adjustment)
            rate = _get(self.coupon_rates, i)
            nominal = _get(self.notionals, i)

            ref_start, ref_end = start, end
            if tenor.length != 0 and not schedule.is_regular(i):
                if i == 0:
                    ref_start = schedule.calendar.adjust(
                        shift(end, -tenor, schedule.end_of_month), schedule.convention
                    )
                else:
                    ref_end = schedule.calendar.adjust(
                        shift(start, tenor, schedule.end_of_month), schedule.convention
                    )

            if i == 0 and self.first_period_day_counter is not None:
                rate = InterestRate(rate.rate, self.first_period_day_counter,
                                    rate.compounding, rate.frequency)

            leg.append(FixedRateCoupon(
                payment_date, nominal, rate, start, end, ref_start, ref_end
            ))

        return leg


__all__ = ["FixedRateLeg"]
