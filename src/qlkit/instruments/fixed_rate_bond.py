"""
Fixed-rate bond.

Provides:
- FixedRateBond: bullet bond paying fixed coupons on a schedule
"""

import logging
from datetime import date
from typing import Optional, Sequence, Union

from ..cashflows.legs import FixedRateLeg
from ..conventions import BusinessDayConvention, Calendar, Conventions, Frequency
from ..daycounters import DayCounter
from ..dates import DateGeneration, Period, Schedule
from ..errors import InvalidArgumentError
from ..interest_rate import InterestRate
from .bond import Bond

logger = logging.getLogger(__name__)

CouponRates = Union[float, InterestRate, Sequence[Union[float, InterestRate]]]


class FixedRateBond(Bond):
    """
    Fixed-rate bond.

    Coupons are either plain rates, simply compounded and accrued with
    ``accrual_day_counter``, or InterestRate objects carrying their own
    conventions.

    Example:
        >>> schedule = Schedule(date(2024, 1, 15), date(2029, 1, 15), Period.from_string("6M"))
        >>> bond = FixedRateBond(1, 100.0, schedule, 0.045, ActualActual())
        >>> bond.set_pricing_engine(DiscountingBondEngine(curve))
        >>> bond.clean_price()
    """

    def __init__(
        self,
        settlement_days: int,
        face_amount: float,
        schedule: Schedule,
        coupons: CouponRates,
        accrual_day_counter: Optional[DayCounter] = None,
        payment_convention: BusinessDayConvention = BusinessDayConvention.FOLLOWING,
        redemption: float = 100.0,
        issue_date: Optional[date] = None,
        payment_calendar: Optional[Calendar] = None
    ):
        """
        Args:
            settlement_days: Business days to settle
            face_amount: Face amount
            schedule: Coupon schedule
            coupons: Coupon rate(s)
            accrual_day_counter: Day counter for plain coupon rates
            payment_convention: Adjustment of payment dates
            redemption: Redemption price per 100 of face
            issue_date: Optional issue date
            payment_calendar: Payment calendar; the schedule's by default

        Raises:
            InvalidArgumentError: If no cash flows or more than one
                redemption result
        """
        calendar = payment_calendar if payment_calendar is not None else schedule.calendar
        super().__init__(settlement_days, calendar, issue_date)

        self._frequency = schedule.tenor.frequency()
        self._maturity_date = schedule.end_date
        if accrual_day_counter is None:
            first = coupons[0] if isinstance(coupons, (list, tuple)) and coupons else coupons
            if isinstance(first, InterestRate):
                accrual_day_counter = first.day_counter
        self._day_counter = accrual_day_counter

        self._cashflows = (
            FixedRateLeg(schedule)
            .with_coupon_rates(coupons, accrual_day_counter)
            .with_payment_calendar(calendar)
            .with_notionals(face_amount)
            .with_payment_adjustment(payment_convention)
            .build()
        )

        if not self._cashflows:
            raise InvalidArgumentError("bond with no cashflows!")
        self._add_redemptions_to_cashflows([redemption])
        if len(self._redemptions) != 1:
            raise InvalidArgumentError("multiple redemptions created")

        logger.debug("Created %r on %s", self, schedule)

    @classmethod
    def from_dates(
        cls,
        settlement_days: int,
        calendar: Calendar,
        face_amount: float,
        start_date: date,
        maturity_date: date,
        tenor: Period,
        coupons: CouponRates,
        accrual_day_counter: DayCounter,
        accrual_convention: BusinessDayConvention = BusinessDayConvention.FOLLOWING,
        payment_convention: BusinessDayConvention = BusinessDayConvention.FOLLOWING,
        redemption: float = 100.0,
        issue_date: Optional[date] = None,
        stub_date: Optional[date] = None,
        rule: DateGeneration = DateGeneration.BACKWARD,
        end_of_month: bool = False,
        payment_calendar: Optional[Calendar] = None
    ) -> "FixedRateBond":
        """
        Build the bond together with its schedule.

        With BACKWARD generation the stub date is the next-to-last date;
        with FORWARD generation it is the first date.

        Raises:
            InvalidArgumentError: For generation rules that do not take a
                stub date
        """
        if rule == DateGeneration.BACKWARD:
            first_date, next_to_last_date = None, stub_date
        elif rule == DateGeneration.FORWARD:
            first_date, next_to_last_date = stub_date, None
        else:
            raise InvalidArgumentError(
                f"stub date ({stub_date}) not allowed with {rule.value} DateGeneration rule"
            )

        schedule = Schedule(
            start_date, maturity_date, tenor, calendar,
            accrual_convention, accrual_convention, rule, end_of_month,
            first_date, next_to_last_date,
        )
        return cls(
            settlement_days, face_amount, schedule, coupons, accrual_day_counter,
            payment_convention, redemption, issue_date,
            payment_calendar if payment_calendar is not None else calendar,
        )

    @classmethod
    def from_conventions(
        cls,
        conventions: Conventions,
        face_amount: float,
        start_date: date,
        maturity_date: date,
        coupon: float,
        issue_date: Optional[date] = None,
        redemption: float = 100.0
    ) -> "FixedRateBond":
        """
        Build a bullet bond from a conventions preset.

        Example:
            >>> FixedRateBond.from_conventions(Conventions.usd_treasury(), 100.0,
            ...                                date(2024, 2, 15), date(2034, 2, 15), 0.04)
        """
        schedule = Schedule(
            start_date, maturity_date,
            Period.from_frequency(conventions.frequency),
            conventions.calendar,
            conventions.business_day,
        )
        return cls(
            conventions.settlement_days, face_amount, schedule, coupon,
            conventions.day_counter, conventions.business_day, redemption, issue_date,
        )

    def frequency(self) -> Frequency:
        return self._frequency

    def day_counter(self) -> DayCounter:
        return self._day_counter


__all__ = ["FixedRateBond"]
