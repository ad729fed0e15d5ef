"""
Base bond instrument.

Conventions:
- Prices and accrued amounts are quoted per 100 of outstanding notional
- Settlement values and NPVs are in currency units
- A cash flow paying on the settlement date is considered already paid
"""

import bisect
import logging
import math
from datetime import date
from typing import List, Optional, Sequence

import pandas as pd
from scipy.optimize import brentq

from ..cashflows.analysis import CashFlowClassifier, cashflows_to_frame
from ..cashflows.cashflow import CashFlow, Redemption
from ..conventions import Calendar, Compounding, Frequency
from ..daycounters import DayCounter
from ..errors import InvalidArgumentError, PricingError
from ..interest_rate import InterestRate
from ..settings import Settings
from .instrument import Instrument

logger = logging.getLogger(__name__)


class Bond(Instrument):
    """
    Bond with a notional schedule implied by its coupons.

    Attributes:
        settlement_days: Business days between trade and settlement
        calendar: Calendar used to compute settlement dates
        issue_date: Issue date; settlement never happens before it
    """

    def __init__(
        self,
        settlement_days: int,
        calendar: Calendar,
        issue_date: Optional[date] = None,
        coupons: Optional[Sequence[CashFlow]] = None
    ):
        """
        Args:
            settlement_days: Business days to settle
            calendar: Settlement calendar
            issue_date: Optional issue date
            coupons: Coupon leg; a redemption of the outstanding notional is
                added automatically
        """
        super().__init__()
        self.settlement_days = settlement_days
        self.calendar = calendar
        self.issue_date = issue_date
        self._cashflows: List[CashFlow] = []
        self._redemptions: List[CashFlow] = []
        self._notionals: List[float] = []
        self._notional_schedule: List[Optional[date]] = []
        self._maturity_date: Optional[date] = None

        self.register_with(Settings.instance().evaluation_date_observable)

        if coupons:
            self._cashflows = sorted(coupons, key=lambda cf: cf.date())
            if issue_date is not None and not issue_date < self._cashflows[0].date():
                raise InvalidArgumentError(
                    f"issue date ({issue_date}) must be earlier than first payment date "
                    f"({self._cashflows[0].date()})"
                )
            self._maturity_date = self._cashflows[-1].date()
            self._add_redemptions_to_cashflows()

    # ------------------------------------------------------------------
    # Cash flows and notionals
    # ------------------------------------------------------------------

    def _calculate_notionals_from_cashflows(self) -> None:
        """Derive the notional schedule from coupon nominals."""
        classified = CashFlowClassifier.classify(self._cashflows)
        if not classified.coupons:
            raise InvalidArgumentError("no coupons provided")

        # the first schedule entry is open-ended
        self._notional_schedule = [None]
        self._notionals = []
        last_payment: Optional[date] = None
        for coupon in sorted(classified.coupons, key=lambda c: c.date()):
            nominal = coupon.nominal()
            if not self._notionals:
                self._notionals.append(nominal)
            elif not math.isclose(nominal, self._notionals[-1], rel_tol=1e-12):
                # notional changed: the difference was repaid on the last payment date
                self._notionals.append(nominal)
                self._notional_schedule.append(last_payment)
            last_payment = coupon.date()

        self._notionals.append(0.0)
        self._notional_schedule.append(last_payment)

    def _add_redemptions_to_cashflows(self, redemptions: Sequence[float] = ()) -> None:
        """
        Add one redemption per notional step.

        Args:
            redemptions: Redemption prices per 100 of repaid notional, one
                per notional step; the last one is repeated, 100 if empty
        """
        self._calculate_notionals_from_cashflows()
        self._redemptions = []

        for i in range(1, len(self._notional_schedule)):
            if i < len(redemptions):
                price = redemptions[i]
            elif redemptions:
                price = redemptions[-1]
            else:
                price = 100.0
            amount = (price / 100.0) * (self._notionals[i - 1] - self._notionals[i])
            payment = Redemption(amount, self._notional_schedule[i])
            self._cashflows.append(payment)
            self._redemptions.append(payment)

        # stable sort keeps redemptions after coupons paid on the same date
        self._cashflows.sort(key=lambda cf: cf.date())
        for cf in self._cashflows:
            self.register_with(cf)

        logger.debug(
            "Bond cashflows: %d flows, %d redemptions, maturity %s",
            len(self._cashflows), len(self._redemptions), self._maturity_date,
        )

    @property
    def cashflows(self) -> List[CashFlow]:
        return list(self._cashflows)

    @property
    def redemptions(self) -> List[CashFlow]:
        return list(self._redemptions)

    def redemption(self) -> CashFlow:
        """The single redemption of a bullet bond."""
        if len(self._redemptions) != 1:
            raise InvalidArgumentError("multiple redemption cash flows given")
        return self._redemptions[-1]

    @property
    def notionals(self) -> List[float]:
        return list(self._notionals)

    @property
    def notional_schedule(self) -> List[Optional[date]]:
        return list(self._notional_schedule)

    def notional(self, d: Optional[date] = None) -> float:
        """
        Outstanding notional at a date (settlement date by default).

        On a repayment date the repayment counts as already made.
        """
        if d is None:
            d = self.settlement_date()
        if d > self._notional_schedule[-1]:
            # after maturity
            return 0.0
        dates = self._notional_schedule[1:]
        index = bisect.bisect_left(dates, d) + 1
        if d < self._notional_schedule[index]:
            return self._notionals[index - 1]
        return self._notionals[index]

    @property
    def maturity_date(self) -> date:
        if self._maturity_date is not None:
            return self._maturity_date
        return self._cashflows[-1].date()

    # ------------------------------------------------------------------
    # Dates
    # ------------------------------------------------------------------

    def settlement_date(self, d: Optional[date] = None) -> date:
        """Settlement date for a trade on ``d`` (evaluation date by default)."""
        if d is None:
            d = Settings.instance().evaluation_date
        settlement = self.calendar.advance(d, self.settlement_days)
        if self.issue_date is not None:
            return max(settlement, self.issue_date)
        return settlement

    def is_tradable(self, d: Optional[date] = None) -> bool:
        return self.notional(self.settlement_date(d)) != 0.0

    def is_expired(self) -> bool:
        today = Settings.instance().evaluation_date
        return all(cf.has_occurred(today) for cf in self._cashflows)

    def next_cash_flow_date(self, d: Optional[date] = None) -> Optional[date]:
        """First payment date strictly after ``d`` (settlement date by default)."""
        if d is None:
            d = self.settlement_date()
        for cf in self._cashflows:
            if not cf.has_occurred(d):
                return cf.date()
        return None

    def previous_cash_flow_date(self, d: Optional[date] = None) -> Optional[date]:
        """Last payment date on or before ``d`` (settlement date by default)."""
        if d is None:
            d = self.settlement_date()
        previous = None
        for cf in self._cashflows:
            if not cf.has_occurred(d):
                break
            previous = cf.date()
        return previous

    # ------------------------------------------------------------------
    # Analytics
    # ------------------------------------------------------------------

    def accrued_amount(self, settlement: Optional[date] = None) -> float:
        """Accrued interest per 100 of notional at settlement."""
        if settlement is None:
            settlement = self.settlement_date()
        notional = self.notional(settlement)
        if notional == 0.0:
            return 0.0

        next_date = self.next_cash_flow_date(settlement)
        if next_date is None:
            return 0.0
        accrued = sum(
            coupon.accrued_amount(settlement)
            for coupon in CashFlowClassifier.classify(self._cashflows).coupons
            if coupon.date() == next_date
        )
        return accrued * 100.0 / notional

    def settlement_value(self) -> float:
        """Dirty value of the bond at settlement, in currency units."""
        return self.result("settlement_value")

    def dirty_price(self) -> float:
        """Settlement value per 100 of outstanding notional."""
        settlement = self.settlement_date()
        notional = self.notional(settlement)
        if notional == 0.0:
            return 0.0
        return self.settlement_value() * 100.0 / notional

    def clean_price(self) -> float:
        """Dirty price less accrued interest, per 100 of notional."""
        return self.dirty_price() - self.accrued_amount(self.settlement_date())

    def dirty_price_from_yield(
        self,
        y: float,
        day_counter: DayCounter,
        compounding: Compounding,
        frequency: Frequency,
        settlement: Optional[date] = None
    ) -> float:
        """Dirty price per 100 of notional implied by a yield."""
        if settlement is None:
            settlement = self.settlement_date()
        rate = InterestRate(y, day_counter, compounding, frequency)
        value = sum(
            cf.amount() * rate.discount_factor(settlement, cf.date())
            for cf in self._cashflows
            if not cf.has_occurred(settlement)
        )
        notional = self.notional(settlement)
        if notional == 0.0:
            return 0.0
        return value * 100.0 / notional

    def clean_price_from_yield(
        self,
        y: float,
        day_counter: DayCounter,
        compounding: Compounding,
        frequency: Frequency,
        settlement: Optional[date] = None
    ) -> float:
        if settlement is None:
            settlement = self.settlement_date()
        dirty = self.dirty_price_from_yield(y, day_counter, compounding, frequency, settlement)
        return dirty - self.accrued_amount(settlement)

    def yield_rate(
        self,
        day_counter: DayCounter,
        compounding: Compounding,
        frequency: Frequency,
        clean_price: Optional[float] = None,
        settlement: Optional[date] = None,
        accuracy: float = 1e-10,
        max_evaluations: int = 100
    ) -> float:
        """
        Yield implied by a clean price.

        Args:
            day_counter: Day counter for the yield
            compounding: Compounding of the yield
            frequency: Compounding frequency
            clean_price: Clean price per 100; the engine's clean price if omitted
            settlement: Settlement date; the bond's settlement date if omitted
            accuracy: Solver tolerance
            max_evaluations: Solver iteration limit

        Returns:
            Yield as a decimal

        Raises:
            PricingError: If no yield reprices the bond
        """
        if settlement is None:
            settlement = self.settlement_date()
        if clean_price is None:
            clean_price = self.clean_price()
        if self.notional(settlement) == 0.0:
            raise PricingError("bond is not tradable at settlement")

        target = clean_price + self.accrued_amount(settlement)
        live = [cf for cf in self._cashflows if not cf.has_occurred(settlement)]
        max_t = max(day_counter.year_fraction(settlement, cf.date()) for cf in live)

        lower, upper = -0.5, 1.0
        if compounding == Compounding.SIMPLE and max_t > 0:
            # keep 1 + y t positive on the whole bracket
            lower = max(lower, -0.99 / max_t)

        def objective(y: float) -> float:
            return self.dirty_price_from_yield(
                y, day_counter, compounding, frequency, settlement
            ) - target

        try:
            return brentq(objective, lower, upper, xtol=accuracy, maxiter=max_evaluations)
        except (ValueError, RuntimeError) as exc:
            raise PricingError(f"could not solve for yield at price {clean_price}: {exc}") from exc

    def setup_expired(self) -> None:
        super().setup_expired()
        self._additional_results = {"settlement_value": 0.0}

    def cashflow_frame(self) -> pd.DataFrame:
        """Cash flows as a DataFrame, flagged as occurred at settlement."""
        return cashflows_to_frame(self._cashflows, self.settlement_date())

    def __repr__(self) -> str:
        return (f"{type(self).__name__}(maturity={self._maturity_date}, "
                f"cashflows={len(self._cashflows)})")


__all__ = ["Bond"]
