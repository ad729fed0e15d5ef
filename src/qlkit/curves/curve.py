"""
Yield curve representation and operations.

Provides:
- Curve: discount factors at discrete nodes with interpolation
- FlatCurve: single flat rate read lazily from a quote
- create_flat_curve: flat curve built from discrete nodes

Both curve types are observable: instruments priced off a curve register
with it and are invalidated when its nodes or its quote change.

Conventions:
    - Zero rates are continuously compounded unless stated otherwise
    - Times are year fractions from the reference date
    - Discount factor at t=0 is 1.0
"""

import logging
import math
from dataclasses import dataclass
from datetime import date
from typing import List, Optional, Tuple, Union

import numpy as np

from ..conventions import Compounding, Frequency
from ..daycounters import Actual365Fixed, DayCounter
from ..errors import InvalidArgumentError, PricingError
from ..interest_rate import InterestRate
from ..patterns.lazy_object import LazyObject
from ..patterns.observable import Observable
from ..quotes import Quote, SimpleQuote
from ..settings import Settings
from .interpolation import Interpolator, create_interpolator

logger = logging.getLogger(__name__)


@dataclass
class CurveNode:
    """A single point on the curve."""
    time: float  # Year fraction from reference date
    discount_factor: float
    zero_rate: float  # Continuously compounded

    @classmethod
    def from_discount_factor(cls, time: float, df: float) -> "CurveNode":
        """Create node from discount factor."""
        if time <= 0:
            return cls(time=time, discount_factor=df, zero_rate=0.0)
        return cls(time=time, discount_factor=df, zero_rate=-math.log(df) / time)

    @classmethod
    def from_zero_rate(cls, time: float, zr: float) -> "CurveNode":
        """Create node from continuously compounded zero rate."""
        return cls(time=time, discount_factor=math.exp(-zr * time), zero_rate=zr)


def _convert_zero_rate(
    zr_cont: float,
    t: float,
    day_counter: DayCounter,
    compounding: Compounding,
    frequency: Frequency
) -> float:
    if compounding == Compounding.CONTINUOUS:
        return zr_cont
    compound = math.exp(zr_cont * t)
    return InterestRate.implied_rate(compound, day_counter, compounding, frequency, t).rate


class Curve(Observable):
    """
    Yield curve with interpolation.

    Stores discount factors at discrete nodes and interpolates
    continuously compounded zero rates between them.

    Attributes:
        reference_date: Valuation date (time 0)
        day_counter: Day counter for time calculations
        interpolation_method: Name of interpolation method
    """

    def __init__(
        self,
        reference_date: date,
        day_counter: Optional[DayCounter] = None,
        interpolation_method: str = "linear"
    ):
        super().__init__()
        self.reference_date = reference_date
        self.day_counter = day_counter if day_counter is not None else Actual365Fixed()
        self.interpolation_method = interpolation_method

        self._nodes: List[CurveNode] = [CurveNode(time=0.0, discount_factor=1.0, zero_rate=0.0)]
        self._interpolator: Optional[Interpolator] = None
        self._is_fitted = False

    def time_from_reference(self, d: date) -> float:
        """Year fraction from the reference date to ``d``."""
        return self.day_counter.year_fraction(self.reference_date, d)

    def _to_time(self, t: Union[float, date]) -> float:
        return self.time_from_reference(t) if isinstance(t, date) else float(t)

    def add_node(self, time: float, discount_factor: float) -> None:
        """
        Add or replace a discount factor node and notify observers.

        Args:
            time: Year fraction from reference date
            discount_factor: Discount factor P(0,t)
        """
        if time < 0:
            raise InvalidArgumentError("Time must be non-negative")
        if discount_factor <= 0:
            raise InvalidArgumentError(f"Invalid discount factor: {discount_factor}")

        node = CurveNode.from_discount_factor(time, discount_factor)
        for i, n in enumerate(self._nodes):
            if abs(n.time - time) < 1e-10:
                self._nodes[i] = node
                break
            if n.time > time:
                self._nodes.insert(i, node)
                break
        else:
            self._nodes.append(node)

        self._is_fitted = False
        self.notify_observers()

    def add_node_from_date(self, d: date, discount_factor: float) -> None:
        """Add a node using a date instead of year fraction."""
        self.add_node(self.time_from_reference(d), discount_factor)

    def build(self) -> None:
        """
        Fit the interpolator to the current nodes and notify observers.

        Raises:
            InvalidArgumentError: With fewer than 2 nodes
        """
        if len(self._nodes) < 2:
            raise InvalidArgumentError("Need at least 2 nodes to build curve")
        self._fit()
        logger.debug("Built %r", self)
        self.notify_observers()

    def _fit(self) -> None:
        times = np.array([n.time for n in self._nodes])
        zero_rates = np.array([n.zero_rate for n in self._nodes])
        # the t=0 node carries no rate information; extend the first rate back
        if times[0] == 0.0:
            zero_rates[0] = zero_rates[1]

        self._interpolator = create_interpolator(self.interpolation_method)
        self._interpolator.fit(times, zero_rates)
        self._is_fitted = True

    def _ensure_fitted(self) -> None:
        # node changes already notified; fitting on read stays silent
        if not self._is_fitted or self._interpolator is None:
            if len(self._nodes) < 2:
                raise PricingError("Curve not fitted - add more nodes and call build()")
            self._fit()

    def discount_factor(self, t: Union[float, date]) -> float:
        """Discount factor P(0,t) for a year fraction or a date."""
        t = self._to_time(t)
        if t <= 0:
            return 1.0
        self._ensure_fitted()
        return math.exp(-self._interpolator.interpolate(t) * t)

    def zero_rate(
        self,
        t: Union[float, date],
        compounding: Compounding = Compounding.CONTINUOUS,
        frequency: Frequency = Frequency.ANNUAL
    ) -> float:
        """
        Zero rate z(t).

        Args:
            t: Year fraction or date
            compounding: Compounding convention for output
            frequency: Compounding frequency for compounded output
        """
        t = self._to_time(t)
        self._ensure_fitted()
        zr_cont = self._interpolator.interpolate(max(t, 0.0))
        if t <= 0:
            return zr_cont
        return _convert_zero_rate(zr_cont, t, self.day_counter, compounding, frequency)

    def forward_rate(self, t1: Union[float, date], t2: Union[float, date]) -> float:
        """Simply compounded forward rate between t1 and t2."""
        t1, t2 = self._to_time(t1), self._to_time(t2)
        if t2 <= t1:
            raise InvalidArgumentError("t2 must be greater than t1")
        return (self.discount_factor(t1) / self.discount_factor(t2) - 1) / (t2 - t1)

    def get_nodes(self) -> List[Tuple[float, float, float]]:
        """All nodes as (time, discount_factor, zero_rate) tuples."""
        return [(n.time, n.discount_factor, n.zero_rate) for n in self._nodes]

    def get_node_times(self) -> np.ndarray:
        return np.array([n.time for n in self._nodes])

    def get_node_dfs(self) -> np.ndarray:
        return np.array([n.discount_factor for n in self._nodes])

    def bump_parallel(self, bp: float) -> "Curve":
        """
        Create a new curve with all zero rates shifted.

        Args:
            bp: Bump size in basis points
        """
        bump = bp / 10000.0
        new_curve = self._empty_copy()
        new_curve._nodes = [
            n if n.time == 0 else CurveNode.from_zero_rate(n.time, n.zero_rate + bump)
            for n in self._nodes
        ]
        if len(new_curve._nodes) >= 2:
            new_curve.build()
        return new_curve

    def copy(self) -> "Curve":
        """Create a deep copy of the curve (observers are not copied)."""
        new_curve = self._empty_copy()
        new_curve._nodes = [
            CurveNode(time=n.time, discount_factor=n.discount_factor, zero_rate=n.zero_rate)
            for n in self._nodes
        ]
        if self._is_fitted:
            new_curve.build()
        return new_curve

    def _empty_copy(self) -> "Curve":
        return Curve(self.reference_date, self.day_counter, self.interpolation_method)

    def __repr__(self) -> str:
        return (f"Curve(reference={self.reference_date}, nodes={len(self._nodes)}, "
                f"method={self.interpolation_method})")


class FlatCurve(LazyObject):
    """
    Flat yield curve driven by a rate quote.

    The quote is turned into an InterestRate lazily; moving the quote
    invalidates the curve and everything priced off it. Without an explicit
    reference date the curve follows the global evaluation date.

    Example:
        >>> rate = SimpleQuote(0.05)
        >>> curve = FlatCurve(date(2024, 1, 15), rate)
        >>> rate.set_value(0.06)  # instruments on this curve are invalidated
    """

    def __init__(
        self,
        reference_date: Optional[date],
        rate: Union[Quote, float],
        day_counter: Optional[DayCounter] = None,
        compounding: Compounding = Compounding.CONTINUOUS,
        frequency: Frequency = Frequency.ANNUAL
    ):
        super().__init__()
        self._reference_date = reference_date
        self.quote = rate if isinstance(rate, Quote) else SimpleQuote(rate)
        self.day_counter = day_counter if day_counter is not None else Actual365Fixed()
        self.compounding = compounding
        self.frequency = frequency
        self._rate: Optional[InterestRate] = None

        self.register_with(self.quote)
        if reference_date is None:
            self.register_with(Settings.instance().evaluation_date_observable)

    @property
    def reference_date(self) -> date:
        if self._reference_date is None:
            return Settings.instance().evaluation_date
        return self._reference_date

    def perform_calculations(self) -> None:
        self._rate = InterestRate(
            self.quote.value(), self.day_counter, self.compounding, self.frequency
        )

    @property
    def rate(self) -> InterestRate:
        self.calculate()
        return self._rate

    def time_from_reference(self, d: date) -> float:
        return self.day_counter.year_fraction(self.reference_date, d)

    def discount_factor(self, t: Union[float, date]) -> float:
        """Discount factor for a year fraction or a date."""
        if isinstance(t, date):
            t = self.time_from_reference(t)
        if t <= 0:
            return 1.0
        return self.rate.discount_factor(t)

    def zero_rate(
        self,
        t: Union[float, date],
        compounding: Compounding = Compounding.CONTINUOUS,
        frequency: Frequency = Frequency.ANNUAL
    ) -> float:
        if isinstance(t, date):
            t = self.time_from_reference(t)
        t = max(t, 1e-4)
        compound = 1.0 / self.discount_factor(t)
        return InterestRate.implied_rate(
            compound, self.day_counter, compounding, frequency, t
        ).rate

    def forward_rate(self, t1: Union[float, date], t2: Union[float, date]) -> float:
        """Simply compounded forward rate between t1 and t2."""
        if isinstance(t1, date):
            t1 = self.time_from_reference(t1)
        if isinstance(t2, date):
            t2 = self.time_from_reference(t2)
        if t2 <= t1:
            raise InvalidArgumentError("t2 must be greater than t1")
        return (self.discount_factor(t1) / self.discount_factor(t2) - 1) / (t2 - t1)

    def __repr__(self) -> str:
        value = self.quote.value() if self.quote.is_valid() else None
        return f"FlatCurve(reference={self._reference_date}, rate={value})"


def create_flat_curve(
    reference_date: date,
    rate: float,
    max_tenor_years: float = 30.0,
    day_counter: Optional[DayCounter] = None
) -> Curve:
    """
    Create a flat yield curve out of discrete nodes.

    Args:
        reference_date: Valuation date
        rate: Flat continuously compounded rate
        max_tenor_years: Maximum tenor in years
        day_counter: Day counter for times (Actual/365 Fixed by default)
    """
    curve = Curve(reference_date, day_counter, interpolation_method="linear")
    for t in [0.25, 0.5, 1, 2, 5, 10, 20, max_tenor_years]:
        curve.add_node(t, math.exp(-rate * t))
    curve.build()
    return curve


__all__ = [
    "Curve",
    "CurveNode",
    "FlatCurve",
    "create_flat_curve",
]
