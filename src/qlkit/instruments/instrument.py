"""
Instruments and pricing engines.

An Instrument is a LazyObject whose results come from a PricingEngine. The
engine observes the market data it prices off and forwards notifications,
so moving a quote invalidates every instrument priced with it.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, Optional

from ..errors import PricingError
from ..patterns.lazy_object import LazyObject
from ..patterns.observable import Observable, Observer

logger = logging.getLogger(__name__)


@dataclass
class PricingResults:
    """
    Results produced by a pricing engine.

    Attributes:
        value: Net present value
        error_estimate: Numerical error on the value, if known
        valuation_date: Date the value refers to
        additional_results: Engine-specific extra results by name
    """
    value: Optional[float] = None
    error_estimate: Optional[float] = None
    valuation_date: Optional[date] = None
    additional_results: Dict[str, Any] = field(default_factory=dict)


class PricingEngine(Observable, Observer, ABC):
    """
    Base class for pricing engines.

    Engines register with their market data; notifications from the data
    are forwarded to the instruments using the engine.
    """

    def __init__(self):
        Observable.__init__(self)
        Observer.__init__(self)

    def update(self) -> None:
        self.notify_observers()

    @abstractmethod
    def calculate(self, instrument: "Instrument") -> PricingResults:
        """Price an instrument."""


class Instrument(LazyObject):
    """
    Abstract instrument class.

    Results are computed by the pricing engine on first access and cached
    until the engine or any other observed input changes.
    """

    def __init__(self):
        super().__init__()
        self._engine: Optional[PricingEngine] = None
        self._npv: Optional[float] = None
        self._error_estimate: Optional[float] = None
        self._valuation_date: Optional[date] = None
        self._additional_results: Dict[str, Any] = {}

    @property
    def pricing_engine(self) -> Optional[PricingEngine]:
        return self._engine

    def set_pricing_engine(self, engine: Optional[PricingEngine]) -> None:
        """Set the engine used for pricing; invalidates cached results."""
        if self._engine is not None:
            self.unregister_with(self._engine)
        self._engine = engine
        if engine is not None:
            self.register_with(engine)
        # trigger recalculation and notify observers
        self.update()

    @abstractmethod
    def is_expired(self) -> bool:
        """Whether the instrument is still tradable."""

    def calculate(self) -> None:
        if not self.calculated and not self.frozen and self.is_expired():
            self.setup_expired()
            self._calculated = True
            return
        super().calculate()

    def setup_expired(self) -> None:
        """Set results to those of an expired instrument."""
        self._npv = 0.0
        self._error_estimate = 0.0
        self._valuation_date = None
        self._additional_results = {}

    def perform_calculations(self) -> None:
        if self._engine is None:
            raise PricingError("null pricing engine")
        results = self._engine.calculate(self)
        self.fetch_results(results)

    def fetch_results(self, results: PricingResults) -> None:
        self._npv = results.value
        self._error_estimate = results.error_estimate
        self._valuation_date = results.valuation_date
        self._additional_results = dict(results.additional_results)

    def npv(self) -> float:
        """Net present value of the instrument."""
        self.calculate()
        if self._npv is None:
            raise PricingError("NPV not provided")
        return self._npv

    def error_estimate(self) -> float:
        self.calculate()
        if self._error_estimate is None:
            raise PricingError("error estimate not provided")
        return self._error_estimate

    def valuation_date(self) -> date:
        """Date the NPV refers to."""
        self.calculate()
        if self._valuation_date is None:
            raise PricingError("valuation date not provided")
        return self._valuation_date

    def result(self, tag: str) -> Any:
        """Additional result by name."""
        self.calculate()
        if tag not in self._additional_results:
            raise PricingError(f"{tag} not provided")
        return self._additional_results[tag]

    @property
    def additional_results(self) -> Dict[str, Any]:
        self.calculate()
        return dict(self._additional_results)


__all__ = [
    "Instrument",
    "PricingEngine",
    "PricingResults",
]
