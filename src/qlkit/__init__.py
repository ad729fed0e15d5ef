"""
qlkit: Lazy Fixed-Income Analytics Library

A modular library for:
- Propagating market data changes through observer dependency graphs
- Caching analytics with lazy, freezable recalculation
- Modelling currencies, day counters, calendars and coupon schedules
- Building and pricing fixed-rate bonds from their cashflows

Scope: plain discounting of fixed cashflows; no holiday calendars of real
markets and no currency conversion.
"""

__version__ = "0.1.0"

# Core patterns
from .patterns import (
    Observable,
    Observer,
    ObservableValue,
    LazyObject,
    AcyclicVisitor,
)
from .event import Event, SimpleEvent
from .errors import (
    QLError,
    InvalidArgumentError,
    CurrencyMismatchError,
    UnsupportedVisitorError,
    NotificationError,
    PricingError,
)
from .settings import Settings, saved_settings

# Conventions and dates
from .conventions import (
    DayCount,
    BusinessDayConvention,
    Compounding,
    Frequency,
    TimeUnit,
    Calendar,
    NullCalendar,
    Conventions,
)
from .daycounters import DayCounter, Actual365Fixed, Actual360, ActualActual, Thirty360
from .dates import Period, DateGeneration, Schedule
from .interest_rate import InterestRate

# Currencies
from .currencies import Currency, Money, Rounding, USDCurrency, EURCurrency, JPYCurrency

# Market data
from .quotes import Quote, SimpleQuote
from .curves import Curve, FlatCurve, create_flat_curve

# Cashflows
from .cashflows import (
    CashFlow,
    SimpleCashFlow,
    Redemption,
    Coupon,
    FixedRateCoupon,
    FixedRateLeg,
    CashFlowClassifier,
    cashflows_to_frame,
)

# Instruments and pricers
from .instruments import Instrument, PricingEngine, Bond, FixedRateBond
from .pricers import DiscountingBondEngine

__all__ = [
    "__version__",
    # Core patterns
    "Observable",
    "Observer",
    "ObservableValue",
    "LazyObject",
    "AcyclicVisitor",
    "Event",
    "SimpleEvent",
    "QLError",
    "InvalidArgumentError",
    "CurrencyMismatchError",
    "UnsupportedVisitorError",
    "NotificationError",
    "PricingError",
    "Settings",
    "saved_settings",
    # Conventions and dates
    "DayCount",
    "BusinessDayConvention",
    "Compounding",
    "Frequency",
    "TimeUnit",
    "Calendar",
    "NullCalendar",
    "Conventions",
    "DayCounter",
    "Actual365Fixed",
    "Actual360",
    "ActualActual",
    "Thirty360",
    "Period",
    "DateGeneration",
    "Schedule",
    "InterestRate",
    # Currencies
    "Currency",
    "Money",
    "Rounding",
    "USDCurrency",
    "EURCurrency",
    "JPYCurrency",
    # Market data
    "Quote",
    "SimpleQuote",
    "Curve",
    "FlatCurve",
    "create_flat_curve",
    # Cashflows
    "CashFlow",
    "SimpleCashFlow",
    "Redemption",
    "Coupon",
    "FixedRateCoupon",
    "FixedRateLeg",
    "CashFlowClassifier",
    "cashflows_to_frame",
    # Instruments and pricers
    "Instrument",
    "PricingEngine",
    "Bond",
    "FixedRateBond",
    "DiscountingBondEngine",
]
