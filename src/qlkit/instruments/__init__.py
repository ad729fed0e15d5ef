"""
Instruments package.

Provides:
- Instrument: LazyObject priced by a PricingEngine
- PricingEngine / PricingResults: engine interface and its results
- Bond: notional schedule, settlement and price/yield analytics
- FixedRateBond: bullet bond with fixed coupons
"""

from .instrument import Instrument, PricingEngine, PricingResults
from .bond import Bond
from .fixed_rate_bond import FixedRateBond

__all__ = [
    "Instrument",
    "PricingEngine",
    "PricingResults",
    "Bond",
    "FixedRateBond",
]
