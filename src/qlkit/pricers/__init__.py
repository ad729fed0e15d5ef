"""
Pricers package - instrument pricing.

Provides pricing engines for:
- Fixed-rate and amortizing bonds, by discounting on a yield curve
"""

from .bonds import DiscountingBondEngine, present_value

__all__ = [
    "DiscountingBondEngine",
    "present_value",
]
