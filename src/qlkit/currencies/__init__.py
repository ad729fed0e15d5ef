"""
Currencies package - currency definitions and money amounts.

Provides:
- Currency: ISO currency definition with rounding and formatting
- Rounding: rounding conventions
- Money: amount in a currency
- Regional currencies (America, Europe, Asia)
"""

from .currency import Currency, Rounding, RoundingType
from .money import Money
from .america import USDCurrency, CADCurrency, BRLCurrency
from .europe import EURCurrency, GBPCurrency, CHFCurrency
from .asia import (
    JPYCurrency,
    CNYCurrency,
    HKDCurrency,
    INRCurrency,
    SGDCurrency,
    KRWCurrency,
)

__all__ = [
    "Currency",
    "Rounding",
    "RoundingType",
    "Money",
    "USDCurrency",
    "CADCurrency",
    "BRLCurrency",
    "EURCurrency",
    "GBPCurrency",
    "CHFCurrency",
    "JPYCurrency",
    "CNYCurrency",
    "HKDCurrency",
    "INRCurrency",
    "SGDCurrency",
    "KRWCurrency",
]
