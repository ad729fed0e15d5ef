"""
Cashflows package - cash flows, coupons and legs.

Provides:
- CashFlow, SimpleCashFlow, Redemption, AmortizingPayment
- Coupon, FixedRateCoupon
- FixedRateLeg: builder for fixed-rate coupon legs
- CashFlowClassifier / CashFlowTabulator: visitors over legs
"""

from .cashflow import CashFlow, SimpleCashFlow, Redemption, AmortizingPayment
from .coupons import Coupon, FixedRateCoupon
from .legs import FixedRateLeg
from .analysis import CashFlowClassifier, CashFlowTabulator, cashflows_to_frame

__all__ = [
    "CashFlow",
    "SimpleCashFlow",
    "Redemption",
    "AmortizingPayment",
    "Coupon",
    "FixedRateCoupon",
    "FixedRateLeg",
    "CashFlowClassifier",
    "CashFlowTabulator",
    "cashflows_to_frame",
]
