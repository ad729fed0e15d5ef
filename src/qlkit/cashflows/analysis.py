"""
Cash flow visitors.

Provides:
- CashFlowClassifier: Splits a leg into coupons, redemptions and other flows
- CashFlowTabulator: Builds one report row per cash flow
- cashflows_to_frame: Cash flows as a pandas DataFrame
"""

from datetime import date
from typing import Any, Dict, Iterable, List, Optional

import pandas as pd

from ..patterns.visitor import AcyclicVisitor
from .cashflow import AmortizingPayment, CashFlow, Redemption
from .coupons import Coupon, FixedRateCoupon


class CashFlowClassifier(AcyclicVisitor):
    """
    Sort cash flows by kind.

    Attributes:
        coupons: Interest-paying coupons
        redemptions: Redemptions and amortizing payments
        others: Any other cash flow
    """

    def __init__(self):
        self.coupons: List[Coupon] = []
        self.redemptions: List[CashFlow] = []
        self.others: List[CashFlow] = []

    def visit_coupon(self, coupon: Coupon) -> None:
        self.coupons.append(coupon)

    def visit_redemption(self, flow: Redemption) -> None:
        self.redemptions.append(flow)

    def visit_amortizing_payment(self, flow: AmortizingPayment) -> None:
        self.redemptions.append(flow)

    def visit_cash_flow(self, flow: CashFlow) -> None:
        self.others.append(flow)

    @classmethod
    def classify(cls, cashflows: Iterable[CashFlow]) -> "CashFlowClassifier":
        classifier = cls()
        for cf in cashflows:
            cf.accept(classifier)
        return classifier


class CashFlowTabulator(AcyclicVisitor):
    """Collect one row of details per visited cash flow."""

    def __init__(self, ref_date: Optional[date] = None):
        self.ref_date = ref_date
        self.rows: List[Dict[str, Any]] = []

    def _row(self, flow: CashFlow, kind: str, **details) -> None:
        row = {"date": flow.date(), "type": kind, "amount": flow.amount()}
        if self.ref_date is not None:
            row["occurred"] = flow.has_occurred(self.ref_date)
        row.update(details)
        self.rows.append(row)

    def visit_fixed_rate_coupon(self, coupon: FixedRateCoupon) -> None:
        self._row(
            coupon, "FIXED_COUPON",
            nominal=coupon.nominal(),
            rate=coupon.rate(),
            accrual_start=coupon.accrual_start_date,
            accrual_end=coupon.accrual_end_date,
            accrual_period=coupon.accrual_period(),
        )

    def visit_coupon(self, coupon: Coupon) -> None:
        self._row(
            coupon, "COUPON",
            nominal=coupon.nominal(),
            accrual_start=coupon.accrual_start_date,
            accrual_end=coupon.accrual_end_date,
        )

    def visit_redemption(self, flow: Redemption) -> None:
        self._row(flow, "REDEMPTION")

    def visit_amortizing_payment(self, flow: AmortizingPayment) -> None:
        self._row(flow, "AMORTIZATION")

    def visit_cash_flow(self, flow: CashFlow) -> None:
        self._row(flow, "CASHFLOW")


def cashflows_to_frame(
    cashflows: Iterable[CashFlow],
    ref_date: Optional[date] = None
) -> pd.DataFrame:
    """
    Tabulate cash flows.

    Args:
        cashflows: Cash flows to report
        ref_date: If given, adds an ``occurred`` column as of this date

    Returns:
        DataFrame with one row per cash flow, sorted by date
    """
    tabulator = CashFlowTabulator(ref_date)
    for cf in cashflows:
        cf.accept(tabulator)
    df = pd.DataFrame(tabulator.rows)
    if not df.empty:
        df = df.sort_values("date", kind="stable").reset_index(drop=True)
    return df


__all__ = [
    "CashFlowClassifier",
    "CashFlowTabulator",
    "cashflows_to_frame",
]
