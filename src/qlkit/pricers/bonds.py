"""
Bond pricing engine.

Prices bonds by discounting their outstanding cash flows on a yield curve.

Conventions:
- NPV is discounted to the curve reference date
- Settlement value is discounted to the bond settlement date
- Amounts are in currency units
"""

import logging
from datetime import date
from typing import Iterable, Union

from ..cashflows.cashflow import CashFlow
from ..curves.curve import Curve, FlatCurve
from ..errors import PricingError
from ..instruments.bond import Bond
from ..instruments.instrument import PricingEngine, PricingResults

logger = logging.getLogger(__name__)

DiscountCurve = Union[Curve, FlatCurve]


def present_value(
    cashflows: Iterable[CashFlow],
    curve: DiscountCurve,
    settlement: date,
    include_settlement_date_flows: bool = False
) -> float:
    """
    Present value at the curve reference date of flows after settlement.

    Args:
        cashflows: Cash flows to discount
        curve: Discount curve
        settlement: Flows that have occurred as of this date are skipped
        include_settlement_date_flows: Whether a flow paying on the
            settlement date is still counted

    Returns:
        PV in currency units
    """
    pv = 0.0
    for cf in cashflows:
        if cf.has_occurred(settlement, include_settlement_date_flows):
            continue
        pv += cf.amount() * curve.discount_factor(cf.date())
    return pv


class DiscountingBondEngine(PricingEngine):
    """
    Discounting engine for bonds.

    Attributes:
        curve: Discount curve
        include_settlement_date_flows: Whether flows paying on the
            reference/settlement date are still priced
    """

    def __init__(self, curve: DiscountCurve, include_settlement_date_flows: bool = False):
        super().__init__()
        self.curve = curve
        self.include_settlement_date_flows = include_settlement_date_flows
        self.register_with(curve)

    def calculate(self, instrument: Bond) -> PricingResults:
        if not isinstance(instrument, Bond):
            raise PricingError(f"{type(instrument).__name__} is not a bond")

        reference = self.curve.reference_date
        cashflows = instrument.cashflows
        value = present_value(
            cashflows, self.curve, reference, self.include_settlement_date_flows
        )

        settlement = instrument.settlement_date()
        settlement_df = self.curve.discount_factor(settlement)
        settlement_value = present_value(
            cashflows, self.curve, settlement, self.include_settlement_date_flows
        ) / settlement_df

        logger.debug(
            "Priced %r: npv=%.6f settlement_value=%.6f at %s",
            instrument, value, settlement_value, settlement,
        )
        return PricingResults(
            value=value,
            error_estimate=None,
            valuation_date=reference,
            additional_results={"settlement_value": settlement_value},
        )

    def __repr__(self) -> str:
        return f"DiscountingBondEngine(curve={self.curve!r})"


__all__ = [
    "DiscountingBondEngine",
    "present_value",
]
