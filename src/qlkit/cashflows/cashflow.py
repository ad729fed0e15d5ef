"""
Cash flows: dated amounts paid by an instrument.
"""

import datetime
from abc import abstractmethod

from ..event import Event


class CashFlow(Event):
    """Base class for cash flows."""

    @abstractmethod
    def amount(self) -> float:
        """
        Amount paid at the cash flow date.

        The amount is not discounted, i.e. it is the actual amount paid.
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.date().isoformat()}, {self.amount():.6f})"


class SimpleCashFlow(CashFlow):
    """Predetermined cash flow paying a fixed amount at a given date."""

    def __init__(self, amount: float, payment_date: datetime.date):
        super().__init__()
        self._amount = float(amount)
        self._payment_date = payment_date

    def date(self) -> datetime.date:
        return self._payment_date

    def amount(self) -> float:
        return self._amount


class Redemption(SimpleCashFlow):
    """Bond redemption: repayment of the outstanding notional."""


class AmortizingPayment(SimpleCashFlow):
    """Partial repayment of notional before maturity."""


__all__ = [
    "CashFlow",
    "SimpleCashFlow",
    "Redemption",
    "AmortizingPayment",
]
