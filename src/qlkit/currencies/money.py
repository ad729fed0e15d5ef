"""
Amount of cash in a given currency.

Arithmetic and comparisons are only defined between amounts in the same
currency; there is no exchange-rate conversion.
"""

from typing import Union

from ..errors import CurrencyMismatchError
from .currency import Currency


class Money:
    """
    Monetary amount.

    Attributes:
        value: Amount as a float
        currency: Currency of the amount
    """

    def __init__(self, value: float, currency: Currency):
        self.value = float(value)
        self.currency = currency

    def _check(self, other: "Money", op: str) -> None:
        if self.currency != other.currency:
            raise CurrencyMismatchError(
                f"Cannot {op} amounts in different currencies: "
                f"{self.currency} and {other.currency}"
            )

    def rounded(self) -> "Money":
        """Amount rounded with the currency's rounding convention."""
        return Money(self.currency.rounding(self.value), self.currency)

    def __add__(self, other: "Money") -> "Money":
        if not isinstance(other, Money):
            return NotImplemented
        self._check(other, "add")
        return Money(self.value + other.value, self.currency)

    def __sub__(self, other: "Money") -> "Money":
        if not isinstance(other, Money):
            return NotImplemented
        self._check(other, "subtract")
        return Money(self.value - other.value, self.currency)

    def __mul__(self, x: float) -> "Money":
        if isinstance(x, Money):
            return NotImplemented
        return Money(self.value * x, self.currency)

    __rmul__ = __mul__

    def __truediv__(self, x: Union[float, "Money"]) -> Union["Money", float]:
        if isinstance(x, Money):
            self._check(x, "divide")
            return self.value / x.value
        return Money(self.value / x, self.currency)

    def __neg__(self) -> "Money":
        return Money(-self.value, self.currency)

    def __abs__(self) -> "Money":
        return Money(abs(self.value), self.currency)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.currency == other.currency and self.value == other.value

    def __hash__(self) -> int:
        return hash((self.value, self.currency))

    def __lt__(self, other: "Money") -> bool:
        self._check(other, "compare")
        return self.value < other.value

    def __le__(self, other: "Money") -> bool:
        self._check(other, "compare")
        return self.value <= other.value

    def __gt__(self, other: "Money") -> bool:
        self._check(other, "compare")
        return self.value > other.value

    def __ge__(self, other: "Money") -> bool:
        self._check(other, "compare")
        return self.value >= other.value

    def __str__(self) -> str:
        return self.currency.format(self.rounded().value)

    def __repr__(self) -> str:
        return f"Money({self.value!r}, {self.currency.code!r})"


__all__ = ["Money"]
