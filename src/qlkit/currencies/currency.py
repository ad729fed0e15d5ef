"""
Currency definitions and rounding conventions.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class RoundingType(Enum):
    """Rounding methods."""
    NONE = "None"          # do not round
    UP = "Up"              # round away from zero
    DOWN = "Down"          # truncate
    CLOSEST = "Closest"    # round to the closest
    FLOOR = "Floor"        # positive numbers rounded up, negative truncated
    CEILING = "Ceiling"    # positive numbers truncated, negative rounded up


@dataclass(frozen=True)
class Rounding:
    """
    Rounding convention.

    Attributes:
        type: Rounding method
        precision: Number of decimal places kept
        digit: First discarded digit from which rounding goes up
    """
    type: RoundingType = RoundingType.NONE
    precision: int = 0
    digit: int = 5

    def __call__(self, value: float) -> float:
        if self.type == RoundingType.NONE:
            return value

        mult = 10.0 ** self.precision
        neg = value < 0.0
        lvalue = abs(value) * mult
        mod_val, integral = math.modf(lvalue)
        lvalue = integral
        threshold = self.digit / 10.0

        if self.type == RoundingType.UP:
            if mod_val != 0.0:
                lvalue += 1.0
        elif self.type == RoundingType.CLOSEST:
            if mod_val >= threshold:
                lvalue += 1.0
        elif self.type == RoundingType.FLOOR:
            if not neg and mod_val >= threshold:
                lvalue += 1.0
        elif self.type == RoundingType.CEILING:
            if neg and mod_val >= threshold:
                lvalue += 1.0

        return -(lvalue / mult) if neg else lvalue / mult

    @classmethod
    def closest(cls, precision: int, digit: int = 5) -> "Rounding":
        return cls(RoundingType.CLOSEST, precision, digit)

    @classmethod
    def up(cls, precision: int, digit: int = 5) -> "Rounding":
        return cls(RoundingType.UP, precision, digit)

    @classmethod
    def down(cls, precision: int, digit: int = 5) -> "Rounding":
        return cls(RoundingType.DOWN, precision, digit)


@dataclass(frozen=True, eq=False)
class Currency:
    """
    Currency definition.

    A currency built without arguments is an empty placeholder that must
    be replaced by a valid currency before use.

    Attributes:
        name: Currency name, e.g. "U.S. dollar"
        code: ISO 4217 three-letter code, e.g. "USD"
        numeric_code: ISO 4217 numeric code, e.g. 840
        symbol: Symbol, e.g. "$"
        fraction_symbol: Fraction symbol, e.g. "¢"
        fractions_per_unit: Number of fractionary parts in a unit, e.g. 100
        rounding: Rounding convention
        format_string: Format fed with the ``value``, ``code`` and
            ``symbol`` fields, e.g. "{symbol} {value:.2f}"
        triangulation_currency: Currency used for triangulated exchange
    """
    name: Optional[str] = None
    code: Optional[str] = None
    numeric_code: int = 0
    symbol: str = ""
    fraction_symbol: str = ""
    fractions_per_unit: int = 0
    rounding: Rounding = Rounding()
    format_string: str = "{code} {value:.2f}"
    triangulation_currency: Optional["Currency"] = None

    @property
    def empty(self) -> bool:
        return self.name is None

    def format(self, value: float) -> str:
        """Format an amount in this currency."""
        return self.format_string.format(value=value, code=self.code, symbol=self.symbol)

    def __rmul__(self, value: float):
        from .money import Money
        return Money(value, self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Currency):
            return NotImplemented
        return self.name == other.name and self.code == other.code

    def __hash__(self) -> int:
        return hash((self.name, self.code))

    def __str__(self) -> str:
        return self.code or ""

    def __repr__(self) -> str:
        return f"Currency({self.code!r})" if not self.empty else "Currency()"


__all__ = [
    "RoundingType",
    "Rounding",
    "Currency",
]
