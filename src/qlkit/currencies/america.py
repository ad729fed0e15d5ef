"""
American currencies.
"""

from .currency import Currency, Rounding


class USDCurrency(Currency):
    """
    U.S. dollar.

    The ISO three-letter code is USD; the numeric code is 840.
    It is divided into 100 cents.
    """

    def __init__(self):
        super().__init__("U.S. dollar", "USD", 840, "$", "\xA2", 100,
                         Rounding(), "{symbol} {value:.2f}")


class CADCurrency(Currency):
    """
    Canadian dollar.

    The ISO three-letter code is CAD; the numeric code is 124.
    It is divided into 100 cents.
    """

    def __init__(self):
        super().__init__("Canadian dollar", "CAD", 124, "Can$", "", 100,
                         Rounding(), "{symbol} {value:.2f}")


class BRLCurrency(Currency):
    """
    Brazilian real.

    The ISO three-letter code is BRL; the numeric code is 986.
    It is divided into 100 centavos.
    """

    def __init__(self):
        super().__init__("Brazilian real", "BRL", 986, "R$", "", 100,
                         Rounding(), "{symbol} {value:.2f}")


__all__ = [
    "USDCurrency",
    "CADCurrency",
    "BRLCurrency",
]
