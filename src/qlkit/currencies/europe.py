"""
European currencies.
"""

from .currency import Currency, Rounding


class EURCurrency(Currency):
    """
    European Euro.

    The ISO three-letter code is EUR; the numeric code is 978.
    It is divided into 100 cents.
    """

    def __init__(self):
        super().__init__("European Euro", "EUR", 978, "", "", 100,
                         Rounding.closest(2), "{code} {value:.2f}")


class GBPCurrency(Currency):
    """
    British pound sterling.

    The ISO three-letter code is GBP; the numeric code is 826.
    It is divided into 100 pence.
    """

    def __init__(self):
        super().__init__("British pound sterling", "GBP", 826, "\xA3", "p", 100,
                         Rounding(), "{symbol} {value:.2f}")


class CHFCurrency(Currency):
    """
    Swiss franc.

    The ISO three-letter code is CHF; the numeric code is 756.
    It is divided into 100 cents.
    """

    def __init__(self):
        super().__init__("Swiss franc", "CHF", 756, "SwF", "", 100,
                         Rounding(), "{symbol} {value:.2f}")


__all__ = [
    "EURCurrency",
    "GBPCurrency",
    "CHFCurrency",
]
