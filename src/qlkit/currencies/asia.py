"""
Asian currencies.
"""

from .currency import Currency, Rounding


class JPYCurrency(Currency):
    """
    Japanese yen.

    The ISO three-letter code is JPY; the numeric code is 392.
    It is divided into 100 sen.
    """

    def __init__(self):
        super().__init__("Japanese yen", "JPY", 392, "\xA5", "", 100,
                         Rounding(), "{symbol} {value:.0f}")


class CNYCurrency(Currency):
    """
    Chinese yuan renminbi.

    The ISO three-letter code is CNY; the numeric code is 156.
    """

    def __init__(self):
        super().__init__("Chinese Yuan Renminbi", "CNY", 156, "CN$", "", 100,
                         Rounding(), "{symbol} {value:.2f}")


class HKDCurrency(Currency):
    """
    Hong Kong dollar.

    The ISO three-letter code is HKD; the numeric code is 344.
    It is divided into 100 cents.
    """

    def __init__(self):
        super().__init__("Hong Kong dollar", "HKD", 344, "HK$", "", 100,
                         Rounding(), "{symbol} {value:.2f}")


class INRCurrency(Currency):
    """
    Indian rupee.

    The ISO three-letter code is INR; the numeric code is 356.
    It is divided into 100 paise.
    """

    def __init__(self):
        super().__init__("Indian rupee", "INR", 356, "Rs", "", 100,
                         Rounding(), "{symbol} {value:.2f}")


class SGDCurrency(Currency):
    """
    Singapore dollar.

    The ISO three-letter code is SGD; the numeric code is 702.
    It is divided into 100 cents.
    """

    def __init__(self):
        super().__init__("Singapore dollar", "SGD", 702, "S$", "", 100,
                         Rounding(), "{symbol} {value:.2f}")


class KRWCurrency(Currency):
    """
    South-Korean won.

    The ISO three-letter code is KRW; the numeric code is 410.
    It is divided into 100 chon.
    """

    def __init__(self):
        super().__init__("South-Korean won", "KRW", 410, "W", "", 100,
                         Rounding(), "{symbol} {value:.0f}")


__all__ = [
    "JPYCurrency",
    "CNYCurrency",
    "HKDCurrency",
    "INRCurrency",
    "SGDCurrency",
    "KRWCurrency",
]
