"""
Exception classes for qlkit.

- QLError: base class for every library error
- InvalidArgumentError: bad construction arguments (bonds, schedules, rates)
- UnsupportedVisitorError: an event was asked to accept a missing or
  incompatible visitor
- NotificationError: one or more observers failed while being notified
- PricingError: results unavailable (no engine, no value, unsolvable yield)
"""

from typing import List, Optional


class QLError(Exception):
    """Base class for all qlkit errors."""


class InvalidArgumentError(QLError, ValueError):
    """
    Invalid argument or construction error.

    Raised immediately by the constructing call, e.g. a bond built with no
    cashflows or a schedule whose termination precedes its effective date.
    """


class CurrencyMismatchError(InvalidArgumentError):
    """Arithmetic between money amounts in different currencies."""


class UnsupportedVisitorError(QLError, TypeError):
    """Raised when an event cannot be dispatched to the given visitor."""


class NotificationError(QLError):
    """
    Raised after a notification round in which some observers failed.

    Every observer is still notified; the failures are collected and
    reported together.

    Attributes:
        errors: Exceptions raised by the failing observers, in call order
    """

    def __init__(self, errors: List[BaseException], message: Optional[str] = None):
        self.errors = list(errors)
        if message is None:
            details = "; ".join(f"{type(e).__name__}: {e}" for e in self.errors)
            message = f"could not notify {len(self.errors)} observer(s): {details}"
        super().__init__(message)


class PricingError(QLError):
    """Pricing results are not available."""


__all__ = [
    "QLError",
    "InvalidArgumentError",
    "CurrencyMismatchError",
    "UnsupportedVisitorError",
    "NotificationError",
    "PricingError",
]
