"""
Market quotes.

Quotes are the leaves of a dependency graph: curves and instruments
register with them and are invalidated when a quote value changes.
"""

from abc import ABC, abstractmethod
from typing import Optional

from .errors import InvalidArgumentError
from .patterns.observable import Observable


class Quote(Observable, ABC):
    """Purely virtual base class for market observables."""

    @abstractmethod
    def value(self) -> float:
        """Current value of the quote."""

    @abstractmethod
    def is_valid(self) -> bool:
        """Whether the quote currently holds a value."""


class SimpleQuote(Quote):
    """
    Market element returning a stored value.

    Example:
        >>> rate = SimpleQuote(0.05)
        >>> rate.set_value(0.051)  # observers are notified
    """

    def __init__(self, value: Optional[float] = None):
        super().__init__()
        self._value = value

    def value(self) -> float:
        if self._value is None:
            raise InvalidArgumentError("invalid SimpleQuote")
        return self._value

    def is_valid(self) -> bool:
        return self._value is not None

    def set_value(self, value: Optional[float] = None) -> float:
        """
        Store a new value and notify observers if it changed.

        Returns:
            Difference between the new and the old value (0.0 when either
            is missing)
        """
        diff = 0.0
        if value is not None and self._value is not None:
            diff = value - self._value
        if value != self._value:
            self._value = value
            self.notify_observers()
        return diff

    def reset(self) -> None:
        """Invalidate the quote."""
        self.set_value(None)

    def __repr__(self) -> str:
        return f"SimpleQuote({self._value!r})"


__all__ = [
    "Quote",
    "SimpleQuote",
]
