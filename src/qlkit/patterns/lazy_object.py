"""
Framework for calculation on demand and result caching.

A LazyObject observes the inputs its results depend on. When an input
changes, the cached results are invalidated and the change is forwarded to
the object's own observers, but nothing is recomputed until a result is
requested again.

States:
    uncalculated -> calculate() -> calculated
    calculated   -> update()    -> uncalculated (observers notified)

While frozen, calculate() never recomputes and stale results are returned.

A dependency graph of lazy objects is confined to one thread; no locking is
performed.
"""

import logging
from abc import ABC, abstractmethod

from ..errors import NotificationError
from .observable import Observable, Observer

logger = logging.getLogger(__name__)


class LazyObject(Observable, Observer, ABC):
    """
    Observable/Observer caching the results of ``perform_calculations()``.

    Subclasses implement ``perform_calculations()`` to fill their result
    attributes and call ``calculate()`` from every result accessor.

    Example:
        >>> class Price(LazyObject):
        ...     def __init__(self, quote):
        ...         super().__init__()
        ...         self.quote = quote
        ...         self.register_with(quote)
        ...     def perform_calculations(self):
        ...         self._value = 2 * self.quote.value()
        ...     def value(self):
        ...         self.calculate()
        ...         return self._value
    """

    def __init__(self):
        Observable.__init__(self)
        Observer.__init__(self)
        self._calculated = False
        self._frozen = False

    @property
    def calculated(self) -> bool:
        return self._calculated

    @property
    def frozen(self) -> bool:
        return self._frozen

    def update(self) -> None:
        """
        Invalidate cached results.

        Observers are notified only when results were available and the
        object is not frozen.
        """
        was_calculated = self._calculated
        # cleared first so a notification cycle reaching this object stops here
        self._calculated = False
        if was_calculated and not self._frozen:
            self.notify_observers()

    def recalculate(self) -> None:
        """
        Force recalculation of any results which would otherwise be cached.

        Explicit invocation is not needed if the object registered itself
        with the structures its results depend on. Observers are notified
        whether or not the calculation succeeds, and the frozen state is
        restored before that. A calculation error is re-raised even if
        notifying fails; the NotificationError becomes its ``__cause__``.
        """
        was_frozen = self._frozen
        self._calculated = False
        self._frozen = False
        try:
            self.calculate()
        except Exception as error:
            self._frozen = was_frozen
            try:
                self.notify_observers()
            except NotificationError as notification_error:
                raise error from notification_error
            raise
        self._frozen = was_frozen
        self.notify_observers()

    def freeze(self) -> None:
        """Return the presently cached results even if inputs change."""
        self._frozen = True

    def unfreeze(self) -> None:
        """Re-enable recalculation and let suppressed invalidations through."""
        self._frozen = False
        self.notify_observers()

    def calculate(self) -> None:
        """
        Perform all needed calculations by calling ``perform_calculations()``.

        Results are cached until the next invalidation. Overrides must
        call this implementation.
        """
        if not self._calculated and not self._frozen:
            # prevent infinite recursion in case of bootstrapping
            self._calculated = True
            try:
                self.perform_calculations()
            except Exception:
                self._calculated = False
                logger.debug("Calculation failed for %r; cache reset", self)
                raise

    @abstractmethod
    def perform_calculations(self) -> None:
        """Compute the results that calculate() caches."""


__all__ = ["LazyObject"]
