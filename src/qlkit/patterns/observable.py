"""
Observer pattern used to propagate market data changes.

Observables hold their observers by weak reference: registering does not
keep an observer alive. Observers hold strong references to what they
watch, so a dependency graph lives as long as its leaves are referenced.

Notification is synchronous and single-threaded. One failing observer does
not stop the others from being notified; failures are collected and raised
together as a NotificationError once the fan-out completes.
"""

import logging
import weakref
from typing import Any, Dict, List, Optional

from ..errors import InvalidArgumentError, NotificationError

logger = logging.getLogger(__name__)


class Observable:
    """An object whose changes can be watched by observers."""

    def __init__(self):
        self._observers = weakref.WeakSet()

    def register_observer(self, observer) -> bool:
        """
        Add an observer to the notification set.

        Args:
            observer: Any object with a callable ``update()``

        Returns:
            True if the observer was added, False if it was already registered
        """
        if not callable(getattr(observer, "update", None)):
            raise InvalidArgumentError(f"{observer!r} has no update() method")
        if observer in self._observers:
            return False
        self._observers.add(observer)
        return True

    def unregister_observer(self, observer) -> bool:
        """Remove an observer; returns False if it was not registered."""
        if observer not in self._observers:
            return False
        self._observers.discard(observer)
        return True

    def notify_observers(self) -> None:
        """
        Call ``update()`` on every registered observer.

        Raises:
            NotificationError: If any observer raised; raised only after
                all observers have been notified
        """
        errors = []
        for observer in list(self._observers):
            try:
                observer.update()
            except Exception as exc:
                logger.warning(
                    "Observer %r failed during notification from %r: %s",
                    observer, self, exc,
                )
                errors.append(exc)
        if errors:
            raise NotificationError(errors)

    @property
    def observers(self) -> List[Any]:
        """Snapshot of the currently registered observers."""
        return list(self._observers)

    @property
    def observer_count(self) -> int:
        return len(self._observers)


class Observer:
    """
    Capability of reacting to notifications.

    Subclasses implement ``update()``. The helpers keep track of the
    observables this object registered with so it can detach cleanly.
    """

    def __init__(self):
        self._observables: Dict[int, Observable] = {}

    def register_with(self, observable: Optional[Observable]) -> bool:
        """Start observing ``observable``; None is ignored."""
        if observable is None:
            return False
        self._observables[id(observable)] = observable
        return observable.register_observer(self)

    def unregister_with(self, observable: Optional[Observable]) -> bool:
        """Stop observing ``observable``."""
        if observable is None:
            return False
        self._observables.pop(id(observable), None)
        return observable.unregister_observer(self)

    def unregister_with_all(self) -> None:
        """Stop observing everything."""
        for observable in list(self._observables.values()):
            observable.unregister_observer(self)
        self._observables.clear()

    @property
    def observables(self) -> List[Observable]:
        return list(self._observables.values())

    def update(self) -> None:
        """React to a change in one of the observed objects."""
        raise NotImplementedError


class ObservableValue(Observable):
    """
    Value holder notifying its observers on every assignment.

    Example:
        >>> evaluation_date = ObservableValue(date(2024, 1, 15))
        >>> evaluation_date.set(date(2024, 1, 16))  # observers are notified
    """

    def __init__(self, value: Any = None):
        super().__init__()
        self._value = value

    @property
    def value(self) -> Any:
        return self._value

    def set(self, value: Any) -> None:
        self._value = value
        self.notify_observers()

    def __repr__(self) -> str:
        return f"ObservableValue({self._value!r})"


__all__ = [
    "Observable",
    "Observer",
    "ObservableValue",
]
