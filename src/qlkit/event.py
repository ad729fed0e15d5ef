"""
Base class for dated events such as cashflows.
"""

from abc import ABC, abstractmethod
import datetime
from typing import Any, Optional

from .errors import UnsupportedVisitorError
from .patterns.observable import Observable
from .settings import Settings


class Event(Observable, ABC):
    """
    Something happening at a given date.

    Events are observable so that dependants can follow changes in the
    data they are built from.
    """

    @abstractmethod
    def date(self) -> datetime.date:
        """Date at which the event occurs."""

    def has_occurred(
        self,
        ref_date: Optional[datetime.date] = None,
        include_today: bool = False
    ) -> bool:
        """
        Whether the event has already occurred as of a date.

        Args:
            ref_date: Reference date; the evaluation date if omitted
            include_today: If True the event counts as occurred only when it
                falls strictly before ``ref_date``; if False an event falling
                on ``ref_date`` counts as occurred as well

        Returns:
            ``date() < ref_date`` if include_today else ``date() <= ref_date``
        """
        if ref_date is None:
            ref_date = Settings.instance().evaluation_date
        if include_today:
            return self.date() < ref_date
        return self.date() <= ref_date

    def accept(self, visitor: Any) -> Any:
        """
        Dispatch to the visitor's handler for this event's type.

        Raises:
            UnsupportedVisitorError: If the visitor is missing or has no
                ``visit()``, or it cannot handle this type
        """
        if not callable(getattr(visitor, "visit", None)):
            raise UnsupportedVisitorError("not an event visitor")
        return visitor.visit(self)


class SimpleEvent(Event):
    """Event with no content other than its date."""

    def __init__(self, d: datetime.date):
        super().__init__()
        self._date = d

    def date(self) -> datetime.date:
        return self._date

    def __repr__(self) -> str:
        return f"SimpleEvent({self._date.isoformat()})"


__all__ = [
    "Event",
    "SimpleEvent",
]
