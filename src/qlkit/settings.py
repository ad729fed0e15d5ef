"""
Global library settings.

The evaluation date is the "today" used by instruments to decide which
cashflows have already occurred and when settlement happens. It is held in
an ObservableValue so that instruments registered with it are invalidated
whenever it moves.
"""

import logging
from contextlib import contextmanager
from datetime import date
from typing import Iterator, Optional

from .patterns.observable import ObservableValue

logger = logging.getLogger(__name__)


class Settings:
    """
    Process-wide settings singleton.

    Example:
        >>> Settings.instance().evaluation_date = date(2024, 1, 15)
    """

    _instance: Optional["Settings"] = None

    def __init__(self):
        self._evaluation_date = ObservableValue(None)

    @classmethod
    def instance(cls) -> "Settings":
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @property
    def evaluation_date(self) -> date:
        """Evaluation date; today's date while not explicitly set."""
        d = self._evaluation_date.value
        return d if d is not None else date.today()

    @evaluation_date.setter
    def evaluation_date(self, d: Optional[date]) -> None:
        logger.debug("Evaluation date set to %s", d)
        self._evaluation_date.set(d)

    @property
    def evaluation_date_observable(self) -> ObservableValue:
        """Observable to register with in order to follow date changes."""
        return self._evaluation_date

    @property
    def is_evaluation_date_set(self) -> bool:
        return self._evaluation_date.value is not None

    def reset_evaluation_date(self) -> None:
        """Go back to following the system date."""
        self.evaluation_date = None


@contextmanager
def saved_settings() -> Iterator[Settings]:
    """Restore the evaluation date on exit."""
    settings = Settings.instance()
    saved = settings.evaluation_date_observable.value
    try:
        yield settings
    finally:
        if settings.evaluation_date_observable.value != saved:
            settings.evaluation_date = saved


__all__ = [
    "Settings",
    "saved_settings",
]
