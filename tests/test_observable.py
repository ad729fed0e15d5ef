"""
Unit tests for the observer plumbing.
"""

import gc

import pytest

from qlkit.errors import InvalidArgumentError, NotificationError
from qlkit.patterns import Observable, ObservableValue, Observer


class Counter(Observer):
    """Observer counting notifications."""

    def __init__(self):
        super().__init__()
        self.count = 0

    def update(self):
        self.count += 1


class Failing(Observer):
    def update(self):
        raise RuntimeError("boom")


class TestObservable:
    """Tests for registration and notification."""

    def test_notify_reaches_observer(self):
        """Test a registered observer is updated once per notification."""
        subject = Observable()
        counter = Counter()
        counter.register_with(subject)

        subject.notify_observers()
        subject.notify_observers()

        assert counter.count == 2

    def test_register_twice_is_noop(self):
        """Test double registration does not double notify."""
        subject = Observable()
        counter = Counter()

        assert subject.register_observer(counter) is True
        assert subject.register_observer(counter) is False
        subject.notify_observers()

        assert counter.count == 1
        assert subject.observer_count == 1

    def test_unregister(self):
        """Test unregistered observers are no longer notified."""
        subject = Observable()
        counter = Counter()
        counter.register_with(subject)

        assert counter.unregister_with(subject) is True
        assert subject.unregister_observer(counter) is False
        subject.notify_observers()

        assert counter.count == 0

    def test_unregister_with_all(self):
        """Test an observer can detach from everything it watches."""
        a, b = Observable(), Observable()
        counter = Counter()
        counter.register_with(a)
        counter.register_with(b)
        assert len(counter.observables) == 2

        counter.unregister_with_all()
        a.notify_observers()
        b.notify_observers()

        assert counter.count == 0
        assert counter.observables == []

    def test_register_with_none_ignored(self):
        """Test None observables are ignored."""
        counter = Counter()
        assert counter.register_with(None) is False
        assert counter.unregister_with(None) is False

    def test_observer_needs_update(self):
        """Test objects without update() cannot register."""
        with pytest.raises(InvalidArgumentError):
            Observable().register_observer(object())

    def test_observers_held_weakly(self):
        """Test a collected observer silently leaves the set."""
        subject = Observable()
        counter = Counter()
        counter.register_with(subject)
        assert subject.observer_count == 1

        del counter
        gc.collect()

        assert subject.observer_count == 0
        subject.notify_observers()

    def test_observer_keeps_observable_alive(self):
        """Test observers hold strong references to what they watch."""
        counter = Counter()
        counter.register_with(Observable())
        gc.collect()

        assert len(counter.observables) == 1
        counter.observables[0].notify_observers()
        assert counter.count == 1


class TestNotificationErrors:
    """Tests for failures during fan-out."""

    def test_failure_does_not_stop_fanout(self):
        """Test every observer is notified before the error is raised."""
        subject = Observable()
        counters = [Counter() for _ in range(3)]
        failing = Failing()
        for obs in counters + [failing]:
            obs.register_with(subject)

        with pytest.raises(NotificationError) as exc_info:
            subject.notify_observers()

        assert all(c.count == 1 for c in counters)
        assert len(exc_info.value.errors) == 1
        assert isinstance(exc_info.value.errors[0], RuntimeError)

    def test_all_failures_collected(self):
        """Test several failures are reported together."""
        subject = Observable()
        failing = [Failing(), Failing()]
        for obs in failing:
            obs.register_with(subject)

        with pytest.raises(NotificationError) as exc_info:
            subject.notify_observers()

        assert len(exc_info.value.errors) == 2

    def test_failures_are_logged(self, caplog):
        """Test each failure is logged at warning level."""
        subject = Observable()
        failing = Failing()
        failing.register_with(subject)

        with pytest.raises(NotificationError):
            subject.notify_observers()

        assert any(r.levelname == "WARNING" and "boom" in r.getMessage()
                   for r in caplog.records)


class TestObservableValue:
    """Tests for ObservableValue."""

    def test_set_notifies(self):
        """Test every assignment notifies, even with the same value."""
        value = ObservableValue(1)
        counter = Counter()
        counter.register_with(value)

        value.set(2)
        value.set(2)

        assert value.value == 2
        assert counter.count == 2
