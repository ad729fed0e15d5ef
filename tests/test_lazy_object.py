"""
Unit tests for LazyObject calculation caching.
"""

import pytest

from qlkit.errors import NotificationError
from qlkit.patterns import LazyObject, Observable, Observer
from qlkit.quotes import SimpleQuote


class Doubler(LazyObject):
    """Lazy object doubling a quote and counting its calculations."""

    def __init__(self, quote):
        super().__init__()
        self.quote = quote
        self.runs = 0
        self._value = None
        self.register_with(quote)

    def perform_calculations(self):
        self.runs += 1
        self._value = 2.0 * self.quote.value()

    def value(self):
        self.calculate()
        return self._value


class Exploding(LazyObject):
    """Lazy object whose calculation always fails."""

    def __init__(self):
        super().__init__()
        self.runs = 0

    def perform_calculations(self):
        self.runs += 1
        raise ArithmeticError("calculation failed")


class SelfReferencing(LazyObject):
    """Lazy object whose calculation reads its own result accessor."""

    def __init__(self):
        super().__init__()
        self.runs = 0
        self._value = None

    def perform_calculations(self):
        self.runs += 1
        # a bootstrapping calculation asking for its own (partial) result
        previous = self.value()
        self._value = 1.0 if previous is None else previous + 1.0

    def value(self):
        self.calculate()
        return self._value


class FailingObserver(Observer):
    def update(self):
        raise RuntimeError("observer failed")


class Counter(Observer):
    def __init__(self):
        super().__init__()
        self.count = 0

    def update(self):
        self.count += 1


@pytest.fixture
def quote():
    return SimpleQuote(1.5)


class TestCaching:
    """Tests for calculate() and invalidation."""

    def test_initial_state(self, quote):
        """Test new objects are neither calculated nor frozen."""
        obj = Doubler(quote)
        assert obj.calculated is False
        assert obj.frozen is False

    def test_calculate_runs_once(self, quote):
        """Test two calculations without invalidation compute once."""
        obj = Doubler(quote)

        first = obj.value()
        second = obj.value()

        assert obj.runs == 1
        assert first == second == 3.0
        assert obj.calculated is True

    def test_update_invalidates_and_notifies(self, quote):
        """Test a dependency change invalidates and propagates."""
        obj = Doubler(quote)
        counter = Counter()
        counter.register_with(obj)
        obj.value()

        quote.set_value(2.0)

        assert obj.calculated is False
        assert counter.count == 1
        assert obj.value() == 4.0
        assert obj.runs == 2

    def test_update_when_uncalculated_does_not_notify(self, quote):
        """Test invalidating an uncalculated object is silent."""
        obj = Doubler(quote)
        counter = Counter()
        counter.register_with(obj)

        quote.set_value(2.0)

        assert obj.calculated is False
        assert counter.count == 0

    def test_notification_from_plain_observable(self):
        """Test any observable dependency invalidates the cache."""
        source = Observable()
        obj = Doubler(SimpleQuote(1.0))
        obj.register_with(source)
        obj.value()

        source.notify_observers()

        assert obj.calculated is False

    def test_propagation_through_chain(self, quote):
        """Test invalidation travels through lazy objects observing each other."""
        inner = Doubler(quote)
        outer = Doubler(inner)
        # outer reads inner through value()
        assert outer.value() == 6.0

        quote.set_value(1.0)

        assert inner.calculated is False
        assert outer.calculated is False
        assert outer.value() == 4.0

    def test_cycle_terminates(self):
        """Test a notification loop between two lazy objects stops."""
        a = Doubler(SimpleQuote(1.0))
        b = Doubler(SimpleQuote(1.0))
        a.register_with(b)
        b.register_with(a)
        a.value()
        b.value()

        a.update()

        assert a.calculated is False
        assert b.calculated is False

    def test_reentrant_calculation_runs_once(self):
        """Test a calculation reading its own result does not recurse."""
        obj = SelfReferencing()

        assert obj.value() == 1.0
        assert obj.runs == 1
        assert obj.calculated is True

        assert obj.value() == 1.0
        assert obj.runs == 1


class TestFreeze:
    """Tests for freeze() and unfreeze()."""

    def test_frozen_returns_stale_value(self, quote):
        """Test frozen objects keep returning cached results."""
        obj = Doubler(quote)
        obj.value()
        obj.freeze()

        quote.set_value(5.0)

        assert obj.value() == 3.0
        assert obj.value() == 3.0
        assert obj.runs == 1
        assert obj.calculated is False

    def test_frozen_update_does_not_notify(self, quote):
        """Test invalidation of a frozen object is not propagated."""
        obj = Doubler(quote)
        counter = Counter()
        counter.register_with(obj)
        obj.value()
        obj.freeze()

        quote.set_value(5.0)

        assert counter.count == 0

    def test_unfreeze_notifies_once(self, quote):
        """Test unfreeze() notifies observers exactly once."""
        obj = Doubler(quote)
        counter = Counter()
        counter.register_with(obj)
        obj.value()
        obj.freeze()
        quote.set_value(5.0)

        obj.unfreeze()

        assert counter.count == 1
        assert obj.frozen is False
        assert obj.value() == 10.0
        assert obj.runs == 2

    def test_unfreeze_notifies_even_if_untouched(self, quote):
        obj = Doubler(quote)
        counter = Counter()
        counter.register_with(obj)
        obj.freeze()
        obj.unfreeze()
        assert counter.count == 1


class TestErrors:
    """Tests for failures during calculation."""

    def test_error_rolls_back(self):
        """Test a failed calculation leaves the object uncalculated."""
        obj = Exploding()

        with pytest.raises(ArithmeticError, match="calculation failed"):
            obj.calculate()

        assert obj.calculated is False

    def test_retry_after_error(self):
        """Test the next calculate() retries the computation."""
        obj = Exploding()
        for _ in range(2):
            with pytest.raises(ArithmeticError):
                obj.calculate()
        assert obj.runs == 2

    def test_invalid_input_propagates(self):
        """Test an unset quote surfaces as the caller's error."""
        obj = Doubler(SimpleQuote())
        with pytest.raises(ValueError):
            obj.value()
        assert obj.calculated is False


class TestRecalculate:
    """Tests for recalculate()."""

    def test_recalculate_forces_computation(self, quote):
        """Test recalculate() recomputes a calculated object."""
        obj = Doubler(quote)
        obj.value()

        obj.recalculate()

        assert obj.runs == 2
        assert obj.calculated is True

    def test_recalculate_notifies(self, quote):
        """Test recalculate() notifies observers on success."""
        obj = Doubler(quote)
        counter = Counter()
        counter.register_with(obj)

        obj.recalculate()

        assert counter.count == 1

    def test_recalculate_restores_frozen(self, quote):
        """Test a frozen object recomputes and stays frozen."""
        obj = Doubler(quote)
        obj.value()
        obj.freeze()
        quote.set_value(4.0)

        obj.recalculate()

        assert obj.frozen is True
        assert obj.value() == 8.0

    def test_recalculate_notifies_on_failure(self):
        """Test observers are notified before the error propagates."""
        obj = Exploding()
        obj.freeze()
        counter = Counter()
        counter.register_with(obj)

        with pytest.raises(ArithmeticError):
            obj.recalculate()

        assert counter.count == 1
        assert obj.frozen is True
        assert obj.calculated is False

    def test_calculation_error_wins_over_notification_error(self):
        """Test a failing observer does not mask the calculation error."""
        obj = Exploding()
        observer = FailingObserver()
        observer.register_with(obj)

        with pytest.raises(ArithmeticError, match="calculation failed") as excinfo:
            obj.recalculate()

        assert isinstance(excinfo.value.__cause__, NotificationError)
        assert obj.calculated is False

    def test_notification_error_after_success(self, quote):
        """Test a failing observer surfaces once the calculation succeeded."""
        obj = Doubler(quote)
        observer = FailingObserver()
        observer.register_with(obj)

        with pytest.raises(NotificationError):
            obj.recalculate()

        assert obj.calculated is True
        assert obj.value() == 3.0
