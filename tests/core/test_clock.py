import pytest

from stopwatch.core.clock import Clock


class SubscriberWithCycles:
    def __init__(self):
        self.calls = 0
        self.cycles = []

    def tick(self, cycles: int = 1) -> None:
        self.calls += 1
        self.cycles.append(cycles)


def test_clock_subscribe_unsubscribe_and_tick():
    clock = Clock(frequency=1_000)
    sub = SubscriberWithCycles()

    clock.subscribe(sub)
    clock.subscribe(sub)  # should not duplicate
    clock.tick(5)

    assert clock.cycle_count == 5
    assert sub.calls == 1
    assert sub.cycles == [5]

    clock.unsubscribe(sub)
    clock.tick(2)
    assert sub.calls == 1  # no new calls after unsubscribe
    assert clock.cycle_count == 7


def test_clock_notifies_in_subscription_order():
    clock = Clock()
    order = []

    class Named:
        def __init__(self, name):
            self.name = name

        def tick(self, cycles: int = 1) -> None:
            order.append(self.name)

    clock.subscribe(Named("first"))
    clock.subscribe(Named("second"))
    clock.tick()

    assert order == ["first", "second"]


def test_clock_zero_cycles_is_noop():
    clock = Clock()
    sub = SubscriberWithCycles()
    clock.subscribe(sub)

    clock.tick(0)
    assert clock.cycle_count == 0
    assert sub.calls == 0


def test_clock_elapsed_seconds():
    clock = Clock(frequency=10)
    clock.tick(25)
    assert clock.elapsed_seconds == pytest.approx(2.5)


def test_clock_cycles_for():
    clock = Clock(frequency=100)
    assert clock.cycles_for(1.5) == 150
    assert clock.cycles_for(0) == 0
    with pytest.raises(ValueError):
        clock.cycles_for(-1)


def test_clock_reset():
    clock = Clock()
    clock.tick(4)
    clock.reset()
    assert clock.cycle_count == 0
    assert clock.elapsed_seconds == 0


def test_clock_invalid_frequency():
    with pytest.raises(ValueError):
        Clock(frequency=0)


def test_clock_negative_cycles():
    clock = Clock()
    with pytest.raises(ValueError):
        clock.tick(-1)
