"""Clock implementation for simulation timing."""

from __future__ import annotations

from typing import List

from stopwatch.interfaces.clock import ClockSubscriber, IClock


class Clock(IClock):
    """Pub/sub clock that notifies subscribers on tick().

    One tick is one rising edge. Subscribers are notified once per call
    with the number of edges in the batch, in subscription order.
    """

    def __init__(self, frequency: int = 10):
        if frequency <= 0:
            raise ValueError("Clock frequency must be positive")
        self._frequency = frequency
        self._cycle_count = 0
        self._subscribers: List[ClockSubscriber] = []

    @property
    def frequency(self) -> int:
        return self._frequency

    @property
    def cycle_count(self) -> int:
        return self._cycle_count

    @property
    def elapsed_seconds(self) -> float:
        return self._cycle_count / self._frequency

    def cycles_for(self, seconds: float) -> int:
        """Number of edges covering the given simulated duration."""
        if seconds < 0:
            raise ValueError("seconds must be >= 0")
        return round(seconds * self._frequency)

    def subscribe(self, subscriber: ClockSubscriber) -> None:
        if subscriber not in self._subscribers:
            self._subscribers.append(subscriber)

    def unsubscribe(self, subscriber: ClockSubscriber) -> None:
        if subscriber in self._subscribers:
            self._subscribers.remove(subscriber)

    def tick(self, cycles: int = 1) -> None:
        if cycles < 0:
            raise ValueError("cycles must be >= 0")
        if cycles == 0:
            return

        self._cycle_count += cycles
        for subscriber in list(self._subscribers):
            subscriber.tick(cycles)

    def reset(self) -> None:
        self._cycle_count = 0
