"""Clock interface for simulation timing and pub/sub edge propagation."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Protocol


class ClockSubscriber(Protocol):
    """Anything that can advance on rising clock edges."""

    def tick(self, cycles: int = 1) -> None:
        """Advance the subscriber by the given number of clock edges."""
        ...


class IClock(ABC):
    """Clock interface used by designs and the simulation engine."""

    @property
    @abstractmethod
    def frequency(self) -> int:
        """Clock frequency in Hz."""
        ...

    @property
    @abstractmethod
    def cycle_count(self) -> int:
        """Total number of rising edges elapsed."""
        ...

    @property
    @abstractmethod
    def elapsed_seconds(self) -> float:
        """Simulated time since the last reset, in seconds."""
        ...

    @abstractmethod
    def cycles_for(self, seconds: float) -> int:
        """Edges covering a simulated duration. Raises ValueError if negative."""
        ...

    @abstractmethod
    def subscribe(self, subscriber: ClockSubscriber) -> None:
        """Subscribe to clock edges."""
        ...

    @abstractmethod
    def unsubscribe(self, subscriber: ClockSubscriber) -> None:
        """Unsubscribe from clock edges."""
        ...

    @abstractmethod
    def tick(self, cycles: int = 1) -> None:
        """Advance the clock and notify subscribers."""
        ...

    @abstractmethod
    def reset(self) -> None:
        """Reset cycle count to zero."""
        ...
