"""Design abstraction - behavioral contract.

A Design is a complete synchronous system: a clock, the signals it owns
and the HDL blocks that drive them. The Design is responsible for wiring
everything together and exposing its ports by name.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from stopwatch.core.signal import SignalBank, SignalDescriptor
from stopwatch.interfaces.clock import IClock


class Design(ABC):
    """Base class for simulated designs."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable design name (e.g., 'StopWatch')."""
        ...

    @property
    @abstractmethod
    def clock(self) -> IClock:
        """Design clock (pub/sub edge source)."""
        ...

    @property
    @abstractmethod
    def signals(self) -> SignalBank:
        """All signals of the design, ports and internal state."""
        ...

    @property
    @abstractmethod
    def ports(self) -> dict[str, SignalDescriptor]:
        """Top-level ports, keyed by name."""
        ...

    @abstractmethod
    def reset(self) -> None:
        """Return the design to its power-on state."""
        ...

    @abstractmethod
    def step(self, cycles: int = 1) -> None:
        """Advance the design by a number of clock edges."""
        ...

    @abstractmethod
    def read(self, name: str) -> int:
        """Read the current value of any signal."""
        ...

    @abstractmethod
    def write(self, name: str, value: int) -> None:
        """Drive an input port."""
        ...
