"""What the front panel needs from a simulated stopwatch."""

from __future__ import annotations

from contextlib import nullcontext
from dataclasses import dataclass, field
from typing import ContextManager, Optional, Protocol

from stopwatch.designs.stopwatch.design import StopWatch
from stopwatch.utils.config_loader import DisplayConfig


class SimulatorBackend(Protocol):
    @property
    def design_name(self) -> str:
        ...

    @property
    def display_config(self) -> DisplayConfig:
        ...

    def step(self, cycles: int) -> None:
        ...

    def reset(self) -> None:
        ...

    def read(self, name: str) -> int:
        ...

    def write(self, name: str, value: int) -> None:
        ...

    def signals(self) -> dict[str, int]:
        ...

    def cycle_count(self) -> int:
        ...

    def elapsed_seconds(self) -> float:
        ...

    def display_value(self) -> Optional[int]:
        ...

    def running(self) -> bool:
        ...


@dataclass
class DesignBackend:
    """SimulatorBackend over an in-process StopWatch.

    Every call holds ``lock`` so the GUI timer and the control server can
    share one design.
    """

    design: StopWatch
    lock: ContextManager = field(default_factory=nullcontext)

    def __post_init__(self) -> None:
        if self.lock is None:
            self.lock = nullcontext()

    @property
    def design_name(self) -> str:
        return self.design.name

    @property
    def display_config(self) -> DisplayConfig:
        return self.design.config.display

    def step(self, cycles: int) -> None:
        with self.lock:
            self.design.step(cycles)

    def reset(self) -> None:
        with self.lock:
            self.design.reset()

    def read(self, name: str) -> int:
        with self.lock:
            return self.design.read(name)

    def write(self, name: str, value: int) -> None:
        with self.lock:
            self.design.write(name, value)

    def signals(self) -> dict[str, int]:
        with self.lock:
            return self.design.signals.snapshot()

    def cycle_count(self) -> int:
        with self.lock:
            return self.design.clock.cycle_count

    def elapsed_seconds(self) -> float:
        """Time held by the counter, not wall-clock simulated time."""
        with self.lock:
            return self.design.elapsed_seconds()

    def display_value(self) -> Optional[int]:
        with self.lock:
            return self.design.display_value()

    def running(self) -> bool:
        with self.lock:
            return self.design.running
