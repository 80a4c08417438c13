"""Front-panel presenter: drives the clock and refreshes bound components.

Framework-agnostic; the Qt window only calls into it from its timer.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterable, Optional

import psutil  # type: ignore[import-untyped]

from stopwatch_gui.backend import SimulatorBackend
from stopwatch_gui.components.base import ComponentController


class SimulationState(Enum):
    RUNNING = auto()
    PAUSED = auto()
    # Clock driven by the control server instead of the GUI timer
    EXTERNAL = auto()


@dataclass
class StatusSample:
    cycle: int
    seconds: float
    shown: str
    counting: bool
    cpu_percent: Optional[float] = None
    memory_percent: Optional[float] = None


def format_shown(value: Optional[int]) -> str:
    """Displayed time as 'TO.T', or '--.-' while the display is blank."""
    if value is None:
        return "--.-"
    return f"{value // 100}{value // 10 % 10}.{value % 10}"


class SystemMonitor:
    """CPU and memory usage of this process."""

    def __init__(self):
        self._proc = psutil.Process()
        # First cpu_percent() call only primes the counter
        self._proc.cpu_percent(interval=None)

    def sample(self) -> tuple[float, float]:
        return float(self._proc.cpu_percent(interval=None)), float(self._proc.memory_percent())


class SimulationController:
    """Steps the stopwatch and pushes signal values to the panel components."""

    def __init__(
        self,
        backend: SimulatorBackend,
        components: Iterable[ComponentController],
        monitor: Optional[SystemMonitor] = None,
    ):
        self._backend = backend
        self._monitor = monitor
        self._state = SimulationState.PAUSED
        self._components = list(components)
        for comp in self._components:
            comp.attach_backend(backend)

    @property
    def state(self) -> SimulationState:
        return self._state

    def set_running(self, running: bool) -> None:
        if self._state != SimulationState.EXTERNAL:
            self._state = SimulationState.RUNNING if running else SimulationState.PAUSED

    def set_external(self, external: bool) -> None:
        if external:
            self._state = SimulationState.EXTERNAL
        elif self._state == SimulationState.EXTERNAL:
            self._state = SimulationState.PAUSED

    def reset(self) -> None:
        """Power-on reset of the design (not the RESET button)."""
        self._backend.reset()

    def step(self, cycles: int) -> None:
        self._backend.step(cycles)

    def tick(self, cycles: int) -> None:
        """One GUI timer period: advance unless paused, then refresh."""
        if self._state == SimulationState.RUNNING:
            self._backend.step(cycles)
        self.update_components()

    def update_components(self) -> None:
        for comp in self._components:
            comp.update(self._backend)

    def signals(self) -> dict[str, int]:
        return self._backend.signals()

    def status(self) -> StatusSample:
        sample = StatusSample(
            cycle=self._backend.cycle_count(),
            seconds=self._backend.elapsed_seconds(),
            shown=format_shown(self._backend.display_value()),
            counting=self._backend.running(),
        )
        if self._monitor is not None:
            sample.cpu_percent, sample.memory_percent = self._monitor.sample()
        return sample
