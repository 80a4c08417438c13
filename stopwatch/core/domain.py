"""Synchronous clock domain driven by the MyHDL simulator.

MyHDL keeps one set of global scheduler state, so only one Simulation
can run in a process at a time. Each SynchronousDomain owns a Simulation
while it is the active domain. Stepping another domain suspends the
active one: its signal values are frozen in its SignalBank, its
Simulation is quit, and the values are loaded back the next time it runs.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Callable, List, Optional, Sequence

from myhdl import Signal, Simulation, always, block, delay

from stopwatch.core.signal import SignalBank

logger = logging.getLogger(__name__)

EdgeListener = Callable[[int, List[str]], None]
Elaborator = Callable[[Any], Sequence[Any]]

HALF_PERIOD = 5
CLOCK_PERIOD = 2 * HALF_PERIOD

_active: Optional["SynchronousDomain"] = None
_SIMULATOR_LOCK = threading.RLock()


@block
def clock_driver(clock, half_period=HALF_PERIOD):
    """Free-running clock. The first rising edge is half a period in."""

    @always(delay(half_period))
    def drive():
        clock.next = not clock

    return drive


def release_simulator() -> None:
    """Suspend whichever domain currently holds the MyHDL simulator.

    Call before running a separate MyHDL simulation in the same process.
    """
    with _SIMULATOR_LOCK:
        if _active is not None:
            _active.suspend()


class SynchronousDomain:
    """HDL blocks clocked by one clock, simulated with MyHDL.

    ``elaborate(clock)`` must return the block instances to simulate,
    built over the bank's signals and the given clock signal. It is called
    again whenever the domain (re)starts its Simulation, so every piece of
    state must live in bank signals.

    Subscribe the domain to a Clock; each clock tick is one rising edge.
    When listeners are registered the domain runs edge by edge and calls
    each listener with the edge index and the names of the signals that
    changed on that edge.
    """

    def __init__(self, signals: SignalBank, elaborate: Elaborator):
        self._signals = signals
        self._elaborate = elaborate
        self._sim: Optional[Simulation] = None
        self._listeners: List[EdgeListener] = []
        self._edge_count = 0

    @property
    def signals(self) -> SignalBank:
        return self._signals

    @property
    def edge_count(self) -> int:
        return self._edge_count

    @property
    def active(self) -> bool:
        """True while this domain owns the running MyHDL Simulation."""
        return self._sim is not None

    def add_listener(self, listener: EdgeListener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove_listener(self, listener: EdgeListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def edge(self) -> List[str]:
        """Run one rising edge. Returns the names of changed signals."""
        before = self._signals.snapshot()
        self._run(1)
        after = self._signals.snapshot()
        changed = [name for name, value in after.items() if before[name] != value]
        for listener in list(self._listeners):
            listener(self._edge_count, changed)
        return changed

    def tick(self, cycles: int = 1) -> None:
        if cycles <= 0:
            return
        if self._listeners:
            for _ in range(cycles):
                self.edge()
        else:
            self._run(cycles)

    def reset(self) -> None:
        """Back to power-on: every signal at its reset value, no edges run."""
        with _SIMULATOR_LOCK:
            self._quit()
            self._signals.reset()
            self._edge_count = 0
        logger.debug(f"Domain reset ({len(self._signals)} signals)")

    def suspend(self) -> None:
        """Give up the simulator, keeping the current signal values."""
        with _SIMULATOR_LOCK:
            if self._sim is None:
                return
            self._signals.freeze()
            self._quit()
        logger.debug("Domain suspended")

    def _quit(self) -> None:
        global _active
        if self._sim is None:
            return
        self._sim.quit()
        self._sim = None
        if _active is self:
            _active = None

    def _activate(self) -> None:
        global _active
        if self._sim is not None:
            return
        if _active is not None:
            _active.suspend()

        # A fresh clock per Simulation: waiters left on an old clock never fire.
        clock = Signal(bool(0))
        self._sim = Simulation(self._elaborate(clock), clock_driver(clock))
        _active = self

        for name, value in self._signals.thaw().items():
            self._signals.get(name).next = value
        # Settle combinational logic; the first edge is still ahead.
        self._sim.run(1, quiet=1)

    def _run(self, cycles: int) -> None:
        with _SIMULATOR_LOCK:
            self._activate()
            for name, value in self._signals.take_pending().items():
                self._signals.get(name).next = value
            self._sim.run(cycles * CLOCK_PERIOD, quiet=1)
            self._edge_count += cycles
