"""Simulation engine for orchestrating design execution."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from stopwatch.interfaces.design import Design


class SimulationEngine:
    """Minimal simulation engine.

    This delegates execution to the design's step/reset methods and adds
    time-based helpers on top of the design clock.
    """

    def run(self, design: "Design", cycles: int = 1) -> None:
        """Run the design for the given number of clock edges."""
        self.step(design, cycles)

    def step(self, design: "Design", cycles: int = 1) -> None:
        """Advance the design by a number of clock edges."""
        design.step(cycles)

    def run_seconds(self, design: "Design", seconds: float) -> int:
        """Advance the design by a simulated duration. Returns edges run."""
        cycles = design.clock.cycles_for(seconds)
        design.step(cycles)
        return cycles

    def pulse(self, design: "Design", name: str, hold: int = 1) -> None:
        """Drive an input high for `hold` edges, then low again."""
        if hold < 1:
            raise ValueError("hold must be >= 1")
        design.write(name, 1)
        design.step(hold)
        design.write(name, 0)

    def reset(self, design: "Design") -> None:
        """Reset the design."""
        design.reset()
