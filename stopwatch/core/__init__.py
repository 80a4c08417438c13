"""Core modules for the stopwatch model.

Core infrastructure shared by every design:
- signal: named MyHDL signals of a design
- clock: pub/sub clock
- domain: MyHDL simulation of a design's clocked blocks
- design: design registry and factory (Design ABC is in interfaces)
"""

from stopwatch.core.clock import Clock
from stopwatch.core.design import (
    DesignRegistry,
    create_design,
    list_available_designs,
    register_design,
)
from stopwatch.core.domain import SynchronousDomain, release_simulator
from stopwatch.core.exceptions import (
    ConfigurationError,
    DesignError,
    SignalError,
    SignalWidthError,
    StopwatchError,
    UnknownSignalError,
)
from stopwatch.core.signal import SignalBank, SignalDescriptor, make_reset, make_signal
from stopwatch.core.simulation_engine import SimulationEngine

__all__ = [
    # Signals
    "SignalBank",
    "SignalDescriptor",
    "make_signal",
    "make_reset",
    # Clocking
    "Clock",
    "SynchronousDomain",
    "release_simulator",
    # Simulation engine
    "SimulationEngine",
    # Design registry
    "DesignRegistry",
    "create_design",
    "list_available_designs",
    "register_design",
    # Errors
    "StopwatchError",
    "ConfigurationError",
    "DesignError",
    "SignalError",
    "SignalWidthError",
    "UnknownSignalError",
]
