"""Stopwatch HDL model.

Cycle-accurate simulation of a 00.0-59.9 stopwatch: a BCD time counter
driving three seven-segment encoders as MyHDL blocks, Verilog conversion
and a JSON control server.

Getting started:
    from stopwatch import create_design

    watch = create_design("stopwatch")
    watch.reset()
    watch.click("startstop")
    watch.step(25)
    print(watch.render())
"""

# Core abstractions
from stopwatch.interfaces.design import Design
from stopwatch.core.clock import Clock
from stopwatch.core.design import (
    create_design,
    list_available_designs,
    verify_designs_registered,
)
from stopwatch.core.simulation_engine import SimulationEngine
from stopwatch.utils.config_loader import StopwatchConfig, get_config, load_config

# Design implementations (auto-registers when imported)
from stopwatch.designs.stopwatch import Bcd2Led, StopWatch, TimeCount
from stopwatch.hdl.verilog import emit_verilog, write_verilog

__all__ = [
    # Core
    "Design",
    "Clock",
    "SimulationEngine",
    # Configuration
    "StopwatchConfig",
    "get_config",
    "load_config",
    # Design creation
    "create_design",
    "list_available_designs",
    "verify_designs_registered",
    # Concrete design
    "StopWatch",
    "TimeCount",
    "Bcd2Led",
    # HDL output
    "emit_verilog",
    "write_verilog",
]
