"""GUI application entry point."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from PySide6 import QtWidgets

from stopwatch.designs.stopwatch.design import StopWatch
from stopwatch_gui.backend import DesignBackend
from stopwatch_gui.config import load_gui_config
from stopwatch_gui.controller import SimulationController, SystemMonitor
from stopwatch_gui.registry import default_registry
from stopwatch_gui.view.main_window import MainWindow

DEFAULT_GUI_CONFIG = Path(__file__).parent / "boards" / "stopwatch.yaml"


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Stopwatch GUI")
    parser.add_argument("--config", default=None, help="Path to design config YAML")
    parser.add_argument("--gui-config", default=None, help="Path to GUI layout YAML")
    parser.add_argument(
        "--cycles",
        type=int,
        default=None,
        help="Clock edges per GUI tick (default: real time)",
    )
    parser.add_argument("--tick-ms", type=int, default=100, help="GUI tick interval (ms)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    return parser.parse_args(argv)


def cycles_per_gui_tick(frequency: int, tick_ms: int) -> int:
    """Clock edges to run per GUI tick so the watch keeps real time."""
    return max(1, round(frequency * tick_ms / 1000))


def run_gui(
    argv: list[str] | None = None,
    *,
    design: StopWatch | None = None,
    lock=None,
    external_clock: bool = False,
) -> int:
    args = _parse_args(argv if argv is not None else sys.argv[1:])
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    if design is None:
        design = StopWatch(config_path=args.config)
        design.reset()

    gui_config = load_gui_config(args.gui_config or DEFAULT_GUI_CONFIG)

    registry = default_registry()
    component_instances = [registry.create(c) for c in gui_config.components]
    controllers = [c.controller for c in component_instances]

    backend = DesignBackend(design, lock=lock)
    controller = SimulationController(backend, controllers, monitor=SystemMonitor())

    cycles = args.cycles
    if cycles is None:
        cycles = cycles_per_gui_tick(design.clock.frequency, args.tick_ms)

    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication(sys.argv)
    window = MainWindow(
        controller,
        gui_config,
        component_instances,
        cycles_per_tick=cycles,
        tick_ms=args.tick_ms,
        external_clock=external_clock,
    )
    window.resize(gui_config.canvas.width + 260, gui_config.canvas.height + 120)
    window.show()
    return app.exec()


def main() -> None:
    raise SystemExit(run_gui())


if __name__ == "__main__":
    main()
