"""Verilog output for the stopwatch design.

Every module is converted by MyHDL from the same blocks the simulation
runs: ``TimeCount``, ``bcd2led``, ``Prescaler`` and the ``StopWatch`` top
level. MyHDL flattens the hierarchy, so StopWatch.v is self-contained.

Usage:
    python -m stopwatch.hdl.verilog --out build/verilog
"""

from __future__ import annotations

import argparse
import logging
import tempfile
from pathlib import Path
from typing import Any, Callable, Optional

from myhdl import Signal, intbv

from stopwatch.core.signal import make_reset
from stopwatch.designs.stopwatch.bcd2led import Bcd2Led, encoder_rom
from stopwatch.designs.stopwatch.design import stopwatch_top
from stopwatch.designs.stopwatch.prescaler import Prescaler
from stopwatch.designs.stopwatch.time_count import TimeCount
from stopwatch.utils.config_loader import (
    SEGMENT_COUNT,
    StopwatchConfig,
    get_config,
    load_config,
)

logger = logging.getLogger(__name__)

MODULES = ("TimeCount", "bcd2led", "Prescaler", "StopWatch")


def _digit(config: StopwatchConfig) -> Signal:
    return Signal(intbv(0)[config.counter.digit_width :])


def _led(config: StopwatchConfig) -> Signal:
    return Signal(intbv(config.display.blank)[SEGMENT_COUNT:])


def _time_count(config: StopwatchConfig) -> Any:
    return TimeCount(
        _digit(config),
        _digit(config),
        _digit(config),
        Signal(bool(0)),
        Signal(bool(0)),
        make_reset(),
        Signal(bool(0)),
        tens_max=config.counter.tens_max,
    )


def _bcd2led(config: StopwatchConfig) -> Any:
    code = encoder_rom(config.display, config.counter.digit_width)
    return Bcd2Led(_led(config), _digit(config), make_reset(), Signal(bool(0)), code)


def _prescaler(config: StopwatchConfig) -> Any:
    return Prescaler(Signal(bool(0)), make_reset(), Signal(bool(0)), config.clock.cycles_per_tick)


def _stopwatch(config: StopwatchConfig) -> Any:
    return stopwatch_top(
        _led(config),
        _led(config),
        _led(config),
        Signal(bool(0)),
        make_reset(),
        Signal(bool(0)),
        config,
    )


_BUILDERS: dict[str, Callable[[StopwatchConfig], Any]] = {
    "TimeCount": _time_count,
    "bcd2led": _bcd2led,
    "Prescaler": _prescaler,
    "StopWatch": _stopwatch,
}


def convert_module(module: str, config: StopwatchConfig, directory: str | Path) -> Path:
    """Convert one module to ``directory/<module>.v`` and return the path."""
    if module not in _BUILDERS:
        raise ValueError(f"Unknown module '{module}'. Available: {', '.join(MODULES)}")
    instance = _BUILDERS[module](config)
    instance.convert(hdl="Verilog", path=str(directory), name=module, testbench=False)
    return Path(directory) / f"{module}.v"


def emit_verilog(config: Optional[StopwatchConfig] = None) -> dict[str, str]:
    """Generate every module. Returns file name -> Verilog text."""
    config = config or get_config()
    modules = {}
    with tempfile.TemporaryDirectory() as tmp:
        for module in MODULES:
            path = convert_module(module, config, tmp)
            modules[path.name] = path.read_text(encoding="utf-8")
    return modules


def write_verilog(
    out_dir: str | Path,
    config: Optional[StopwatchConfig] = None,
    single_file: Optional[str] = None,
) -> list[Path]:
    """Write the generated modules to out_dir.

    Args:
        out_dir: Output directory (created if missing).
        config: Design configuration; the bundled one if None.
        single_file: If set, concatenate all modules into this file name.

    Returns:
        Paths of the files written.
    """
    out = Path(out_dir)
    out.mkdir(parents=True, exist_ok=True)
    modules = emit_verilog(config)

    if single_file:
        modules = {single_file: "\n".join(modules.values())}

    written = []
    for filename, text in modules.items():
        path = out / filename
        path.write_text(text, encoding="utf-8")
        logger.info(f"Wrote {path}")
        written.append(path)
    return written


def _parse_args(argv: Optional[list[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate Verilog for the stopwatch design")
    parser.add_argument("--out", default="build/verilog", help="Output directory")
    parser.add_argument("--config", default=None, help="Path to design config YAML")
    parser.add_argument(
        "--single-file",
        default=None,
        help="Write all modules into one file with this name",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Log each file written")
    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING)

    config = load_config(path=args.config) if args.config else get_config()
    for path in write_verilog(args.out, config, single_file=args.single_file):
        print(path)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
