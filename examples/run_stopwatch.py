import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

# Ensure local repo package is used even if another "stopwatch" is on PYTHONPATH.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from stopwatch import SimulationEngine, StopWatch


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the stopwatch design on the console.")
    parser.add_argument("--config", default=None, help="Path to design config YAML")
    parser.add_argument(
        "--seconds",
        type=float,
        default=3.0,
        help="Simulated seconds to run after the first press",
    )
    parser.add_argument(
        "--stop-at",
        type=float,
        default=None,
        help="Press start/stop again after this many seconds",
    )
    parser.add_argument(
        "--every",
        type=float,
        default=0.5,
        help="Print the display every N simulated seconds",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    args = parser.parse_args(argv)
    if args.every <= 0:
        parser.error("--every must be positive")
    return args


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    watch = StopWatch(config_path=args.config)
    engine = SimulationEngine()
    engine.reset(watch)
    engine.pulse(watch, "startstop")

    elapsed = 0.0
    stopped = False
    while elapsed < args.seconds:
        engine.run_seconds(watch, args.every)
        elapsed += args.every
        if args.stop_at is not None and not stopped and elapsed >= args.stop_at:
            engine.pulse(watch, "startstop")
            stopped = True

        print(f"t={watch.clock.elapsed_seconds:6.1f}s running={watch.running}")
        print(watch.render())
        print()


if __name__ == "__main__":
    main()
