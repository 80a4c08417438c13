"""StopWatch top-level design.

``stopwatch_top`` is the MyHDL block that wires together:
- a clock prescaler producing the tenth-of-a-second tick
- the TimeCount BCD counter
- three Bcd2Led encoders, one per digit

The StopWatch class simulates it cycle by cycle and exposes its ports and
internal registers by name.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from myhdl import Signal, block, intbv
from overrides import override  # type: ignore

from stopwatch.core.clock import Clock
from stopwatch.core.domain import SynchronousDomain
from stopwatch.core.exceptions import SignalError
from stopwatch.core.signal import SignalBank, SignalDescriptor
from stopwatch.designs.stopwatch.bcd2led import Bcd2Led, bcd2led_monitor, encoder_rom
from stopwatch.designs.stopwatch.prescaler import Prescaler, prescale_width
from stopwatch.designs.stopwatch.seven_segment import decode, render as render_patterns
from stopwatch.designs.stopwatch.time_count import TimeCount, time_count_monitor
from stopwatch.interfaces.design import Design
from stopwatch.utils.config_loader import (
    SEGMENT_COUNT,
    StopwatchConfig,
    get_config,
    load_config,
)

logger = logging.getLogger(__name__)

DIGIT_NAMES = ("tens", "ones", "tenths")


def make_internals(config: StopwatchConfig) -> dict[str, Any]:
    """Signals inside the top level: the digits, the counter state and the prescaler."""
    width = config.counter.digit_width
    cycles = config.clock.cycles_per_tick
    return {
        "tens": Signal(intbv(0)[width:]),
        "ones": Signal(intbv(0)[width:]),
        "tenths": Signal(intbv(0)[width:]),
        "running": Signal(bool(0)),
        "seen": Signal(bool(0)),
        "prescale": Signal(intbv(0)[prescale_width(cycles) :]),
        "tick": Signal(bool(cycles == 1)),
    }


@block
def stopwatch_top(tens_led, ones_led, tenths_led, startstop, reset, clock, config, internals=None):
    """The StopWatch module. ``internals`` comes from make_internals()."""
    if internals is None:
        internals = make_internals(config)
    tens = internals["tens"]
    ones = internals["ones"]
    tenths = internals["tenths"]
    running = internals["running"]
    seen = internals["seen"]
    prescale = internals["prescale"]
    tick = internals["tick"]
    code = encoder_rom(config.display, config.counter.digit_width)

    prescaler = Prescaler(tick, reset, clock, config.clock.cycles_per_tick, count=prescale)
    timecount = TimeCount(
        tens,
        ones,
        tenths,
        startstop,
        tick,
        reset,
        clock,
        tens_max=config.counter.tens_max,
        running=running,
        seen=seen,
    )
    bcd2led_tens = Bcd2Led(tens_led, tens, reset, clock, code)
    bcd2led_ones = Bcd2Led(ones_led, ones, reset, clock, code)
    bcd2led_tenths = Bcd2Led(tenths_led, tenths, reset, clock, code)

    return prescaler, timecount, bcd2led_tens, bcd2led_ones, bcd2led_tenths


class StopWatch(Design):
    """Three-digit stopwatch counting 00.0 to 59.9 seconds."""

    def __init__(
        self,
        config: Optional[StopwatchConfig] = None,
        config_path: Optional[str] = None,
        **_kwargs: Any,
    ):
        if config is None:
            config = load_config(path=config_path) if config_path else get_config()
        self.config = config

        self._clock = Clock(config.clock.frequency)
        self._signals = SignalBank()
        self._ports: dict[str, SignalDescriptor] = {}
        self._warned: dict[str, set[int]] = {name: set() for name in DIGIT_NAMES}

        self._declare()
        self._domain = SynchronousDomain(self._signals, self._elaborate)
        self._clock.subscribe(self._domain)
        logger.debug(
            f"StopWatch built: {config.clock.frequency} Hz clock, "
            f"{config.clock.cycles_per_tick} cycles per tick"
        )

    def _declare(self) -> None:
        bank = self._signals
        bank.create("startstop")
        self._port("startstop", "input")
        bank.create_reset("reset")
        self._port("reset", "input")

        for name in DIGIT_NAMES:
            bank.create(f"{name}_led", width=SEGMENT_COUNT, reset_value=self.config.display.blank)
            self._port(f"{name}_led", "output")

        for name, signal in make_internals(self.config).items():
            bank.add(name, signal)

    def _port(self, name: str, direction: str) -> None:
        self._ports[name] = self._signals.descriptor(name, direction)  # type: ignore[arg-type]

    def _elaborate(self, clock: Any) -> list[Any]:
        get = self._signals.get
        internals = {name: get(name) for name in make_internals(self.config)}
        blocks = [
            stopwatch_top(
                get("tens_led"),
                get("ones_led"),
                get("tenths_led"),
                get("startstop"),
                get("reset"),
                clock,
                self.config,
                internals=internals,
            ),
            time_count_monitor(
                get("tens"),
                get("ones"),
                get("tenths"),
                get("running"),
                get("reset"),
                clock,
                tens_max=self.config.counter.tens_max,
            ),
        ]
        for name in DIGIT_NAMES:
            blocks.append(
                bcd2led_monitor(
                    get(name), get("reset"), clock, f"bcd2led_{name}", self._warned[name]
                )
            )
        return blocks

    @property
    @override
    def name(self) -> str:
        return "StopWatch"

    @property
    @override
    def clock(self) -> Clock:
        return self._clock

    @property
    @override
    def signals(self) -> SignalBank:
        return self._signals

    @property
    @override
    def ports(self) -> dict[str, SignalDescriptor]:
        return dict(self._ports)

    @property
    def domain(self) -> SynchronousDomain:
        return self._domain

    @override
    def reset(self) -> None:
        """Power-on reset: clears every signal and the cycle counter."""
        self._clock.reset()
        self._domain.reset()
        for warned in self._warned.values():
            warned.clear()
        logger.debug("StopWatch reset")

    @override
    def step(self, cycles: int = 1) -> None:
        self._clock.tick(cycles)

    @override
    def read(self, name: str) -> int:
        return self._signals.read(name)

    @override
    def write(self, name: str, value: int) -> None:
        desc = self._ports.get(name)
        if desc is None or desc.direction != "input":
            raise SignalError(f"'{name}' is not an input port", name=name)
        self._signals.drive(name, value)

    def press(self, name: str = "startstop") -> None:
        self.write(name, 1)

    def release(self, name: str = "startstop") -> None:
        self.write(name, 0)

    def click(self, name: str = "startstop", hold: int = 1) -> None:
        """Press an input, hold it for `hold` edges, then release it."""
        if hold < 1:
            raise ValueError("hold must be >= 1")
        self.press(name)
        self.step(hold)
        self.release(name)

    @property
    def running(self) -> bool:
        return bool(self.read("running"))

    def digits(self) -> tuple[int, int, int]:
        """(tens, ones, tenths) held by the counter."""
        tens, ones, tenths = (self.read(name) for name in DIGIT_NAMES)
        return tens, ones, tenths

    def time_value(self) -> int:
        """Counter value as tens*100 + ones*10 + tenths (599 is 59.9 s)."""
        tens, ones, tenths = self.digits()
        return tens * 100 + ones * 10 + tenths

    def elapsed_seconds(self) -> float:
        return self.time_value() / 10

    def led_patterns(self) -> tuple[int, int, int]:
        tens, ones, tenths = (self.read(f"{name}_led") for name in DIGIT_NAMES)
        return tens, ones, tenths

    def display(self) -> tuple[Optional[int], ...]:
        """Digits shown on the LEDs (None for a blank digit)."""
        return tuple(decode(p, self.config.display) for p in self.led_patterns())

    def display_value(self) -> Optional[int]:
        """Displayed number in the same units as time_value(), or None if blank."""
        shown = self.display()
        if any(d is None for d in shown):
            return None
        tens, ones, tenths = shown
        return tens * 100 + ones * 10 + tenths

    def render(self) -> str:
        """ASCII art of the three LED digits with a point before tenths."""
        return render_patterns(self.led_patterns(), self.config.display, points=(1,))
