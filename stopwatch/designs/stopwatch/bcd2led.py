"""Registered BCD digit to seven-segment encoder."""

from __future__ import annotations

import logging
from typing import Optional

from myhdl import always, always_seq, block

from stopwatch.designs.stopwatch.seven_segment import encode
from stopwatch.utils.config_loader import DisplayConfig

logger = logging.getLogger(__name__)


def encoder_rom(display: DisplayConfig, digit_width: int = 4) -> tuple[int, ...]:
    """Pattern for every value of a digit_width-bit input.

    Values 10 and up map to the blank pattern, so the last entry (the
    ``default`` arm of the generated case statement) is always blank.
    """
    return tuple(encode(value, display) for value in range(1 << digit_width))


@block
def Bcd2Led(led, bcd, reset, clock, code):
    """Drives ``led`` with ``code[bcd]`` on every rising edge.

    ``code`` is a tuple from encoder_rom(). Reset loads the reset value of
    ``led``, which the design sets to the blank pattern.
    """

    @always_seq(clock.posedge, reset=reset)
    def logic():
        led.next = code[int(bcd)]

    return logic


@block
def bcd2led_monitor(bcd, reset, clock, name="bcd2led", warned: Optional[set[int]] = None):
    """Warns once per input value that is not a decimal digit. Simulation only."""
    if warned is None:
        warned = set()

    @always(clock.posedge)
    def check():
        value = int(bcd)
        if value > 9 and not reset and value not in warned:
            warned.add(value)
            logger.warning(f"{name}: input {value} is not a decimal digit, showing blank")

    return check
