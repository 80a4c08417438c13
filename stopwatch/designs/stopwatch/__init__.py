"""Stopwatch design: TimeCount counter, Bcd2Led encoders and the StopWatch top."""

from stopwatch.core.design import register_design
from stopwatch.designs.stopwatch.bcd2led import Bcd2Led
from stopwatch.designs.stopwatch.design import StopWatch
from stopwatch.designs.stopwatch.prescaler import Prescaler
from stopwatch.designs.stopwatch.time_count import TimeCount

register_design("stopwatch", StopWatch)

__all__ = ["Bcd2Led", "Prescaler", "StopWatch", "TimeCount"]
