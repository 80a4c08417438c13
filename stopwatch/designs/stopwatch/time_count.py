"""BCD time counter with start/stop toggle and synchronous reset."""

from __future__ import annotations

import logging

from myhdl import Signal, always, always_seq, block

logger = logging.getLogger(__name__)


@block
def TimeCount(
    tens, ones, tenths, startstop, tick, reset, clock, tens_max=5, running=None, seen=None
):
    """Counts tens of seconds, seconds and tenths of seconds.

    Each rising edge:

    - reset high: clear the digits, ``running`` and ``seen``; nothing else
      happens on that edge.
    - startstop high and not yet ``seen``: toggle ``running``. ``seen``
      follows startstop, so a held button toggles only once.
    - running and ``tick`` high: advance tenths with decimal carry into
      ones and tens; past ``tens_max``:9.9 the counter wraps to zero.

    The toggle takes effect on the edge it is seen, so the press that
    starts the counter also counts if it lands on a tick. ``running`` and
    ``seen`` are internal registers unless the caller passes signals to
    observe them.
    """
    if running is None:
        running = Signal(bool(0))
    if seen is None:
        seen = Signal(bool(0))

    @always_seq(clock.posedge, reset=reset)
    def logic():
        seen.next = startstop
        counting = bool(running)
        if startstop and not seen:
            counting = not running
        running.next = counting

        if counting and tick:
            if tenths == 9:
                tenths.next = 0
                if ones == 9:
                    ones.next = 0
                    if tens == tens_max:
                        tens.next = 0
                    else:
                        tens.next = tens + 1
                else:
                    ones.next = ones + 1
            else:
                tenths.next = tenths + 1

    return logic


@block
def time_count_monitor(tens, ones, tenths, running, reset, clock, tens_max=5, name="timecount"):
    """Logs start/stop toggles and the wrap past tens_max:9.9.

    Simulation only: samples the registers before each rising edge and
    compares them with the values on the following falling edge.
    """
    before = {}

    @always(clock.posedge)
    def sample():
        before["digits"] = (int(tens), int(ones), int(tenths))
        before["running"] = bool(running)

    @always(clock.negedge)
    def report():
        if not before or reset:
            return
        if bool(running) != before["running"]:
            logger.debug(f"{name}: {'started' if running else 'stopped'}")
        digits = (int(tens), int(ones), int(tenths))
        if before["digits"] == (tens_max, 9, 9) and digits == (0, 0, 0):
            logger.info(f"{name}: wrapped past {tens_max}9.9")

    return sample, report
