"""Clock prescaler producing the tenth-of-a-second tick strobe."""

from __future__ import annotations

from myhdl import Signal, always_comb, always_seq, block, intbv


def prescale_width(cycles_per_tick: int) -> int:
    """Bits needed to count 0 .. cycles_per_tick - 1."""
    return max(1, (cycles_per_tick - 1).bit_length())


@block
def Prescaler(tick, reset, clock, cycles_per_tick, count=None):
    """Free-running divider.

    ``tick`` is high on the last of every ``cycles_per_tick`` clock
    cycles, so with one cycle per tick it is always high and ``count``
    never leaves zero.
    """
    if cycles_per_tick < 1:
        raise ValueError("cycles_per_tick must be >= 1")
    if count is None:
        count = Signal(intbv(0)[prescale_width(cycles_per_tick) :])
    elif cycles_per_tick > 1 << len(count):
        raise ValueError(f"Prescaler count is too narrow for {cycles_per_tick} cycles")
    last = cycles_per_tick - 1

    @always_comb
    def strobe():
        tick.next = count == last

    @always_seq(clock.posedge, reset=reset)
    def logic():
        if count == last:
            count.next = 0
        else:
            count.next = count + 1

    return strobe, logic
