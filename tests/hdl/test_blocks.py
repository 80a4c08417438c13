"""The HDL blocks in plain MyHDL testbenches, outside any SynchronousDomain."""

import pytest
from myhdl import Signal, StopSimulation, block, delay, instance, intbv

from stopwatch.core.domain import clock_driver, release_simulator
from stopwatch.core.signal import make_reset
from stopwatch.designs.stopwatch.bcd2led import Bcd2Led, encoder_rom
from stopwatch.designs.stopwatch.design import make_internals, stopwatch_top
from stopwatch.designs.stopwatch.seven_segment import encode


@pytest.fixture(autouse=True)
def free_simulator():
    release_simulator()


def test_encoder_matches_encode(stopwatch_config):
    display = stopwatch_config.display
    results = {}

    @block
    def bench():
        clock = Signal(bool(0))
        reset = make_reset()
        bcd = Signal(intbv(0)[4:])
        led = Signal(intbv(display.blank)[7:])
        dut = Bcd2Led(led, bcd, reset, clock, encoder_rom(display))

        @instance
        def stimulus():
            for value in range(16):
                bcd.next = value
                yield delay(1)
                clock.next = 1
                yield delay(1)
                clock.next = 0
                yield delay(1)
                results[value] = int(led)
            raise StopSimulation()

        return dut, stimulus

    bench().run_sim(quiet=1)
    assert results == {value: encode(value, display) for value in range(16)}


def test_stopwatch_counts_and_wraps(stopwatch_config):
    display = stopwatch_config.display
    internals = make_internals(stopwatch_config)
    samples = []

    @block
    def bench():
        clock = Signal(bool(0))
        reset = make_reset()
        startstop = Signal(bool(0))
        tens_led = Signal(intbv(display.blank)[7:])
        ones_led = Signal(intbv(display.blank)[7:])
        tenths_led = Signal(intbv(display.blank)[7:])
        dut = stopwatch_top(
            tens_led,
            ones_led,
            tenths_led,
            startstop,
            reset,
            clock,
            stopwatch_config,
            internals=internals,
        )
        clk = clock_driver(clock)

        @instance
        def stimulus():
            startstop.next = 1
            yield clock.negedge
            startstop.next = 0
            for _ in range(600):
                yield clock.negedge
                digits = (int(internals["tens"]), int(internals["ones"]), int(internals["tenths"]))
                leds = (int(tens_led), int(ones_led), int(tenths_led))
                samples.append((digits, leds))
            raise StopSimulation()

        return dut, clk, stimulus

    bench().run_sim(quiet=1)

    values = [tens * 100 + ones * 10 + tenths for (tens, ones, tenths), _ in samples]
    assert values[:3] == [2, 3, 4]
    assert values[values.index(599) + 1] == 0

    # each encoder shows the digit the counter held one edge earlier
    for (previous, _), (_, leds) in zip(samples, samples[1:]):
        assert leds == tuple(encode(digit, display) for digit in previous)
