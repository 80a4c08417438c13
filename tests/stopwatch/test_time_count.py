import logging

import pytest

from stopwatch.core.domain import SynchronousDomain
from stopwatch.core.signal import SignalBank
from stopwatch.designs.stopwatch.time_count import TimeCount, time_count_monitor

DIGITS = ("tens", "ones", "tenths")


class Harness:
    """TimeCount alone in a clock domain, tick strobe driven by the test."""

    def __init__(self, tens_max=5):
        self.bank = SignalBank()
        for name in DIGITS:
            self.bank.create(name, width=4)
        for name in ("running", "seen", "startstop"):
            self.bank.create(name)
        self.bank.create("tick", reset_value=1)
        self.bank.create_reset("reset")
        self.tens_max = tens_max
        self.domain = SynchronousDomain(self.bank, self._elaborate)

    def _elaborate(self, clock):
        get = self.bank.get
        counter = TimeCount(
            get("tens"),
            get("ones"),
            get("tenths"),
            get("startstop"),
            get("tick"),
            get("reset"),
            clock,
            tens_max=self.tens_max,
            running=get("running"),
            seen=get("seen"),
        )
        monitor = time_count_monitor(
            get("tens"),
            get("ones"),
            get("tenths"),
            get("running"),
            get("reset"),
            clock,
            tens_max=self.tens_max,
        )
        return [counter, monitor]

    def edge(self, startstop=0, reset=0, n=1):
        self.bank.drive("startstop", startstop)
        self.bank.drive("reset", reset)
        self.domain.tick(n)

    def strobe(self, value):
        self.bank.drive("tick", value)

    def digits(self):
        return tuple(self.bank.read(n) for n in DIGITS)

    def value(self):
        tens, ones, tenths = self.digits()
        return tens * 100 + ones * 10 + tenths

    def load(self, tens, ones, tenths):
        for name, v in zip(DIGITS, (tens, ones, tenths)):
            self.bank.drive(name, v)
        self.bank.drive("running", 1)


@pytest.fixture
def tc():
    return Harness()


def test_idle_counter_holds(tc):
    tc.edge(n=5)
    assert tc.digits() == (0, 0, 0)
    assert tc.bank.read("running") == 0


def test_press_starts_and_counts_same_edge(tc):
    tc.edge(startstop=1)
    assert tc.bank.read("running") == 1
    assert tc.bank.read("seen") == 1
    assert tc.value() == 1


def test_held_press_toggles_once(tc):
    tc.edge(startstop=1, n=20)
    assert tc.bank.read("running") == 1
    assert tc.value() == 20

    tc.edge(startstop=0)
    assert tc.bank.read("seen") == 0
    assert tc.bank.read("running") == 1


def test_second_press_stops(tc):
    tc.edge(startstop=1)
    tc.edge(n=4)
    tc.edge(startstop=1)
    assert tc.bank.read("running") == 0
    assert tc.value() == 5

    tc.edge(n=10)
    assert tc.value() == 5


def test_count_advances_only_on_strobe(tc):
    tc.edge(startstop=1)
    tc.strobe(0)
    tc.edge(n=3)
    assert tc.value() == 1
    tc.strobe(1)
    tc.edge()
    assert tc.value() == 2


@pytest.mark.parametrize(
    "start, expected",
    [
        ((0, 0, 8), (0, 0, 9)),
        ((0, 0, 9), (0, 1, 0)),
        ((0, 9, 9), (1, 0, 0)),
        ((4, 9, 9), (5, 0, 0)),
        ((5, 8, 9), (5, 9, 0)),
    ],
)
def test_decimal_carry(tc, start, expected):
    tc.load(*start)
    tc.edge()
    assert tc.digits() == expected


def test_wrap_past_59_9(tc, caplog):
    tc.load(5, 9, 9)
    with caplog.at_level(logging.INFO, logger="stopwatch.designs.stopwatch.time_count"):
        tc.edge()
    assert tc.digits() == (0, 0, 0)
    assert tc.bank.read("running") == 1
    assert "wrapped" in caplog.text


def test_wrap_respects_tens_max():
    tc = Harness(tens_max=2)
    tc.load(2, 9, 9)
    tc.edge()
    assert tc.digits() == (0, 0, 0)


def test_reset_clears_everything(tc):
    tc.edge(startstop=1)
    tc.edge(n=7)
    tc.edge(reset=1)
    assert tc.digits() == (0, 0, 0)
    assert tc.bank.read("running") == 0
    assert tc.bank.read("seen") == 0


def test_reset_has_priority_over_startstop(tc):
    tc.edge(startstop=1, reset=1, n=3)
    assert tc.digits() == (0, 0, 0)
    assert tc.bank.read("running") == 0
    assert tc.bank.read("seen") == 0

    # startstop still held after reset drops: seen was cleared, so it toggles
    tc.edge(startstop=1)
    assert tc.bank.read("running") == 1


def test_start_and_stop_are_logged(tc, caplog):
    with caplog.at_level(logging.DEBUG, logger="stopwatch.designs.stopwatch.time_count"):
        tc.edge(startstop=1)
        tc.edge(n=2)
        tc.edge(startstop=1)
    messages = [r.getMessage() for r in caplog.records if r.name.endswith("time_count")]
    assert messages == ["timecount: started", "timecount: stopped"]


def test_running_and_seen_default_to_internal_registers():
    bank = SignalBank()
    for name in DIGITS:
        bank.create(name, width=4)
    bank.create("startstop")
    bank.create("tick", reset_value=1)
    bank.create_reset("reset")
    get = bank.get

    def elaborate(clock):
        counter = TimeCount(
            get("tens"), get("ones"), get("tenths"), get("startstop"), get("tick"), get("reset"), clock
        )
        return [counter]

    domain = SynchronousDomain(bank, elaborate)
    bank.drive("startstop", 1)
    domain.tick(3)
    assert tuple(bank.read(n) for n in DIGITS) == (0, 0, 3)
