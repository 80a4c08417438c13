import logging

import pytest

from stopwatch.core.domain import SynchronousDomain
from stopwatch.core.signal import SignalBank
from stopwatch.designs.stopwatch.bcd2led import Bcd2Led, bcd2led_monitor, encoder_rom
from stopwatch.designs.stopwatch.seven_segment import encode

LOGGER = "stopwatch.designs.stopwatch.bcd2led"


class Encoder:
    """One Bcd2Led and its warning monitor in a clock domain."""

    def __init__(self, display):
        self.bank = SignalBank()
        self.bank.create("led", width=7, reset_value=display.blank)
        self.bank.create("bcd", width=4)
        self.bank.create_reset("reset")
        self.code = encoder_rom(display)
        self.warned = set()
        self.domain = SynchronousDomain(self.bank, self._elaborate)

    def _elaborate(self, clock):
        get = self.bank.get
        encoder = Bcd2Led(get("led"), get("bcd"), get("reset"), clock, self.code)
        monitor = bcd2led_monitor(get("bcd"), get("reset"), clock, warned=self.warned)
        return [encoder, monitor]


@pytest.fixture
def encoder(stopwatch_config):
    return Encoder(stopwatch_config.display)


def test_encoder_rom(stopwatch_config):
    display = stopwatch_config.display
    code = encoder_rom(display)
    assert len(code) == 16
    assert code[:10] == display.encoding
    assert set(code[10:]) == {display.blank}
    assert len(encoder_rom(display, digit_width=5)) == 32


@pytest.mark.parametrize(
    "digit, pattern",
    [
        (0, 0b1000000),
        (1, 0b1111001),
        (2, 0b0100100),
        (5, 0b0010010),
        (7, 0b1111000),
        (8, 0b0000000),
        (9, 0b0010000),
    ],
)
def test_digit_patterns(encoder, digit, pattern):
    encoder.bank.drive("bcd", digit)
    encoder.domain.edge()
    assert encoder.bank.read("led") == pattern


def test_every_value_matches_encode(encoder, stopwatch_config):
    for value in range(16):
        encoder.bank.drive("bcd", value)
        encoder.domain.edge()
        assert encoder.bank.read("led") == encode(value, stopwatch_config.display)


def test_output_is_registered(encoder):
    encoder.bank.drive("bcd", 3)
    assert encoder.bank.read("led") == 0b1111111
    encoder.domain.edge()
    assert encoder.bank.read("led") == 0b0110000


def test_reset_blanks(encoder):
    encoder.bank.drive("bcd", 4)
    encoder.domain.edge()
    encoder.bank.drive("reset", 1)
    encoder.domain.edge()
    assert encoder.bank.read("led") == 0b1111111


def test_out_of_range_shows_blank_and_warns_once(encoder, caplog):
    encoder.bank.drive("bcd", 12)
    with caplog.at_level(logging.WARNING, logger=LOGGER):
        encoder.domain.tick(3)
    assert encoder.bank.read("led") == 0b1111111
    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert len(warnings) == 1
    assert "12" in warnings[0].getMessage()

    encoder.warned.clear()
    caplog.clear()
    with caplog.at_level(logging.WARNING, logger=LOGGER):
        encoder.domain.edge()
    assert len(caplog.records) == 1


def test_no_warning_while_reset(encoder, caplog):
    encoder.bank.drive("bcd", 15)
    encoder.bank.drive("reset", 1)
    with caplog.at_level(logging.WARNING, logger=LOGGER):
        encoder.domain.tick(2)
    assert caplog.records == []
    assert encoder.warned == set()
