import threading

import pytest

from stopwatch.core.exceptions import SignalError
from stopwatch_gui.backend import DesignBackend


@pytest.fixture
def backend(watch):
    return DesignBackend(watch)


def test_backend_drives_design(backend):
    assert backend.design_name == "StopWatch"
    assert backend.display_config.active_low is True

    backend.write("startstop", 1)
    backend.step(1)
    backend.write("startstop", 0)
    backend.step(4)

    assert backend.read("tenths") == 5
    assert backend.cycle_count() == 5
    assert backend.elapsed_seconds() == pytest.approx(0.5)
    assert backend.signals()["running"] == 1
    assert backend.running() is True
    assert backend.display_value() == 4

    backend.reset()
    assert backend.cycle_count() == 0
    assert backend.read("tenths") == 0


def test_backend_rejects_output_writes(backend):
    with pytest.raises(SignalError):
        backend.write("tens_led", 0)


def test_backend_uses_lock(watch):
    class CountingLock:
        def __init__(self):
            self.inner = threading.RLock()
            self.entries = 0

        def __enter__(self):
            self.entries += 1
            return self.inner.__enter__()

        def __exit__(self, *exc):
            return self.inner.__exit__(*exc)

    lock = CountingLock()
    backend = DesignBackend(watch, lock=lock)
    backend.step(2)
    backend.read("tenths")
    assert lock.entries == 2
