import json
import socket
import threading

import pytest

from stopwatch.control.server import ControlServer
from stopwatch.control.session import PROTOCOL_VERSION, ControlSession, WatchState


@pytest.fixture
def session(watch):
    return ControlSession(watch)


def test_click_and_state(session):
    state = session.click("startstop")
    assert isinstance(state, WatchState)
    assert state.running is True
    assert state.digits == (0, 0, 1)
    assert state.cycle == 1

    state = session.step(9)
    assert state.digits == (0, 1, 0)
    assert state.seconds == pytest.approx(1.0)
    assert state.display == (0, 0, 9)


def test_run_seconds(session):
    session.click("startstop")
    state = session.run_seconds(2.0)
    assert state.cycle == 21
    assert state.digits == (0, 2, 1)


def test_invalid_arguments(session):
    with pytest.raises(ValueError):
        session.step(-1)
    with pytest.raises(ValueError):
        session.click("startstop", hold=0)


def test_handle_hello(session):
    response = session.handle_request({"id": 1, "cmd": "hello"})
    assert response["ok"] is True
    assert response["id"] == 1
    assert response["result"]["version"] == PROTOCOL_VERSION
    assert response["result"]["design"] == "StopWatch"
    assert sorted(response["result"]["inputs"]) == ["reset", "startstop"]


def test_handle_press_step_read(session):
    assert session.handle_request({"cmd": "press"})["ok"]
    result = session.handle_request({"cmd": "step", "cycles": 5})["result"]
    assert result["running"] is True
    assert session.handle_request({"cmd": "release"})["ok"]

    response = session.handle_request({"cmd": "read", "name": "tenths"})
    assert response["result"] == {"value": 5}


def test_handle_click_and_display(session):
    session.handle_request({"cmd": "click", "hold": 1})
    session.handle_request({"cmd": "step", "cycles": 3})
    response = session.handle_request({"cmd": "display"})
    assert response["ok"]
    assert response["result"]["digits"] == [0, 0, 3]
    assert len(response["result"]["text"].split("\n")) == 3


def test_handle_reset(session):
    session.handle_request({"cmd": "click"})
    session.handle_request({"cmd": "step", "cycles": 10})
    assert session.handle_request({"cmd": "reset"})["ok"]
    state = session.handle_request({"cmd": "state"})["result"]
    assert state["digits"] == (0, 0, 0)
    assert state["cycle"] == 0


def test_handle_signals(session):
    result = session.handle_request({"cmd": "signals"})["result"]
    assert set(result["signals"]) >= {"tens", "ones", "tenths", "tens_led", "running"}


@pytest.mark.parametrize(
    "request_, fragment",
    [
        ({"cmd": "fly"}, "Unknown command"),
        ({"cmd": 3}, "must be a string"),
        ({"cmd": "read", "name": "minutes"}, "Unknown signal"),
        ({"cmd": "write", "name": "tenths", "value": 1}, "not an input port"),
        ({"cmd": "write", "name": "startstop", "value": 3}, "does not fit"),
        ({"cmd": "run_seconds"}, "seconds"),
    ],
)
def test_handle_errors(session, request_, fragment):
    response = session.handle_request({"id": 7, **request_})
    assert response["ok"] is False
    assert response["id"] == 7
    assert fragment in response["error"]


def test_server_round_trip(session):
    server = ControlServer("127.0.0.1", 0, session)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        host, port = server.server_address
        with socket.create_connection((host, port), timeout=5) as conn:
            stream = conn.makefile("rwb")
            for request in ({"id": 1, "cmd": "click"}, "not json", [1, 2]):
                line = request if isinstance(request, str) else json.dumps(request)
                stream.write((line + "\n").encode("utf-8"))
            stream.flush()
            replies = [json.loads(stream.readline()) for _ in range(3)]
    finally:
        server.shutdown()
        server.server_close()

    assert replies[0]["ok"] is True
    assert replies[0]["result"]["digits"] == [0, 0, 1]
    assert replies[1]["ok"] is False
    assert "Invalid JSON" in replies[1]["error"]
    assert replies[2] == {"ok": False, "error": "Request must be a JSON object"}
