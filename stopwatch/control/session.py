"""Control session for driving a design from an external client."""

from __future__ import annotations

import logging
import threading
from dataclasses import asdict, dataclass
from typing import Any, Callable, Optional

from stopwatch.designs.stopwatch.design import StopWatch

logger = logging.getLogger(__name__)

PROTOCOL_VERSION = 1


@dataclass(frozen=True)
class WatchState:
    cycle: int
    running: bool
    digits: tuple[int, int, int]
    display: tuple[Optional[int], ...]
    seconds: float


class ControlSession:
    """Synchronous control session bound to a single stopwatch."""

    def __init__(self, design: StopWatch, lock: threading.RLock | None = None):
        self.design = design
        self._lock = lock or threading.RLock()

    def reset(self) -> None:
        with self._lock:
            self.design.reset()

    def press(self, name: str) -> None:
        with self._lock:
            self.design.press(name)

    def release(self, name: str) -> None:
        with self._lock:
            self.design.release(name)

    def click(self, name: str, hold: int = 1) -> WatchState:
        if hold < 1:
            raise ValueError("hold must be >= 1")
        with self._lock:
            self.design.click(name, hold)
            return self.state()

    def step(self, cycles: int = 1) -> WatchState:
        if cycles < 0:
            raise ValueError("cycles must be >= 0")
        with self._lock:
            self.design.step(cycles)
            return self.state()

    def run_seconds(self, seconds: float) -> WatchState:
        with self._lock:
            self.design.step(self.design.clock.cycles_for(seconds))
            return self.state()

    def read(self, name: str) -> int:
        with self._lock:
            return self.design.read(name)

    def write(self, name: str, value: int) -> None:
        with self._lock:
            self.design.write(name, value)

    def signals(self) -> dict[str, int]:
        with self._lock:
            return self.design.signals.snapshot()

    def state(self) -> WatchState:
        with self._lock:
            return WatchState(
                cycle=self.design.clock.cycle_count,
                running=self.design.running,
                digits=self.design.digits(),
                display=self.design.display(),
                seconds=self.design.elapsed_seconds(),
            )

    def handle_request(self, request: dict[str, Any]) -> dict[str, Any]:
        req_id = request.get("id")
        cmd = request.get("cmd")

        handlers: dict[str, Callable[[dict[str, Any]], dict[str, Any]]] = {
            "hello": self._cmd_hello,
            "reset": self._cmd_reset,
            "press": self._cmd_press,
            "release": self._cmd_release,
            "click": self._cmd_click,
            "step": self._cmd_step,
            "run_seconds": self._cmd_run_seconds,
            "read": self._cmd_read,
            "write": self._cmd_write,
            "signals": self._cmd_signals,
            "state": self._cmd_state,
            "display": self._cmd_display,
        }

        try:
            if not isinstance(cmd, str):
                raise ValueError("Command must be a string")
            handler = handlers.get(cmd)
            if handler is None:
                raise ValueError(f"Unknown command '{cmd}'")
            result = handler(request)
            return {"id": req_id, "ok": True, "result": result}
        except Exception as exc:  # pylint: disable=broad-exception-caught
            logger.warning(f"Request {cmd!r} failed: {exc}")
            return {"id": req_id, "ok": False, "error": str(exc)}

    def _cmd_hello(self, _request: dict[str, Any]) -> dict[str, Any]:
        return {
            "version": PROTOCOL_VERSION,
            "design": self.design.name,
            "inputs": [n for n, d in self.design.ports.items() if d.direction == "input"],
        }

    def _cmd_reset(self, _request: dict[str, Any]) -> dict[str, Any]:
        self.reset()
        return {"status": "ok"}

    def _cmd_press(self, request: dict[str, Any]) -> dict[str, Any]:
        self.press(str(request.get("name", "startstop")))
        return {"status": "ok"}

    def _cmd_release(self, request: dict[str, Any]) -> dict[str, Any]:
        self.release(str(request.get("name", "startstop")))
        return {"status": "ok"}

    def _cmd_click(self, request: dict[str, Any]) -> dict[str, Any]:
        state = self.click(str(request.get("name", "startstop")), int(request.get("hold", 1)))
        return asdict(state)

    def _cmd_step(self, request: dict[str, Any]) -> dict[str, Any]:
        return asdict(self.step(int(request.get("cycles", 1))))

    def _cmd_run_seconds(self, request: dict[str, Any]) -> dict[str, Any]:
        return asdict(self.run_seconds(float(request["seconds"])))

    def _cmd_read(self, request: dict[str, Any]) -> dict[str, Any]:
        return {"value": self.read(str(request["name"]))}

    def _cmd_write(self, request: dict[str, Any]) -> dict[str, Any]:
        self.write(str(request["name"]), int(request["value"]))
        return {"status": "ok"}

    def _cmd_signals(self, _request: dict[str, Any]) -> dict[str, Any]:
        return {"signals": self.signals()}

    def _cmd_state(self, _request: dict[str, Any]) -> dict[str, Any]:
        return asdict(self.state())

    def _cmd_display(self, _request: dict[str, Any]) -> dict[str, Any]:
        with self._lock:
            return {"text": self.design.render(), "digits": list(self.design.display())}
