"""TCP control server for driving the stopwatch from external tools.

Requests and responses are newline-delimited JSON objects. Can optionally
launch the GUI for the same design instance.
"""

from __future__ import annotations

import argparse
import json
import logging
import socketserver
import threading

from stopwatch.core.design import (
    create_design,
    list_available_designs,
    verify_designs_registered,
)
from stopwatch.control.session import ControlSession
from stopwatch.designs.stopwatch import StopWatch

logger = logging.getLogger(__name__)


class _ControlHandler(socketserver.StreamRequestHandler):
    def handle(self) -> None:
        session: ControlSession = self.server.session  # type: ignore[attr-defined]
        logger.info(f"Client connected: {self.client_address}")
        while True:
            line = self.rfile.readline()
            if not line:
                break
            try:
                request = json.loads(line.decode("utf-8"))
            except json.JSONDecodeError as exc:
                logger.warning(f"Invalid JSON from {self.client_address}: {exc}")
                response = {"ok": False, "error": f"Invalid JSON: {exc}"}
            else:
                if isinstance(request, dict):
                    response = session.handle_request(request)
                else:
                    response = {"ok": False, "error": "Request must be a JSON object"}

            self.wfile.write((json.dumps(response) + "\n").encode("utf-8"))
        logger.info(f"Client disconnected: {self.client_address}")


class ControlServer(socketserver.ThreadingTCPServer):
    allow_reuse_address = True
    daemon_threads = True

    def __init__(self, host: str, port: int, session: ControlSession):
        super().__init__((host, port), _ControlHandler)
        self.session = session


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Stopwatch control server")
    parser.add_argument("--design", default="stopwatch", help="Design name to simulate")
    parser.add_argument("--config", default=None, help="Path to design config YAML")
    parser.add_argument(
        "--host", default="127.0.0.1", help="Bind host (default: 127.0.0.1)"
    )
    parser.add_argument(
        "--port", type=int, default=3334, help="Bind port (default: 3334)"
    )
    parser.add_argument(
        "--no-gui",
        action="store_true",
        help="Run headless (do not launch GUI)",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    return parser.parse_args()


def _run_with_gui(
    design, session: ControlSession, lock: threading.RLock, args: argparse.Namespace
) -> int:
    try:
        from stopwatch_gui.app import run_gui
    except ImportError as exc:  # pragma: no cover - optional GUI dependency
        logger.warning(f"GUI unavailable: {exc}")
        return _serve_headless(session, args)

    server = ControlServer(args.host, args.port, session)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    logger.info(f"Control server listening on {args.host}:{args.port} (design={args.design})")
    try:
        return run_gui([], design=design, lock=lock, external_clock=True)
    finally:
        server.shutdown()
        server.server_close()


def _serve_headless(session: ControlSession, args: argparse.Namespace) -> int:
    server = ControlServer(args.host, args.port, session)
    logger.info(f"Control server listening on {args.host}:{args.port} (design={args.design})")
    print(f"Control server listening on {args.host}:{args.port}")
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        pass
    finally:
        server.server_close()
    return 0


def main() -> int:
    # Ensure designs are registered
    _ = StopWatch
    verify_designs_registered()

    args = _parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)
    if args.design not in list_available_designs():
        raise SystemExit(
            f"Unknown design '{args.design}'. Available: {list_available_designs()}"
        )

    design = create_design(args.design, config_path=args.config)
    design.reset()

    lock = threading.RLock()
    session = ControlSession(design, lock=lock)

    if not args.no_gui:
        return _run_with_gui(design, session, lock, args)
    return _serve_headless(session, args)


if __name__ == "__main__":
    raise SystemExit(main())
