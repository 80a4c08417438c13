import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from stopwatch_gui.app import run_gui


if __name__ == "__main__":
    raise SystemExit(run_gui(sys.argv[1:]))
