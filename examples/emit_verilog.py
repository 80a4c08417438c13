import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from stopwatch.hdl.verilog import main


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:] or ["--out", str(ROOT / "build" / "verilog"), "-v"]))
