"""Seven-segment pattern helpers: encode, decode and console rendering.

Segment i of a pattern is bit i, with segments named a-g::

         a
        ---
     f |   | b
        --- <- g
     e |   | c
        ---
         d
"""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from stopwatch.utils.config_loader import DisplayConfig

SEGMENTS = "abcdefg"


def encode(digit: int, display: DisplayConfig) -> int:
    """Pattern for digit, or the blank pattern when digit is not 0-9."""
    pattern = display.pattern_for(digit)
    return display.blank if pattern is None else pattern


def decode(pattern: int, display: DisplayConfig) -> Optional[int]:
    """Digit shown by pattern, or None for blank or unknown patterns."""
    try:
        return display.encoding.index(pattern)
    except ValueError:
        return None


def lit_segments(pattern: int, active_low: bool = True) -> frozenset[str]:
    """Names of the segments that are lit by pattern."""
    lit = set()
    for bit, name in enumerate(SEGMENTS):
        on = bool(pattern & (1 << bit))
        if on != active_low:
            lit.add(name)
    return frozenset(lit)


def _glyph(pattern: int, active_low: bool) -> list[str]:
    seg = lit_segments(pattern, active_low)

    def mark(name: str, char: str) -> str:
        return char if name in seg else " "

    return [
        " " + mark("a", "_") + " ",
        mark("f", "|") + mark("g", "_") + mark("b", "|"),
        mark("e", "|") + mark("d", "_") + mark("c", "|"),
    ]


def render(
    patterns: Sequence[int],
    display: DisplayConfig,
    points: Iterable[int] = (),
) -> str:
    """Render digit patterns as three lines of ASCII art.

    Args:
        patterns: One pattern per digit, most significant first.
        display: Display configuration (for polarity).
        points: Indexes of digits followed by a decimal point.
    """
    points = set(points)
    rows = ["", "", ""]
    for index, pattern in enumerate(patterns):
        glyph = _glyph(pattern, display.active_low)
        dot = index in points
        for row in range(3):
            rows[row] += glyph[row]
            if dot:
                rows[row] += "." if row == 2 else " "
    return "\n".join(rows)
