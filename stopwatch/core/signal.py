"""Named MyHDL signals of a design.

The signals themselves are MyHDL ``Signal`` objects, shared by the HDL
blocks that read and drive them. A SignalBank gives them names, checks
values driven from outside the design, and keeps answering reads while the
design's simulation is suspended (see core.domain).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Literal, Optional

from myhdl import ResetSignal, Signal, intbv

from stopwatch.core.exceptions import SignalWidthError, UnknownSignalError

Direction = Literal["input", "output", "internal"]

# myhdl.Signal is a factory function; its instances have no public type.
HdlSignal = Any


@dataclass(frozen=True)
class SignalDescriptor:
    """Metadata about a single signal.

    Used by the top-level design to declare its ports.
    """

    name: str
    width: int
    direction: Direction = "internal"
    reset_value: int = 0


def make_signal(width: int = 1, reset_value: int = 0) -> HdlSignal:
    """A bool signal for one bit, an unsigned intbv signal otherwise."""
    if width < 1:
        raise ValueError(f"Signal width must be >= 1, got {width}")
    if width == 1:
        return Signal(bool(reset_value))
    return Signal(intbv(reset_value)[width:])


def make_reset() -> HdlSignal:
    """Active-high synchronous reset, as used by every always_seq block."""
    return ResetSignal(0, active=1, isasync=False)


class SignalBank:
    """Name -> MyHDL signal map for one design.

    Values written from outside (button presses, test stimulus) are queued
    with drive() and reach the signals right before the next clock edge;
    read() already reports them. While the owning domain is suspended the
    bank is frozen and reads come from the values saved at suspension.
    """

    def __init__(self):
        self._signals: dict[str, HdlSignal] = {}
        self._reset_values: dict[str, int] = {}
        self._pending: dict[str, int] = {}
        self._frozen: Optional[dict[str, int]] = None

    def add(self, name: str, signal: HdlSignal) -> HdlSignal:
        """Add an existing signal. Its current value becomes its reset value.

        Raises:
            ValueError: If a signal with the same name already exists
        """
        if name in self._signals:
            raise ValueError(f"Signal '{name}' already exists")
        self._signals[name] = signal
        self._reset_values[name] = int(signal.val)
        return signal

    def create(self, name: str, width: int = 1, reset_value: int = 0) -> HdlSignal:
        """Create and add a new signal."""
        if width >= 1 and not 0 <= reset_value < (1 << width):
            raise SignalWidthError(name, reset_value, width)
        return self.add(name, make_signal(width, reset_value))

    def create_reset(self, name: str = "reset") -> HdlSignal:
        return self.add(name, make_reset())

    def get(self, name: str) -> HdlSignal:
        """Return the MyHDL signal called name.

        Raises:
            UnknownSignalError: If no such signal exists
        """
        try:
            return self._signals[name]
        except KeyError:
            raise UnknownSignalError(name) from None

    def find(self, name: str) -> Optional[HdlSignal]:
        """Return the signal called name, or None."""
        return self._signals.get(name)

    def width(self, name: str) -> int:
        return len(self.get(name))

    def reset_value(self, name: str) -> int:
        self.get(name)
        return self._reset_values[name]

    def descriptor(self, name: str, direction: Direction = "internal") -> SignalDescriptor:
        return SignalDescriptor(
            name=name,
            width=self.width(name),
            direction=direction,
            reset_value=self.reset_value(name),
        )

    def read(self, name: str) -> int:
        signal = self.get(name)
        if name in self._pending:
            return self._pending[name]
        if self._frozen is not None:
            return self._frozen[name]
        return int(signal.val)

    def drive(self, name: str, value: int) -> None:
        """Queue a value for the signal, applied before the next clock edge.

        Raises:
            SignalWidthError: If the value does not fit the signal
        """
        width = self.width(name)
        value = int(value)
        if not 0 <= value < (1 << width):
            raise SignalWidthError(name, value, width)
        self._pending[name] = value

    def take_pending(self) -> dict[str, int]:
        """Return and clear the values queued by drive()."""
        pending, self._pending = self._pending, {}
        return pending

    def freeze(self) -> None:
        """Save the live signal values; reads use them until thaw()."""
        self._frozen = {name: int(sig.val) for name, sig in self._signals.items()}

    def thaw(self) -> dict[str, int]:
        """End a freeze. Returns the saved values to load back into the signals."""
        frozen, self._frozen = self._frozen, None
        return frozen or {}

    def reset(self) -> None:
        """Drop queued values and freeze every signal at its reset value."""
        self._pending.clear()
        self._frozen = dict(self._reset_values)

    def snapshot(self) -> dict[str, int]:
        """Current value of every signal, keyed by name."""
        return {name: self.read(name) for name in self._signals}

    def names(self) -> list[str]:
        return list(self._signals.keys())

    def __contains__(self, name: object) -> bool:
        return name in self._signals

    def __iter__(self) -> Iterator[str]:
        return iter(self._signals)

    def __len__(self) -> int:
        return len(self._signals)
