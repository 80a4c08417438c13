"""Seven-segment digit component."""

from __future__ import annotations

from PySide6 import QtCore, QtGui

from stopwatch.designs.stopwatch.seven_segment import lit_segments
from stopwatch_gui.backend import SimulatorBackend
from stopwatch_gui.components.base import ComponentController, ComponentGraphicsItem
from stopwatch_gui.config import SignalBinding


def segment_rects(rect: QtCore.QRectF) -> dict[str, QtCore.QRectF]:
    """Geometry of each segment inside a digit cell."""
    w = rect.width()
    h = rect.height()
    t = max(2.0, min(w, h) * 0.12)
    left = rect.left() + t / 2
    right = rect.right() - t * 1.5
    top = rect.top() + t / 2
    mid = rect.top() + h / 2 - t / 2
    bottom = rect.bottom() - t * 1.5
    span_w = right - left - t
    span_h = (bottom - top) / 2 - t

    return {
        "a": QtCore.QRectF(left + t, top, span_w, t),
        "b": QtCore.QRectF(right, top + t, t, span_h),
        "c": QtCore.QRectF(right, mid + t, t, span_h),
        "d": QtCore.QRectF(left + t, bottom, span_w, t),
        "e": QtCore.QRectF(left, mid + t, t, span_h),
        "f": QtCore.QRectF(left, top + t, t, span_h),
        "g": QtCore.QRectF(left + t, mid, span_w, t),
    }


class SevenSegmentView(ComponentGraphicsItem):
    """One digit of a seven-segment display, with an optional decimal point."""

    def __init__(
        self,
        size: tuple[int, int] = (90, 150),
        on_color: str = "#ff3b30",
        off_color: str = "#3a0f0f",
        point: bool = False,
    ):
        super().__init__(size=size)
        self._lit: frozenset[str] = frozenset()
        self._on_color = QtGui.QColor(on_color)
        self._off_color = QtGui.QColor(off_color)
        self._point = point

    @property
    def lit(self) -> frozenset[str]:
        return self._lit

    def set_lit(self, segments: frozenset[str]) -> None:
        if segments != self._lit:
            self._lit = segments
            self.update()

    def paint(self, painter: QtGui.QPainter, _option, _widget=None) -> None:  # type: ignore[override]
        painter.setRenderHint(QtGui.QPainter.Antialiasing, True)
        painter.setPen(QtCore.Qt.NoPen)
        rect = self.boundingRect()
        for name, seg in segment_rects(rect).items():
            color = self._on_color if name in self._lit else self._off_color
            painter.setBrush(QtGui.QBrush(color))
            painter.drawRoundedRect(seg, seg.width() / 3, seg.height() / 3)

        if self._point:
            size = max(4.0, rect.width() * 0.1)
            dot = QtCore.QRectF(rect.right() - size, rect.bottom() - size, size, size)
            painter.setBrush(QtGui.QBrush(self._on_color))
            painter.drawEllipse(dot)


class SevenSegmentController(ComponentController):
    """Controller mapping a 7-bit pattern signal onto a digit view."""

    def __init__(self, component_id: str, binding: SignalBinding, view: SevenSegmentView):
        super().__init__(component_id, binding)
        self._view = view

    @property
    def view(self) -> SevenSegmentView:
        return self._view

    def update(self, backend: SimulatorBackend) -> None:
        pattern = backend.read(self.binding.signal)
        active_low = backend.display_config.active_low != self.binding.invert
        self._view.set_lit(lit_segments(pattern, active_low))
