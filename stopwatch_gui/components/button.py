"""Momentary push button component."""

from __future__ import annotations

from PySide6 import QtCore, QtGui

from stopwatch_gui.backend import SimulatorBackend
from stopwatch_gui.components.base import ComponentController, ComponentGraphicsItem
from stopwatch_gui.config import SignalBinding


class ButtonView(ComponentGraphicsItem):
    pressed = QtCore.Signal()
    released = QtCore.Signal()

    def __init__(
        self,
        size: tuple[int, int] = (70, 34),
        label: str = "",
        on_color: str = "#f59e0b",
        off_color: str = "#2f2f2f",
        border_color: str = "#111111",
        text_color: str = "#e5e7eb",
    ):
        super().__init__(size=size)
        self._pressed = False
        self._label = label
        self._on_color = QtGui.QColor(on_color)
        self._off_color = QtGui.QColor(off_color)
        self._border_color = QtGui.QColor(border_color)
        self._text_color = QtGui.QColor(text_color)
        self.setAcceptedMouseButtons(QtCore.Qt.LeftButton)

    def paint(self, painter: QtGui.QPainter, _option, _widget=None) -> None:  # type: ignore[override]
        painter.setRenderHint(QtGui.QPainter.Antialiasing, True)
        rect = self.boundingRect().adjusted(1, 1, -1, -1)
        color = self._on_color if self._pressed else self._off_color
        painter.setBrush(QtGui.QBrush(color))
        painter.setPen(QtGui.QPen(self._border_color, 1))
        painter.drawRoundedRect(rect, 4, 4)
        if self._label:
            painter.setPen(QtGui.QPen(self._text_color))
            painter.drawText(rect, QtCore.Qt.AlignCenter, self._label)

    def mousePressEvent(self, event) -> None:  # type: ignore[override]
        self._pressed = True
        self.update()
        self.pressed.emit()
        event.accept()

    def mouseReleaseEvent(self, event) -> None:  # type: ignore[override]
        self._pressed = False
        self.update()
        self.released.emit()
        event.accept()


class ButtonController(ComponentController):
    """Controller for a momentary button (drives its input while held)."""

    def __init__(self, component_id: str, binding: SignalBinding, view: ButtonView):
        super().__init__(component_id, binding)
        self._view = view
        view.pressed.connect(self._on_press)
        view.released.connect(self._on_release)

    @property
    def view(self) -> ButtonView:
        return self._view

    def update(self, backend: SimulatorBackend) -> None:
        # Inputs need no periodic refresh.
        _ = backend

    def _on_press(self) -> None:
        self._drive(True)

    def _on_release(self) -> None:
        self._drive(False)

    def _drive(self, active: bool) -> None:
        if self.binding.direction != "input" or self._backend is None:
            return
        level = active != self.binding.invert
        self._backend.write(self.binding.signal, int(level))
