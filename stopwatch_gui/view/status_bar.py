"""Bottom status bar: watch readout, clock position and process load."""

from __future__ import annotations

from PySide6 import QtWidgets

from stopwatch_gui.controller import StatusSample


def _percent(label: str, value: float | None) -> str:
    return f"{label}: --" if value is None else f"{label}: {value:5.1f}%"


class StatusBar(QtWidgets.QFrame):
    def __init__(self, parent: QtWidgets.QWidget | None = None):
        super().__init__(parent)
        self.setFrameShape(QtWidgets.QFrame.NoFrame)

        self._shown_label = QtWidgets.QLabel("--.-")
        self._mode_label = QtWidgets.QLabel("STOP")
        self._cycle_label = QtWidgets.QLabel("Cycle: 0")
        self._cpu_label = QtWidgets.QLabel(_percent("CPU", None))
        self._mem_label = QtWidgets.QLabel(_percent("Mem", None))

        layout = QtWidgets.QHBoxLayout(self)
        layout.setContentsMargins(12, 6, 12, 6)
        for label in (self._shown_label, self._mode_label, self._cycle_label):
            layout.addWidget(label)
        layout.addStretch(1)
        layout.addWidget(self._cpu_label)
        layout.addWidget(self._mem_label)

    def update_status(self, sample: StatusSample) -> None:
        self._shown_label.setText(sample.shown)
        self._mode_label.setText("RUN" if sample.counting else "STOP")
        self._cycle_label.setText(f"Cycle: {sample.cycle} (counter {sample.seconds:4.1f} s)")
        self._cpu_label.setText(_percent("CPU", sample.cpu_percent))
        self._mem_label.setText(_percent("Mem", sample.memory_percent))
