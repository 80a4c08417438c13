"""Top bar with design name, run state and clock controls."""

from __future__ import annotations

from PySide6 import QtCore, QtWidgets

from stopwatch_gui.controller import SimulationState


class TopBar(QtWidgets.QFrame):
    run_toggled = QtCore.Signal(bool)
    reset_requested = QtCore.Signal()

    def __init__(self, title: str, parent: QtWidgets.QWidget | None = None):
        super().__init__(parent)
        self.setFrameShape(QtWidgets.QFrame.NoFrame)

        self._name_label = QtWidgets.QLabel(title)
        self._state_label = QtWidgets.QLabel("Paused")
        self._run_button = QtWidgets.QPushButton("Pause")
        self._run_button.setCheckable(True)
        self._run_button.setChecked(True)
        self._run_button.toggled.connect(self._on_run_toggled)
        self._reset_button = QtWidgets.QPushButton("Power-on reset")
        self._reset_button.clicked.connect(self._on_reset_clicked)

        layout = QtWidgets.QHBoxLayout(self)
        layout.setContentsMargins(12, 6, 12, 6)
        layout.addWidget(self._name_label)
        layout.addStretch(1)
        layout.addWidget(self._run_button)
        layout.addWidget(self._reset_button)
        layout.addWidget(self._state_label)

    def _on_run_toggled(self, checked: bool) -> None:
        self._run_button.setText("Pause" if checked else "Run")
        self.run_toggled.emit(checked)

    def _on_reset_clicked(self) -> None:
        self.reset_requested.emit()

    def set_state(self, state: SimulationState) -> None:
        if state == SimulationState.RUNNING:
            label = "Running"
        elif state == SimulationState.EXTERNAL:
            label = "External"
        else:
            label = "Paused"
        self._state_label.setText(label)
        self._run_button.setEnabled(state != SimulationState.EXTERNAL)
