"""Signal value panel."""

from __future__ import annotations

from PySide6 import QtWidgets


class SignalPanel(QtWidgets.QWidget):
    def __init__(self, parent: QtWidgets.QWidget | None = None):
        super().__init__(parent)
        self._table = QtWidgets.QTableWidget(self)
        self._table.setColumnCount(2)
        self._table.setHorizontalHeaderLabels(["Signal", "Value"])
        self._table.verticalHeader().setVisible(False)
        self._table.setEditTriggers(QtWidgets.QAbstractItemView.NoEditTriggers)
        self._table.setSelectionMode(QtWidgets.QAbstractItemView.NoSelection)
        self._table.setAlternatingRowColors(True)

        layout = QtWidgets.QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self._table)

        self._names: list[str] = []

    def update_signals(self, values: dict[str, int]) -> None:
        names = list(values)
        if names != self._names:
            self._names = names
            self._table.setRowCount(len(names))
            for row, name in enumerate(names):
                self._table.setItem(row, 0, QtWidgets.QTableWidgetItem(name))
                self._table.setItem(row, 1, QtWidgets.QTableWidgetItem(""))

        for row, name in enumerate(names):
            item = self._table.item(row, 1)
            if item is not None:
                item.setText(str(values[name]))
