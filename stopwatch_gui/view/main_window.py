"""Main GUI window."""

from __future__ import annotations

from PySide6 import QtCore, QtWidgets

from stopwatch_gui.config import GuiDesignConfig
from stopwatch_gui.controller import SimulationController
from stopwatch_gui.registry import ComponentInstance
from stopwatch_gui.view.design_canvas import DesignCanvas
from stopwatch_gui.view.signal_panel import SignalPanel
from stopwatch_gui.view.status_bar import StatusBar
from stopwatch_gui.view.top_bar import TopBar


class MainWindow(QtWidgets.QMainWindow):
    def __init__(
        self,
        controller: SimulationController,
        config: GuiDesignConfig,
        components: list[ComponentInstance],
        cycles_per_tick: int = 1,
        tick_ms: int = 100,
        external_clock: bool = False,
    ):
        super().__init__()
        self._controller = controller
        self._cycles_per_tick = cycles_per_tick

        self.setWindowTitle(f"{config.title} Simulator")

        central = QtWidgets.QWidget()
        self.setCentralWidget(central)

        self._top_bar = TopBar(config.title)
        self._canvas = DesignCanvas(config)
        self._canvas.set_components(components)
        self._signal_panel = SignalPanel()
        self._status_bar = StatusBar()

        splitter = QtWidgets.QSplitter()
        splitter.addWidget(self._canvas)
        splitter.addWidget(self._signal_panel)
        splitter.setStretchFactor(0, 3)
        splitter.setStretchFactor(1, 1)

        layout = QtWidgets.QVBoxLayout(central)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self._top_bar)
        layout.addWidget(splitter, 1)
        layout.addWidget(self._status_bar)

        self._top_bar.run_toggled.connect(self._controller.set_running)
        self._top_bar.reset_requested.connect(self._controller.reset)

        self._timer = QtCore.QTimer(self)
        self._timer.timeout.connect(self._tick)
        self._timer.start(tick_ms)

        if external_clock:
            self._controller.set_external(True)
        else:
            self._controller.set_running(True)
        self._top_bar.set_state(self._controller.state)

    def _tick(self) -> None:
        self._controller.tick(self._cycles_per_tick)
        self._signal_panel.update_signals(self._controller.signals())
        self._status_bar.update_status(self._controller.status())
        self._top_bar.set_state(self._controller.state)
